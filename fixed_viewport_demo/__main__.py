"""Demo entry point."""

from fixed_viewport_demo.app import run


def main() -> None:
    """Run the letterbox demo."""
    run()


if __name__ == "__main__":
    main()
