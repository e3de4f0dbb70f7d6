"""Tick-loop host primitives."""

from fixed_viewport.gameplay.update_loop import RuntimeUpdateLoop

__all__ = ["RuntimeUpdateLoop"]
