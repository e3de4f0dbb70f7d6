"""Letterbox demo application built on fixed_viewport."""

from fixed_viewport_demo.app import DemoApp, render_letterbox, run

__all__ = ["DemoApp", "render_letterbox", "run"]
