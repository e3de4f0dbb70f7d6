"""Aspect-ratio fitting math for letterboxed/pillarboxed viewports."""

from __future__ import annotations

from fixed_viewport.api.viewport import ViewportRect


def fit(
    surface_width: float,
    surface_height: float,
    aspect_ratio: float,
) -> tuple[float, float, float, float]:
    """Return centered ``(x, y, w, h)`` of the largest ``aspect_ratio`` rect inside the surface.

    A surface relatively wider than the target is pillarboxed (full height,
    centered horizontally). Anything else, equal ratios included, is
    letterboxed (full width, centered vertically).
    """
    if surface_width <= 0.0 or surface_height <= 0.0:
        raise ValueError("surface dimensions must be > 0")
    if aspect_ratio <= 0.0:
        raise ValueError("aspect_ratio must be > 0")
    surface_ratio = float(surface_width) / float(surface_height)
    if surface_ratio > aspect_ratio:
        height = float(surface_height)
        width = height * aspect_ratio
        return (float(surface_width) - width) / 2.0, 0.0, width, height
    width = float(surface_width)
    height = width / aspect_ratio
    return 0.0, (float(surface_height) - height) / 2.0, width, height


def fit_viewport(surface_width: int, surface_height: int, aspect_ratio: float) -> ViewportRect:
    """Fit and truncate to the physical pixel grid."""
    return ViewportRect.from_fit(*fit(surface_width, surface_height, aspect_ratio))
