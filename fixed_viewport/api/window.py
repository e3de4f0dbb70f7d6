"""Surface notification contracts published by the host window layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SurfaceResized:
    """Surface physical size changed."""

    surface_id: str
    physical_width: int
    physical_height: int


@dataclass(frozen=True, slots=True)
class SurfaceScaleFactorChanged:
    """Surface DPI scale factor changed."""

    surface_id: str
    scale_factor: float


SurfaceNotification = SurfaceResized | SurfaceScaleFactorChanged


__all__ = [
    "SurfaceNotification",
    "SurfaceResized",
    "SurfaceScaleFactorChanged",
]
