"""Fixed-aspect-ratio viewport synchronization for resizable surfaces."""

from fixed_viewport.api.viewport import (
    CameraChanged,
    ImageTarget,
    PrimarySurface,
    SurfaceChanged,
    SurfaceRef,
    ViewportRect,
)
from fixed_viewport.viewport.fit import fit, fit_viewport
from fixed_viewport.viewport.plugin import FixedViewportPlugin
from fixed_viewport.world.entities import Surface, View
from fixed_viewport.world.store import World

__all__ = [
    "CameraChanged",
    "FixedViewportPlugin",
    "ImageTarget",
    "PrimarySurface",
    "Surface",
    "SurfaceChanged",
    "SurfaceRef",
    "View",
    "ViewportRect",
    "World",
    "fit",
    "fit_viewport",
]
