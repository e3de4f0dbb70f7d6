"""Public viewport, render-target and sync-signal contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class ViewportRect:
    """Viewport sub-rectangle in physical pixels."""

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_fit(cls, x: float, y: float, width: float, height: float) -> ViewportRect:
        """Build rect from fitted float geometry, truncating toward zero."""
        return cls(x=int(x), y=int(y), width=int(width), height=int(height))

    def as_tuple(self) -> tuple[int, int, int, int]:
        return self.x, self.y, self.width, self.height


@dataclass(frozen=True, slots=True)
class PrimarySurface:
    """Render to whichever surface is flagged primary."""


@dataclass(frozen=True, slots=True)
class SurfaceRef:
    """Render to one specific surface."""

    surface_id: str


@dataclass(frozen=True, slots=True)
class ImageTarget:
    """Render to an off-screen image; never backed by a surface."""

    image_id: str


RenderTarget = PrimarySurface | SurfaceRef | ImageTarget


@dataclass(frozen=True, slots=True)
class CameraChanged:
    """A view's desired aspect ratio was mutated."""

    view_id: str


@dataclass(frozen=True, slots=True)
class SurfaceChanged:
    """A surface was resized or its scale factor changed."""

    surface_id: str


SyncSignal = CameraChanged | SurfaceChanged

PrimaryStatus = Literal["found", "not_found", "ambiguous"]


@dataclass(frozen=True, slots=True)
class PrimaryResolution[TSurface]:
    """Outcome of scanning surfaces for the unique primary one."""

    status: PrimaryStatus
    surface: TSurface | None = None

    @property
    def found(self) -> bool:
        return self.status == "found"


__all__ = [
    "CameraChanged",
    "ImageTarget",
    "PrimaryResolution",
    "PrimaryStatus",
    "PrimarySurface",
    "RenderTarget",
    "SurfaceChanged",
    "SurfaceRef",
    "SyncSignal",
    "ViewportRect",
]
