"""Host-owned view and surface records."""

from __future__ import annotations

import math

from fixed_viewport.api.viewport import PrimarySurface, RenderTarget, ViewportRect


def validate_aspect_ratio(value: float) -> float:
    ratio = float(value)
    if not math.isfinite(ratio) or ratio <= 0.0:
        raise ValueError(f"aspect_ratio must be a positive finite number, got {value!r}")
    return ratio


class View:
    """Camera-like record with a desired aspect ratio and a computed viewport.

    Every assignment to ``aspect_ratio`` bumps ``revision``, even when the
    value is unchanged. ``viewport`` is written by the sync system only and
    never touches the revision.
    """

    __slots__ = ("_aspect_ratio", "_revision", "target", "view_id", "viewport")

    def __init__(
        self,
        view_id: str,
        *,
        aspect_ratio: float,
        target: RenderTarget | None = None,
    ) -> None:
        self.view_id = view_id
        self.target: RenderTarget = target if target is not None else PrimarySurface()
        self.viewport: ViewportRect | None = None
        self._aspect_ratio = validate_aspect_ratio(aspect_ratio)
        self._revision = 0

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @aspect_ratio.setter
    def aspect_ratio(self, value: float) -> None:
        self._aspect_ratio = validate_aspect_ratio(value)
        self._revision += 1

    @property
    def revision(self) -> int:
        return self._revision

    def __repr__(self) -> str:
        return (
            f"View(view_id={self.view_id!r}, aspect_ratio={self._aspect_ratio!r}, "
            f"target={self.target!r}, viewport={self.viewport!r})"
        )


class Surface:
    """Window-like record with a physical pixel size."""

    __slots__ = ("physical_height", "physical_width", "primary", "scale_factor", "surface_id")

    def __init__(
        self,
        surface_id: str,
        *,
        physical_width: int,
        physical_height: int,
        scale_factor: float = 1.0,
        primary: bool = False,
    ) -> None:
        self.surface_id = surface_id
        self.physical_width = int(physical_width)
        self.physical_height = int(physical_height)
        self.scale_factor = float(scale_factor)
        self.primary = bool(primary)

    @property
    def logical_size(self) -> tuple[float, float]:
        scale = self.scale_factor if self.scale_factor > 0.0 else 1.0
        return self.physical_width / scale, self.physical_height / scale

    def has_drawable_area(self) -> bool:
        return self.physical_width > 0 and self.physical_height > 0

    def __repr__(self) -> str:
        return (
            f"Surface(surface_id={self.surface_id!r}, size={self.physical_width}x"
            f"{self.physical_height}, scale_factor={self.scale_factor!r}, primary={self.primary!r})"
        )
