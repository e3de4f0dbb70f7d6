"""Host entity store for views, surfaces and surface notifications."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

from fixed_viewport.api.viewport import RenderTarget
from fixed_viewport.api.window import SurfaceResized, SurfaceScaleFactorChanged
from fixed_viewport.runtime.notifications import NotificationFeed
from fixed_viewport.world.entities import Surface, View

_LOG = logging.getLogger("fixed_viewport.world")


class World:
    """Owns every view and surface record plus the host notification feeds.

    Iteration follows spawn order for both entity kinds.
    """

    def __init__(self, *, feed_capacity: int = 1024) -> None:
        self._views: dict[str, View] = {}
        self._surfaces: dict[str, Surface] = {}
        self.resize_events: NotificationFeed[SurfaceResized] = NotificationFeed(
            "surface.resized", capacity=feed_capacity
        )
        self.scale_factor_events: NotificationFeed[SurfaceScaleFactorChanged] = NotificationFeed(
            "surface.scale_factor_changed", capacity=feed_capacity
        )

    def spawn_surface(
        self,
        surface_id: str,
        *,
        physical_width: int,
        physical_height: int,
        scale_factor: float = 1.0,
        primary: bool = False,
    ) -> Surface:
        normalized = _normalize_id(surface_id, kind="surface_id")
        if normalized in self._surfaces:
            raise ValueError(f"duplicate surface_id: {normalized}")
        surface = Surface(
            normalized,
            physical_width=physical_width,
            physical_height=physical_height,
            scale_factor=scale_factor,
            primary=primary,
        )
        self._surfaces[normalized] = surface
        return surface

    def spawn_view(
        self,
        view_id: str,
        *,
        aspect_ratio: float,
        target: RenderTarget | None = None,
    ) -> View:
        normalized = _normalize_id(view_id, kind="view_id")
        if normalized in self._views:
            raise ValueError(f"duplicate view_id: {normalized}")
        view = View(normalized, aspect_ratio=aspect_ratio, target=target)
        self._views[normalized] = view
        return view

    def despawn_surface(self, surface_id: str) -> Surface | None:
        return self._surfaces.pop(surface_id, None)

    def despawn_view(self, view_id: str) -> View | None:
        return self._views.pop(view_id, None)

    def view(self, view_id: str) -> View | None:
        return self._views.get(view_id)

    def surface(self, surface_id: str) -> Surface | None:
        return self._surfaces.get(surface_id)

    def views(self) -> Iterator[View]:
        return iter(tuple(self._views.values()))

    def surfaces(self) -> Iterator[Surface]:
        return iter(tuple(self._surfaces.values()))

    def resize_surface(self, surface_id: str, physical_width: int, physical_height: int) -> None:
        """Apply a host resize and publish the matching notification."""
        surface = self._require_surface(surface_id)
        surface.physical_width = int(physical_width)
        surface.physical_height = int(physical_height)
        _LOG.debug(
            "surface_resized surface=%s size=%dx%d",
            surface.surface_id,
            surface.physical_width,
            surface.physical_height,
        )
        self.resize_events.publish(
            SurfaceResized(
                surface_id=surface.surface_id,
                physical_width=surface.physical_width,
                physical_height=surface.physical_height,
            )
        )

    def set_scale_factor(self, surface_id: str, scale_factor: float, *, rescale: bool = False) -> None:
        """Apply a DPI change; with ``rescale`` the physical size keeps its logical size."""
        surface = self._require_surface(surface_id)
        value = float(scale_factor)
        if not math.isfinite(value) or value <= 0.0:
            raise ValueError(f"scale_factor must be > 0, got {scale_factor!r}")
        if rescale:
            logical_width, logical_height = surface.logical_size
            surface.physical_width = int(logical_width * value)
            surface.physical_height = int(logical_height * value)
        surface.scale_factor = value
        self.scale_factor_events.publish(
            SurfaceScaleFactorChanged(surface_id=surface.surface_id, scale_factor=value)
        )

    def set_primary(self, surface_id: str, primary: bool = True) -> None:
        self._require_surface(surface_id).primary = bool(primary)

    def _require_surface(self, surface_id: str) -> Surface:
        surface = self._surfaces.get(surface_id)
        if surface is None:
            raise KeyError(f"unknown surface_id: {surface_id}")
        return surface


def _normalize_id(raw: str, *, kind: str) -> str:
    normalized = str(raw).strip()
    if not normalized:
        raise ValueError(f"{kind} must not be empty")
    return normalized
