"""Rendercanvas-backed surface adapter feeding resize/DPI changes into a world."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from fixed_viewport.world.store import World

_LOG = logging.getLogger("fixed_viewport.window")

KeyHandler = Callable[[str], None]


@dataclass(slots=True)
class RenderCanvasSurface:
    """Mirrors one rendercanvas canvas as a surface record in ``world``.

    Resize payloads carry logical size plus ``pixel_ratio``; a ratio change is
    published as a scale-factor notification before the resize notification.
    """

    canvas: Any
    world: World
    surface_id: str
    on_key: KeyHandler | None = None
    _rc_auto: Any | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._bind_canvas_events()

    def physical_size(self) -> tuple[int, int]:
        surface = self.world.surface(self.surface_id)
        if surface is None:
            return 0, 0
        return surface.physical_width, surface.physical_height

    def set_title(self, title: str) -> None:
        setter = getattr(self.canvas, "set_title", None)
        if callable(setter):
            setter(title)

    def request_draw(self, draw_function: Callable[[], None] | None = None) -> None:
        request_draw = getattr(self.canvas, "request_draw", None)
        if not callable(request_draw):
            return
        if draw_function is None:
            request_draw()
            return
        request_draw(draw_function)

    def run_loop(self) -> None:
        if self._rc_auto is None:
            return
        loop = getattr(self._rc_auto, "loop", None)
        if loop is not None and hasattr(loop, "run"):
            loop.run()
            return
        run_func = getattr(self._rc_auto, "run", None)
        if callable(run_func):
            run_func()
            return
        raise RuntimeError("rendercanvas.auto did not expose a runnable loop.")

    def close(self) -> None:
        self.world.despawn_surface(self.surface_id)
        closer = getattr(self.canvas, "close", None)
        if callable(closer):
            closer()

    def _bind_canvas_events(self) -> None:
        add_handler = getattr(self.canvas, "add_event_handler", None)
        if not callable(add_handler):
            return
        self._try_add_event_handler(add_handler, self._on_resize, "resize")
        self._try_add_event_handler(add_handler, self._on_key_down, "key_down")

    def _on_resize(self, event: object) -> None:
        width = _event_value(event, "width")
        height = _event_value(event, "height")
        if not isinstance(width, (int, float)) or not isinstance(height, (int, float)):
            size = _event_value(event, "size")
            if not isinstance(size, (tuple, list)) or len(size) < 2:
                return
            width, height = size[0], size[1]
            if not isinstance(width, (int, float)) or not isinstance(height, (int, float)):
                return
        pixel_ratio = _positive_finite(_event_value(event, "pixel_ratio", 1.0)) or 1.0
        physical_width = float(width) * pixel_ratio
        physical_height = float(height) * pixel_ratio
        if not (math.isfinite(physical_width) and math.isfinite(physical_height)):
            _LOG.debug("resize_ignored reason=non_finite_size surface=%s", self.surface_id)
            return
        surface = self.world.surface(self.surface_id)
        if surface is None:
            _LOG.debug("resize_ignored reason=surface_gone surface=%s", self.surface_id)
            return
        if pixel_ratio != surface.scale_factor:
            self.world.set_scale_factor(self.surface_id, pixel_ratio)
        self.world.resize_surface(
            self.surface_id,
            max(0, int(physical_width)),
            max(0, int(physical_height)),
        )
        self.request_draw()

    def _on_key_down(self, event: object) -> None:
        if self.on_key is None:
            return
        key = _event_value(event, "key")
        if isinstance(key, str):
            self.on_key(key)
            self.request_draw()

    def _try_add_event_handler(self, add_handler: Any, handler: Any, event_type: str) -> None:
        try:
            add_handler(handler, event_type)
        except (TypeError, ValueError, KeyError):
            _LOG.debug("event_bind_failed type=%s", event_type, exc_info=True)


def create_rendercanvas_surface(
    world: World,
    *,
    surface_id: str = "primary",
    primary: bool = True,
    canvas: Any | None = None,
    width: int = 1280,
    height: int = 720,
    title: str = "Fixed Viewport",
    on_key: KeyHandler | None = None,
) -> RenderCanvasSurface:
    """Create (or wrap) a rendercanvas canvas and spawn its surface record."""
    rc_auto: Any | None = None
    if canvas is None:
        try:
            import rendercanvas.auto as rc_auto
        except ImportError as exc:
            raise RuntimeError(
                "Render canvas backend unavailable. Install a desktop backend such as glfw."
            ) from exc
        canvas_cls = getattr(rc_auto, "RenderCanvas", None)
        if canvas_cls is None:
            raise RuntimeError("rendercanvas.auto did not expose RenderCanvas.")
        canvas = canvas_cls(size=(int(width), int(height)), title=title, update_mode="ondemand")
    physical_width, physical_height = _canvas_physical_size(canvas, width, height)
    world.spawn_surface(
        surface_id,
        physical_width=physical_width,
        physical_height=physical_height,
        scale_factor=_canvas_pixel_ratio(canvas),
        primary=primary,
    )
    return RenderCanvasSurface(
        canvas=canvas,
        world=world,
        surface_id=surface_id,
        on_key=on_key,
        _rc_auto=rc_auto,
    )


def _canvas_physical_size(canvas: Any, fallback_width: int, fallback_height: int) -> tuple[int, int]:
    getter = getattr(canvas, "get_physical_size", None)
    if callable(getter):
        size = getter()
        if isinstance(size, (tuple, list)) and len(size) >= 2:
            return int(size[0]), int(size[1])
    return int(fallback_width), int(fallback_height)


def _canvas_pixel_ratio(canvas: Any) -> float:
    getter = getattr(canvas, "get_pixel_ratio", None)
    if callable(getter):
        ratio = getter()
        return _positive_finite(ratio) or 1.0
    return 1.0


def _positive_finite(value: object) -> float | None:
    if isinstance(value, (int, float)) and math.isfinite(value) and value > 0:
        return float(value)
    return None


def _event_value(event: object, key: str, default: object | None = None) -> object | None:
    if isinstance(event, dict):
        return event.get(key, default)
    return getattr(event, key, default)
