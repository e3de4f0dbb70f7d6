"""Interactive letterbox demo: arrow keys change the view's aspect ratio."""

from __future__ import annotations

from time import perf_counter

import numpy as np

from fixed_viewport.api.context import RuntimeContext, create_runtime_context
from fixed_viewport.api.gameplay import UpdateLoop, create_update_loop
from fixed_viewport.api.logging import get_logger
from fixed_viewport.api.viewport import PrimarySurface, ViewportRect
from fixed_viewport.runtime.config import ViewportConfig, load_viewport_config
from fixed_viewport.runtime.logging import configure_logging, shutdown_logging
from fixed_viewport.viewport.plugin import FixedViewportPlugin
from fixed_viewport.viewport.sync import SYNC_SERVICE, SyncReport, ViewportSyncSystem
from fixed_viewport.window.rendercanvas_surface import create_rendercanvas_surface
from fixed_viewport.world.store import World

_LOG = get_logger("fixed_viewport.demo")

VIEW_ID = "main"
FILL_RGBA = (239, 68, 68, 255)
BAR_RGBA = (0, 0, 0, 255)


def render_letterbox(width: int, height: int, viewport: ViewportRect | None) -> np.ndarray:
    """Return an RGBA frame with bars outside ``viewport`` and the viewport filled."""
    frame = np.empty((max(0, height), max(0, width), 4), dtype=np.uint8)
    frame[:, :] = BAR_RGBA
    if viewport is not None:
        frame[
            viewport.y : viewport.y + viewport.height,
            viewport.x : viewport.x + viewport.width,
        ] = FILL_RGBA
    return frame


class DemoApp:
    """Owns the world, the tick loop and the single demo view."""

    def __init__(self, config: ViewportConfig, *, world: World | None = None) -> None:
        self.config = config
        self.world = world if world is not None else World(feed_capacity=config.sync.feed_capacity)
        self.context: RuntimeContext = create_runtime_context(self.world)
        self.loop: UpdateLoop = create_update_loop()
        self.plugin = FixedViewportPlugin(trace=config.sync.trace_enabled)
        self.plugin.install(self.loop)
        self.view = self.world.spawn_view(
            VIEW_ID, aspect_ratio=config.demo.aspect_ratio, target=PrimarySurface()
        )
        self._last_tick: float | None = None

    def start(self) -> None:
        self.loop.start(self.context)

    def on_key(self, key: str) -> None:
        step = self.config.demo.ratio_step
        if key == "ArrowUp":
            self.view.aspect_ratio = self.view.aspect_ratio + step
        elif key == "ArrowDown":
            self.view.aspect_ratio = max(step, self.view.aspect_ratio - step)
        else:
            return
        _LOG.info("aspect_ratio_changed view=%s ratio=%.3f", VIEW_ID, self.view.aspect_ratio)

    def tick(self) -> None:
        now = perf_counter()
        delta = 0.0 if self._last_tick is None else max(0.0, now - self._last_tick)
        self._last_tick = now
        self.loop.step(self.context, delta)
        report = self.report()
        if report.writes:
            _LOG.debug("demo_viewport viewport=%s writes=%d", self.view.viewport, report.writes)

    def report(self) -> SyncReport:
        """Return the outcome of the latest sync pass, read from the context services."""
        sync = self.context.require(SYNC_SERVICE)
        if not isinstance(sync, ViewportSyncSystem):
            raise TypeError(f"service {SYNC_SERVICE!r} is not a ViewportSyncSystem")
        return sync.last_report

    def frame(self, width: int, height: int) -> np.ndarray:
        self.tick()
        return render_letterbox(width, height, self.view.viewport)

    def shutdown(self) -> None:
        self.loop.shutdown(self.context)


def run(config: ViewportConfig | None = None) -> None:
    """Open a window and keep the view letterboxed until it is closed."""
    resolved = config or load_viewport_config()
    configure_logging(resolved.logging)
    app = DemoApp(resolved)
    surface = create_rendercanvas_surface(
        app.world,
        width=resolved.demo.width,
        height=resolved.demo.height,
        title=resolved.demo.title,
        on_key=app.on_key,
    )
    bitmap_context = surface.canvas.get_context("bitmap")
    app.start()

    def _draw() -> None:
        width, height = surface.physical_size()
        bitmap_context.set_bitmap(app.frame(width, height))
        surface.set_title(f"{resolved.demo.title} ({app.view.aspect_ratio:.2f})")

    surface.request_draw(_draw)
    _LOG.info(
        "demo_started size=%dx%d aspect_ratio=%.3f",
        resolved.demo.width,
        resolved.demo.height,
        resolved.demo.aspect_ratio,
    )
    try:
        surface.run_loop()
    finally:
        app.shutdown()
        shutdown_logging()
