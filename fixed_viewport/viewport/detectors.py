"""Change detectors that turn host mutations into sync signals."""

from __future__ import annotations

import logging

from fixed_viewport.api.context import RuntimeContext
from fixed_viewport.api.viewport import CameraChanged, SurfaceChanged
from fixed_viewport.api.window import SurfaceResized, SurfaceScaleFactorChanged
from fixed_viewport.runtime.notifications import FeedReader
from fixed_viewport.viewport.signals import SyncSignalQueue
from fixed_viewport.world.entities import View

_LOG = logging.getLogger("fixed_viewport.detect")


class CameraChangeDetector:
    """Emits ``CameraChanged`` for views whose aspect ratio was assigned since last tick.

    A view never observed before (freshly spawned, or respawned under a reused
    id) counts as changed.
    """

    def __init__(self, signals: SyncSignalQueue) -> None:
        self._signals = signals
        self._seen: dict[str, tuple[View, int]] = {}

    def start(self, context: RuntimeContext) -> None:
        _ = context

    def update(self, context: RuntimeContext, delta_seconds: float) -> None:
        _ = delta_seconds
        observed: dict[str, tuple[View, int]] = {}
        emitted = 0
        for view in context.world.views():
            observed[view.view_id] = (view, view.revision)
            previous = self._seen.get(view.view_id)
            if previous is not None and previous[0] is view and previous[1] == view.revision:
                continue
            self._signals.emit(CameraChanged(view.view_id))
            emitted += 1
        self._seen = observed
        if emitted:
            _LOG.debug("camera_signals emitted=%d", emitted)

    def shutdown(self, context: RuntimeContext) -> None:
        _ = context
        self._seen.clear()


class SurfaceChangeDetector:
    """Emits ``SurfaceChanged`` for every resize and scale-factor notification.

    Notifications are not deduplicated: two resizes of one surface in a tick
    yield two signals.
    """

    def __init__(self, signals: SyncSignalQueue) -> None:
        self._signals = signals
        self._resize_reader: FeedReader[SurfaceResized] | None = None
        self._scale_reader: FeedReader[SurfaceScaleFactorChanged] | None = None

    def start(self, context: RuntimeContext) -> None:
        self._attach(context)

    def update(self, context: RuntimeContext, delta_seconds: float) -> None:
        _ = delta_seconds
        resize_reader, scale_reader = self._attach(context)
        resized = resize_reader.read()
        for event in resized:
            self._signals.emit(SurfaceChanged(event.surface_id))
        rescaled = scale_reader.read()
        for event in rescaled:
            self._signals.emit(SurfaceChanged(event.surface_id))
        if resized or rescaled:
            _LOG.debug("surface_signals resized=%d rescaled=%d", len(resized), len(rescaled))

    def shutdown(self, context: RuntimeContext) -> None:
        world = context.world
        if self._resize_reader is not None:
            world.resize_events.detach(self._resize_reader)
            self._resize_reader = None
        if self._scale_reader is not None:
            world.scale_factor_events.detach(self._scale_reader)
            self._scale_reader = None

    def _attach(
        self, context: RuntimeContext
    ) -> tuple[FeedReader[SurfaceResized], FeedReader[SurfaceScaleFactorChanged]]:
        world = context.world
        if self._resize_reader is None:
            self._resize_reader = world.resize_events.reader()
        if self._scale_reader is None:
            self._scale_reader = world.scale_factor_events.reader()
        return self._resize_reader, self._scale_reader
