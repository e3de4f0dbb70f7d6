"""Wires the viewport detectors and sync stage into an update loop."""

from __future__ import annotations

from fixed_viewport.api.gameplay import SystemSpec, UpdateLoop
from fixed_viewport.viewport.detectors import CameraChangeDetector, SurfaceChangeDetector
from fixed_viewport.viewport.signals import SyncSignalQueue
from fixed_viewport.viewport.sync import ViewportSyncSystem

DETECT_CAMERA_ORDER = 0
DETECT_SURFACE_ORDER = 1
SYNC_ORDER = 100


class FixedViewportPlugin:
    """Keeps every view's viewport fitted to its surface at the view's aspect ratio.

    Detectors always run before the sync stage within a tick; the sync stage
    only ever sees signals emitted earlier in the same tick.
    """

    def __init__(self, *, trace: bool = False) -> None:
        self.signals = SyncSignalQueue()
        self.camera_detector = CameraChangeDetector(self.signals)
        self.surface_detector = SurfaceChangeDetector(self.signals)
        self.sync = ViewportSyncSystem(self.signals, trace=trace)

    def install(self, loop: UpdateLoop) -> None:
        loop.add_system(
            SystemSpec("viewport.detect_camera", self.camera_detector, order=DETECT_CAMERA_ORDER)
        )
        loop.add_system(
            SystemSpec("viewport.detect_surface", self.surface_detector, order=DETECT_SURFACE_ORDER)
        )
        loop.add_system(SystemSpec("viewport.sync", self.sync, order=SYNC_ORDER))
