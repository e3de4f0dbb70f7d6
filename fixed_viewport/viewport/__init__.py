"""Fixed-aspect viewport fitting and synchronization."""

from fixed_viewport.viewport.applier import apply_viewport
from fixed_viewport.viewport.detectors import CameraChangeDetector, SurfaceChangeDetector
from fixed_viewport.viewport.fit import fit, fit_viewport
from fixed_viewport.viewport.plugin import FixedViewportPlugin
from fixed_viewport.viewport.resolver import (
    Resolution,
    resolve_primary_surface,
    resolve_signal,
    resolve_signals,
    resolve_view_surface,
)
from fixed_viewport.viewport.signals import SyncSignalQueue
from fixed_viewport.viewport.sync import SYNC_SERVICE, SyncReport, ViewportSyncSystem

__all__ = [
    "SYNC_SERVICE",
    "CameraChangeDetector",
    "FixedViewportPlugin",
    "Resolution",
    "SurfaceChangeDetector",
    "SyncReport",
    "SyncSignalQueue",
    "ViewportSyncSystem",
    "apply_viewport",
    "fit",
    "fit_viewport",
    "resolve_primary_surface",
    "resolve_signal",
    "resolve_signals",
    "resolve_view_surface",
]
