"""Public fixed-viewport API contracts."""

from fixed_viewport.api.context import RuntimeContext, create_runtime_context
from fixed_viewport.api.gameplay import System, SystemSpec, UpdateLoop, create_update_loop
from fixed_viewport.api.logging import ViewportLoggingConfig, get_logger
from fixed_viewport.api.viewport import (
    CameraChanged,
    ImageTarget,
    PrimaryResolution,
    PrimaryStatus,
    PrimarySurface,
    RenderTarget,
    SurfaceChanged,
    SurfaceRef,
    SyncSignal,
    ViewportRect,
)
from fixed_viewport.api.window import (
    SurfaceNotification,
    SurfaceResized,
    SurfaceScaleFactorChanged,
)

__all__ = [
    "CameraChanged",
    "ImageTarget",
    "PrimaryResolution",
    "PrimaryStatus",
    "PrimarySurface",
    "RenderTarget",
    "RuntimeContext",
    "SurfaceChanged",
    "SurfaceNotification",
    "SurfaceRef",
    "SurfaceResized",
    "SurfaceScaleFactorChanged",
    "SyncSignal",
    "System",
    "SystemSpec",
    "UpdateLoop",
    "ViewportLoggingConfig",
    "ViewportRect",
    "create_runtime_context",
    "create_update_loop",
    "get_logger",
]
