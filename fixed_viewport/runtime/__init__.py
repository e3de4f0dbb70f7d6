"""Ambient runtime modules: feeds, configuration, logging and context."""

from fixed_viewport.runtime.config import (
    ViewportConfig,
    ViewportDemoConfig,
    ViewportSyncConfig,
    load_viewport_config,
    resolve_log_level_name,
)
from fixed_viewport.runtime.logging import configure_logging, setup_logging, shutdown_logging
from fixed_viewport.runtime.notifications import FeedReader, NotificationFeed

__all__ = [
    "FeedReader",
    "NotificationFeed",
    "ViewportConfig",
    "ViewportDemoConfig",
    "ViewportSyncConfig",
    "configure_logging",
    "load_viewport_config",
    "resolve_log_level_name",
    "setup_logging",
    "shutdown_logging",
]
