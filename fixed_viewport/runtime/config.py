"""Environment-sourced configuration for the viewport runtime and demo."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from fixed_viewport.api.logging import ViewportLoggingConfig

DEFAULT_ASPECT_RATIO = 16.0 / 9.0


@dataclass(frozen=True, slots=True)
class ViewportSyncConfig:
    trace_enabled: bool
    feed_capacity: int


@dataclass(frozen=True, slots=True)
class ViewportDemoConfig:
    aspect_ratio: float
    ratio_step: float
    width: int
    height: int
    title: str


@dataclass(frozen=True, slots=True)
class ViewportConfig:
    logging: ViewportLoggingConfig
    sync: ViewportSyncConfig
    demo: ViewportDemoConfig


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _positive_float(name: str, default: float, *, env: Mapping[str, str] | None = None) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        return float(default)
    try:
        value = float(raw.strip())
    except ValueError:
        return float(default)
    # rejects nan/inf as well as non-positive values
    if not 0.0 < value < float("inf"):
        return float(default)
    return value


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _resolution(raw: str) -> tuple[int, int] | None:
    value = str(raw).strip().lower()
    if not value:
        return None
    normalized = value.replace(" ", "")
    for sep in ("x", ",", ":"):
        if sep in normalized:
            left, right = normalized.split(sep, 1)
            try:
                width = max(1, int(left))
                height = max(1, int(right))
            except ValueError:
                return None
            return (width, height)
    return None


def _log_format(name: str, *, env: Mapping[str, str] | None = None) -> str:
    value = _text(name, "text", env=env).lower()
    return value if value in {"text", "json"} else "text"


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("VIEWPORT_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = default
    return value.strip().upper()


def load_viewport_config(*, env: Mapping[str, str] | None = None) -> ViewportConfig:
    resolution = _resolution(_text("VIEWPORT_DEMO_RESOLUTION", "", env=env)) or (1280, 720)
    file_path = _text("VIEWPORT_LOG_FILE", "", env=env)
    return ViewportConfig(
        logging=ViewportLoggingConfig(
            level_name=resolve_log_level_name(env=env),
            console_format=_log_format("VIEWPORT_LOG_FORMAT", env=env),
            file_path=file_path or None,
            file_format="json",
        ),
        sync=ViewportSyncConfig(
            trace_enabled=_flag("VIEWPORT_SYNC_TRACE_ENABLED", False, env=env),
            feed_capacity=_int("VIEWPORT_FEED_CAPACITY", 1024, minimum=16, env=env),
        ),
        demo=ViewportDemoConfig(
            aspect_ratio=_positive_float("VIEWPORT_DEMO_ASPECT_RATIO", DEFAULT_ASPECT_RATIO, env=env),
            ratio_step=_positive_float("VIEWPORT_DEMO_RATIO_STEP", 0.1, env=env),
            width=resolution[0],
            height=resolution[1],
            title=_text("VIEWPORT_DEMO_TITLE", "Fixed Viewport", env=env),
        ),
    )
