from __future__ import annotations

import pytest

from fixed_viewport.runtime.config import (
    DEFAULT_ASPECT_RATIO,
    load_viewport_config,
    resolve_log_level_name,
)


def test_load_viewport_config_defaults() -> None:
    cfg = load_viewport_config(env={})

    assert cfg.logging.level_name == "INFO"
    assert cfg.logging.console_format == "text"
    assert cfg.logging.file_path is None
    assert cfg.sync.trace_enabled is False
    assert cfg.sync.feed_capacity == 1024
    assert cfg.demo.aspect_ratio == DEFAULT_ASPECT_RATIO
    assert cfg.demo.ratio_step == 0.1
    assert (cfg.demo.width, cfg.demo.height) == (1280, 720)
    assert cfg.demo.title == "Fixed Viewport"


def test_load_viewport_config_parses_env_values() -> None:
    cfg = load_viewport_config(
        env={
            "VIEWPORT_LOG_LEVEL": "debug",
            "VIEWPORT_LOG_FORMAT": "JSON",
            "VIEWPORT_LOG_FILE": "logs/viewport.jsonl",
            "VIEWPORT_SYNC_TRACE_ENABLED": "yes",
            "VIEWPORT_FEED_CAPACITY": "64",
            "VIEWPORT_DEMO_ASPECT_RATIO": "2.35",
            "VIEWPORT_DEMO_RATIO_STEP": "0.05",
            "VIEWPORT_DEMO_RESOLUTION": "800 x 600",
            "VIEWPORT_DEMO_TITLE": "Cinema",
        }
    )

    assert cfg.logging.level_name == "DEBUG"
    assert cfg.logging.console_format == "json"
    assert cfg.logging.file_path == "logs/viewport.jsonl"
    assert cfg.sync.trace_enabled is True
    assert cfg.sync.feed_capacity == 64
    assert cfg.demo.aspect_ratio == 2.35
    assert cfg.demo.ratio_step == 0.05
    assert (cfg.demo.width, cfg.demo.height) == (800, 600)
    assert cfg.demo.title == "Cinema"


@pytest.mark.parametrize("raw", ["0", "-1.5", "nan", "inf", "wide"])
def test_invalid_aspect_ratio_falls_back_to_default(raw: str) -> None:
    cfg = load_viewport_config(env={"VIEWPORT_DEMO_ASPECT_RATIO": raw})

    assert cfg.demo.aspect_ratio == DEFAULT_ASPECT_RATIO


def test_invalid_values_fall_back_or_clamp() -> None:
    cfg = load_viewport_config(
        env={
            "VIEWPORT_LOG_FORMAT": "xml",
            "VIEWPORT_SYNC_TRACE_ENABLED": "maybe",
            "VIEWPORT_FEED_CAPACITY": "2",
            "VIEWPORT_DEMO_RESOLUTION": "big",
        }
    )

    assert cfg.logging.console_format == "text"
    assert cfg.sync.trace_enabled is False
    assert cfg.sync.feed_capacity == 16
    assert (cfg.demo.width, cfg.demo.height) == (1280, 720)


def test_resolve_log_level_prefers_package_variable() -> None:
    assert resolve_log_level_name(env={"LOG_LEVEL": "warning"}) == "WARNING"
    assert resolve_log_level_name(env={"LOG_LEVEL": "warning", "VIEWPORT_LOG_LEVEL": "error"}) == "ERROR"
    assert resolve_log_level_name(default="debug", env={}) == "DEBUG"


def test_load_viewport_config_reads_process_env(monkeypatch) -> None:
    monkeypatch.setenv("VIEWPORT_DEMO_RATIO_STEP", "0.25")

    assert load_viewport_config().demo.ratio_step == 0.25
