from __future__ import annotations

import pytest

from fixed_viewport.api.context import create_runtime_context
from fixed_viewport.world.store import World


def test_runtime_context_provide_get_require() -> None:
    context = create_runtime_context()
    context.provide("clock", {"name": "frame"})
    assert context.get("clock") == {"name": "frame"}
    assert context.require("clock") == {"name": "frame"}


def test_runtime_context_require_missing_raises() -> None:
    context = create_runtime_context()
    assert context.get("missing") is None
    with pytest.raises(KeyError):
        context.require("missing")


def test_runtime_context_rejects_empty_service_name() -> None:
    context = create_runtime_context()
    with pytest.raises(ValueError):
        context.provide("   ", object())


def test_runtime_context_binds_given_world() -> None:
    world = World()

    assert create_runtime_context(world).world is world
    assert isinstance(create_runtime_context().world, World)
