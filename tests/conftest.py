from __future__ import annotations

from dataclasses import dataclass

import pytest

from fixed_viewport.api.context import RuntimeContext, create_runtime_context
from fixed_viewport.api.gameplay import UpdateLoop, create_update_loop
from fixed_viewport.viewport.plugin import FixedViewportPlugin
from fixed_viewport.world.store import World


@dataclass(slots=True)
class SyncHarness:
    world: World
    context: RuntimeContext
    loop: UpdateLoop
    plugin: FixedViewportPlugin

    def tick(self) -> None:
        self.loop.step(self.context, 0.016)


@pytest.fixture
def world() -> World:
    return World()


@pytest.fixture
def harness(world: World) -> SyncHarness:
    context = create_runtime_context(world)
    loop = create_update_loop()
    plugin = FixedViewportPlugin()
    plugin.install(loop)
    loop.start(context)
    return SyncHarness(world=world, context=context, loop=loop, plugin=plugin)
