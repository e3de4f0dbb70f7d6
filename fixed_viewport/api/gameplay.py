"""Public tick-loop API contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from fixed_viewport.api.context import RuntimeContext


class System(Protocol):
    """Standard system lifecycle contract."""

    def start(self, context: RuntimeContext) -> None:
        """Initialize system resources."""

    def update(self, context: RuntimeContext, delta_seconds: float) -> None:
        """Run one tick."""

    def shutdown(self, context: RuntimeContext) -> None:
        """Release system resources."""


@dataclass(frozen=True, slots=True)
class SystemSpec:
    """System registration entry for update-loop ordering."""

    system_id: str
    system: System
    order: int = 0


class UpdateLoop(Protocol):
    """Ordered tick-loop contract."""

    def add_system(self, spec: SystemSpec) -> None:
        """Register system for lifecycle execution."""

    def start(self, context: RuntimeContext) -> None:
        """Start systems in order."""

    def step(self, context: RuntimeContext, delta_seconds: float) -> int:
        """Run one update frame and return number of ticks executed."""

    def shutdown(self, context: RuntimeContext) -> None:
        """Shutdown started systems in reverse order."""

    def tick_index(self) -> int:
        """Return number of completed ticks."""

    def system_ids(self) -> tuple[str, ...]:
        """Return registered system ids in execution order."""


def create_update_loop() -> UpdateLoop:
    """Create default update-loop implementation."""
    from fixed_viewport.gameplay.update_loop import RuntimeUpdateLoop

    return RuntimeUpdateLoop()


__all__ = ["System", "SystemSpec", "UpdateLoop", "create_update_loop"]
