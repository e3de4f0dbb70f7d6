"""Public runtime context API."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from fixed_viewport.world.store import World


class RuntimeContext(ABC):
    """Shared runtime context passed to every system on each tick."""

    world: "World"
    services: dict[str, "ServiceLike"]

    @abstractmethod
    def provide(self, name: str, service: "ServiceLike") -> None:
        """Register a named service."""

    @abstractmethod
    def get(self, name: str) -> "ServiceLike | None":
        """Return a named service if present."""

    @abstractmethod
    def require(self, name: str) -> "ServiceLike":
        """Return named service or raise KeyError."""


class ServiceLike(Protocol):
    """Opaque service contract for runtime context boundaries."""


def create_runtime_context(world: "World | None" = None) -> RuntimeContext:
    """Create default runtime context bound to a world."""
    from fixed_viewport.runtime.context import RuntimeContextImpl
    from fixed_viewport.world.store import World

    return RuntimeContextImpl(world=world if world is not None else World())
