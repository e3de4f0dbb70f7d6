"""Ordered tick-loop implementation."""

from __future__ import annotations

import logging
from time import perf_counter

from fixed_viewport.api.context import RuntimeContext
from fixed_viewport.api.gameplay import SystemSpec

_LOG = logging.getLogger("fixed_viewport.update")


class RuntimeUpdateLoop:
    """Runs registered systems once per tick in ascending ``(order, system_id)``."""

    def __init__(self) -> None:
        self._systems: list[SystemSpec] = []
        self._started_ids: set[str] = set()
        self._cached_order: tuple[SystemSpec, ...] | None = None
        self._tick_index = 0

    def add_system(self, spec: SystemSpec) -> None:
        """Register system spec."""
        normalized_id = spec.system_id.strip()
        if not normalized_id:
            raise ValueError("system_id must not be empty")
        if any(existing.system_id == normalized_id for existing in self._systems):
            raise ValueError(f"duplicate system_id: {normalized_id}")
        self._systems.append(
            SystemSpec(system_id=normalized_id, system=spec.system, order=spec.order)
        )
        self._cached_order = None

    def start(self, context: RuntimeContext) -> None:
        """Start systems in ascending order."""
        for spec in self._ordered_systems():
            if spec.system_id in self._started_ids:
                continue
            spec.system.start(context)
            self._started_ids.add(spec.system_id)

    def step(self, context: RuntimeContext, delta_seconds: float) -> int:
        """Run one tick and return number of ticks executed."""
        if delta_seconds < 0.0:
            raise ValueError("delta_seconds must be >= 0")
        ordered = self._ordered_systems()
        system_timings_ms: dict[str, float] = {}
        for spec in ordered:
            if spec.system_id not in self._started_ids:
                continue
            started_at = perf_counter()
            try:
                spec.system.update(context, delta_seconds)
            except Exception:
                _LOG.error(
                    "system_failed tick=%d system=%s", self._tick_index, spec.system_id
                )
                raise
            finally:
                system_timings_ms[spec.system_id] = (perf_counter() - started_at) * 1000.0
        self._tick_index += 1
        self._log_system_timings(tick_index=self._tick_index, timings_ms=system_timings_ms)
        return 1 if ordered else 0

    def shutdown(self, context: RuntimeContext) -> None:
        """Shutdown started systems in reverse order."""
        for spec in reversed(self._ordered_systems()):
            if spec.system_id not in self._started_ids:
                continue
            spec.system.shutdown(context)
            self._started_ids.remove(spec.system_id)

    def tick_index(self) -> int:
        return self._tick_index

    def system_ids(self) -> tuple[str, ...]:
        return tuple(spec.system_id for spec in self._ordered_systems())

    def _ordered_systems(self) -> tuple[SystemSpec, ...]:
        if self._cached_order is not None:
            return self._cached_order
        self._cached_order = tuple(
            sorted(
                self._systems,
                key=lambda item: (item.order, item.system_id),
            )
        )
        return self._cached_order

    @staticmethod
    def _log_system_timings(*, tick_index: int, timings_ms: dict[str, float]) -> None:
        if not timings_ms or not _LOG.isEnabledFor(logging.DEBUG):
            return
        top = sorted(timings_ms.items(), key=lambda item: item[1], reverse=True)[:3]
        top_text = ", ".join(f"{system_id}={elapsed_ms:.3f}ms" for system_id, elapsed_ms in top)
        _LOG.debug("system_timing tick=%d systems=%s", tick_index, top_text)
