"""Resolve-and-apply stage of the viewport sync tick."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from fixed_viewport.api.context import RuntimeContext
from fixed_viewport.viewport.applier import apply_viewport
from fixed_viewport.viewport.resolver import resolve_signals
from fixed_viewport.viewport.signals import SyncSignalQueue

_LOG = logging.getLogger("fixed_viewport.sync")

SYNC_SERVICE = "viewport.sync"


@dataclass(frozen=True, slots=True)
class SyncReport:
    """Outcome of one sync pass."""

    signals: int = 0
    pairs: int = 0
    writes: int = 0
    skipped: dict[str, int] = field(default_factory=dict)


class ViewportSyncSystem:
    """Consumes this tick's signals and rewrites the affected viewports."""

    def __init__(self, signals: SyncSignalQueue, *, trace: bool = False) -> None:
        self._signals = signals
        self._trace = trace
        self.last_report = SyncReport()

    def start(self, context: RuntimeContext) -> None:
        context.provide(SYNC_SERVICE, self)

    def update(self, context: RuntimeContext, delta_seconds: float) -> None:
        _ = delta_seconds
        self.last_report = self.run(context)

    def shutdown(self, context: RuntimeContext) -> None:
        _ = context
        self._signals.drain()

    def run(self, context: RuntimeContext) -> SyncReport:
        drained = self._signals.drain()
        if not drained:
            return SyncReport()
        resolution = resolve_signals(context.world, drained)
        writes = 0
        empty_surfaces = 0
        for view, surface in resolution.pairs:
            if apply_viewport(view, surface, trace=self._trace):
                writes += 1
            else:
                empty_surfaces += 1
        skipped = dict(resolution.skipped)
        if empty_surfaces:
            skipped["empty_surface"] = empty_surfaces
        report = SyncReport(
            signals=len(drained),
            pairs=len(resolution.pairs),
            writes=writes,
            skipped=skipped,
        )
        _LOG.debug(
            "viewport_sync signals=%d pairs=%d writes=%d skipped=%s",
            report.signals,
            report.pairs,
            report.writes,
            report.skipped,
            extra={
                "signals": report.signals,
                "pairs": report.pairs,
                "writes": report.writes,
                "skipped": report.skipped,
            },
        )
        return report
