"""Per-tick hand-off of sync signals from detectors to the sync stage."""

from __future__ import annotations

from collections import deque

from fixed_viewport.api.viewport import SyncSignal


class SyncSignalQueue:
    """FIFO of signals emitted during the current tick."""

    def __init__(self) -> None:
        self._signals: deque[SyncSignal] = deque()

    def __len__(self) -> int:
        return len(self._signals)

    def emit(self, signal: SyncSignal) -> None:
        self._signals.append(signal)

    def drain(self) -> tuple[SyncSignal, ...]:
        """Return all pending signals in emission order and clear the queue."""
        drained = tuple(self._signals)
        self._signals.clear()
        return drained
