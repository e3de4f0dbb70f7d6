"""Cursor-based notification feeds between the host and tick systems."""

from __future__ import annotations

import logging

_LOG = logging.getLogger("fixed_viewport.feed")


class NotificationFeed[T]:
    """Bounded append-only feed where every reader keeps its own cursor.

    Cursors are absolute sequence numbers, so compaction never shifts what a
    reader has or has not seen.
    """

    def __init__(self, name: str, *, capacity: int = 1024) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self._name = name
        self._capacity = int(capacity)
        self._items: list[T] = []
        self._base = 0
        self._readers: list[FeedReader[T]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def size(self) -> int:
        return len(self._items)

    @property
    def base(self) -> int:
        """Sequence number of the oldest retained item."""
        return self._base

    @property
    def end(self) -> int:
        """Sequence number the next published item will get."""
        return self._base + len(self._items)

    def publish(self, item: T) -> None:
        if not self._readers:
            return
        self._items.append(item)
        if len(self._items) <= self._capacity:
            return
        overflow = len(self._items) - self._capacity
        del self._items[:overflow]
        self._base += overflow
        _LOG.warning("feed_overflow feed=%s dropped=%d", self._name, overflow)

    def reader(self) -> FeedReader[T]:
        """Register a reader that sees items published from now on."""
        created = FeedReader(self, self.end)
        self._readers.append(created)
        return created

    def detach(self, reader: FeedReader[T]) -> None:
        if reader in self._readers:
            self._readers.remove(reader)
        self.compact()

    def items_since(self, cursor: int) -> tuple[tuple[T, ...], int]:
        """Return retained items at or after ``cursor`` plus the cursor to resume from."""
        start = max(cursor, self._base)
        lagged = start - cursor
        if lagged:
            _LOG.warning("feed_reader_lagged feed=%s missed=%d", self._name, lagged)
        drained = tuple(self._items[start - self._base :])
        return drained, self.end

    def compact(self) -> None:
        """Drop items every attached reader has already consumed."""
        if not self._readers:
            self._base = self.end
            self._items.clear()
            return
        floor = min(reader.cursor for reader in self._readers)
        consumed = floor - self._base
        if consumed > 0:
            del self._items[:consumed]
            self._base = floor


class FeedReader[T]:
    """Consumer-owned view into a feed."""

    def __init__(self, feed: NotificationFeed[T], cursor: int) -> None:
        self._feed = feed
        self._cursor = cursor

    @property
    def cursor(self) -> int:
        return self._cursor

    def pending(self) -> int:
        return self._feed.end - max(self._cursor, self._feed.base)

    def read(self) -> tuple[T, ...]:
        """Return every item published since the previous read, oldest first."""
        drained, self._cursor = self._feed.items_since(self._cursor)
        self._feed.compact()
        return drained
