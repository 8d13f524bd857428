"""In-process per-aggregate locks.

One re-entrant lock per (kind, id) pair, created on first use.  Units of
work acquire them through ``hold()`` and release them when they exit, so
two operations on the same Order or Product never interleave.

Each entry counts the callers holding or waiting on it and is dropped
when the count reaches zero, so the registry only ever contains locks
that are in use.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class _Entry:

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.users = 0


class AggregateLocks:

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._entries: dict[tuple[str, str], _Entry] = {}

    @contextmanager
    def hold(self, kind: str, key: str) -> Iterator[None]:
        """Acquire the lock for (*kind*, *key*) for the duration of the block.

        Usage:
            with locks.hold("order", order_id):
                # load, mutate and save the order
                pass
        """
        entry = self._acquire_entry((kind, key))
        try:
            with entry.lock:
                yield
        finally:
            self._release_entry((kind, key), entry)

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)

    def _acquire_entry(self, name: tuple[str, str]) -> _Entry:
        with self._guard:
            entry = self._entries.get(name)
            if entry is None:
                entry = _Entry()
                self._entries[name] = entry
            entry.users += 1
            return entry

    def _release_entry(self, name: tuple[str, str], entry: _Entry) -> None:
        with self._guard:
            entry.users -= 1
            if entry.users == 0:
                del self._entries[name]
