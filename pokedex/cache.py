"""A thread-safe in-memory cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class _Entry:
    created_at: float
    value: bytes


class Cache:
    """Maps keys to byte strings and drops entries older than ``interval`` seconds.

    A background thread removes expired entries once per interval. Call
    :meth:`close` to stop it, or use the cache as a context manager.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self.interval = float(interval)
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    def add(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any earlier entry."""
        with self._lock:
            self._entries[key] = _Entry(time.monotonic(), bytes(value))

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if there is none."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.value

    def reap(self, now: float, max_age: float) -> None:
        """Remove every entry created before ``now - max_age`` (monotonic seconds)."""
        cutoff = now - max_age
        with self._lock:
            expired = [k for k, e in self._entries.items() if e.created_at < cutoff]
            for key in expired:
                del self._entries[key]

    def close(self) -> None:
        """Stop the background reaper thread."""
        self._stopped.set()
        if self._reaper is not threading.current_thread():
            self._reaper.join()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _reap_loop(self) -> None:
        while not self._stopped.wait(self.interval):
            self.reap(time.monotonic(), self.interval)