"""In-memory engine."""

import threading
import time
from fnmatch import fnmatchcase

from .base import Engine, check_bytes, has_ttl


class Memory(Engine):
    """A memory-backed engine with lazy expiry.

    Scans walk the sorted list of live keys; the cursor is an offset
    into that list, so keys created or removed mid-scan may be missed
    or repeated, as with Redis.
    """

    def __init__(self) -> None:
        self.memory: dict[str, tuple[bytes, float | None]] = {}
        self._lock = threading.Lock()

    def _live(self, key: str) -> bytes | None:
        entry = self.memory.get(key)
        if entry is None:
            return None
        value, deadline = entry
        if deadline is not None and time.monotonic() >= deadline:
            del self.memory[key]
            return None
        return value

    def _store(self, key: str, value: bytes, ttl: float | None) -> None:
        deadline = time.monotonic() + ttl if has_ttl(ttl) else None
        self.memory[key] = (value, deadline)

    def get(self, key: str) -> bytes | None:
        with self._lock:
            return self._live(key)

    def set(self, key: str, value: bytes, ttl: float | None = None) -> None:
        check_bytes(value)
        with self._lock:
            self._store(key, value, ttl)

    def set_nx(self, key: str, value: bytes, ttl: float | None = None) -> bool:
        check_bytes(value)
        with self._lock:
            if self._live(key) is not None:
                return False
            self._store(key, value, ttl)
            return True

    def delete(self, *keys: str) -> int:
        removed = 0
        with self._lock:
            for key in keys:
                if self._live(key) is not None:
                    del self.memory[key]
                    removed += 1
        return removed

    def exists(self, key: str) -> bool:
        with self._lock:
            return self._live(key) is not None

    def scan(self, cursor: int, pattern: str, count: int) -> tuple[int, list[str]]:
        with self._lock:
            live = sorted(k for k in list(self.memory) if self._live(k) is not None)
        end = cursor + count
        page = [k for k in live[cursor:end] if fnmatchcase(k, pattern)]
        return (end if end < len(live) else 0), page

    def mget(self, *keys: str) -> list[bytes | None]:
        with self._lock:
            return [self._live(key) for key in keys]

    def close(self) -> None:
        """Nothing to release; contents stay readable."""
