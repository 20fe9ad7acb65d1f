"""Adapter: the full store contract over a primitive engine."""

from __future__ import annotations

import logging
import threading

from . import cas
from .engine.base import Engine
from .engine.memory import Memory
from .envelope import VersionClock, decode, default_clock, encode
from .errors import FeatureNotImplemented, KeyNotFound
from .keys import directory_pattern, normalize
from .mget import multi_get, multi_get_flat
from .models import KVPair, LockOptions, WriteOptions
from .scan import DEFAULT_SCAN_COUNT, scan_keys

logger = logging.getLogger(__name__)


def _ttl(options: WriteOptions | None) -> float | None:
    return options.ttl if options is not None else None


class Adapter:
    """Versioned key-value store backed by an ``Engine``.

    Every value is stored as a versioned envelope, directories are key
    prefixes, and compare-and-swap is emulated (see ``rediskv.cas``).
    The adapter keeps no state besides the engine handle and does no
    locking of its own.

    Implements the ``Store`` protocol.

    Args:
        engine: Engine to store into. Defaults to a fresh ``Memory``.
        scan_count: Page size hint for directory scans.
        clock: Source of version stamps.
    """

    def __init__(
        self,
        engine: Engine | None = None,
        *,
        scan_count: int = DEFAULT_SCAN_COUNT,
        clock: VersionClock = default_clock,
    ) -> None:
        if scan_count < 1:
            raise ValueError(f"scan_count must be at least 1, got {scan_count}")
        self.engine = engine if engine is not None else Memory()
        self.scan_count = scan_count
        self._clock = clock

    # -- Read operations --

    def get(self, key: str) -> KVPair:
        """Get the value and version at ``key``.

        Raises:
            KeyNotFound: If the key is absent or expired.
        """
        raw = self.engine.get(normalize(key))
        if raw is None:
            raise KeyNotFound(f"Key {key!r} not found")
        vv = decode(raw)
        return KVPair(key=key, value=vv.value, last_index=vv.version)

    def get_many(self, *keys: str) -> list[KVPair]:
        """Get several keys at once, leaving out absent ones."""
        return multi_get(self.engine, keys)

    def exists(self, key: str) -> bool:
        return self.engine.exists(normalize(key))

    def list(self, directory: str) -> list[KVPair]:
        """All pairs whose key starts with ``directory``, in no particular order.

        Pairs carry the engine's flat key (``"/a/b"`` for ``"a/b"``).

        Raises:
            KeyNotFound: If no key starts with the directory.
        """
        keys = scan_keys(self.engine, directory_pattern(directory), self.scan_count)
        return multi_get_flat(self.engine, keys)

    # -- Write operations --

    def put(self, key: str, value: bytes, options: WriteOptions | None = None) -> None:
        """Store ``value`` at ``key`` under a new version."""
        raw = encode(value, self._clock.next())
        self.engine.set(normalize(key), raw, _ttl(options))

    def delete(self, key: str) -> None:
        """Remove ``key``. Removing an absent key is not an error."""
        self.engine.delete(normalize(key))

    def delete_tree(self, directory: str) -> None:
        """Remove every key starting with ``directory`` in one bulk delete.

        Raises:
            KeyNotFound: If no key starts with the directory.
        """
        keys = scan_keys(self.engine, directory_pattern(directory), self.scan_count)
        removed = self.engine.delete(*keys)
        logger.debug("Deleted %d keys under %r", removed, directory)

    # -- Optimistic concurrency --

    def atomic_put(
        self,
        key: str,
        value: bytes,
        previous: KVPair | None = None,
        options: WriteOptions | None = None,
    ) -> tuple[bool, KVPair]:
        """Compare-and-swap put. Pass ``previous=None`` to create.

        Not atomic: see ``rediskv.cas.atomic_put``.
        """
        return cas.atomic_put(
            self.engine, key, value, previous, _ttl(options), clock=self._clock
        )

    def atomic_delete(self, key: str, previous: KVPair | None = None) -> bool:
        """Compare-and-swap delete.

        Not atomic: see ``rediskv.cas.atomic_delete``.
        """
        return cas.atomic_delete(self.engine, key, previous)

    # -- Unsupported capabilities --

    def watch(self, key: str, stop: threading.Event | None = None):
        """Not supported. Always raises ``FeatureNotImplemented``."""
        raise FeatureNotImplemented("watch")

    def watch_tree(self, directory: str, stop: threading.Event | None = None):
        """Not supported. Always raises ``FeatureNotImplemented``."""
        raise FeatureNotImplemented("watch_tree")

    def new_lock(self, key: str, options: LockOptions | None = None):
        """Not supported. Always raises ``FeatureNotImplemented``."""
        raise FeatureNotImplemented("locks")

    # -- Lifecycle --

    def close(self) -> None:
        """Release the engine. The adapter must not be used afterwards."""
        self.engine.close()

    def __enter__(self) -> Adapter:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
