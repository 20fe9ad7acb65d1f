"""Compare-and-swap emulated with plain engine commands.

Both operations read the current envelope, compare its version with
the caller's ``previous`` pair, then write or delete. The three steps
are separate round trips: another writer can change the key between
the read and the write, and neither operation detects that. Treat
them as best-effort optimistic concurrency.

Decision table shared by both operations:

    previous   current    outcome
    --------   -------    -------
    None       absent     proceed
    None       present    KeyModified
    given      absent     KeyModified
    given      present    proceed if versions match, else KeyModified
"""

import logging

from .engine.base import Engine
from .envelope import VersionClock, VersionedValue, decode, default_clock, encode
from .errors import KeyModified
from .keys import normalize
from .models import KVPair

logger = logging.getLogger(__name__)


def _read(engine: Engine, flat_key: str) -> VersionedValue | None:
    raw = engine.get(flat_key)
    if raw is None:
        return None
    return decode(raw)


def _check(key: str, current: VersionedValue | None, previous: KVPair | None) -> None:
    """Raise ``KeyModified`` unless the decision table says proceed."""
    if previous is None:
        if current is not None:
            logger.debug("CAS on %r: expected absent, found version %d", key, current.version)
            raise KeyModified(f"Key {key!r} already exists")
        return
    if current is None:
        logger.debug("CAS on %r: expected version %d, key is gone", key, previous.last_index)
        raise KeyModified(f"Key {key!r} no longer exists")
    if current.version != previous.last_index:
        logger.debug(
            "CAS on %r: expected version %d, found %d",
            key, previous.last_index, current.version,
        )
        raise KeyModified(f"Key {key!r} was modified")


def atomic_put(
    engine: Engine,
    key: str,
    value: bytes,
    previous: KVPair | None,
    ttl: float | None = None,
    *,
    clock: VersionClock = default_clock,
) -> tuple[bool, KVPair]:
    """Write ``value`` only if ``key`` is still as the caller last saw it.

    Pass ``previous=None`` to create a key that must not exist yet.
    When replacing, the old entry is deleted before the create-only
    write, so a concurrent reader briefly sees the key as absent.

    Returns:
        ``(True, pair)`` with the freshly assigned version.

    Raises:
        KeyModified: If the check fails, or another writer created the
            key between the delete and the write.
    """
    flat = normalize(key)
    _check(key, _read(engine, flat), previous)
    if previous is not None:
        engine.delete(flat)

    version = clock.next()
    if not engine.set_nx(flat, encode(value, version), ttl):
        logger.debug("CAS on %r: lost create race", key)
        raise KeyModified(f"Key {key!r} was created concurrently")
    return True, KVPair(key=key, value=value, last_index=version)


def atomic_delete(engine: Engine, key: str, previous: KVPair | None) -> bool:
    """Delete ``key`` only if it is still as the caller last saw it.

    With ``previous=None`` this succeeds only when the key is already
    absent.

    Raises:
        KeyModified: If the check fails.
    """
    flat = normalize(key)
    _check(key, _read(engine, flat), previous)
    engine.delete(flat)
    return True
