"""Enumerating keys through the engine's cursor scan."""

import logging
from typing import Iterator

from .engine.base import Engine
from .errors import KeyNotFound

logger = logging.getLogger(__name__)

START_CURSOR = 0
DEFAULT_SCAN_COUNT = 10


def iter_keys(
    engine: Engine, pattern: str, count: int = DEFAULT_SCAN_COUNT
) -> Iterator[str]:
    """Lazily yield every key matching ``pattern``, one page at a time.

    Keys present for the whole scan are yielded at least once; the
    engine may repeat some. Memory stays bounded by a single page.
    """
    if count < 1:
        raise ValueError(f"scan count must be at least 1, got {count}")
    cursor = START_CURSOR
    while True:
        cursor, keys = engine.scan(cursor, pattern, count)
        yield from keys
        if cursor == START_CURSOR:
            return


def scan_keys(
    engine: Engine, pattern: str, count: int = DEFAULT_SCAN_COUNT
) -> set[str]:
    """Collect all keys matching ``pattern``.

    The whole result is held in memory; there is no cap on its size.

    Raises:
        KeyNotFound: If no key matches.
    """
    keys = set(iter_keys(engine, pattern, count))
    logger.debug("Scan %r matched %d keys", pattern, len(keys))
    if not keys:
        raise KeyNotFound(f"No keys match {pattern!r}")
    return keys
