"""Batched retrieval of versioned values."""

from typing import Iterable

from .engine.base import Engine
from .envelope import decode
from .keys import normalize
from .models import KVPair


def _collect(engine: Engine, keys: list[str], flat_keys: list[str]) -> list[KVPair]:
    if not flat_keys:
        return []
    replies = engine.mget(*flat_keys)
    pairs: list[KVPair] = []
    for key, raw in zip(keys, replies):
        if not raw:
            continue
        vv = decode(raw)
        pairs.append(KVPair(key=key, value=vv.value, last_index=vv.version))
    return pairs


def multi_get(engine: Engine, keys: Iterable[str]) -> list[KVPair]:
    """Fetch several keys in one round trip.

    Absent keys are left out of the result rather than raising. Each
    pair carries the key exactly as the caller passed it.
    """
    keys = list(keys)
    return _collect(engine, keys, [normalize(k) for k in keys])


def multi_get_flat(engine: Engine, flat_keys: Iterable[str]) -> list[KVPair]:
    """Like ``multi_get`` for keys already in engine form, such as scan results.

    The keys are fetched exactly as given, never normalized again.
    """
    flat_keys = list(flat_keys)
    return _collect(engine, flat_keys, flat_keys)
