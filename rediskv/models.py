"""Value types shared by the adapter and its callers."""

import ssl
import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class KVPair:
    """A key with its value and concurrency token.

    ``last_index`` is opaque: pass it back unchanged (as ``previous``)
    to assert nobody modified the key since it was read.
    """

    key: str
    value: bytes
    last_index: int


@dataclass(frozen=True)
class WriteOptions:
    """Per-write options. ``ttl`` is in seconds; None or 0 never expires."""

    ttl: float | None = None


@dataclass(frozen=True)
class LockOptions:
    """Options accepted by ``new_lock``."""

    value: bytes | None = None
    ttl: float | None = None
    renew_lock: threading.Event | None = None


@dataclass(frozen=True)
class Config:
    """Construction-time options for a store.

    Args:
        tls: TLS context. Rejected: only plaintext endpoints are supported.
        username: ACL user name, if the server requires one.
        password: Server password, if any.
        db: Logical database index on the server.
    """

    tls: ssl.SSLContext | None = None
    username: str | None = None
    password: str | None = None
    db: int = 0
