"""rediskv: Versioned key-value store over a single Redis node."""

from .adapter import Adapter
from .engine import Disk, Engine, Memory, Redis
from .envelope import VersionClock, VersionedValue
from .errors import (
    CorruptValue,
    FeatureNotImplemented,
    KeyModified,
    KeyNotFound,
    KVError,
    Unsupported,
)
from .models import Config, KVPair, LockOptions, WriteOptions
from .store import Store, backends, register, store

__all__ = [
    "Adapter",
    "Config",
    "CorruptValue",
    "Disk",
    "Engine",
    "FeatureNotImplemented",
    "KVError",
    "KVPair",
    "KeyModified",
    "KeyNotFound",
    "LockOptions",
    "Memory",
    "Redis",
    "Store",
    "Unsupported",
    "VersionClock",
    "VersionedValue",
    "WriteOptions",
    "backends",
    "register",
    "store",
]
