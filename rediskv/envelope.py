"""Versioned envelopes: the only thing ever written to the engine."""

import base64
import binascii
import json
import threading
import time
from dataclasses import dataclass

from .errors import CorruptValue

VALUE_FIELD = "Value"
VERSION_FIELD = "Version"


@dataclass(frozen=True)
class VersionedValue:
    """An opaque payload paired with the version stamp it was written with."""

    value: bytes
    version: int


def encode(value: bytes, version: int) -> bytes:
    """Serialize a payload and its version to the stored format.

    The format is a compact JSON object with a base64 ``Value`` and an
    integer ``Version``, field order fixed so encoding is deterministic.
    """
    if not isinstance(value, bytes):
        raise TypeError(f"Expected bytes, got {type(value).__name__}")
    if version < 0:
        raise ValueError(f"Version must be unsigned, got {version}")
    doc = {
        VALUE_FIELD: base64.b64encode(value).decode("ascii"),
        VERSION_FIELD: version,
    }
    return json.dumps(doc, separators=(",", ":")).encode("utf-8")


def decode(raw: bytes) -> VersionedValue:
    """Parse stored bytes back into a ``VersionedValue``.

    Raises:
        CorruptValue: If ``raw`` is not an envelope.
    """
    try:
        doc = json.loads(raw)
    except (UnicodeDecodeError, ValueError) as e:
        raise CorruptValue(raw, f"invalid JSON: {e}") from e
    if not isinstance(doc, dict) or set(doc) != {VALUE_FIELD, VERSION_FIELD}:
        raise CorruptValue(raw, "unexpected fields")

    version = doc[VERSION_FIELD]
    # bool is an int subclass; reject it explicitly
    if not isinstance(version, int) or isinstance(version, bool) or version < 0:
        raise CorruptValue(raw, "version is not an unsigned integer")

    encoded = doc[VALUE_FIELD]
    if encoded is None:
        return VersionedValue(b"", version)
    if not isinstance(encoded, str):
        raise CorruptValue(raw, "value is not a base64 string")
    try:
        value = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise CorruptValue(raw, f"invalid base64: {e}") from e
    return VersionedValue(value, version)


class VersionClock:
    """Issues version stamps from wall-clock nanoseconds.

    Stamps from one clock are unique and strictly increasing: when the
    clock has not advanced since the last stamp, the next one is bumped
    to ``last + 1``. Stamps from different processes can still collide.
    Callers must only compare versions for equality.
    """

    def __init__(self) -> None:
        self._last = 0
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            self._last = max(time.time_ns(), self._last + 1)
            return self._last


default_clock = VersionClock()
