"""Abstract engine interface."""

from abc import ABC, abstractmethod


class Engine(ABC):
    """The primitive commands a key-value engine must offer.

    Keys are flat strings and values are bytes; versioning, directories
    and compare-and-swap are synthesized above this layer. Engines
    report absence with None or False and raise only for transport or
    server failures.
    """

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """Get bytes value for key, or None if not found."""

    @abstractmethod
    def set(self, key: str, value: bytes, ttl: float | None = None) -> None:
        """Set bytes value for key, expiring after ``ttl`` seconds if given."""

    @abstractmethod
    def set_nx(self, key: str, value: bytes, ttl: float | None = None) -> bool:
        """Set value only if key is absent. Returns True if it was created."""

    @abstractmethod
    def delete(self, *keys: str) -> int:
        """Remove keys if present, returning how many existed."""

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check if key exists."""

    @abstractmethod
    def scan(self, cursor: int, pattern: str, count: int) -> tuple[int, list[str]]:
        """One page of a cursor-based key scan.

        Start with cursor 0 and pass back each returned cursor; the scan
        is complete when the returned cursor is 0 again. ``pattern`` is a
        glob; ``count`` is a hint for the page size.
        """

    @abstractmethod
    def mget(self, *keys: str) -> list[bytes | None]:
        """Get many keys in one round trip, None in each absent slot."""

    @abstractmethod
    def close(self) -> None:
        """Release the engine's connection or files."""


def check_bytes(value: bytes) -> None:
    if not isinstance(value, bytes):
        raise TypeError(f"Expected bytes, got {type(value).__name__}")


def has_ttl(ttl: float | None) -> bool:
    """Whether ``ttl`` asks for expiry (None and 0 mean never)."""
    return ttl is not None and ttl > 0
