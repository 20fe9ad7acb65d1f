"""Store protocol, backend registry and factory function."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Callable, Protocol, Sequence, runtime_checkable

from .errors import Unsupported
from .models import Config, KVPair, LockOptions, WriteOptions

if TYPE_CHECKING:
    from .adapter import Adapter
    from .engine.base import Engine


@runtime_checkable
class Store(Protocol):
    """Protocol for backend-agnostic key-value stores.

    Implementations: ``Adapter``.
    """

    def put(self, key: str, value: bytes, options: WriteOptions | None = None) -> None: ...
    def get(self, key: str) -> KVPair: ...
    def get_many(self, *keys: str) -> list[KVPair]: ...
    def delete(self, key: str) -> None: ...
    def exists(self, key: str) -> bool: ...
    def list(self, directory: str) -> list[KVPair]: ...
    def delete_tree(self, directory: str) -> None: ...
    def atomic_put(
        self,
        key: str,
        value: bytes,
        previous: KVPair | None = None,
        options: WriteOptions | None = None,
    ) -> tuple[bool, KVPair]: ...
    def atomic_delete(self, key: str, previous: KVPair | None = None) -> bool: ...
    def watch(self, key: str, stop: threading.Event | None = None): ...
    def watch_tree(self, directory: str, stop: threading.Event | None = None): ...
    def new_lock(self, key: str, options: LockOptions | None = None): ...
    def close(self) -> None: ...


EngineFactory = Callable[[str | None, Config | None], "Engine"]
"""Engine constructor: (endpoint or None, config) -> Engine."""

_registry: dict[str, EngineFactory] = {}


def register(name: str, factory: EngineFactory) -> None:
    """Make an engine available to ``store()`` under ``name``."""
    _registry[name] = factory


def backends() -> list[str]:
    """Names of the registered engines."""
    return sorted(_registry)


def _redis(endpoint: str | None, config: Config | None) -> Engine:
    if endpoint is None:
        raise ValueError("an endpoint is required for backend 'redis'")
    from .engine.redis import Redis

    return Redis(endpoint, config)


def _memory(endpoint: str | None, config: Config | None) -> Engine:
    from .engine.memory import Memory

    return Memory()


def _disk(endpoint: str | None, config: Config | None) -> Engine:
    if endpoint is None:
        raise ValueError("a directory endpoint is required for backend 'disk'")
    from .engine.disk import Disk

    return Disk(endpoint)


register("redis", _redis)
register("memory", _memory)
register("disk", _disk)


def store(
    backend: str = "redis",
    endpoints: Sequence[str] = (),
    config: Config | None = None,
    *,
    scan_count: int | None = None,
) -> Adapter:
    """Create a store with sensible defaults.

    Args:
        backend: ``"redis"`` (default), ``"memory"`` or ``"disk"``, or
            any name added with ``register()``.
        endpoints: At most one endpoint: ``host[:port]`` for redis, a
            directory path for disk, nothing for memory.
        config: Credentials and database. TLS is not supported.
        scan_count: Page size hint for directory scans.

    Returns:
        An ``Adapter`` over the chosen engine.

    Raises:
        Unsupported: For several endpoints or a TLS config.
        ValueError: For an unknown backend, a missing endpoint or a
            scan_count below 1.
    """
    if isinstance(endpoints, str):
        endpoints = [endpoints]
    if len(endpoints) > 1:
        raise Unsupported(f"{backend} does not support multiple endpoints")
    if config is not None and config.tls is not None:
        raise Unsupported(f"{backend} does not support tls")
    if scan_count is not None and scan_count < 1:
        raise ValueError(f"scan_count must be at least 1, got {scan_count}")

    factory = _registry.get(backend)
    if factory is None:
        raise ValueError(f"Unknown backend: {backend!r}")
    engine = factory(endpoints[0] if endpoints else None, config)

    from .adapter import Adapter

    if scan_count is None:
        return Adapter(engine)
    return Adapter(engine, scan_count=scan_count)
