"""Redis engine using redis-py."""

import logging

import redis

from ..errors import Unsupported
from ..models import Config
from .base import Engine, check_bytes, has_ttl

logger = logging.getLogger(__name__)

DEFAULT_PORT = 6379
DIAL_TIMEOUT = 5.0
READ_TIMEOUT = 30.0
# redis-py shares one socket timeout between reads and writes
WRITE_TIMEOUT = 30.0


def parse_endpoint(endpoint: str) -> tuple[str, int]:
    """Split ``host[:port]`` into host and port."""
    host, sep, port = endpoint.strip().rpartition(":")
    if not sep:
        return port, DEFAULT_PORT
    if not host or not port.isdigit():
        raise ValueError(f"Invalid redis endpoint: {endpoint!r}")
    return host, int(port)


def _px(ttl: float | None) -> int | None:
    # sub-millisecond TTLs still expire rather than persist
    return max(1, int(ttl * 1000)) if has_ttl(ttl) else None


class Redis(Engine):
    """Engine backed by a single Redis node.

    Args:
        endpoint: ``host[:port]`` of the server.
        config: Credentials and database. TLS is rejected.
        client: An existing ``redis.Redis`` to use instead of connecting.
            The engine takes ownership and closes it on ``close()``.
    """

    def __init__(
        self,
        endpoint: str | None = None,
        config: Config | None = None,
        *,
        client: redis.Redis | None = None,
    ) -> None:
        if config is not None and config.tls is not None:
            raise Unsupported("redis does not support tls")
        if client is None:
            if endpoint is None:
                raise ValueError("endpoint is required when no client is given")
            config = config or Config()
            host, port = parse_endpoint(endpoint)
            client = redis.Redis(
                host=host,
                port=port,
                db=config.db,
                username=config.username,
                password=config.password,
                socket_connect_timeout=DIAL_TIMEOUT,
                socket_timeout=max(READ_TIMEOUT, WRITE_TIMEOUT),
            )
            logger.debug("Connecting to redis at %s:%d db=%d", host, port, config.db)
        self.client = client

    def get(self, key: str) -> bytes | None:
        return self.client.get(key)

    def set(self, key: str, value: bytes, ttl: float | None = None) -> None:
        check_bytes(value)
        self.client.set(key, value, px=_px(ttl))

    def set_nx(self, key: str, value: bytes, ttl: float | None = None) -> bool:
        check_bytes(value)
        return bool(self.client.set(key, value, nx=True, px=_px(ttl)))

    def delete(self, *keys: str) -> int:
        if not keys:
            return 0
        return int(self.client.delete(*keys))

    def exists(self, key: str) -> bool:
        return self.client.exists(key) > 0

    def scan(self, cursor: int, pattern: str, count: int) -> tuple[int, list[str]]:
        next_cursor, keys = self.client.scan(cursor=cursor, match=pattern, count=count)
        return int(next_cursor), [
            k.decode("utf-8") if isinstance(k, bytes) else k for k in keys
        ]

    def mget(self, *keys: str) -> list[bytes | None]:
        if not keys:
            return []
        return list(self.client.mget(keys))

    def close(self) -> None:
        self.client.close()
