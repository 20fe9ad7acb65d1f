"""Disk-backed engine using diskcache."""

from fnmatch import fnmatchcase
from itertools import islice
from typing import cast

from .base import Engine, check_bytes, has_ttl

ONE_GB = 1024 * 1024 * 1024


class Disk(Engine):
    """Engine backed by diskcache (SQLite + mmap).

    ``set_nx`` maps onto ``Cache.add``, which is atomic across
    processes sharing the directory.
    """

    def __init__(self, directory: str, size_limit: int = ONE_GB) -> None:
        from diskcache import Cache as DiskCache

        self.store = DiskCache(directory, size_limit=size_limit)

    def get(self, key: str) -> bytes | None:
        return cast(bytes | None, self.store.get(key))

    def set(self, key: str, value: bytes, ttl: float | None = None) -> None:
        check_bytes(value)
        self.store.set(key, value, expire=ttl if has_ttl(ttl) else None)

    def set_nx(self, key: str, value: bytes, ttl: float | None = None) -> bool:
        check_bytes(value)
        return self.store.add(key, value, expire=ttl if has_ttl(ttl) else None)

    def delete(self, *keys: str) -> int:
        removed = 0
        with self.store.transact():
            for key in keys:
                if self.store.delete(key, retry=False):
                    removed += 1
        return removed

    def exists(self, key: str) -> bool:
        return key in self.store

    def scan(self, cursor: int, pattern: str, count: int) -> tuple[int, list[str]]:
        # iterkeys walks keys in sorted order, expired ones included; one
        # extra key tells whether the scan continues past this page
        end = cursor + count
        keys = [str(k) for k in islice(self.store.iterkeys(), cursor, end + 1)]
        page = [
            k for k in keys[:count]
            if fnmatchcase(k, pattern) and k in self.store
        ]
        return (end if len(keys) > count else 0), page

    def mget(self, *keys: str) -> list[bytes | None]:
        return [self.get(key) for key in keys]

    def close(self) -> None:
        self.store.close()
