"""Tests for the rediskv.store() factory function."""

import ssl

import pytest

from rediskv import Adapter, Config, Unsupported, backends, register, store
from rediskv.engine import Disk, Memory, Redis


class TestStoreFactory:
    def test_memory(self):
        s = store("memory")
        assert isinstance(s, Adapter)
        assert isinstance(s.engine, Memory)

    def test_disk(self, disk_dir):
        s = store("disk", [disk_dir])
        assert isinstance(s.engine, Disk)
        s.close()

    def test_redis_default(self):
        s = store(endpoints=["localhost:6379"])
        assert isinstance(s.engine, Redis)
        s.close()

    def test_single_endpoint_string(self):
        s = store("redis", "localhost:6379")
        assert isinstance(s.engine, Redis)
        s.close()

    def test_scan_count(self):
        assert store("memory", scan_count=50).scan_count == 50

    def test_zero_scan_count_rejected(self):
        with pytest.raises(ValueError, match="scan_count"):
            store("memory", scan_count=0)

    def test_multiple_endpoints_rejected(self):
        with pytest.raises(Unsupported, match="multiple endpoints"):
            store("redis", ["host1:6379", "host2:6379"])

    def test_tls_rejected(self):
        with pytest.raises(Unsupported, match="tls"):
            store("redis", ["localhost:6379"], Config(tls=ssl.create_default_context()))

    def test_credentials_accepted(self):
        s = store("redis", ["localhost:6379"], Config(password="secret"))
        assert s.engine.client.connection_pool.connection_kwargs["password"] == "secret"
        s.close()

    def test_redis_requires_endpoint(self):
        with pytest.raises(ValueError, match="endpoint is required"):
            store("redis")

    def test_disk_requires_endpoint(self):
        with pytest.raises(ValueError, match="endpoint is required"):
            store("disk")

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown backend"):
            store("etcd", ["localhost:2379"])


class TestRegistry:
    def test_builtins(self):
        assert {"disk", "memory", "redis"} <= set(backends())

    def test_register(self):
        created = []

        def factory(endpoint, config):
            created.append(endpoint)
            return Memory()

        register("custom", factory)
        s = store("custom", ["somewhere"])
        assert isinstance(s.engine, Memory)
        assert created == ["somewhere"]
