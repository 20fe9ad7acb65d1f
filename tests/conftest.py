"""Shared fixtures: one engine of each kind."""

import shutil
import tempfile

import fakeredis
import pytest

from rediskv.engine import Disk, Memory, Redis


def make_redis() -> Redis:
    return Redis(client=fakeredis.FakeRedis(server=fakeredis.FakeServer()))


@pytest.fixture
def disk_dir():
    tmpdir = tempfile.mkdtemp()
    yield tmpdir
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture(params=["memory", "disk", "redis"])
def engine(request, disk_dir):
    if request.param == "memory":
        e = Memory()
    elif request.param == "disk":
        e = Disk(disk_dir)
    else:
        e = make_redis()
    yield e
    e.close()
