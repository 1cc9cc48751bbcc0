"""Tests for the shared storage accessor."""

import threading
import time

import pytest

from objstore import deps
from objstore.storage.contracts import StorageConfigError


def test_get_storage_builds_once(monkeypatch, mock_storage):
    calls = []

    def fake_build():
        calls.append(1)
        return mock_storage

    monkeypatch.setattr("objstore.storage.factory.build_storage", fake_build)

    assert deps.get_storage() is mock_storage
    assert deps.get_storage() is mock_storage
    assert len(calls) == 1


def test_reset_storage_forces_rebuild(monkeypatch, mock_storage):
    monkeypatch.setattr("objstore.storage.factory.build_storage", lambda: mock_storage)
    deps.get_storage()

    deps.reset_storage()
    monkeypatch.setattr("objstore.storage.factory.build_storage", lambda: "rebuilt")

    assert deps.get_storage() == "rebuilt"


def test_get_storage_without_bucket_raises():
    with pytest.raises(StorageConfigError):
        deps.get_storage()


def test_concurrent_first_calls_build_once(monkeypatch):
    calls = []
    start = threading.Barrier(4)

    def slow_build():
        calls.append(1)
        time.sleep(0.05)
        return object()

    monkeypatch.setattr("objstore.storage.factory.build_storage", slow_build)
    results = []

    def worker():
        start.wait()
        results.append(deps.get_storage())

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert len(results) == 4
    assert len({id(r) for r in results}) == 1
