from datetime import datetime, timedelta, timezone

import pytest

import streamwrap.db.cached as cached_module
from streamwrap.db.cached import MemoryCache, text_hash


@pytest.fixture
def clock(monkeypatch):
    current = {"now": datetime(2024, 1, 1, tzinfo=timezone.utc)}
    monkeypatch.setattr(cached_module, "_now", lambda: current["now"])
    return current


def test_set_and_get():
    cache = MemoryCache()
    cache.set("streams", [1, 2], timedelta(seconds=600))
    assert cache.get("streams") == [1, 2]
    assert cache.get("missing", default="fallback") == "fallback"


def test_non_positive_expiry_is_not_stored():
    cache = MemoryCache()
    cache.set("streams", [1], timedelta(0))
    cache.set("other", [1], timedelta(seconds=-5))
    assert len(cache) == 0
    assert cache.get("streams") is None


def test_entries_expire(clock):
    cache = MemoryCache()
    cache.set("streams", ["a"], timedelta(seconds=600))

    clock["now"] += timedelta(seconds=599)
    assert cache.get("streams") == ["a"]

    clock["now"] += timedelta(seconds=1)
    assert cache.get("streams") is None
    assert len(cache) == 0


def test_hashed_key():
    cache = MemoryCache()
    key = text_hash("https://addon.example.com/stream/movie/tt1.json")
    cache.set(key, ["x"], timedelta(minutes=1), hashed_key=True)

    assert cache.get(key, hashed_key=True) == ["x"]
    assert cache.get("https://addon.example.com/stream/movie/tt1.json") == ["x"]


def test_delete_and_clear():
    cache = MemoryCache()
    cache.set("a", 1, timedelta(minutes=1))
    cache.set("b", 2, timedelta(minutes=1))

    cache.delete("a")
    assert cache.get("a") is None
    assert cache.get("b") == 2

    cache.clear()
    assert len(cache) == 0


def test_clean_up_removes_expired_entries(clock):
    cache = MemoryCache(cleanup_interval=timedelta(minutes=15))
    cache.set("short", 1, timedelta(minutes=1))
    cache.set("long", 2, timedelta(hours=1))

    clock["now"] += timedelta(minutes=16)
    cache.set("fresh", 3, timedelta(minutes=1))

    assert len(cache) == 2
    assert cache.get("long") == 2


def test_get_instance_is_shared():
    assert MemoryCache.get_instance() is MemoryCache.get_instance()
