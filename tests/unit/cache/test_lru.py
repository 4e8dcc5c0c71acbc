"""Tests for the in-process LRU cache."""

import threading

import pytest

from src.cache import LRUCache


def test_get_and_put():
    cache = LRUCache(2)
    cache.put("a", 1)

    assert cache.get("a") == 1
    assert cache.get("missing") is None
    assert "a" in cache
    assert len(cache) == 1


def test_put_overwrites():
    cache = LRUCache(2)
    cache.put("a", 1)
    cache.put("a", 2)

    assert cache.get("a") == 2
    assert len(cache) == 1


def test_evicts_least_recently_used():
    cache = LRUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.get("a")
    cache.put("c", 3)

    assert "a" in cache
    assert "b" not in cache
    assert "c" in cache


def test_overwrite_refreshes_recency():
    cache = LRUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("a", 10)
    cache.put("c", 3)

    assert cache.get("a") == 10
    assert "b" not in cache


def test_never_exceeds_capacity():
    cache = LRUCache(3)
    for i in range(4):
        cache.put(i, i)

    assert len(cache) == 3
    assert 0 not in cache


def test_stats():
    cache = LRUCache(1)
    cache.put("a", 1)
    cache.get("a")
    cache.get("b")
    cache.put("b", 2)

    assert cache.stats() == {
        "size": 1,
        "max_size": 1,
        "hits": 1,
        "misses": 1,
        "evictions": 1,
    }


def test_clear():
    cache = LRUCache(2)
    cache.put("a", 1)
    cache.clear()

    assert len(cache) == 0
    assert cache.get("a") is None
    assert cache.capacity == 2


@pytest.mark.parametrize("capacity", [0, -1])
def test_capacity_must_be_positive(capacity):
    with pytest.raises(ValueError):
        LRUCache(capacity)


def test_concurrent_puts_keep_bound():
    cache = LRUCache(50)

    def writer(offset):
        for i in range(200):
            cache.put(offset * 1000 + i, i)
            cache.get(offset * 1000 + i // 2)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(cache) == 50
    assert cache.stats()["evictions"] == 8 * 200 - 50


def test_clear_is_not_an_eviction():
    cache = LRUCache(3)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.clear()

    assert cache.stats()["evictions"] == 0


def test_backed_by_cachetools():
    from cachetools import LRUCache as BoundedLRU

    cache = LRUCache(4)

    assert isinstance(cache._entries, BoundedLRU)
    assert cache._entries.maxsize == 4
