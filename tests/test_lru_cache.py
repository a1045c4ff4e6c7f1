import threading

import pytest

from structkit.lru_cache import LRUCache


def test_get_missing_returns_none():
    cache = LRUCache(2)
    assert cache.get(1) is None


def test_put_and_get():
    cache = LRUCache(2)
    cache.put(1, "one")
    assert cache.get(1) == "one"
    assert len(cache) == 1


def test_evicts_least_recently_used():
    cache = LRUCache(2)
    cache.put(1, "one")
    cache.put(2, "two")
    cache.get(1)
    cache.put(3, "three")
    assert cache.get(2) is None
    assert cache.get(1) == "one"
    assert cache.get(3) == "three"
    assert len(cache) == 2


def test_update_refreshes_recency():
    cache = LRUCache(2)
    cache.put(1, "one")
    cache.put(2, "two")
    cache.put(1, "uno")
    cache.put(3, "three")
    assert cache.get(1) == "uno"
    assert 2 not in cache


def test_length_never_exceeds_capacity():
    cache = LRUCache(3)
    for key in range(10):
        cache.put(key, key)
        assert len(cache) <= 3
    assert [cache.get(k) for k in (7, 8, 9)] == [7, 8, 9]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        LRUCache(0)


def test_concurrent_writers_and_reader():
    cache = LRUCache(10)
    threads = [
        threading.Thread(target=cache.put, args=(0, 1)),
        threading.Thread(target=cache.put, args=(0, 2)),
        threading.Thread(target=cache.get, args=(0,)),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert cache.get(0) in (1, 2)
    assert len(cache) == 1