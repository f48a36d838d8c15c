import pytest

from algodrills.cache import LRUCache


def test_oldest_entries_are_evicted():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    cache.put(3, 3)
    cache.put(4, 4)
    assert cache.get(1) == -1
    assert cache.get(2) == -1
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_get_refreshes_recency():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == -1
    assert cache.get(1) == 1
    assert cache.get(3) == 3


def test_put_existing_key_updates_and_refreshes():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    cache.put(1, 10)
    cache.put(3, 3)
    assert cache.get(1) == 10
    assert cache.get(2) == -1
    assert cache.get(3) == 3


def test_missing_key_returns_minus_one():
    cache = LRUCache(1)
    assert cache.get(42) == -1


def test_zero_capacity_put_raises():
    cache = LRUCache(0)
    with pytest.raises(ValueError):
        cache.put(1, 1)