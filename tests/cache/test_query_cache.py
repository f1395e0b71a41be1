from __future__ import annotations

import pytest

from ai3.cache import InMemoryQueryCache, normalize_query_key
from ai3.errors import ConfigurationError


class _Clock:
    def __init__(self, start: float = 500.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def test_put_then_get_within_ttl_hits():
    cache = InMemoryQueryCache(ttl_s=30, max_size=10)
    cache.put("k", "v")
    assert cache.get("k") == "v"


def test_get_after_ttl_misses_and_purges_entry():
    clock = _Clock()
    cache = InMemoryQueryCache(ttl_s=1, max_size=10, clock=clock)
    cache.put("k", "v")

    clock.advance(0.5)
    assert cache.get("k") == "v"

    clock.advance(0.5)
    assert cache.get("k") is None
    assert len(cache) == 0


def test_zero_ttl_never_hits():
    cache = InMemoryQueryCache(ttl_s=0, max_size=10)
    cache.put("k", "v")
    assert cache.get("k") is None


def test_overwrite_restamps_created_at():
    clock = _Clock()
    cache = InMemoryQueryCache(ttl_s=10, max_size=10, clock=clock)
    cache.put("k", "v1")
    clock.advance(8)
    cache.put("k", "v2")
    clock.advance(8)

    assert cache.get("k") == "v2"
    assert len(cache) == 1


def test_full_cache_evicts_oldest_entry():
    clock = _Clock()
    cache = InMemoryQueryCache(ttl_s=100, max_size=3, clock=clock)
    for key in ("a", "b", "c"):
        cache.put(key, key.upper())
        clock.advance(1)

    cache.put("d", "D")

    assert cache.get("a") is None
    assert cache.get("b") == "B"
    assert cache.get("d") == "D"
    assert cache.stats().count == 3


def test_overwriting_existing_key_at_capacity_does_not_evict():
    cache = InMemoryQueryCache(ttl_s=100, max_size=2)
    cache.put("a", 1)
    cache.put("b", 2)

    cache.put("a", 3)

    assert cache.get("a") == 3
    assert cache.get("b") == 2


def test_expired_entries_are_dropped_before_evicting_live_ones():
    clock = _Clock()
    cache = InMemoryQueryCache(ttl_s=5, max_size=2, clock=clock)
    cache.put("old", 1)
    clock.advance(10)
    cache.put("live", 2)

    cache.put("new", 3)

    assert cache.get("live") == 2
    assert cache.get("new") == 3
    assert len(cache) == 2


def test_zero_max_size_is_a_noop_cache():
    cache = InMemoryQueryCache(ttl_s=30, max_size=0)
    cache.put("k", "v")

    assert cache.get("k") is None
    stats = cache.stats()
    assert stats.count == 0
    assert stats.utilization == 0.0


def test_stats_report_utilization_and_counters():
    cache = InMemoryQueryCache(ttl_s=30, max_size=3)
    cache.put("a", 1)
    cache.get("a")
    cache.get("missing")

    stats = cache.stats()
    assert stats.count == 1
    assert stats.max_size == 3
    assert stats.utilization == 33.33
    assert stats.hits == 1
    assert stats.misses == 1
    assert stats.as_dict()["utilization"] == 33.33


def test_delete_clear_and_purge_expired():
    clock = _Clock()
    cache = InMemoryQueryCache(ttl_s=5, max_size=10, clock=clock)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.delete("a")
    cache.delete("missing")
    assert len(cache) == 1

    clock.advance(6)
    cache.put("c", 3)
    assert cache.purge_expired() == 1
    assert cache.get("c") == 3

    cache.clear()
    assert len(cache) == 0


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"ttl_s": -1}, "ttl_s"),
        ({"max_size": -1}, "max_size"),
        ({"max_size": 1.5}, "max_size"),
    ],
)
def test_invalid_configuration_is_rejected(kwargs, message):
    with pytest.raises(ConfigurationError, match=message):
        InMemoryQueryCache(**kwargs)


def test_normalize_query_key_trims_lowercases_and_collapses_whitespace():
    assert normalize_query_key("  Create   Electronic\nMusic ") == "create electronic music"
    assert normalize_query_key("") == ""


def test_clear_resets_hit_and_miss_counters():
    cache = InMemoryQueryCache(ttl_s=30, max_size=3)
    cache.put("a", 1)
    cache.get("a")
    cache.get("x")

    cache.clear()

    stats = cache.stats()
    assert stats.count == 0
    assert stats.hits == 0
    assert stats.misses == 0


@pytest.mark.parametrize("ttl", [None, "5", True])
def test_non_numeric_ttl_is_rejected(ttl):
    with pytest.raises(ConfigurationError, match="ttl_s must be a number"):
        InMemoryQueryCache(ttl_s=ttl)
