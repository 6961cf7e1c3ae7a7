import pytest

from football_standings.cache import TTLCache


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_get_returns_value_within_ttl():
    clock = FakeClock()
    cache = TTLCache(ttl=60, clock=clock)
    cache.put("152", ["row"])

    clock.now += 59
    assert cache.get("152") == ["row"]


def test_entry_expires_after_ttl():
    clock = FakeClock()
    cache = TTLCache(ttl=60, clock=clock)
    cache.put("152", ["row"])

    clock.now += 60
    assert cache.get("152") is None
    assert len(cache) == 0


def test_reads_do_not_extend_expiry():
    clock = FakeClock()
    cache = TTLCache(ttl=10, clock=clock)
    cache.put("k", 1)
    clock.now += 8
    assert cache.get("k") == 1
    clock.now += 3
    assert cache.get("k") is None


def test_least_recently_used_entry_is_evicted_over_bound():
    cache = TTLCache(ttl=60, max_entries=2, clock=FakeClock())
    cache.put("a", 1)
    cache.put("b", 2)
    assert cache.get("a") == 1  # "b" is now least recent
    cache.put("c", 3)

    assert cache.get("b") is None
    assert cache.get("a") == 1
    assert cache.get("c") == 3


def test_evict_and_clear():
    cache = TTLCache(ttl=60, clock=FakeClock())
    cache.put("a", 1)
    cache.put("b", 2)

    assert cache.evict("a") is True
    assert cache.evict("a") is False
    assert "b" in cache
    cache.clear()
    assert len(cache) == 0


def test_keys_are_case_sensitive():
    cache = TTLCache(ttl=60, clock=FakeClock())
    cache.put("England", ["x"])
    assert cache.get("england") is None


def test_rejects_non_positive_bound():
    with pytest.raises(ValueError):
        TTLCache(ttl=60, max_entries=0)
