import time

import pytest

from pokedex.cache import Cache


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("https://example.com", b"testdata"),
        ("https://example.com/path", b"moretestdata"),
    ],
)
def test_add_get(key, value):
    with Cache(5.0) as cache:
        cache.add(key, value)
        assert cache.get(key) == value


def test_get_missing_key_returns_none():
    with Cache(5.0) as cache:
        assert cache.get("https://example.com/missing") is None


def test_add_replaces_existing_value():
    with Cache(5.0) as cache:
        cache.add("k", b"first")
        cache.add("k", b"second")
        assert cache.get("k") == b"second"
        assert len(cache) == 1


def test_reap_loop_removes_expired_entries():
    base = 0.005
    with Cache(base) as cache:
        cache.add("https://example.com", b"testdata")
        assert cache.get("https://example.com") == b"testdata"

        deadline = time.monotonic() + 2.0
        while cache.get("https://example.com") is not None and time.monotonic() < deadline:
            time.sleep(base + 0.005)

        assert cache.get("https://example.com") is None


def test_reap_keeps_fresh_entries():
    with Cache(60.0) as cache:
        cache.add("fresh", b"data")
        cache.reap(time.monotonic(), 30.0)
        assert cache.get("fresh") == b"data"


def test_reap_removes_old_entries_only():
    with Cache(60.0) as cache:
        cache.add("old", b"a")
        cache.reap(time.monotonic() + 100.0, 30.0)
        assert "old" not in cache
        cache.add("new", b"b")
        cache.reap(time.monotonic(), 30.0)
        assert "new" in cache
        assert len(cache) == 1


@pytest.mark.parametrize("interval", [0, -1.0])
def test_non_positive_interval_rejected(interval):
    with pytest.raises(ValueError):
        Cache(interval)


def test_close_stops_reaper():
    cache = Cache(0.01)
    cache.close()
    cache.add("k", b"v")
    time.sleep(0.05)
    assert cache.get("k") == b"v"