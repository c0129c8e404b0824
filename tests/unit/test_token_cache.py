"""TokenCache 단위 테스트."""

from __future__ import annotations

from image_scraper.crawlers.token_cache import TokenCache


def test_get_miss_when_absent(fake_clock):
    cache = TokenCache(clock=fake_clock)
    assert cache.get("cats") is None


def test_get_hit_before_expiry(fake_clock):
    cache = TokenCache(clock=fake_clock)
    cache.set("cats", "4-111", ttl=600)

    fake_clock.advance(599.9)
    assert cache.get("cats") == "4-111"


def test_get_miss_at_expiry_instant(fake_clock):
    """now == expires_at 이면 만료."""
    cache = TokenCache(clock=fake_clock)
    entry = cache.set("cats", "4-111", ttl=600)

    fake_clock.now = entry.expires_at
    assert cache.get("cats") is None


def test_set_overwrites_existing_entry(fake_clock):
    cache = TokenCache(clock=fake_clock)
    cache.set("cats", "4-old", ttl=600)
    fake_clock.advance(700)
    cache.set("cats", "4-new", ttl=600)

    assert cache.get("cats") == "4-new"
    assert len(cache) == 1


def test_keys_are_raw_query_strings(fake_clock):
    """검색어는 정규화하지 않음 (대소문자/공백 구분)."""
    cache = TokenCache(clock=fake_clock)
    cache.set("Cats", "4-111", ttl=600)

    assert cache.get("cats") is None
    assert cache.get(" Cats") is None
    assert cache.get("Cats") == "4-111"


def test_clear(fake_clock):
    cache = TokenCache(clock=fake_clock)
    cache.set("a", "1", ttl=10)
    cache.set("b", "2", ttl=10)
    assert len(cache) == 2

    cache.clear()
    assert len(cache) == 0
    assert cache.get("a") is None
