"""Tests for TranslationCacheManager.

Tests cache search, registration, TTL expiry, capacity limits and statistics.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import TYPE_CHECKING, Any

import pytest

from core.cache.manager import TranslationCacheManager
from core.trans.interface import Result
from models.translation_models import TranslationCacheKey

if TYPE_CHECKING:
    from models.cache_models import CacheStatistics


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now: float = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache_manager(clock: FakeClock) -> TranslationCacheManager:
    return TranslationCacheManager(capacity=3, clock=clock)


def _key(query: str, src: str = "en", tgt: str = "ja") -> TranslationCacheKey:
    return TranslationCacheKey(src, tgt, query)


def test_capacity_must_be_positive() -> None:
    with pytest.raises(ValueError, match="capacity"):
        TranslationCacheManager(capacity=0)


def test_from_config_reads_cache_section() -> None:
    config: Any = SimpleNamespace(CACHE=SimpleNamespace(CAPACITY=8, TTL=30.0))

    manager: TranslationCacheManager = TranslationCacheManager.from_config(config)

    assert manager.capacity == 8
    assert manager.ttl_sec == 30.0


def test_search_miss_returns_none(cache_manager: TranslationCacheManager) -> None:
    assert cache_manager.search(_key("hello")) is None
    assert cache_manager.statistics().misses == 1


def test_register_then_search_hits(cache_manager: TranslationCacheManager) -> None:
    result = Result(text="こんにちは")
    cache_manager.register(_key("hello"), result)

    assert cache_manager.search(_key("hello")) is result
    assert _key("hello") in cache_manager
    assert cache_manager.statistics().hits == 1


def test_key_includes_both_languages(cache_manager: TranslationCacheManager) -> None:
    cache_manager.register(_key("hello", "en", "ja"), Result(text="こんにちは"))

    assert cache_manager.search(_key("hello", "en", "fr")) is None
    assert cache_manager.search(_key("hello", "auto", "ja")) is None


def test_query_whitespace_is_significant(cache_manager: TranslationCacheManager) -> None:
    cache_manager.register(_key(" hello"), Result(text="x"))

    assert cache_manager.search(_key("hello")) is None


def test_least_recently_used_entry_is_evicted(cache_manager: TranslationCacheManager) -> None:
    for query in ("a", "b", "c"):
        cache_manager.register(_key(query), Result(text=query.upper()))

    cache_manager.search(_key("a"))
    cache_manager.register(_key("d"), Result(text="D"))

    assert len(cache_manager) == 3
    assert _key("b") not in cache_manager
    assert _key("a") in cache_manager
    assert cache_manager.statistics().evictions == 1


def test_register_existing_key_replaces_result(cache_manager: TranslationCacheManager) -> None:
    cache_manager.register(_key("a"), Result(text="old"))
    cache_manager.register(_key("a"), Result(text="new"))

    cached: Result | None = cache_manager.search(_key("a"))

    assert cached is not None
    assert cached.text == "new"
    assert len(cache_manager) == 1


def test_ttl_expires_entries_on_search(clock: FakeClock) -> None:
    manager = TranslationCacheManager(capacity=3, ttl_sec=10.0, clock=clock)
    manager.register(_key("hello"), Result(text="x"))

    clock.advance(9.9)
    assert manager.search(_key("hello")) is not None

    clock.advance(0.1)
    assert manager.search(_key("hello")) is None
    assert len(manager) == 0
    assert manager.statistics().expirations == 1


def test_zero_ttl_never_expires(cache_manager: TranslationCacheManager, clock: FakeClock) -> None:
    cache_manager.register(_key("hello"), Result(text="x"))

    clock.advance(10**9)

    assert cache_manager.search(_key("hello")) is not None
    assert cache_manager.cleanup_expired_entries() == 0


def test_cleanup_expired_entries_removes_only_expired(clock: FakeClock) -> None:
    manager = TranslationCacheManager(capacity=3, ttl_sec=5.0, clock=clock)
    manager.register(_key("old"), Result(text="x"))
    clock.advance(3.0)
    manager.register(_key("new"), Result(text="y"))
    clock.advance(2.5)

    removed: int = manager.cleanup_expired_entries()

    assert removed == 1
    assert _key("old") not in manager
    assert _key("new") in manager


def test_clear_and_statistics(cache_manager: TranslationCacheManager) -> None:
    cache_manager.register(_key("a"), Result(text="A"))
    cache_manager.search(_key("a"))
    cache_manager.search(_key("b"))
    cache_manager.clear()

    stats: CacheStatistics = cache_manager.statistics()

    assert len(cache_manager) == 0
    assert stats.entries == 0
    assert stats.capacity == 3
    assert (stats.hits, stats.misses) == (1, 1)
