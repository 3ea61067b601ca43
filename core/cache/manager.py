"""Translation cache manager.

Keeps translation results in memory, keyed by (source language, target language, query).
The cache is bounded: least recently used entries are evicted once the capacity is reached,
and entries older than the TTL (when one is set) are dropped on access.
"""

from __future__ import annotations

import time
from collections import OrderedDict
from typing import TYPE_CHECKING, ClassVar

from models.cache_models import CacheStatistics, TranslationCacheEntry
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from core.trans.interface import Result
    from models.config_models import Config
    from models.translation_models import TranslationCacheKey

__all__: list[str] = ["TranslationCacheManager"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class TranslationCacheManager:
    """Bounded in-memory cache for translation results.

    Only successful results are registered; failures are never stored so that a later
    request for the same key reaches the backend again.

    Args:
        capacity (int): Maximum number of entries.
        ttl_sec (float): Lifetime of an entry in seconds. 0 or negative disables expiry.
        clock (Callable[[], float]): Monotonic time source, replaceable in tests.

    Raises:
        ValueError: If ``capacity`` is not positive.

    Attributes:
        DEFAULT_CAPACITY (ClassVar[int]): Capacity used by ``from_config`` when none is configured.
    """

    DEFAULT_CAPACITY: ClassVar[int] = 256

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        ttl_sec: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if capacity <= 0:
            msg: str = f"Cache capacity must be positive: {capacity}"
            raise ValueError(msg)

        self._capacity: int = capacity
        self._ttl_sec: float = ttl_sec
        self._clock: Callable[[], float] = clock
        self._entries: OrderedDict[TranslationCacheKey, TranslationCacheEntry] = OrderedDict()
        self._stats: CacheStatistics = CacheStatistics(capacity=capacity)
        logger.debug("TranslationCacheManager instance created (capacity=%d, ttl=%.1f)", capacity, ttl_sec)

    @classmethod
    def from_config(cls, config: Config) -> TranslationCacheManager:
        return cls(capacity=config.CACHE.CAPACITY or cls.DEFAULT_CAPACITY, ttl_sec=config.CACHE.TTL)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def ttl_sec(self) -> float:
        return self._ttl_sec

    def _is_expired(self, entry: TranslationCacheEntry, now: float) -> bool:
        return self._ttl_sec > 0 and now - entry.created_at >= self._ttl_sec

    def search(self, key: TranslationCacheKey) -> Result | None:
        """Return the cached result for ``key``, or None.

        A hit marks the entry as most recently used. Expired entries are removed and count as a miss.
        """
        entry: TranslationCacheEntry | None = self._entries.get(key)
        if entry is None:
            self._stats.misses += 1
            return None

        now: float = self._clock()
        if self._is_expired(entry, now):
            del self._entries[key]
            self._stats.expirations += 1
            self._stats.misses += 1
            logger.debug("Cache entry expired: %s", self._describe(key))
            return None

        entry.last_used_at = now
        entry.hit_count += 1
        self._entries.move_to_end(key)
        self._stats.hits += 1
        logger.debug("Cache hit: %s (hits=%d)", self._describe(key), entry.hit_count)
        return entry.result

    def register(self, key: TranslationCacheKey, result: Result) -> None:
        """Store ``result`` under ``key``, evicting least recently used entries when full."""
        now: float = self._clock()
        if key in self._entries:
            self._entries.move_to_end(key)
        self._entries[key] = TranslationCacheEntry(key=key, result=result, created_at=now, last_used_at=now)

        while len(self._entries) > self._capacity:
            evicted_key, _ = self._entries.popitem(last=False)
            self._stats.evictions += 1
            logger.debug("Cache entry evicted: %s", self._describe(evicted_key))

        logger.debug("Cache registered: %s (%d/%d)", self._describe(key), len(self._entries), self._capacity)

    def cleanup_expired_entries(self) -> int:
        """Remove every expired entry.

        Returns:
            int: Number of removed entries.
        """
        if self._ttl_sec <= 0:
            return 0

        now: float = self._clock()
        expired: list[TranslationCacheKey] = [k for k, e in self._entries.items() if self._is_expired(e, now)]
        for key in expired:
            del self._entries[key]
        self._stats.expirations += len(expired)
        if expired:
            logger.info("Deleted %d expired translation cache entries", len(expired))
        return len(expired)

    def clear(self) -> None:
        self._entries.clear()
        logger.info("Translation cache cleared")

    def statistics(self) -> CacheStatistics:
        return CacheStatistics(
            entries=len(self._entries),
            capacity=self._capacity,
            hits=self._stats.hits,
            misses=self._stats.misses,
            evictions=self._stats.evictions,
            expirations=self._stats.expirations,
        )

    @staticmethod
    def _describe(key: TranslationCacheKey) -> str:
        return f"({key.source_lang} > {key.target_lang}) '{StringUtils.preview(key.query, 16)}'"

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
