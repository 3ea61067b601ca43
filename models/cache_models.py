"""Models for translation cache data.

Defines data classes for translation cache entries and cache statistics.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.trans.interface import Result
    from models.translation_models import TranslationCacheKey

__all__: list[str] = [
    "CacheStatistics",
    "TranslationCacheEntry",
]


@dataclass
class TranslationCacheEntry:
    """Translation cache entry data.

    Attributes:
        key (TranslationCacheKey): Source language, target language and query of the request.
        result (Result): Engine result, carrying the raw backend response.
        created_at (float): Creation time on the cache clock (seconds).
        last_used_at (float): Last hit time on the cache clock (seconds).
        hit_count (int): Number of cache hits.
    """

    key: TranslationCacheKey
    result: Result
    created_at: float
    last_used_at: float
    hit_count: int = 0


@dataclass
class CacheStatistics:
    """Cache usage statistics.

    Attributes:
        entries (int): Number of live entries.
        capacity (int): Maximum number of entries.
        hits (int): Lookups answered from the cache.
        misses (int): Lookups that found nothing usable.
        evictions (int): Entries dropped to respect the capacity.
        expirations (int): Entries dropped because their TTL elapsed.
    """

    entries: int = 0
    capacity: int = 0
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    expirations: int = 0
