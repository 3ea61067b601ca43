"""Data models for the translator.

This package contains dataclass definitions for configuration, languages, parsed queries,
translation responses, cache entries and search results, plus the regular expressions
that recognise translation commands.
"""

from __future__ import annotations

from models.cache_models import CacheStatistics, TranslationCacheEntry
from models.config_models import Cache, Config, General, Translation
from models.language_models import AUTO_DETECT_CODE, AUTO_DETECT_KEY, LanguageDescriptor
from models.query_models import (
    FieldAnnotation,
    GrammarKind,
    HighlightSpan,
    HighlightTag,
    RawMatch,
    ResolvedIntent,
    TokenMatch,
)
from models.re_models import SOURCE_TARGET_PATTERN, TARGET_ONLY_PATTERN
from models.search_models import MenuItem, Priority, SearchResult
from models.translation_models import Sentence, TranslateResponse, TranslationCacheKey

__all__: list[str] = [
    "AUTO_DETECT_CODE",
    "AUTO_DETECT_KEY",
    "SOURCE_TARGET_PATTERN",
    "TARGET_ONLY_PATTERN",
    "Cache",
    "CacheStatistics",
    "Config",
    "FieldAnnotation",
    "General",
    "GrammarKind",
    "HighlightSpan",
    "HighlightTag",
    "LanguageDescriptor",
    "MenuItem",
    "Priority",
    "RawMatch",
    "ResolvedIntent",
    "SearchResult",
    "Sentence",
    "TokenMatch",
    "TranslateResponse",
    "TranslationCacheKey",
    "TranslationCacheEntry",
]
