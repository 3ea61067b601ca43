"""Translation cache package.

Provides the bounded translation result cache and the in-flight request coordinator.
"""

from __future__ import annotations

from core.cache.inflight_manager import InFlightManager
from core.cache.manager import TranslationCacheManager

__all__: list[str] = ["InFlightManager", "TranslationCacheManager"]
