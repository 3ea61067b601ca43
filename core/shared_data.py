"""Shared data management for the translator.

This module defines the SharedData class, the container that builds and owns the collaborators
of a running translator: configuration, settings provider, translation cache, in-flight request
manager, translation manager and the search dispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from core.cache.inflight_manager import InFlightManager
from core.cache.manager import TranslationCacheManager
from core.query.registry import LANGUAGE_REGISTRY
from core.search import TranslatorSearch
from core.settings import ConfigSettingsProvider
from core.trans.manager import TransManager

if TYPE_CHECKING:
    from core.query.registry import LanguageRegistry
    from models.config_models import Config


__all__: list[str] = ["SharedData"]


@dataclass
class SharedData:
    _config: Config = field()
    _registry: LanguageRegistry = field(default=LANGUAGE_REGISTRY)
    _settings: ConfigSettingsProvider = field(init=False)
    _cache_manager: TranslationCacheManager = field(init=False)
    _inflight_manager: InFlightManager = field(init=False)
    _trans_manager: TransManager = field(init=False)
    _search: TranslatorSearch = field(init=False)

    def __post_init__(self) -> None:
        self._settings = ConfigSettingsProvider(self._config, self._registry)
        self._cache_manager = TranslationCacheManager.from_config(self._config)
        self._inflight_manager = InFlightManager(timeout_sec=self._config.TRANSLATION.INFLIGHT_TIMEOUT)
        self._trans_manager = TransManager(self._config, self._cache_manager, self._inflight_manager)
        self._search = TranslatorSearch(self._trans_manager, self._settings, registry=self._registry)

    async def async_init(self) -> None:
        await self._inflight_manager.start()
        await self._trans_manager.initialize()

    async def shutdown(self) -> None:
        await self._trans_manager.shutdown_engines()
        await self._inflight_manager.shutdown()

    @property
    def config(self) -> Config:
        return self._config

    @property
    def registry(self) -> LanguageRegistry:
        return self._registry

    @property
    def settings(self) -> ConfigSettingsProvider:
        return self._settings

    @property
    def cache_manager(self) -> TranslationCacheManager:
        return self._cache_manager

    @property
    def inflight_manager(self) -> InFlightManager:
        return self._inflight_manager

    @property
    def trans_manager(self) -> TransManager:
        return self._trans_manager

    @property
    def search(self) -> TranslatorSearch:
        return self._search
