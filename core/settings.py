"""Default-language settings.

The search dispatcher reads the default language pair through a SettingsProvider on every
search; nothing is cached on the reading side. ConfigSettingsProvider serves the values
from the ``[TRANSLATION]`` section and notifies listeners whenever they change.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from core.query.registry import LANGUAGE_REGISTRY
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from core.query.registry import LanguageRegistry
    from models.config_models import Config
    from models.language_models import LanguageDescriptor

__all__: list[str] = ["ConfigSettingsProvider", "SettingsProvider"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


@runtime_checkable
class SettingsProvider(Protocol):
    def get_default_source_language(self) -> LanguageDescriptor: ...

    def get_default_target_language(self) -> LanguageDescriptor: ...


class ConfigSettingsProvider:
    """SettingsProvider backed by the loaded configuration.

    Configured values may be registry keys (``??``, ``en``) or descriptor codes (``auto``).
    Unknown values resolve to the auto-detect entry with a warning.

    Args:
        config (Config): Loaded configuration; its TRANSLATION section is read on every call.
        registry (LanguageRegistry): Registry used to resolve configured codes.
    """

    def __init__(self, config: Config, registry: LanguageRegistry = LANGUAGE_REGISTRY) -> None:
        self.config: Config = config
        self.registry: LanguageRegistry = registry
        self._listeners: list[Callable[[], None]] = []

    def _descriptor(self, value: str, setting_name: str) -> LanguageDescriptor:
        descriptor: LanguageDescriptor | None = self.registry.lookup(value) or self.registry.find_by_code(value)
        if descriptor is None:
            logger.warning("Unknown language '%s' configured for '%s', using auto-detection", value, setting_name)
            return self.registry.auto_detect
        return descriptor

    def get_default_source_language(self) -> LanguageDescriptor:
        return self._descriptor(self.config.TRANSLATION.DEFAULT_SOURCE_LANGUAGE, "DEFAULT_SOURCE_LANGUAGE")

    def get_default_target_language(self) -> LanguageDescriptor:
        return self._descriptor(self.config.TRANSLATION.DEFAULT_TARGET_LANGUAGE, "DEFAULT_TARGET_LANGUAGE")

    def add_invalidation_listener(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register ``callback`` to be called after the defaults change.

        Returns:
            Callable[[], None]: A function that unregisters the callback.
        """
        self._listeners.append(callback)

        def remove() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return remove

    def update_defaults(self, *, source: str | None = None, target: str | None = None) -> None:
        """Change the default language pair.

        Args:
            source (str | None): New default source (registry key or code). None keeps the current one.
            target (str | None): New default target (registry key or code). None keeps the current one.

        Raises:
            ValueError: If a value is not a registry key or descriptor code.
        """
        for value in (source, target):
            if value is not None and self.registry.lookup(value) is None and self.registry.find_by_code(value) is None:
                msg: str = f"Unknown language code: '{value}'"
                raise ValueError(msg)

        changed: bool = False
        if source is not None and source != self.config.TRANSLATION.DEFAULT_SOURCE_LANGUAGE:
            self.config.TRANSLATION.DEFAULT_SOURCE_LANGUAGE = source
            changed = True
        if target is not None and target != self.config.TRANSLATION.DEFAULT_TARGET_LANGUAGE:
            self.config.TRANSLATION.DEFAULT_TARGET_LANGUAGE = target
            changed = True

        if not changed:
            return

        logger.info(
            "Default languages changed (%s > %s)",
            self.config.TRANSLATION.DEFAULT_SOURCE_LANGUAGE,
            self.config.TRANSLATION.DEFAULT_TARGET_LANGUAGE,
        )
        for callback in list(self._listeners):
            callback()
