"""Language registry.

Read-only mapping from registry keys (two-letter codes plus the ``??`` auto-detect sentinel)
to LanguageDescriptor instances. The registry is built once and never mutated.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from core.trans.engines.const_google import LANGUAGES
from models.language_models import AUTO_DETECT_KEY, LanguageDescriptor
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterator, Mapping

__all__: list[str] = ["LANGUAGE_REGISTRY", "LanguageRegistry"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class LanguageRegistry:
    """Fixed table of languages the translator accepts.

    Args:
        table (Mapping[str, tuple[str, str]]): Registry key -> (code, display name), in UI order.

    Raises:
        ValueError: If two entries share the same descriptor code.
    """

    def __init__(self, table: Mapping[str, tuple[str, str]] = LANGUAGES) -> None:
        entries: dict[str, LanguageDescriptor] = {}
        by_code: dict[str, str] = {}
        for key, (code, name) in table.items():
            if code in by_code:
                msg: str = f"Duplicate language code '{code}' for keys '{by_code[code]}' and '{key}'"
                raise ValueError(msg)
            by_code[code] = key
            entries[key] = LanguageDescriptor(code=code, name=name)

        self._entries: Mapping[str, LanguageDescriptor] = MappingProxyType(entries)
        self._keys_by_code: Mapping[str, str] = MappingProxyType(by_code)
        logger.debug("Language registry built with %d entries", len(entries))

    def lookup(self, code: str) -> LanguageDescriptor | None:
        """Return the descriptor registered under ``code``, or None."""
        return self._entries.get(code)

    def is_valid(self, code: str | None) -> bool:
        """Whether ``code`` is a registry key (case-sensitive, sentinel included)."""
        return code is not None and code in self._entries

    def all(self) -> tuple[LanguageDescriptor, ...]:
        return tuple(self._entries.values())

    def keys(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def display_name(self, code: str) -> str:
        """Return the human-readable name of a registry key.

        Raises:
            KeyError: If ``code`` is not a registry key.
        """
        descriptor: LanguageDescriptor | None = self.lookup(code)
        if descriptor is None:
            msg: str = f"Unknown language code: '{code}'"
            raise KeyError(msg)
        return descriptor.display_name

    def find_by_code(self, code: str) -> LanguageDescriptor | None:
        """Reverse lookup by descriptor code, e.g. ``auto`` -> the sentinel entry."""
        key: str | None = self._keys_by_code.get(code)
        return self._entries[key] if key is not None else None

    @property
    def auto_detect(self) -> LanguageDescriptor:
        return self._entries[AUTO_DETECT_KEY]

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __iter__(self) -> Iterator[LanguageDescriptor]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


LANGUAGE_REGISTRY: LanguageRegistry = LanguageRegistry()
