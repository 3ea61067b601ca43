"""Models for language descriptors.

Defines the immutable LanguageDescriptor value type stored in the language registry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

__all__: list[str] = ["AUTO_DETECT_CODE", "AUTO_DETECT_KEY", "LanguageDescriptor"]

# Registry key of the auto-detect entry; it can never be typed as a two-letter code.
AUTO_DETECT_KEY: Final[str] = "??"
AUTO_DETECT_CODE: Final[str] = "auto"


@dataclass(frozen=True, slots=True)
class LanguageDescriptor:
    """A language known to the translator.

    Attributes:
        code (str): Code sent to the translation backend (``auto`` for the sentinel entry).
        name (str): Human-readable name shown in the UI.
    """

    code: str
    name: str

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def is_auto_detect(self) -> bool:
        return self.code == AUTO_DETECT_CODE

    def __str__(self) -> str:
        return self.name
