"""Translation engine management and interfaces.

This package provides translation through pluggable engine implementations registered by
name, and the manager that adds caching and in-flight request sharing on top of them.
"""

from core.trans.interface import (
    NotSupportedLanguagesError,
    Result,
    TransInterface,
    TranslateExceptionError,
    TranslationRateLimitError,
)
from core.trans.manager import TransManager

__all__: list[str] = [
    "NotSupportedLanguagesError",
    "Result",
    "TransInterface",
    "TransManager",
    "TranslateExceptionError",
    "TranslationRateLimitError",
]
