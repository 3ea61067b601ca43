"""Query recognition package.

Parses ``tr[anslate] [<src>] [<tgt>]: <query>`` commands, resolves their languages and
computes highlight spans for the raw input.
"""

from __future__ import annotations

from core.query.highlighter import HighlightAnnotator
from core.query.matcher import PatternMatcher
from core.query.registry import LANGUAGE_REGISTRY, LanguageRegistry
from core.query.resolver import LanguageResolver

__all__: list[str] = [
    "LANGUAGE_REGISTRY",
    "HighlightAnnotator",
    "LanguageRegistry",
    "LanguageResolver",
    "PatternMatcher",
]
