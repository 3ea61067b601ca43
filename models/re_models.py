"""Regular expressions for translation query parsing.

Patterns for the two command grammars recognised by the pattern matcher:
    tr[anslate] [<tgt>]: <query>
    tr[anslate] <src> <tgt>: <query>

Only the header word is case-insensitive; language codes are two ASCII letters matched verbatim.
The query group starts immediately after the colon, so whitespace following the colon is kept.
"""

from __future__ import annotations

import re
from re import Pattern
from typing import Final

__all__: list[str] = [
    "SOURCE_TARGET_PATTERN",
    "TARGET_ONLY_PATTERN",
]

# Target-only grammar
# Examples: "tr: hello", "tr fr: bonjour", "Translate de:Guten Tag"
TARGET_ONLY_PATTERN: Final[Pattern[str]] = re.compile(
    r"""
    (?P<header>(?i:tr(?:anslate)?))\s*
    (?P<target>[A-Za-z]{2})?\s*
    :(?P<query>.*)
""",
    re.VERBOSE | re.DOTALL,
)

# Source and target grammar
# Examples: "tr en fr: hi", "translate ja en:konnichiwa"
SOURCE_TARGET_PATTERN: Final[Pattern[str]] = re.compile(
    r"""
    (?P<header>(?i:tr(?:anslate)?))\s*
    (?P<source>[A-Za-z]{2})\s*
    (?P<target>[A-Za-z]{2})\s*
    :(?P<query>.*)
""",
    re.VERBOSE | re.DOTALL,
)
