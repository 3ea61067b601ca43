"""Models for parsed translation queries.

Defines the transient parse result (RawMatch), the resolved intent handed to the dispatcher,
and the highlight span types used to annotate the raw input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypeAlias

__all__: list[str] = [
    "FieldAnnotation",
    "GrammarKind",
    "HighlightSpan",
    "HighlightTag",
    "RawMatch",
    "ResolvedIntent",
    "TokenMatch",
]

Span: TypeAlias = tuple[int, int]


class HighlightTag(StrEnum):
    """Semantic class of a highlighted region."""

    PATTERN_MATCH = "patternMatch"
    ERROR = "error"
    OPERATOR = "operator"
    LITERAL = "literal"


class GrammarKind(StrEnum):
    """Grammar that produced a RawMatch."""

    TARGET_ONLY = "target_only"
    SOURCE_TARGET = "source_target"


@dataclass(frozen=True, slots=True)
class TokenMatch:
    """A captured token and its half-open character range in the original input.

    Attributes:
        text (str): Captured text.
        start (int): Start offset (inclusive).
        end (int): End offset (exclusive).
    """

    text: str
    start: int
    end: int

    @property
    def span(self) -> Span:
        return (self.start, self.end)


@dataclass(frozen=True, slots=True)
class RawMatch:
    """Structural parse of one input string.

    Attributes:
        grammar (GrammarKind): Grammar that matched.
        header (TokenMatch): The ``tr``/``translate`` header.
        source (TokenMatch | None): Source language token, only set by the source+target grammar.
        target (TokenMatch | None): Target language token, None when omitted.
        query (TokenMatch): Everything after the colon, untrimmed.
    """

    grammar: GrammarKind
    header: TokenMatch
    source: TokenMatch | None
    target: TokenMatch | None
    query: TokenMatch

    @property
    def query_text(self) -> str:
        return self.query.text


@dataclass(frozen=True, slots=True)
class FieldAnnotation:
    """Input to the highlight annotator for one structural field.

    Attributes:
        name (str): Field name (``header``, ``source`` or ``target``), used in logs only.
        span (Span | None): Character range, None when the field was not typed.
        valid (bool): Whether the typed value is acceptable.
        tag (HighlightTag | None): Tag used when the field is valid.
    """

    name: str
    span: Span | None
    valid: bool = True
    tag: HighlightTag | None = None


@dataclass(frozen=True, slots=True)
class HighlightSpan:
    """Tagged half-open character range of the original input."""

    start: int
    end: int
    tags: tuple[HighlightTag, ...] = ()


@dataclass(frozen=True, slots=True)
class ResolvedIntent:
    """Fully determined translation request.

    Attributes:
        source_lang_code (str): Code of the source language (may be an invalid typed code).
        target_lang_code (str): Code of the target language (may be an invalid typed code).
        query_text (str): Text to translate, untrimmed.
        highlight_spans (tuple[HighlightSpan, ...]): Highlights for the raw input.
        source_valid (bool): Whether the source code is a registry key or a default.
        target_valid (bool): Whether the target code is a registry key or a default.
        grammar (GrammarKind): Grammar the intent was parsed with.
    """

    source_lang_code: str
    target_lang_code: str
    query_text: str
    highlight_spans: tuple[HighlightSpan, ...] = field(default_factory=tuple)
    source_valid: bool = True
    target_valid: bool = True
    grammar: GrammarKind = GrammarKind.TARGET_ONLY

    @property
    def is_valid(self) -> bool:
        return self.source_valid and self.target_valid
