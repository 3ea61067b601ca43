"""Language resolver.

Decides the effective source and target language codes for a RawMatch, applying the
configured defaults, and derives the highlight spans of the resolved intent.

Resolution rules:
    target-only grammar, valid target      -> (default source, target)
    target-only grammar, no target         -> (default source, default target)
    target-only grammar, unknown target    -> (default source, default source), target marked invalid
    source+target grammar                  -> (source, target) verbatim, unknown codes marked invalid
    blank query                            -> no intent
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from core.query.highlighter import HighlightAnnotator
from core.query.registry import LANGUAGE_REGISTRY
from models.query_models import FieldAnnotation, GrammarKind, HighlightTag, ResolvedIntent
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

    from core.query.registry import LanguageRegistry
    from models.language_models import LanguageDescriptor
    from models.query_models import HighlightSpan, RawMatch

__all__: list[str] = ["LanguageResolver"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class _Resolution(NamedTuple):
    source_code: str
    source_valid: bool
    target_code: str
    target_valid: bool


def _code_of(language: LanguageDescriptor | str) -> str:
    return language if isinstance(language, str) else language.code


class LanguageResolver:
    """Resolves RawMatch instances into ResolvedIntent instances.

    Args:
        registry (LanguageRegistry): Registry used to validate typed codes.
        annotator (HighlightAnnotator | None): Annotator for highlight spans.
    """

    def __init__(
        self,
        registry: LanguageRegistry = LANGUAGE_REGISTRY,
        annotator: HighlightAnnotator | None = None,
    ) -> None:
        self.registry: LanguageRegistry = registry
        self.annotator: HighlightAnnotator = annotator or HighlightAnnotator()

    def resolve(
        self,
        raw: RawMatch,
        default_source: LanguageDescriptor | str,
        default_target: LanguageDescriptor | str,
    ) -> ResolvedIntent | None:
        """Resolve ``raw`` against the default language pair.

        Args:
            raw (RawMatch): Output of the pattern matcher.
            default_source (LanguageDescriptor | str): Default source language (descriptor or code).
            default_target (LanguageDescriptor | str): Default target language (descriptor or code).

        Returns:
            ResolvedIntent | None: The intent, or None when the query is blank.
        """
        if StringUtils.is_blank(raw.query_text):
            logger.debug("Empty query, no intent produced")
            return None

        resolution: _Resolution = self._resolve_codes(raw, _code_of(default_source), _code_of(default_target))
        spans: tuple[HighlightSpan, ...] = self.annotator.annotate(self._fields(raw, resolution))

        intent = ResolvedIntent(
            source_lang_code=resolution.source_code,
            target_lang_code=resolution.target_code,
            query_text=raw.query_text,
            highlight_spans=spans,
            source_valid=resolution.source_valid,
            target_valid=resolution.target_valid,
            grammar=raw.grammar,
        )
        logger.debug("Resolved intent: %s", intent)
        return intent

    def describe_fields(
        self,
        raw: RawMatch,
        default_source: LanguageDescriptor | str,
        default_target: LanguageDescriptor | str,
    ) -> list[FieldAnnotation]:
        """Return the header/source/target annotations of ``raw``, including for blank queries."""
        resolution: _Resolution = self._resolve_codes(raw, _code_of(default_source), _code_of(default_target))
        return self._fields(raw, resolution)

    def _resolve_codes(self, raw: RawMatch, default_source: str, default_target: str) -> _Resolution:
        if raw.grammar is GrammarKind.SOURCE_TARGET:
            # Typed codes are kept verbatim so that mistakes are shown, not hidden behind defaults.
            source_code: str = raw.source.text if raw.source is not None else default_source
            target_code: str = raw.target.text if raw.target is not None else default_target
            return _Resolution(
                source_code=source_code,
                source_valid=self.registry.is_valid(source_code),
                target_code=target_code,
                target_valid=self.registry.is_valid(target_code),
            )

        if raw.target is None:
            return _Resolution(default_source, True, default_target, True)

        if self.registry.is_valid(raw.target.text):
            return _Resolution(default_source, True, raw.target.text, True)

        # An unknown target code falls back to the default *source* language.
        logger.debug("Unknown target language '%s', falling back to '%s'", raw.target.text, default_source)
        return _Resolution(default_source, True, default_source, False)

    @staticmethod
    def _fields(raw: RawMatch, resolution: _Resolution) -> list[FieldAnnotation]:
        if raw.grammar is GrammarKind.SOURCE_TARGET:
            source_tag: HighlightTag = HighlightTag.OPERATOR
            target_tag: HighlightTag = HighlightTag.LITERAL
        else:
            source_tag = HighlightTag.PATTERN_MATCH
            target_tag = HighlightTag.PATTERN_MATCH

        return [
            FieldAnnotation(name="header", span=raw.header.span, valid=True, tag=HighlightTag.PATTERN_MATCH),
            FieldAnnotation(
                name="source",
                span=raw.source.span if raw.source is not None else None,
                valid=resolution.source_valid,
                tag=source_tag,
            ),
            FieldAnnotation(
                name="target",
                span=raw.target.span if raw.target is not None else None,
                valid=resolution.target_valid,
                tag=target_tag,
            ),
        ]
