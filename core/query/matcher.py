"""Pattern matcher for translation commands.

Parses raw search input into a RawMatch using the two command grammars. The grammars are
tried in order and the first one that matches wins; they are never combined.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from models.query_models import GrammarKind, RawMatch, TokenMatch
from models.re_models import SOURCE_TARGET_PATTERN, TARGET_ONLY_PATTERN
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from re import Match, Pattern

__all__: list[str] = ["PatternMatcher"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


def _token(match: Match[str], group: str) -> TokenMatch | None:
    """Build a TokenMatch for a named group, None when the group did not take part."""
    text: str | None = match.group(group)
    if text is None:
        return None
    start, end = match.span(group)
    return TokenMatch(text=text, start=start, end=end)


class PatternMatcher:
    """Regex-driven parser for ``tr[anslate] [<src>] [<tgt>]: <query>`` commands.

    Args:
        target_only (Pattern[str]): Grammar with an optional target code.
        source_target (Pattern[str]): Grammar with mandatory source and target codes.
    """

    def __init__(
        self,
        target_only: Pattern[str] = TARGET_ONLY_PATTERN,
        source_target: Pattern[str] = SOURCE_TARGET_PATTERN,
    ) -> None:
        self._grammars: tuple[tuple[GrammarKind, Pattern[str]], ...] = (
            (GrammarKind.TARGET_ONLY, target_only),
            (GrammarKind.SOURCE_TARGET, source_target),
        )

    def match(self, search: str) -> RawMatch | None:
        """Parse ``search`` into a RawMatch.

        Args:
            search (str): Raw input string.

        Returns:
            RawMatch | None: The parse of the first grammar that matches, or None when the input
            is not a translation command.
        """
        if not search:
            return None

        for grammar, pattern in self._grammars:
            match: Match[str] | None = pattern.fullmatch(search)
            if match is None:
                continue

            raw: RawMatch | None = self._build(grammar, match)
            if raw is None:
                # The source+target grammar needs both codes; nothing else is tried afterwards.
                logger.debug("Grammar '%s' matched without both language codes: '%s'", grammar, search)
                return None
            logger.debug("Grammar '%s' matched: %s", grammar, raw)
            return raw

        logger.debug("No translation grammar matched: '%s'", search)
        return None

    @staticmethod
    def _build(grammar: GrammarKind, match: Match[str]) -> RawMatch | None:
        header: TokenMatch | None = _token(match, "header")
        query: TokenMatch | None = _token(match, "query")
        target: TokenMatch | None = _token(match, "target")
        source: TokenMatch | None = _token(match, "source") if grammar is GrammarKind.SOURCE_TARGET else None

        if header is None or query is None:
            return None
        if grammar is GrammarKind.SOURCE_TARGET and (source is None or target is None):
            return None

        return RawMatch(grammar=grammar, header=header, source=source, target=target, query=query)
