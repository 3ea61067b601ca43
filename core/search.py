"""Search dispatcher.

Entry point the host calls once per search input: recognises translation commands, resolves
their languages against the current defaults and turns a successful translation into a
menu item.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.query.matcher import PatternMatcher
from core.query.registry import LANGUAGE_REGISTRY
from core.query.resolver import LanguageResolver
from models.search_models import MenuItem, Priority, SearchResult
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

    from core.query.registry import LanguageRegistry
    from core.settings import SettingsProvider
    from core.trans.interface import Result
    from core.trans.manager import TransManager
    from models.language_models import LanguageDescriptor
    from models.query_models import HighlightSpan, RawMatch, ResolvedIntent

__all__: list[str] = ["TranslatorSearch"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class TranslatorSearch:
    """Runs matcher, resolver and translation for one search input.

    Args:
        trans_manager (TransManager): Translation dispatcher.
        settings (SettingsProvider): Source of the default language pair, read on every search.
        matcher (PatternMatcher | None): Command parser.
        resolver (LanguageResolver | None): Language resolver.
        registry (LanguageRegistry): Registry used to decide whether a request can be issued.
    """

    def __init__(
        self,
        trans_manager: TransManager,
        settings: SettingsProvider,
        matcher: PatternMatcher | None = None,
        resolver: LanguageResolver | None = None,
        registry: LanguageRegistry = LANGUAGE_REGISTRY,
    ) -> None:
        self.trans_manager: TransManager = trans_manager
        self.settings: SettingsProvider = settings
        self.registry: LanguageRegistry = registry
        self.matcher: PatternMatcher = matcher or PatternMatcher()
        self.resolver: LanguageResolver = resolver or LanguageResolver(registry)

    def interpret(self, search: str) -> ResolvedIntent | None:
        """Parse and resolve ``search`` without touching the network."""
        raw: RawMatch | None = self.matcher.match(search)
        if raw is None:
            return None
        return self.resolver.resolve(raw, *self._defaults())

    def _defaults(self) -> tuple[LanguageDescriptor, LanguageDescriptor]:
        return self.settings.get_default_source_language(), self.settings.get_default_target_language()

    def command_spans(self, raw: RawMatch) -> tuple[HighlightSpan, ...]:
        """Highlights of the header and language codes of ``raw``, whatever its query."""
        return self.resolver.annotator.annotate(self.resolver.describe_fields(raw, *self._defaults()))

    def is_dispatchable(self, intent: ResolvedIntent) -> bool:
        """Whether both resolved codes are known to the backend.

        Codes typed verbatim in the source+target form may be unknown; they stay visible as
        error highlights and no request is issued for them.
        """
        return all(
            self.registry.find_by_code(code) is not None
            for code in (intent.source_lang_code, intent.target_lang_code)
        )

    async def search(self, search: str) -> SearchResult:
        """Handle one search input.

        Args:
            search (str): Raw input string.

        Returns:
            SearchResult: The resolved intent (None when the input is not a translation command
            or its query is blank) and the result item (None when there is nothing to show).
        """
        raw: RawMatch | None = self.matcher.match(search)
        if raw is None:
            return SearchResult(search=search)

        intent: ResolvedIntent | None = self.resolver.resolve(raw, *self._defaults())
        if intent is None:
            # Blank query: nothing to translate, but the typed command stays highlighted.
            return SearchResult(search=search, command_spans=self.command_spans(raw))

        if not self.is_dispatchable(intent):
            logger.debug(
                "Unknown language code in '%s' (%s > %s), no request issued",
                StringUtils.preview(search),
                intent.source_lang_code,
                intent.target_lang_code,
            )
            return SearchResult(search=search, intent=intent)

        result: Result | None = await self.trans_manager.translate(intent)
        if result is None or not result.text:
            return SearchResult(search=search, intent=intent)

        return SearchResult(
            search=search,
            intent=intent,
            item=MenuItem(name=result.text, priority=Priority.HIGH),
        )
