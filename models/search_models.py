"""Models for search results handed to the display layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from models.query_models import HighlightSpan, ResolvedIntent

__all__: list[str] = ["MenuItem", "Priority", "SearchResult"]


class Priority(IntEnum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3


@dataclass(frozen=True)
class MenuItem:
    """A single displayable result.

    Attributes:
        name (str): Text shown to the user (the translation).
        priority (Priority): Ordering hint for the menu.
        icon (str): Icon identifier.
    """

    name: str
    priority: Priority = Priority.HIGH
    icon: str = "applets"


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search invocation.

    Attributes:
        search (str): The raw input string.
        intent (ResolvedIntent | None): Resolved intent, None when the input is not a translation query.
        item (MenuItem | None): Result item, None when there is nothing to show.
        command_spans (tuple[HighlightSpan, ...]): Highlights of a recognised command whose query is
            blank, so that no intent exists.
    """

    search: str
    intent: ResolvedIntent | None = None
    item: MenuItem | None = None
    command_spans: tuple[HighlightSpan, ...] = ()

    @property
    def highlight(self) -> tuple[HighlightSpan, ...]:
        if self.intent is None:
            return self.command_spans
        return self.intent.highlight_spans

    @property
    def has_result(self) -> bool:
        return self.item is not None
