from __future__ import annotations

from typing import TYPE_CHECKING, Final

from models.query_models import HighlightTag

if TYPE_CHECKING:
    from collections.abc import Iterable

    from models.query_models import HighlightSpan

__all__: list[str] = ["HighlightUtils"]

ANSI_RESET: Final[str] = "\033[0m"

# SGR parameters per tag
TAG_STYLES: Final[dict[HighlightTag, str]] = {
    HighlightTag.PATTERN_MATCH: "1;36",
    HighlightTag.ERROR: "1;31",
    HighlightTag.OPERATOR: "33",
    HighlightTag.LITERAL: "32",
}


class HighlightUtils:
    """Renders highlight spans onto the input string for terminal output."""

    @staticmethod
    def style_for(tags: Iterable[HighlightTag]) -> str:
        """Return the ANSI escape sequence for a set of tags, or an empty string when none apply."""
        params: list[str] = [TAG_STYLES[tag] for tag in tags if tag in TAG_STYLES]
        if not params:
            return ""
        return f"\033[{';'.join(params)}m"

    @staticmethod
    def render(search: str, spans: Iterable[HighlightSpan], *, color: bool = True) -> str:
        """Wrap each highlighted region of ``search`` in ANSI escapes.

        Args:
            search (str): The original input string.
            spans (Iterable[HighlightSpan]): Ordered, non-overlapping spans over ``search``.
            color (bool): When False the input is returned unchanged.

        Returns:
            str: The decorated string.

        Raises:
            ValueError: If a span lies outside ``search`` or the spans overlap.
        """
        if not color:
            return search

        parts: list[str] = []
        cursor: int = 0
        for span in spans:
            if span.start < cursor or span.end > len(search) or span.start > span.end:
                msg: str = f"Invalid highlight span ({span.start}, {span.end}) for input of length {len(search)}"
                raise ValueError(msg)
            parts.append(search[cursor : span.start])
            style: str = HighlightUtils.style_for(span.tags)
            segment: str = search[span.start : span.end]
            parts.append(f"{style}{segment}{ANSI_RESET}" if style else segment)
            cursor = span.end
        parts.append(search[cursor:])
        return "".join(parts)
