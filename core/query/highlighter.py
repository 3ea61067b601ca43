"""Highlight annotator.

Turns per-field spans and validity into the ordered, non-overlapping highlight spans used to
colour the raw input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from models.query_models import FieldAnnotation, HighlightSpan, HighlightTag
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable

__all__: list[str] = ["HighlightAnnotator"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class HighlightAnnotator:
    """Builds HighlightSpans from FieldAnnotations."""

    @staticmethod
    def annotate(fields: Iterable[FieldAnnotation]) -> tuple[HighlightSpan, ...]:
        """Emit one span per field that was typed in the input.

        Fields without a span (omitted or defaulted) produce nothing. A valid field is tagged
        with its semantic tag, an invalid one with ``error`` only. Order follows ``fields``.

        Args:
            fields (Iterable[FieldAnnotation]): Fields in input order.

        Returns:
            tuple[HighlightSpan, ...]: Highlight spans in the order the fields were supplied.

        Raises:
            ValueError: If a span is reversed or overlaps one emitted before it.
        """
        spans: list[HighlightSpan] = []
        for annotation in fields:
            if annotation.span is None:
                continue

            start, end = annotation.span
            if start > end:
                msg: str = f"Reversed span for '{annotation.name}': {annotation.span}"
                raise ValueError(msg)
            if any(start < other.end and other.start < end for other in spans):
                msg = f"Span for '{annotation.name}' overlaps an earlier span: {annotation.span}"
                raise ValueError(msg)

            tags: tuple[HighlightTag, ...]
            if not annotation.valid:
                tags = (HighlightTag.ERROR,)
            elif annotation.tag is not None:
                tags = (annotation.tag,)
            else:
                tags = ()
            spans.append(HighlightSpan(start=start, end=end, tags=tags))

        logger.debug("Highlight spans: %s", spans)
        return tuple(spans)
