"""Models for translation backend responses.

Defines the dataclasses decoded from the Google ``translate_a/single`` JSON body (``dj=1``)
and the cache key used for translation requests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from dataclasses_json import DataClassJsonMixin, dataclass_json

__all__: list[str] = ["Sentence", "TranslateResponse", "TranslationCacheKey"]


@dataclass_json
@dataclass
class Sentence(DataClassJsonMixin):
    """One translated sentence.

    Attributes:
        trans (str): Translated text.
        orig (str): Original text.
        backend (int): Backend identifier reported by the service.
    """

    trans: str
    orig: str = ""
    backend: int = 0


@dataclass_json
@dataclass
class TranslateResponse(DataClassJsonMixin):
    """Response body of the translation service.

    Attributes:
        sentences (list[Sentence]): Translated sentences in order.
        src (str | None): Detected source language code.
        confidence (float | None): Detection confidence, when reported.
    """

    sentences: list[Sentence] = field(default_factory=list)
    src: str | None = None
    confidence: float | None = None

    @property
    def text(self) -> str:
        return "".join(sentence.trans for sentence in self.sentences)


class TranslationCacheKey(NamedTuple):
    """Key identifying one translation request."""

    source_lang: str
    target_lang: str
    query: str
