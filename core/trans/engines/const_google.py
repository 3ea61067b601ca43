"""Constants for the Google translation endpoint.

The ``gtx`` client endpoint accepts these query parameters:
    sl  source language code (``auto`` for detection)
    tl  target language code
    q   text to translate
    dj  1 returns JSON objects with named fields
    dt  reply content, may repeat (``t`` translation, ``at`` alternatives, ``rm`` transliteration,
        ``bd`` dictionary, ``md`` definitions, ``ss`` synonyms, ``ex`` examples, ``rw`` see also)
"""

from __future__ import annotations

from typing import Final

__all__: list[str] = ["BASE_QUERY_PARAMS", "GOOGLE_TRANSLATE_URL", "LANGUAGES"]

GOOGLE_TRANSLATE_URL: Final[str] = "https://translate.googleapis.com/translate_a/single"

BASE_QUERY_PARAMS: Final[dict[str, str]] = {
    "client": "gtx",
    "dt": "t",
    "dj": "1",
}

# registry key -> (backend code, display name); insertion order is the UI order
LANGUAGES: Final[dict[str, tuple[str, str]]] = {
    "??": ("auto", "Auto"),
    "ar": ("ar", "Arab"),
    "be": ("be", "Belarusian"),
    "ca": ("ca", "Catalan"),
    "cs": ("cs", "Czech"),
    "da": ("da", "Danish"),
    "de": ("de", "German"),
    "en": ("en", "English"),
    "eo": ("eo", "Esperanto"),
    "es": ("es", "Spanish"),
    "et": ("et", "Estonian"),
    "fa": ("fa", "Persian"),
    "fi": ("fi", "Finnish"),
    "fr": ("fr", "French"),
    "ga": ("ga", "Irish"),
    "he": ("he", "Hebrew"),
    "hi": ("hi", "Hindi"),
    "hu": ("hu", "Hungarian"),
    "id": ("id", "Indonesian"),
    "is": ("is", "Icelandic"),
    "it": ("it", "Italian"),
    "ja": ("ja", "Japanese"),
    "kk": ("kk", "Kazakh"),
    "ko": ("ko", "Korean"),
    "ky": ("ky", "Kyrgyz"),
    "lt": ("lt", "Lithuanian"),
    "lv": ("lv", "Latvian"),
    "nl": ("nl", "Dutch"),
    "no": ("no", "Norwegian"),
    "pl": ("pl", "Polish"),
    "pt": ("pt", "Portuguese"),
    "ro": ("ro", "Romanian"),
    "ru": ("ru", "Russian"),
    "sk": ("sk", "Slovak"),
    "sl": ("sl", "Slovenian"),
    "sv": ("sv", "Swedish"),
    "th": ("th", "Thai"),
    "tr": ("tr", "Turkish"),
    "uk": ("uk", "Ukrainian"),
    "vi": ("vi", "Vietnamese"),
    "yi": ("yi", "Yiddish"),
    "zh": ("zh", "Chinese"),
}
