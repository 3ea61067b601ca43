"""Translation engine implementations.

This package contains the concrete TransInterface implementation for the Google ``gtx``
endpoint and the asynchronous HTTP client it is built on.

Modules:
- AsyncTranslator: Asynchronous client for the translation endpoint.
- GoogleTranslation: Engine implementation registered as ``google``.
"""

from core.trans.engines.async_google_translate import (
    AsyncTranslator,
    GoogleError,
    GoogleException,
    HTTPConnectionError,
    HTTPError,
    HTTPTimeoutError,
    InvalidLanguageCodeError,
    ResponseFormatError,
)
from core.trans.engines.const_google import GOOGLE_TRANSLATE_URL, LANGUAGES
from core.trans.engines.trans_google import GoogleTranslation

__all__: list[str] = [
    "GOOGLE_TRANSLATE_URL",
    "LANGUAGES",
    "AsyncTranslator",
    "GoogleError",
    "GoogleException",
    "GoogleTranslation",
    "HTTPConnectionError",
    "HTTPError",
    "HTTPTimeoutError",
    "InvalidLanguageCodeError",
    "ResponseFormatError",
]
