"""aiohttp client for Google's ``translate_a/single`` endpoint.

Note:
    ``client=gtx`` is the unauthenticated endpoint used by browser extensions. It is
    undocumented and only the ``dj=1`` JSON object reply is understood here.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Final

import aiohttp

from core.trans.engines.const_google import BASE_QUERY_PARAMS, GOOGLE_TRANSLATE_URL, LANGUAGES
from models.translation_models import TranslateResponse
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__: list[str] = [
    "BACKEND_CODES",
    "AsyncTranslator",
    "GoogleError",
    "GoogleException",
    "HTTPConnectionError",
    "HTTPError",
    "HTTPRedirection",
    "HTTPTimeoutError",
    "HTTPTooManyRequests",
    "InvalidLanguageCodeError",
    "ResponseFormatError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

TEXT_LENGTH_LIMIT: Final[int] = 5000
BACKEND_CODES: Final[frozenset[str]] = frozenset(code for code, _ in LANGUAGES.values())
BODY_PREVIEW_LENGTH: Final[int] = 300


class GoogleException(Exception):  # noqa: N818
    """Base class of client errors."""


class GoogleError(GoogleException):
    """The request was rejected before it was sent."""


class ResponseFormatError(GoogleException):
    """The reply could not be decoded.

    A truncated reply causes this once; seeing it on every request means the format changed.
    """


class InvalidLanguageCodeError(GoogleException):
    """A language code is missing from the language table."""


class HTTPException(GoogleException):
    pass


class HTTPConnectionError(HTTPException):
    pass


class HTTPTimeoutError(HTTPException):
    pass


class HTTPRedirection(HTTPException):
    """3xx reply."""


class HTTPError(HTTPException):
    """4xx or 5xx reply."""


class HTTPTooManyRequests(HTTPError):
    """429 reply."""


class AsyncTranslator:
    """Sends one GET request per translation.

    Args:
        url (str): Endpoint URL.
        timeout (float): Total request timeout in seconds.
        proxy (str | None): Proxy URL passed to aiohttp.
        code_sensitive (bool): Reject unknown language codes instead of replacing them with ``auto``.

    Raises:
        ValueError: If ``timeout`` is not positive.
    """

    def __init__(
        self,
        url: str = GOOGLE_TRANSLATE_URL,
        timeout: float = 10.0,
        proxy: str | None = None,
        *,
        code_sensitive: bool = True,
    ) -> None:
        if timeout <= 0:
            msg = f"timeout must be positive: {timeout}"
            raise ValueError(msg)
        self.url: str = url
        self.timeout: float = timeout
        self.proxy: str | None = proxy
        self.code_sensitive: bool = code_sensitive
        self._client_session: aiohttp.ClientSession | None = None

    @property
    def _session(self) -> aiohttp.ClientSession:
        # Sessions are created lazily so the client can be built outside a running loop.
        if self._client_session is None or self._client_session.closed:
            self._client_session = aiohttp.ClientSession()
        return self._client_session

    async def close(self) -> None:
        session, self._client_session = self._client_session, None
        if session is not None:
            await session.close()
            logger.debug("HTTP session closed")

    @staticmethod
    def _check_langcode(lang: str, *, sensitive: bool = False) -> str:
        if lang in BACKEND_CODES:
            return lang
        if sensitive:
            msg = f"Language code '{lang}' is not supported"
            raise InvalidLanguageCodeError(msg)
        logger.warning("Language code '%s' is not supported, detecting the language instead", lang)
        return "auto"

    def _validate_languages(self, lang_src: str | None, lang_tgt: str) -> tuple[str, str]:
        return (
            self._check_langcode(lang_src or "auto", sensitive=self.code_sensitive),
            self._check_langcode(lang_tgt, sensitive=self.code_sensitive),
        )

    @staticmethod
    def _validate_text_length(text: str) -> None:
        if not text:
            msg = "Nothing to translate"
            raise GoogleError(msg)
        if len(text) >= TEXT_LENGTH_LIMIT:
            msg = f"Text must be shorter than {TEXT_LENGTH_LIMIT} characters ({len(text)})"
            raise GoogleError(msg)

    @staticmethod
    def build_params(text: str, lang_tgt: str, lang_src: str) -> dict[str, str]:
        """Query string for one request; aiohttp takes care of URL encoding."""
        params: dict[str, str] = dict(BASE_QUERY_PARAMS)
        params.update(sl=lang_src, tl=lang_tgt, q=text)
        return params

    @staticmethod
    def _raise_for_status(status: int, reason: str | None, body: str, headers: Mapping[str, str]) -> None:
        if status < 300:
            return
        summary: str = f"HTTP {status} {reason or ''}".rstrip()
        if status < 400:
            raise HTTPRedirection(f"{summary}, redirected to {headers.get('Location', '?')}")

        detail: str = StringUtils.preview(body.replace("\n", " "), BODY_PREVIEW_LENGTH)
        error_cls: type[HTTPError] = HTTPTooManyRequests if status == 429 else HTTPError
        raise error_cls(f"{summary}: {detail}")

    async def _fetch(self, params: dict[str, str]) -> str:
        try:
            async with self._session.get(
                self.url,
                params=params,
                headers={"Accept": "application/json"},
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                proxy=self.proxy,
            ) as response:
                body: str = await response.text()
                self._raise_for_status(response.status, response.reason, body, response.headers)
                return body
        except TimeoutError as err:
            msg = f"No reply within {self.timeout}s"
            raise HTTPTimeoutError(msg) from err
        except (aiohttp.ClientError, ConnectionResetError) as err:
            msg = f"Connection failed: {err}"
            raise HTTPConnectionError(msg) from err

    @staticmethod
    def _process_response(body: str) -> TranslateResponse:
        try:
            payload: Any = json.loads(body)
        except json.JSONDecodeError as err:
            msg = f"Reply is not JSON: {StringUtils.preview(body, 100)}"
            raise ResponseFormatError(msg) from err

        if not isinstance(payload, dict) or not isinstance(payload.get("sentences"), list):
            msg = f"Reply has no sentence list: {StringUtils.preview(body, 100)}"
            raise ResponseFormatError(msg)
        try:
            return TranslateResponse.from_dict(payload)
        except (KeyError, TypeError, ValueError) as err:
            msg = f"Reply has malformed sentences: {err}"
            raise ResponseFormatError(msg) from err

    async def translate(self, text: str, lang_tgt: str = "auto", lang_src: str | None = "auto") -> TranslateResponse:
        """Translate ``text``.

        Args:
            text (str): Text sent as typed.
            lang_tgt (str): Target language code.
            lang_src (str | None): Source language code, None for detection.

        Returns:
            TranslateResponse: Decoded reply.

        Raises:
            InvalidLanguageCodeError: If a code is unknown and ``code_sensitive`` is set.
            GoogleError: If the text is empty or too long.
            HTTPException: If the request fails.
            ResponseFormatError: If the reply cannot be decoded.
        """
        src, tgt = self._validate_languages(lang_src, lang_tgt)
        self._validate_text_length(text)

        logger.info("Requesting translation (%s > %s)", src, tgt)
        body: str = await self._fetch(self.build_params(text, tgt, src))
        response: TranslateResponse = self._process_response(body)
        logger.debug("Decoded %d sentence(s), detected source: %s", len(response.sentences), response.src)
        return response
