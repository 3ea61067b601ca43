"""Unit tests for async_google_translate module."""

from __future__ import annotations

import json
from typing import Any

import pytest

from core.trans.engines import async_google_translate as agt
from models.translation_models import TranslateResponse


class DummyResponse:
    def __init__(self, status: int = 200, body: str = "", headers: dict[str, str] | None = None) -> None:
        self.status: int = status
        self.reason: str = "OK" if status < 300 else "Error"
        self.headers: dict[str, str] = headers or {}
        self._body: str = body

    async def text(self) -> str:
        return self._body

    async def __aenter__(self) -> DummyResponse:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None


class DummySession:
    response: DummyResponse = DummyResponse()
    error: BaseException | None = None

    def __init__(self, *args, **kwargs) -> None:
        _ = args, kwargs
        self.closed = False
        self.requests: list[tuple[str, dict[str, Any]]] = []

    def get(self, url: str, **kwargs: Any) -> DummyResponse:
        self.requests.append((url, kwargs))
        if type(self).error is not None:
            raise type(self).error
        return type(self).response

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def patch_session(monkeypatch: pytest.MonkeyPatch) -> None:
    DummySession.response = DummyResponse()
    DummySession.error = None
    monkeypatch.setattr(agt.aiohttp, "ClientSession", DummySession)


def _body(*sentences: str, src: str = "en") -> str:
    return json.dumps({"sentences": [{"trans": s, "orig": s, "backend": 10} for s in sentences], "src": src})


def test_check_langcode_accepts_known_code() -> None:
    assert agt.AsyncTranslator._check_langcode("en") == "en"
    assert agt.AsyncTranslator._check_langcode("auto") == "auto"


def test_check_langcode_raises_when_sensitive() -> None:
    with pytest.raises(agt.InvalidLanguageCodeError):
        agt.AsyncTranslator._check_langcode("zz", sensitive=True)


def test_validate_languages_falls_back_to_auto_when_not_sensitive() -> None:
    translator = agt.AsyncTranslator(code_sensitive=False)

    src, tgt = translator._validate_languages("zz", "en")

    assert src == "auto"
    assert tgt == "en"


def test_validate_text_length_rejects_empty() -> None:
    translator = agt.AsyncTranslator()

    with pytest.raises(agt.GoogleError):
        translator._validate_text_length("")


def test_validate_text_length_rejects_too_long() -> None:
    translator = agt.AsyncTranslator()

    with pytest.raises(agt.GoogleError):
        translator._validate_text_length("a" * 5000)


def test_build_params_carries_fixed_and_request_parameters() -> None:
    translator = agt.AsyncTranslator()

    params: dict[str, str] = translator.build_params("a & b", "fr", "auto")

    assert params == {"client": "gtx", "dt": "t", "dj": "1", "sl": "auto", "tl": "fr", "q": "a & b"}


def test_process_response_concatenates_sentences() -> None:
    translator = agt.AsyncTranslator()

    response: TranslateResponse = translator._process_response(_body("Hello. ", "World.", src="ja"))

    assert response.text == "Hello. World."
    assert response.src == "ja"
    assert len(response.sentences) == 2


def test_process_response_raises_on_invalid_json() -> None:
    translator = agt.AsyncTranslator()

    with pytest.raises(agt.ResponseFormatError):
        translator._process_response("<html>not json</html>")


@pytest.mark.parametrize("body", ["[]", '{"src": "en"}', '{"sentences": "text"}', '{"sentences": [{"orig": "x"}]}'])
def test_process_response_raises_on_unexpected_shape(body: str) -> None:
    translator = agt.AsyncTranslator()

    with pytest.raises(agt.ResponseFormatError):
        translator._process_response(body)


@pytest.mark.asyncio
async def test_translate_sends_get_request_with_query_parameters() -> None:
    DummySession.response = DummyResponse(body=_body("Bonjour"))
    translator = agt.AsyncTranslator(timeout=3.0)

    response: TranslateResponse = await translator.translate(" hello", lang_tgt="fr", lang_src="en")

    session: DummySession = translator._session  # type: ignore[assignment]
    url, kwargs = session.requests[0]
    assert response.text == "Bonjour"
    assert url == agt.GOOGLE_TRANSLATE_URL
    assert kwargs["params"]["q"] == " hello"
    assert kwargs["params"]["sl"] == "en"
    assert kwargs["params"]["tl"] == "fr"
    assert kwargs["timeout"].total == 3.0


@pytest.mark.asyncio
async def test_translate_rejects_unknown_code_before_request() -> None:
    translator = agt.AsyncTranslator()

    with pytest.raises(agt.InvalidLanguageCodeError):
        await translator.translate("hello", lang_tgt="zz", lang_src="en")

    session: DummySession = translator._session  # type: ignore[assignment]
    assert session.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status", "expected"),
    [(429, agt.HTTPTooManyRequests), (500, agt.HTTPError), (404, agt.HTTPError), (302, agt.HTTPRedirection)],
)
async def test_get_maps_http_status_to_exception(status: int, expected: type[Exception]) -> None:
    DummySession.response = DummyResponse(status=status, body="oops", headers={"Location": "https://example.com"})
    translator = agt.AsyncTranslator()

    with pytest.raises(expected):
        await translator.translate("hello", lang_tgt="fr", lang_src="en")


@pytest.mark.asyncio
async def test_get_maps_timeout_to_http_timeout_error() -> None:
    DummySession.error = TimeoutError()
    translator = agt.AsyncTranslator()

    with pytest.raises(agt.HTTPTimeoutError):
        await translator.translate("hello", lang_tgt="fr", lang_src="en")


@pytest.mark.asyncio
async def test_get_maps_client_error_to_connection_error() -> None:
    DummySession.error = agt.aiohttp.ClientConnectionError("refused")
    translator = agt.AsyncTranslator()

    with pytest.raises(agt.HTTPConnectionError):
        await translator.translate("hello", lang_tgt="fr", lang_src="en")


@pytest.mark.asyncio
async def test_close_closes_session_and_recreates_on_next_use() -> None:
    translator = agt.AsyncTranslator()
    first: DummySession = translator._session  # type: ignore[assignment]

    await translator.close()

    assert first.closed is True
    assert translator._session is not first
