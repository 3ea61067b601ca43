"""Engine backed by the free Google ``gtx`` endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from core.trans.engines.async_google_translate import (
    BACKEND_CODES,
    AsyncTranslator,
    GoogleException,
    HTTPTooManyRequests,
    InvalidLanguageCodeError,
)
from core.trans.interface import (
    EngineAttributes,
    NotSupportedLanguagesError,
    Result,
    TransInterface,
    TranslateExceptionError,
    TranslationRateLimitError,
)
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

    from models.config_models import Config
    from models.translation_models import TranslateResponse

__all__: list[str] = ["GoogleTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

ENGINE_NAME: Final[str] = "google"

# Checked in order; the first matching client error decides the engine error.
_ERROR_MAP: Final[tuple[tuple[type[GoogleException], type[TranslateExceptionError]], ...]] = (
    (InvalidLanguageCodeError, NotSupportedLanguagesError),
    (HTTPTooManyRequests, TranslationRateLimitError),
    (GoogleException, TranslateExceptionError),
)


class GoogleTranslation(TransInterface):
    """Translates through AsyncTranslator and converts its errors to the engine error family."""

    def __init__(self) -> None:
        super().__init__()
        self._client: AsyncTranslator | None = None

    @property
    def _inst(self) -> AsyncTranslator:
        if self._client is None:
            msg = "Google client has not been created yet"
            raise TranslateExceptionError(msg)
        return self._client

    @staticmethod
    def fetch_engine_name() -> str:
        return ENGINE_NAME

    def initialize(self, config: Config) -> None:
        try:
            timeout: float = config.TRANSLATION.TIMEOUT
            self._client = AsyncTranslator(timeout=timeout)
        except (AttributeError, ValueError) as err:
            logger.critical("Cannot create the Google client: %s", err)
            msg = "Google client creation failed"
            raise RuntimeError(msg) from err

        self.engine_attributes = EngineAttributes(
            name=ENGINE_NAME, supports_auto_detection=True, language_codes=BACKEND_CODES
        )
        logger.debug("Google client ready (timeout: %ss)", timeout)

    @staticmethod
    def _convert_error(err: GoogleException, src_lang: str | None, tgt_lang: str) -> TranslateExceptionError:
        for client_error, engine_error in _ERROR_MAP:
            if isinstance(err, client_error):
                return engine_error(f"Google ({src_lang} > {tgt_lang}): {err}")
        return TranslateExceptionError(str(err))

    async def translation(self, content: str, tgt_lang: str, src_lang: str | None = None) -> Result:
        logger.debug("Google request: %s > %s, '%s'", src_lang, tgt_lang, StringUtils.preview(content))
        try:
            response: TranslateResponse = await self._inst.translate(content, tgt_lang, src_lang)
        except GoogleException as err:
            logger.error("Google translation failed: %s", err)
            raise self._convert_error(err, src_lang, tgt_lang) from err

        logger.debug("Google response (detected: %s): '%s'", response.src, StringUtils.preview(response.text))
        return Result(text=response.text, detected_source_lang=response.src, response=response)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
        logger.info("Google engine closed")
