from __future__ import annotations

from typing import TYPE_CHECKING

from core.trans.engines import GoogleTranslation  # noqa: F401
from core.trans.interface import (
    NotSupportedLanguagesError,
    Result,
    TransInterface,
    TranslateExceptionError,
)
from models.translation_models import TranslationCacheKey
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

    from core.cache.inflight_manager import InFlightManager
    from core.cache.manager import TranslationCacheManager
    from models.config_models import Config
    from models.query_models import ResolvedIntent


__all__: list[str] = ["TransManager"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class TransManager:
    """Dispatches resolved intents to the translation engine.

    Results are looked up in the cache first; concurrent requests for the same key share one
    backend call through the in-flight manager. Only successful results are cached.

    Args:
        config (Config): Configuration naming the engine to use.
        cache_manager (TranslationCacheManager | None): Cache for translation results.
        inflight_manager (InFlightManager | None): Coordinator for concurrent identical requests.
    """

    def __init__(
        self,
        config: Config,
        cache_manager: TranslationCacheManager | None = None,
        inflight_manager: InFlightManager | None = None,
    ) -> None:
        self.config: Config = config
        self.cache_manager: TranslationCacheManager | None = cache_manager
        self.inflight_manager: InFlightManager | None = inflight_manager
        self._engine: TransInterface | None = None
        logger.debug("Registered translation engines: %s", TransInterface.registered)

    async def initialize(self) -> None:
        """Instantiate and initialize the configured engine.

        Raises:
            TranslateExceptionError: If the engine is unknown or fails to initialize.
        """
        logger.info("TransManager initialization started")
        name: str = self.config.TRANSLATION.ENGINE
        engine_cls: type[TransInterface] | None = TransInterface.registered.get(name)
        if engine_cls is None:
            logger.critical("Translation class not found: '%s'", name)
            msg: str = f"Unknown translation engine: '{name}'"
            raise TranslateExceptionError(msg)

        engine: TransInterface = engine_cls()
        try:
            engine.initialize(self.config)
        except RuntimeError as err:
            logger.critical("RuntimeError in '%s' translation setup: %s", name, err)
            msg = f"Translation engine '{name}' could not be initialized"
            raise TranslateExceptionError(msg) from err

        self._engine = engine
        logger.info("Translation engine initialized: '%s'", name)

    @property
    def engine(self) -> TransInterface:
        """The active translation engine.

        Raises:
            TranslateExceptionError: If ``initialize`` has not been run.
        """
        if self._engine is None:
            msg = "No translation engine currently available"
            raise TranslateExceptionError(msg)
        return self._engine

    @staticmethod
    def build_cache_key(intent: ResolvedIntent) -> TranslationCacheKey:
        return TranslationCacheKey(intent.source_lang_code, intent.target_lang_code, intent.query_text)

    async def translate(self, intent: ResolvedIntent) -> Result | None:
        """Translate the query of ``intent``.

        Args:
            intent (ResolvedIntent): Intent produced by the language resolver.

        Returns:
            Result | None: The translation, or None when the query is blank or the request failed.
        """
        if StringUtils.is_blank(intent.query_text):
            logger.debug("Empty content, skipping translation.")
            return None

        key: TranslationCacheKey = self.build_cache_key(intent)
        if not self.engine.supports_language(key.source_lang) or not self.engine.supports_language(key.target_lang):
            logger.info(
                "'%s' does not accept the language pair (src: '%s', tgt: '%s')",
                self.engine.engine_name,
                key.source_lang,
                key.target_lang,
            )
            return None

        if self.cache_manager is not None and (cached := self.cache_manager.search(key)) is not None:
            return cached

        if self.inflight_manager is not None:
            try:
                shared: Result | None = await self.inflight_manager.mark_inflight_start(key)
            except TimeoutError as err:
                logger.warning("In-flight translation unavailable: %s", err)
                return None
            except TranslateExceptionError as err:
                return self._handle_translation_failure(key, err, context="In-flight translation")
            if shared is not None:
                return shared

        try:
            result: Result = await self.engine.translation(
                content=key.query, tgt_lang=key.target_lang, src_lang=key.source_lang
            )
        except TranslateExceptionError as err:
            await self._store_inflight_exception(key, err)
            return self._handle_translation_failure(key, err, context="Translation")
        except Exception as err:
            # Waiters must not hang on a producer that died with an unexpected error.
            await self._store_inflight_exception(key, err)
            raise

        if self.cache_manager is not None:
            self.cache_manager.register(key, result)
        await self._store_inflight_result(key, result)
        logger.debug(
            "Final translation result (src: '%s', tgt: '%s'): %s",
            key.source_lang,
            key.target_lang,
            StringUtils.preview(result.text),
        )
        return result

    async def _store_inflight_result(self, key: TranslationCacheKey, result: Result) -> None:
        if self.inflight_manager is not None:
            await self.inflight_manager.store_inflight_result(key, result)

    async def _store_inflight_exception(self, key: TranslationCacheKey, err: Exception) -> None:
        if self.inflight_manager is not None:
            await self.inflight_manager.store_inflight_exception(key, err)

    def _handle_translation_failure(self, key: TranslationCacheKey, err: Exception, *, context: str) -> None:
        """Log a failed translation; the caller reports it as no result."""
        if isinstance(err, NotSupportedLanguagesError):
            logger.error(
                "%s unsupported language pair (src: '%s', tgt: '%s'): %s",
                context,
                key.source_lang,
                key.target_lang,
                err,
            )
        elif self._engine is not None and self._engine.is_rate_limit_error(err):
            logger.warning("%s rate limited: %s", context, err)
        else:
            logger.error("%s failed: %s", context, err)

    async def shutdown_engines(self) -> None:
        logger.info("Class '%s' termination process started.", self.__class__.__name__)
        if self._engine is not None:
            await self._engine.close()
        logger.info("Class '%s' termination process completed.", self.__class__.__name__)
