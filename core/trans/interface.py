"""Translation engine contract.

Every backend implements TransInterface. Concrete classes are recorded in
``TransInterface.registered`` as soon as they are defined, which is how the translation
manager finds the engine named in ``[TRANSLATION] ENGINE``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.config_models import Config
    from models.translation_models import TranslateResponse

__all__: list[str] = [
    "EngineAttributes",
    "NotSupportedLanguagesError",
    "Result",
    "TransInterface",
    "TranslateExceptionError",
    "TranslationRateLimitError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


@dataclass(frozen=True)
class EngineAttributes:
    """What an engine can do.

    Attributes:
        name (str): Engine name shown in logs.
        supports_auto_detection (bool): Whether ``auto`` is accepted as the source language.
        language_codes (frozenset[str]): Codes the backend accepts. Empty means any code.
    """

    name: str
    supports_auto_detection: bool = True
    language_codes: frozenset[str] = field(default_factory=frozenset)


@dataclass
class Result:
    """Outcome of one successful translation.

    Attributes:
        text (str | None): Translated text.
        detected_source_lang (str | None): Source language reported by the backend, if any.
        response (TranslateResponse | None): Decoded backend response the text came from.
    """

    text: str | None = None
    detected_source_lang: str | None = None
    response: TranslateResponse | None = None

    def __str__(self) -> str:
        return self.text or ""


class TranslateExceptionError(Exception):
    """Translation could not be performed."""


class NotSupportedLanguagesError(TranslateExceptionError):
    """The backend rejected the language pair."""


class TranslationRateLimitError(TranslateExceptionError):
    """The backend is throttling requests."""


class TransInterface(ABC):
    """Base class of translation engines.

    Attributes:
        registered (ClassVar[dict[str, type[TransInterface]]]): Engine classes by engine name.
            Classes whose ``fetch_engine_name`` returns an empty string stay unregistered.
    """

    registered: ClassVar[dict[str, type[TransInterface]]] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        engine_name: object = cls.fetch_engine_name()
        if not engine_name:
            return
        if not isinstance(engine_name, str):
            msg: str = f"{cls.__name__}.fetch_engine_name() must return a string"
            raise TypeError(msg)

        if engine_name in cls.registered:
            logger.warning("Translation engine '%s' replaced by %s", engine_name, cls.__name__)
        cls.registered[engine_name] = cls
        logger.debug("Translation engine registered: '%s' (%s)", engine_name, cls.__name__)

    def __init__(self) -> None:
        self._attributes: EngineAttributes | None = None

    @property
    def engine_attributes(self) -> EngineAttributes:
        """Capabilities declared during ``initialize``.

        Raises:
            RuntimeError: If read before ``initialize``.
        """
        if self._attributes is None:
            msg = f"{type(self).__name__} has not been initialized"
            raise RuntimeError(msg)
        return self._attributes

    @engine_attributes.setter
    def engine_attributes(self, attributes: EngineAttributes) -> None:
        if self._attributes is not None:
            msg = f"{type(self).__name__} attributes are already set"
            raise RuntimeError(msg)
        self._attributes = attributes

    @property
    def engine_name(self) -> str:
        return self.engine_attributes.name

    def supports_language(self, code: str) -> bool:
        """Whether ``code`` may be sent to the backend."""
        attributes: EngineAttributes = self.engine_attributes
        if code == "auto":
            return attributes.supports_auto_detection
        return not attributes.language_codes or code in attributes.language_codes

    def is_rate_limit_error(self, err: Exception) -> bool:
        return isinstance(err, TranslationRateLimitError)

    @staticmethod
    @abstractmethod
    def fetch_engine_name() -> str:
        """Name the engine is registered under; evaluated on the class at definition time."""

    @abstractmethod
    def initialize(self, config: Config) -> None:
        """Create backend clients and set ``engine_attributes``.

        Raises:
            RuntimeError: If the configuration cannot be used.
        """

    @abstractmethod
    async def translation(self, content: str, tgt_lang: str, src_lang: str | None = None) -> Result:
        """Translate ``content``.

        Args:
            content (str): Query text, passed through untrimmed.
            tgt_lang (str): Target language code.
            src_lang (str | None): Source language code; None or ``auto`` lets the backend detect it.

        Returns:
            Result: The translation.

        Raises:
            NotSupportedLanguagesError: If the backend does not accept the language pair.
            TranslationRateLimitError: If the backend throttles the request.
            TranslateExceptionError: For any other failure.
        """

    @abstractmethod
    async def close(self) -> None:
        """Release network resources."""
