"""INI configuration loading.

Values are read section by section into ``models.config_models.Config``; each value is
converted to the type of the field default it replaces. Command-line overrides are applied
last and the merged result is validated before it is handed out.
"""

from __future__ import annotations

import configparser
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from core.query.registry import LANGUAGE_REGISTRY
from core.trans.interface import TransInterface
from models.config_models import Config
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from core.query.registry import LanguageRegistry

__all__: list[str] = [
    "Config",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigLoaderError",
    "ConfigTypeError",
    "ConfigValueError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

QUOTES: Final[tuple[str, ...]] = ('"', "'")


class ConfigLoaderError(Exception):
    """Base class of configuration errors."""


class ConfigFileNotFoundError(ConfigLoaderError):
    pass


class ConfigFormatError(ConfigLoaderError):
    """The file is not valid INI or holds unusable values."""


class ConfigValueError(ConfigFormatError):
    pass


class ConfigTypeError(ConfigFormatError):
    pass


def _unquote(raw: str) -> str:
    value: str = raw.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTES:
        return value[1:-1]
    return value


def _to_bool(raw: str) -> bool:
    value: str = _unquote(raw).lower()
    if value not in configparser.ConfigParser.BOOLEAN_STATES:
        msg = f"not a boolean: {raw!r}"
        raise ValueError(msg)
    return configparser.ConfigParser.BOOLEAN_STATES[value]


def _to_int(raw: str) -> int:
    value: float = float(_unquote(raw))
    if not value.is_integer():
        msg = f"not a whole number: {raw!r}"
        raise ValueError(msg)
    return int(value)


def _to_float(raw: str) -> float:
    return float(_unquote(raw))


# Keyed by the exact type of the field default.
CONVERTERS: Final[dict[type, Callable[[str], Any]]] = {
    bool: _to_bool,
    int: _to_int,
    float: _to_float,
    str: _unquote,
}


class ConfigLoader:
    """Reads, merges and validates the configuration.

    Args:
        config_filename (str): Path of the INI file.
        script_name (str): Name of the running script, stored in ``GENERAL.SCRIPT_NAME``.
        registry (LanguageRegistry): Registry the default languages must exist in.
        **args: Command-line overrides ``debug``, ``source`` and ``target``. None leaves the file value.

    Attributes:
        config (Config): The validated configuration.

    Raises:
        ConfigFileNotFoundError: If the file does not exist.
        ConfigFormatError: If the file cannot be parsed or a value is invalid.
    """

    def __init__(
        self,
        *,
        config_filename: str,
        script_name: str,
        registry: LanguageRegistry = LANGUAGE_REGISTRY,
        **args,
    ) -> None:
        self.registry: LanguageRegistry = registry
        self.config: Config = Config()
        self.config.GENERAL.SCRIPT_NAME = script_name

        self._read(self._open(config_filename, script_name))
        self._apply_overrides(args)
        self._validate()

    @staticmethod
    def _open(config_filename: str, script_name: str) -> configparser.ConfigParser:
        if not Path(config_filename).is_file():
            msg = f"Configuration file '{config_filename}' not found. Place it next to '{script_name}'."
            raise ConfigFileNotFoundError(msg)

        parser = configparser.ConfigParser(interpolation=None)
        parser.optionxform = str  # type: ignore[assignment, method-assign]
        try:
            parser.read(config_filename, encoding="utf-8")
        except configparser.Error as err:
            msg = f"'{config_filename}' is not a valid INI file: {err}"
            raise ConfigFormatError(msg) from err
        logger.debug("Configuration read from '%s'", config_filename)
        return parser

    def _read(self, parser: configparser.ConfigParser) -> None:
        for section_field in fields(self.config):
            section: Any = getattr(self.config, section_field.name)
            if not parser.has_section(section_field.name):
                logger.debug("Section [%s] not present, defaults kept", section_field.name)
                continue
            for key_field in fields(section):
                raw: str | None = parser.get(section_field.name, key_field.name, fallback=None)
                if raw is not None:
                    name: str = f"{section_field.name}.{key_field.name}"
                    setattr(section, key_field.name, self._convert(name, raw, getattr(section, key_field.name)))

    @staticmethod
    def _convert(name: str, raw: str, default: Any) -> Any:
        converter: Callable[[str], Any] | None = CONVERTERS.get(type(default))
        if converter is None:
            msg = f"'{name}' has an unsupported type: {type(default).__name__}"
            raise ConfigTypeError(msg)
        try:
            return converter(raw)
        except ValueError as err:
            msg = f"Invalid value for '{name}': {raw} ({err})"
            raise ConfigValueError(msg) from err

    def _apply_overrides(self, args: dict[str, Any]) -> None:
        if args.get("debug"):
            self.config.GENERAL.DEBUG = True
        if args.get("source") is not None:
            self.config.TRANSLATION.DEFAULT_SOURCE_LANGUAGE = args["source"]
        if args.get("target") is not None:
            self.config.TRANSLATION.DEFAULT_TARGET_LANGUAGE = args["target"]

    def _validate(self) -> None:
        translation = self.config.TRANSLATION
        if translation.ENGINE not in TransInterface.registered:
            logger.warning(
                "Unknown value '%s' for 'TRANSLATION.ENGINE' (known: %s)",
                translation.ENGINE,
                ", ".join(TransInterface.registered) or "none",
            )
        for key in ("DEFAULT_SOURCE_LANGUAGE", "DEFAULT_TARGET_LANGUAGE"):
            code: str = getattr(translation, key)
            if self.registry.lookup(code) is None and self.registry.find_by_code(code) is None:
                msg = f"Unsupported language code for 'TRANSLATION.{key}': {code}"
                raise ConfigValueError(msg)

        bounds: dict[str, float] = {
            "TRANSLATION.TIMEOUT": translation.TIMEOUT,
            "TRANSLATION.INFLIGHT_TIMEOUT": translation.INFLIGHT_TIMEOUT,
            "CACHE.CAPACITY": self.config.CACHE.CAPACITY,
        }
        for name, value in bounds.items():
            if value <= 0:
                msg = f"'{name}' must be greater than 0: {value}"
                raise ConfigValueError(msg)
        if self.config.CACHE.TTL < 0:
            msg = f"'CACHE.TTL' must not be negative: {self.config.CACHE.TTL}"
            raise ConfigValueError(msg)
