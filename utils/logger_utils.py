"""Logging setup shared by every module.

Modules fetch their logger at import time with ``LoggerUtils.get_logger(__name__)``. The
host configures output once by constructing ``LoggerUtils``; loggers fetched earlier start
writing as soon as the handlers are attached to the namespace logger above them.
"""

from __future__ import annotations

import logging
import sys
import warnings
from logging import Formatter, Handler, NullHandler, StreamHandler
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, ClassVar, Final, Literal, NamedTuple, Self, TextIO, TypeAlias

if TYPE_CHECKING:
    from pathlib import Path

__all__: list[str] = ["LogLevel", "LoggerUtils"]

LevelType: TypeAlias = Literal["NOTSET", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_LOG_LEVEL: Final[int] = logging.INFO
DEFAULT_NAMESPACE: Final[str] = "Translator"

CONSOLE_LEVEL: Final[int] = logging.WARNING
CONSOLE_FORMAT: Final[str] = "%(levelname)s: %(message)s"
FILE_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d %(message)s"
FILE_MAX_BYTES: Final[int] = 1024 * 1024
FILE_BACKUP_COUNT: Final[int] = 3

_ORIGINAL_SHOWWARNING = warnings.showwarning


class LogLevel(NamedTuple):
    name: str
    value: int


def _console_handler(*, null: bool) -> Handler:
    if null or sys.stderr is None:
        return NullHandler()
    handler: StreamHandler[TextIO] = StreamHandler(sys.stderr)
    handler.setLevel(CONSOLE_LEVEL)
    handler.setFormatter(Formatter(CONSOLE_FORMAT))
    return handler


def _file_handler(filename: str) -> Handler | None:
    try:
        handler = RotatingFileHandler(
            filename, maxBytes=FILE_MAX_BYTES, backupCount=FILE_BACKUP_COUNT, encoding="utf-8"
        )
    except OSError:
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(Formatter(FILE_FORMAT))
    return handler


class LoggerUtils:
    """Configures the namespace logger once per process.

    Args:
        filename (str | Path): Log file path. Empty keeps logging on the console only.
        use_null_console (bool): Discard console output, used by tests.
    """

    _LOGGER_NAMESPACE: ClassVar[str] = DEFAULT_NAMESPACE
    _configured: ClassVar[bool] = False
    _instance: ClassVar[Self | None] = None

    def __new__(cls, *args, **kwargs) -> Self:
        _ = args, kwargs
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, filename: str | Path = "", *, use_null_console: bool = False) -> None:
        if LoggerUtils._configured:
            return

        self.root_logger: logging.Logger = logging.getLogger(self._LOGGER_NAMESPACE)
        self.root_logger.setLevel(DEFAULT_LOG_LEVEL)
        self.root_logger.addHandler(_console_handler(null=use_null_console))

        if str(filename).strip():
            file_handler: Handler | None = _file_handler(str(filename))
            if file_handler is None:
                self.root_logger.error("Log file '%s' cannot be opened, file logging disabled", filename)
            else:
                self.root_logger.addHandler(file_handler)

        warnings.showwarning = self._log_warning
        LoggerUtils._configured = True

    def _log_warning(
        self,
        message: Warning | str,
        category: type[Warning],
        filename: str,
        lineno: int,
        file: TextIO | None = None,
        line: str | None = None,
    ) -> None:
        _ = file, line
        self.root_logger.warning("%s (%s:%d): %s", category.__name__, filename, lineno, message)

    @classmethod
    def initialize(cls, namespace: str) -> None:
        """Rename the namespace logger. Only allowed before the first configuration.

        Raises:
            RuntimeError: If logging has already been configured.
        """
        if cls._configured:
            msg = "Logging is already configured, the namespace can no longer change"
            raise RuntimeError(msg)
        cls._LOGGER_NAMESPACE = namespace

    @classmethod
    def reset(cls) -> None:
        """Remove the handlers so that the next construction configures logging again."""
        namespace_logger: logging.Logger = logging.getLogger(cls._LOGGER_NAMESPACE)
        for handler in namespace_logger.handlers[:]:
            namespace_logger.removeHandler(handler)
            handler.close()
        warnings.showwarning = _ORIGINAL_SHOWWARNING
        cls._configured = False
        cls._instance = None

    def set_level(self, level: LevelType) -> None:
        value: int | None = logging.getLevelNamesMapping().get(level.upper())
        if value is None:
            self.root_logger.warning("Unknown log level '%s', using INFO", level)
            value = DEFAULT_LOG_LEVEL
        self.root_logger.setLevel(value)

    def get_level(self) -> LogLevel:
        value: int = self.root_logger.getEffectiveLevel()
        return LogLevel(logging.getLevelName(value), value)

    @staticmethod
    def get_logger(name: str | None = None) -> logging.Logger:
        """Logger ``<namespace>.<name>``, or the namespace logger itself when ``name`` is None."""
        namespace: str = LoggerUtils._LOGGER_NAMESPACE
        if not name:
            return logging.getLogger(namespace or None)
        return logging.getLogger(f"{namespace}.{name}" if namespace else name)
