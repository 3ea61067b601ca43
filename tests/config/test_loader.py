from __future__ import annotations

from textwrap import dedent
from typing import TYPE_CHECKING

import pytest

from config.loader import (
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigLoader,
    ConfigTypeError,
    ConfigValueError,
)

if TYPE_CHECKING:
    from pathlib import Path


def _write_ini(tmp_path: Path, content: str) -> Path:
    ini_path: Path = tmp_path / "translator.ini"
    ini_path.write_text(dedent(content), encoding="utf-8")
    return ini_path


def test_config_loader_raises_for_missing_file(tmp_path: Path) -> None:
    ini_path: Path = tmp_path / "missing.ini"
    with pytest.raises(ConfigFileNotFoundError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_config_loader_reads_typed_values(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [GENERAL]
        DEBUG = True
        LOG_FILE = "translator.log"

        [TRANSLATION]
        ENGINE = "google"
        DEFAULT_SOURCE_LANGUAGE = "en"
        DEFAULT_TARGET_LANGUAGE = ja
        TIMEOUT = 5
        INFLIGHT_TIMEOUT = "2.5"

        [CACHE]
        CAPACITY = 32
        TTL = 60
        """,
    )

    loader = ConfigLoader(config_filename=str(ini_path), script_name="test")

    assert loader.config.GENERAL.DEBUG is True
    assert loader.config.GENERAL.LOG_FILE == "translator.log"
    assert loader.config.GENERAL.SCRIPT_NAME == "test"
    assert loader.config.TRANSLATION.ENGINE == "google"
    assert loader.config.TRANSLATION.DEFAULT_SOURCE_LANGUAGE == "en"
    assert loader.config.TRANSLATION.DEFAULT_TARGET_LANGUAGE == "ja"
    assert loader.config.TRANSLATION.TIMEOUT == 5.0
    assert loader.config.TRANSLATION.INFLIGHT_TIMEOUT == 2.5
    assert loader.config.CACHE.CAPACITY == 32
    assert loader.config.CACHE.TTL == 60.0


def test_missing_sections_keep_defaults(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(tmp_path, "[GENERAL]\nDEBUG = False\n")

    loader = ConfigLoader(config_filename=str(ini_path), script_name="test")

    assert loader.config.TRANSLATION.ENGINE == "google"
    assert loader.config.TRANSLATION.DEFAULT_SOURCE_LANGUAGE == "??"
    assert loader.config.TRANSLATION.DEFAULT_TARGET_LANGUAGE == "??"
    assert loader.config.CACHE.CAPACITY == 256


def test_command_line_overrides_take_precedence(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [TRANSLATION]
        DEFAULT_SOURCE_LANGUAGE = "en"
        DEFAULT_TARGET_LANGUAGE = "ja"
        """,
    )

    loader = ConfigLoader(
        config_filename=str(ini_path), script_name="test", debug=True, source="auto", target="fr"
    )

    assert loader.config.GENERAL.DEBUG is True
    assert loader.config.TRANSLATION.DEFAULT_SOURCE_LANGUAGE == "auto"
    assert loader.config.TRANSLATION.DEFAULT_TARGET_LANGUAGE == "fr"


def test_unknown_default_language_is_rejected(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(tmp_path, '[TRANSLATION]\nDEFAULT_TARGET_LANGUAGE = "zz"\n')

    with pytest.raises(ConfigValueError, match="DEFAULT_TARGET_LANGUAGE"):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_unknown_override_language_is_rejected(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(tmp_path, "[GENERAL]\nDEBUG = False\n")

    with pytest.raises(ConfigValueError):
        ConfigLoader(config_filename=str(ini_path), script_name="test", source="EN")


def test_unknown_engine_only_warns(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    ini_path: Path = _write_ini(tmp_path, '[TRANSLATION]\nENGINE = "deepl"\n')

    with caplog.at_level("WARNING"):
        loader = ConfigLoader(config_filename=str(ini_path), script_name="test")

    assert loader.config.TRANSLATION.ENGINE == "deepl"
    assert "deepl" in caplog.text


@pytest.mark.parametrize(
    "content",
    [
        "[CACHE]\nCAPACITY = 0\n",
        "[TRANSLATION]\nTIMEOUT = 0\n",
        "[TRANSLATION]\nINFLIGHT_TIMEOUT = -1\n",
    ],
)
def test_non_positive_bounds_are_rejected(tmp_path: Path, content: str) -> None:
    ini_path: Path = _write_ini(tmp_path, content)

    with pytest.raises(ConfigValueError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


@pytest.mark.parametrize(
    "content",
    [
        "[CACHE]\nCAPACITY = many\n",
        "[TRANSLATION]\nTIMEOUT = soon\n",
        "[GENERAL]\nDEBUG = maybe\n",
    ],
)
def test_unparsable_values_raise_value_error(tmp_path: Path, content: str) -> None:
    ini_path: Path = _write_ini(tmp_path, content)

    with pytest.raises(ConfigValueError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_broken_file_raises_format_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(tmp_path, "DEBUG = True\n[GENERAL\n")

    with pytest.raises(ConfigFormatError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_type_error_is_a_format_error() -> None:
    assert issubclass(ConfigTypeError, ConfigFormatError)
    assert issubclass(ConfigValueError, ConfigFormatError)


def test_negative_ttl_is_rejected(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(tmp_path, "[CACHE]\nTTL = -5\n")

    with pytest.raises(ConfigValueError, match="CACHE.TTL"):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_quoted_boolean_is_accepted(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(tmp_path, "[GENERAL]\nDEBUG = 'yes'\n")

    loader = ConfigLoader(config_filename=str(ini_path), script_name="test")

    assert loader.config.GENERAL.DEBUG is True


@pytest.mark.parametrize("value", ["2.7", "'0.5'", "inf"])
def test_fractional_integer_setting_is_rejected(tmp_path: Path, value: str) -> None:
    ini_path: Path = _write_ini(tmp_path, f"[CACHE]\nCAPACITY = {value}\n")

    with pytest.raises(ConfigValueError, match="CACHE.CAPACITY"):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_whole_number_written_as_float_is_accepted(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(tmp_path, "[CACHE]\nCAPACITY = 64.0\n")

    loader = ConfigLoader(config_filename=str(ini_path), script_name="test")

    assert loader.config.CACHE.CAPACITY == 64
