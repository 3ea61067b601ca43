from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from core.settings import ConfigSettingsProvider, SettingsProvider
from models.config_models import Config

if TYPE_CHECKING:
    from models.language_models import LanguageDescriptor


@pytest.fixture
def config() -> Config:
    config = Config()
    config.TRANSLATION.DEFAULT_SOURCE_LANGUAGE = "??"
    config.TRANSLATION.DEFAULT_TARGET_LANGUAGE = "en"
    return config


@pytest.fixture
def provider(config: Config) -> ConfigSettingsProvider:
    return ConfigSettingsProvider(config)


def test_provider_satisfies_protocol(provider: ConfigSettingsProvider) -> None:
    assert isinstance(provider, SettingsProvider)


def test_defaults_resolve_to_descriptors(provider: ConfigSettingsProvider) -> None:
    source: LanguageDescriptor = provider.get_default_source_language()
    target: LanguageDescriptor = provider.get_default_target_language()

    assert source.code == "auto"
    assert source.is_auto_detect is True
    assert target.code == "en"


def test_descriptor_code_is_accepted_as_setting(config: Config, provider: ConfigSettingsProvider) -> None:
    config.TRANSLATION.DEFAULT_TARGET_LANGUAGE = "auto"

    assert provider.get_default_target_language().is_auto_detect is True


def test_unknown_setting_falls_back_to_auto_detect(
    config: Config, provider: ConfigSettingsProvider, caplog: pytest.LogCaptureFixture
) -> None:
    config.TRANSLATION.DEFAULT_SOURCE_LANGUAGE = "zz"

    with caplog.at_level("WARNING"):
        descriptor: LanguageDescriptor = provider.get_default_source_language()

    assert descriptor.is_auto_detect is True
    assert "zz" in caplog.text


def test_update_defaults_changes_values_and_notifies(provider: ConfigSettingsProvider) -> None:
    notified: list[str] = []
    provider.add_invalidation_listener(lambda: notified.append("changed"))

    provider.update_defaults(source="ja", target="fr")

    assert provider.get_default_source_language().code == "ja"
    assert provider.get_default_target_language().code == "fr"
    assert notified == ["changed"]


def test_update_defaults_without_change_does_not_notify(provider: ConfigSettingsProvider) -> None:
    notified: list[str] = []
    provider.add_invalidation_listener(lambda: notified.append("changed"))

    provider.update_defaults(target="en")

    assert notified == []


def test_update_defaults_rejects_unknown_code(provider: ConfigSettingsProvider) -> None:
    with pytest.raises(ValueError, match="Unknown language code"):
        provider.update_defaults(source="zz")

    assert provider.get_default_source_language().is_auto_detect is True


def test_removed_listener_is_not_called(provider: ConfigSettingsProvider) -> None:
    notified: list[str] = []
    remove = provider.add_invalidation_listener(lambda: notified.append("changed"))

    remove()
    provider.update_defaults(source="de")

    assert notified == []
