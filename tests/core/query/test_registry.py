from __future__ import annotations

import pytest

from core.query.registry import LANGUAGE_REGISTRY, LanguageRegistry
from models.language_models import AUTO_DETECT_CODE, AUTO_DETECT_KEY, LanguageDescriptor


def test_lookup_returns_descriptor_for_known_key() -> None:
    descriptor: LanguageDescriptor | None = LANGUAGE_REGISTRY.lookup("fr")

    assert descriptor == LanguageDescriptor(code="fr", name="French")
    assert str(descriptor) == "French"


def test_lookup_is_case_sensitive() -> None:
    assert LANGUAGE_REGISTRY.lookup("FR") is None
    assert LANGUAGE_REGISTRY.is_valid("FR") is False


def test_sentinel_maps_to_auto_detect() -> None:
    descriptor: LanguageDescriptor = LANGUAGE_REGISTRY.auto_detect

    assert LANGUAGE_REGISTRY.is_valid(AUTO_DETECT_KEY) is True
    assert descriptor.code == AUTO_DETECT_CODE
    assert descriptor.is_auto_detect is True
    assert LANGUAGE_REGISTRY.find_by_code(AUTO_DETECT_CODE) is descriptor


def test_is_valid_rejects_none_and_unknown() -> None:
    assert LANGUAGE_REGISTRY.is_valid(None) is False
    assert LANGUAGE_REGISTRY.is_valid("zz") is False


def test_all_preserves_table_order() -> None:
    registry = LanguageRegistry({"??": ("auto", "Auto"), "ja": ("ja", "Japanese"), "en": ("en", "English")})

    assert [d.code for d in registry.all()] == ["auto", "ja", "en"]
    assert registry.keys() == ("??", "ja", "en")
    assert len(registry) == 3
    assert "ja" in registry


def test_display_name_raises_for_unknown_key() -> None:
    assert LANGUAGE_REGISTRY.display_name("de") == "German"
    with pytest.raises(KeyError):
        LANGUAGE_REGISTRY.display_name("zz")


def test_duplicate_codes_are_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate language code"):
        LanguageRegistry({"en": ("en", "English"), "EN": ("en", "English again")})


def test_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        LANGUAGE_REGISTRY._entries["xx"] = LanguageDescriptor(code="xx", name="X")  # type: ignore[index]  # noqa: SLF001
