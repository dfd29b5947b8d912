# tests/corpus/test_labels.py
"""Tests for the localized label table."""

from darwin_palette.config.enums import ItemCategory
from darwin_palette.corpus.labels import (
    LABELS,
    category_label,
    supported_locales,
    translate,
)


def test_translate_english():
    assert translate("commandPalette.goToHome") == "Go to Home"


def test_translate_portuguese():
    assert translate("commandPalette.goToHome", "pt") == "Ir para Início"


def test_unknown_locale_falls_back_to_english():
    assert translate("commandPalette.goToHome", "de") == "Go to Home"


def test_unknown_key_returns_key():
    assert translate("commandPalette.nope", "pt") == "commandPalette.nope"


def test_locales_share_keys():
    """Every English label has a Portuguese translation."""
    assert set(LABELS["en"]) == set(LABELS["pt"])


def test_category_labels():
    assert category_label(ItemCategory.ACTION) == "Quick Actions"
    assert category_label(ItemCategory.DISEASE, "pt") == "Doenças"


def test_supported_locales():
    assert supported_locales() == ["en", "pt"]
