"""Common test fixtures and utilities for Darwin palette tests."""

import pytest

from darwin_palette.config.enums import ItemCategory
from darwin_palette.config.env_vars import EnvVar
from darwin_palette.corpus.catalogs import StaticCatalog
from darwin_palette.corpus.models import (
    ActionTarget,
    NavigateTarget,
    SearchableItem,
)


@pytest.fixture(autouse=True)
def clean_palette_env(monkeypatch):
    """Keep DARWIN_PALETTE_* settings from leaking into tests."""
    for var in EnvVar:
        monkeypatch.delenv(var.value, raising=False)
    yield


@pytest.fixture
def make_item():
    """
    Factory for searchable items.

    Items navigate to ``/<id>`` unless ``perform`` is given, in which case
    they become action items.
    """

    def _make(item_id, title, category=ItemCategory.PAGE, perform=None, **kwargs):
        if perform is not None:
            target = ActionTarget(perform=perform)
        else:
            target = NavigateTarget(path=kwargs.pop("path", f"/{item_id}"))
        return SearchableItem(
            id=item_id, category=category, title=title, target=target, **kwargs
        )

    return _make


@pytest.fixture
def disease_records():
    return [
        {"id": "hypertension", "title": "Hypertension", "ciap2": ["K86"], "icd10": ["I10"]},
        {"id": "hyperthyroidism", "title": "Hyperthyroidism", "ciap2": ["T85"], "icd10": ["E05"]},
        {"id": "asma", "titulo": "Asma", "ciap2": ["R96"], "cid10": ["J45"]},
    ]


@pytest.fixture
def medication_records():
    return [
        {
            "id": "losartana",
            "nomeGenerico": "Losartana",
            "nomesComerciais": ["Cozaar", "Aradois", "Corus", "Lorsar"],
        },
        {"id": "metformina", "nomeGenerico": "Metformina", "nomesComerciais": None},
    ]


@pytest.fixture
def catalogs(disease_records, medication_records):
    return [
        StaticCatalog(ItemCategory.DISEASE, disease_records),
        StaticCatalog(ItemCategory.MEDICATION, medication_records),
    ]
