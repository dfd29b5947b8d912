"""Corpus models, catalog sources and the corpus builder."""

from darwin_palette.corpus.builder import CorpusCache, build
from darwin_palette.corpus.catalogs import (
    CatalogLoadError,
    StaticCatalog,
    default_static_entries,
    load_catalog_file,
)
from darwin_palette.corpus.models import (
    ActionContext,
    ActionEntry,
    ActionTarget,
    AppState,
    DiseaseRecord,
    MedicationRecord,
    NavigateTarget,
    PageEntry,
    ScreeningRecord,
    SearchableItem,
    StaticEntries,
)

__all__ = [
    "ActionContext",
    "ActionEntry",
    "ActionTarget",
    "AppState",
    "CatalogLoadError",
    "CorpusCache",
    "DiseaseRecord",
    "MedicationRecord",
    "NavigateTarget",
    "PageEntry",
    "ScreeningRecord",
    "SearchableItem",
    "StaticCatalog",
    "StaticEntries",
    "build",
    "default_static_entries",
    "load_catalog_file",
]
