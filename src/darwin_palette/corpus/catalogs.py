# darwin_palette/corpus/catalogs.py
"""Catalog sources, record mapping and the built-in static entries."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Sequence

from pydantic import BaseModel, ValidationError

from darwin_palette.config.enums import ContentMode, ItemCategory, Theme
from darwin_palette.corpus.labels import translate
from darwin_palette.corpus.models import (
    ActionContext,
    ActionEntry,
    AppState,
    DiseaseRecord,
    MedicationRecord,
    NavigateTarget,
    PageEntry,
    ScreeningRecord,
    SearchableItem,
    StaticEntries,
)

logger = logging.getLogger(__name__)


class CatalogLoadError(Exception):
    """Raised when a catalog file cannot be read or parsed."""


# ──────────────────────────────────────────────────────────────────────────────
# Catalog sources
# ──────────────────────────────────────────────────────────────────────────────
class StaticCatalog:
    """In-memory catalog of one kind.

    ``revision`` increases on every ``replace`` so corpus caches notice the
    change without comparing record contents.
    """

    def __init__(self, kind: ItemCategory, records: Iterable[Any] = ()) -> None:
        self.kind = kind
        self._records: tuple[Any, ...] = tuple(records)
        self.revision = 0

    def list_items(self) -> Sequence[Any]:
        return self._records

    def replace(self, records: Iterable[Any]) -> None:
        """Swap the catalog content."""
        self._records = tuple(records)
        self.revision += 1
        logger.debug(
            f"Catalog {self.kind.value} replaced ({len(self._records)} records, "
            f"revision {self.revision})"
        )

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"StaticCatalog(kind={self.kind.value!r}, records={len(self._records)})"


# ──────────────────────────────────────────────────────────────────────────────
# Record mapping
# ──────────────────────────────────────────────────────────────────────────────
def _coerce(model: type[BaseModel], record: Any) -> Any:
    if isinstance(record, model):
        return record
    if isinstance(record, BaseModel):
        record = record.model_dump()
    return model.model_validate(record)


def map_disease(record: Any) -> SearchableItem:
    """Disease → item titled by name, subtitled by its codes."""
    d = _coerce(DiseaseRecord, record)
    codes = [", ".join(group) for group in (d.ciap2, d.icd10) if group]
    return SearchableItem(
        id=f"disease-{d.id}",
        category=ItemCategory.DISEASE,
        title=d.title,
        subtitle=" | ".join(codes),
        keywords=(*d.ciap2, *d.icd10, d.title.lower()),
        target=NavigateTarget(path=f"/doencas/{d.id}"),
    )


def map_medication(record: Any) -> SearchableItem:
    """Medication → item titled by generic name, subtitled by brands."""
    m = _coerce(MedicationRecord, record)
    return SearchableItem(
        id=f"medication-{m.id}",
        category=ItemCategory.MEDICATION,
        title=m.generic_name,
        subtitle=", ".join(m.brand_names[:3]),
        keywords=(m.generic_name.lower(), *(n.lower() for n in m.brand_names)),
        target=NavigateTarget(path=f"/medicamentos/{m.id}"),
    )


def map_screening(record: Any) -> SearchableItem:
    """Screening → item addressed by an anchor on its category page."""
    r = _coerce(ScreeningRecord, record)
    return SearchableItem(
        id=f"screening-{r.id}",
        category=ItemCategory.SCREENING,
        title=r.title,
        subtitle=r.category,
        keywords=(r.title.lower(), r.category),
        target=NavigateTarget(path=f"/{r.category}#{r.id}"),
    )


def map_generic(kind: ItemCategory) -> Callable[[Any], SearchableItem]:
    """Mapper for catalogs whose records are already item-shaped."""

    def _map(record: Any) -> SearchableItem:
        if isinstance(record, SearchableItem):
            return record
        data = dict(record)
        data.setdefault("category", kind)
        return SearchableItem.model_validate(data)

    return _map


RECORD_MAPPERS: dict[ItemCategory, Callable[[Any], SearchableItem]] = {
    ItemCategory.DISEASE: map_disease,
    ItemCategory.MEDICATION: map_medication,
    ItemCategory.SCREENING: map_screening,
}


def mapper_for(kind: ItemCategory) -> Callable[[Any], SearchableItem]:
    return RECORD_MAPPERS.get(kind) or map_generic(kind)


def map_records(kind: ItemCategory, records: Iterable[Any]) -> list[SearchableItem]:
    """Map records, skipping (and logging) the ones that fail validation."""
    mapper = mapper_for(kind)
    items: list[SearchableItem] = []
    for index, record in enumerate(records):
        try:
            if isinstance(record, SearchableItem):
                items.append(record)
            else:
                items.append(mapper(record))
        except (ValidationError, TypeError, ValueError) as exc:
            logger.warning(
                f"Skipping {kind.value} record #{index}: {exc.__class__.__name__}: {exc}"
            )
    return items


# ──────────────────────────────────────────────────────────────────────────────
# Built-in actions and pages
# ──────────────────────────────────────────────────────────────────────────────
def toggle_theme(context: ActionContext) -> None:
    state = context.app_state
    state.theme = Theme.LIGHT if state.theme == Theme.DARK else Theme.DARK
    logger.debug(f"Theme toggled to {state.theme.value}")


def toggle_content_mode(context: ActionContext) -> None:
    state = context.app_state
    state.content_mode = (
        ContentMode.CRITICAL
        if state.content_mode == ContentMode.DESCRIPTIVE
        else ContentMode.DESCRIPTIVE
    )
    logger.debug(f"Content mode toggled to {state.content_mode.value}")


def _theme_subtitle(state: AppState) -> str:
    if state.theme == Theme.DARK:
        return "commandPalette.switchToLight"
    return "commandPalette.switchToDark"


def _content_subtitle(state: AppState) -> str:
    if state.content_mode == ContentMode.DESCRIPTIVE:
        return "commandPalette.switchToCritical"
    return "commandPalette.switchToDescriptive"


DEFAULT_ACTIONS: tuple[ActionEntry, ...] = (
    ActionEntry(
        id="action-toggle-theme",
        title_key="commandPalette.toggleTheme",
        perform=toggle_theme,
        subtitle=_theme_subtitle,
        keywords=("theme", "dark", "light", "mode", "tema", "escuro", "claro"),
    ),
    ActionEntry(
        id="action-toggle-content",
        title_key="commandPalette.toggleContentMode",
        perform=toggle_content_mode,
        subtitle=_content_subtitle,
        keywords=(
            "content",
            "mode",
            "descriptive",
            "critical",
            "analysis",
            "modo",
            "descritivo",
            "critico",
        ),
    ),
)

DEFAULT_PAGES: tuple[PageEntry, ...] = (
    PageEntry("page-home", "commandPalette.goToHome", "/", ("home", "inicio")),
    PageEntry(
        "page-diseases",
        "commandPalette.goToDiseases",
        "/doencas",
        ("diseases", "doencas", "aps"),
    ),
    PageEntry(
        "page-medications",
        "commandPalette.goToMedications",
        "/medicamentos",
        ("medications", "medicamentos", "rename", "drugs"),
    ),
    PageEntry(
        "page-protocols",
        "commandPalette.goToProtocols",
        "/protocolos",
        ("protocols", "protocolos", "fluxograma"),
    ),
    PageEntry(
        "page-calculators",
        "commandPalette.goToCalculators",
        "/calculadoras",
        ("calculators", "calculadoras", "score"),
    ),
    PageEntry(
        "page-learn",
        "commandPalette.goToLearn",
        "/learn",
        ("learn", "aprender", "study", "estudo"),
    ),
    PageEntry(
        "page-community",
        "commandPalette.goToCommunity",
        "/community",
        ("community", "comunidade", "mentoria"),
    ),
    PageEntry(
        "page-quick",
        "commandPalette.quickConsultation",
        "/consulta-rapida",
        ("quick", "rapida", "consulta"),
    ),
    PageEntry(
        "page-soap",
        "commandPalette.soapRecord",
        "/prontuario",
        ("soap", "prontuario", "record"),
    ),
    PageEntry(
        "page-interactions",
        "commandPalette.drugInteractions",
        "/medicamentos/interacoes",
        ("interactions", "interacoes", "drugs"),
    ),
    PageEntry(
        "page-timeline",
        "commandPalette.timeline",
        "/timeline",
        ("timeline", "cronograma"),
    ),
    PageEntry(
        "page-analytics",
        "commandPalette.analytics",
        "/analise",
        ("analytics", "analise", "statistics"),
    ),
)


def default_static_entries() -> StaticEntries:
    """The actions and pages every corpus starts with."""
    return StaticEntries(actions=DEFAULT_ACTIONS, pages=DEFAULT_PAGES)


def resolve_subtitle(entry: ActionEntry, state: AppState, locale: str) -> str | None:
    if entry.subtitle is None:
        return None
    return translate(entry.subtitle(state), locale)


# ──────────────────────────────────────────────────────────────────────────────
# Catalog files
# ──────────────────────────────────────────────────────────────────────────────
CATALOG_FILE_KEYS: dict[str, ItemCategory] = {
    "diseases": ItemCategory.DISEASE,
    "doencas": ItemCategory.DISEASE,
    "medications": ItemCategory.MEDICATION,
    "medicamentos": ItemCategory.MEDICATION,
    "screenings": ItemCategory.SCREENING,
    "rastreamentos": ItemCategory.SCREENING,
}


def load_catalog_file(path: str | Path) -> list[StaticCatalog]:
    """Load catalogs from a JSON file.

    The file holds an object whose keys name a catalog kind (English or
    Portuguese) and whose values are record lists::

        {"diseases": [{"id": "has", "title": "Hypertension", ...}], ...}

    Unknown keys are ignored with a warning; individual bad records are
    skipped later by the corpus builder.

    Raises:
        CatalogLoadError: the file is missing, unreadable or not a JSON object.
    """
    catalog_path = Path(path).expanduser()
    try:
        with open(catalog_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogLoadError(f"Cannot load catalog file {catalog_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise CatalogLoadError(
            f"Catalog file {catalog_path} must contain a JSON object, "
            f"got {type(data).__name__}"
        )

    catalogs: list[StaticCatalog] = []
    for key, records in data.items():
        kind = CATALOG_FILE_KEYS.get(key.lower())
        if kind is None:
            logger.warning(f"Ignoring unknown catalog '{key}' in {catalog_path}")
            continue
        if not isinstance(records, list):
            logger.warning(f"Catalog '{key}' in {catalog_path} is not a list")
            continue
        catalogs.append(StaticCatalog(kind, records))

    logger.debug(f"Loaded {len(catalogs)} catalogs from {catalog_path}")
    return catalogs
