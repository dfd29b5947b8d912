# darwin_palette/corpus/models.py
"""Data models for the searchable corpus."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Any, Callable, Literal, Union

from pydantic import AliasChoices, BaseModel, Field, field_validator

from darwin_palette.config.enums import (
    ContentMode,
    ItemCategory,
    ItemPriority,
    TargetKind,
    Theme,
)


# ──────────────────────────────────────────────────────────────────────────────
# Item targets
# ──────────────────────────────────────────────────────────────────────────────
class NavigateTarget(BaseModel):
    """Committing the item navigates to ``path``."""

    kind: Literal[TargetKind.NAVIGATE] = TargetKind.NAVIGATE
    path: str = Field(min_length=1, description="Application path")

    model_config = {"frozen": True}


class ActionTarget(BaseModel):
    """Committing the item runs ``perform`` (zero arguments)."""

    kind: Literal[TargetKind.ACTION] = TargetKind.ACTION
    perform: Callable[[], Any]

    model_config = {"frozen": True}


ItemTarget = Annotated[
    Union[NavigateTarget, ActionTarget], Field(discriminator="kind")
]


# ──────────────────────────────────────────────────────────────────────────────
# Searchable item
# ──────────────────────────────────────────────────────────────────────────────
class SearchableItem(BaseModel):
    """The unit indexed, displayed and committed by the palette."""

    id: str = Field(min_length=1, description="Unique within one corpus build")
    category: ItemCategory
    title: str = Field(description="Primary display and match text")
    subtitle: str | None = Field(default=None, description="Secondary text")
    keywords: tuple[str, ...] = Field(
        default=(), description="Match-only synonyms and codes"
    )
    target: ItemTarget
    enabled: bool = True
    shortcut: str | None = Field(default=None, description="Display hint, e.g. ⌘D")
    priority: ItemPriority = ItemPriority.NORMAL

    model_config = {"frozen": True}

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        """Reject items without a display title."""
        v = v.strip()
        if not v:
            raise ValueError("title must not be empty")
        return v

    @field_validator("subtitle")
    @classmethod
    def blank_subtitle_is_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v

    @field_validator("keywords", mode="before")
    @classmethod
    def drop_blank_keywords(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return tuple(k for k in v if isinstance(k, str) and k.strip())
        return v

    @property
    def is_navigable(self) -> bool:
        """True when committing this item navigates rather than acts."""
        return isinstance(self.target, NavigateTarget)


# ──────────────────────────────────────────────────────────────────────────────
# Catalog records (external content, normalized on the way in)
# ──────────────────────────────────────────────────────────────────────────────
class DiseaseRecord(BaseModel):
    """A disease entry with primary-care (CIAP-2) and ICD-10 codes."""

    id: str = Field(min_length=1)
    title: str = Field(validation_alias=AliasChoices("title", "titulo"))
    ciap2: list[str] = Field(default_factory=list)
    icd10: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("icd10", "cid10")
    )

    model_config = {"extra": "ignore"}


class MedicationRecord(BaseModel):
    """A medication entry keyed by generic name."""

    id: str = Field(min_length=1)
    generic_name: str = Field(
        validation_alias=AliasChoices("generic_name", "nomeGenerico")
    )
    brand_names: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("brand_names", "nomesComerciais"),
    )

    model_config = {"extra": "ignore"}

    @field_validator("brand_names", mode="before")
    @classmethod
    def none_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class ScreeningRecord(BaseModel):
    """A screening recommendation, addressed by its category page."""

    id: str = Field(min_length=1)
    title: str
    category: str = Field(min_length=1)

    model_config = {"extra": "ignore"}


# ──────────────────────────────────────────────────────────────────────────────
# Application state consumed by actions
# ──────────────────────────────────────────────────────────────────────────────
class AppState(BaseModel):
    """Application-wide state that palette actions read and toggle."""

    theme: Theme = Theme.LIGHT
    content_mode: ContentMode = ContentMode.DESCRIPTIVE


@dataclass
class ActionContext:
    """Explicit context handed to action handlers."""

    app_state: AppState = field(default_factory=AppState)


# ──────────────────────────────────────────────────────────────────────────────
# Static entries
# ──────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class PageEntry:
    """A navigation page; ``title_key`` is resolved through the label table."""

    id: str
    title_key: str
    path: str
    keywords: tuple[str, ...] = ()


@dataclass(frozen=True)
class ActionEntry:
    """A non-navigational command.

    ``subtitle`` may depend on the current application state.
    """

    id: str
    title_key: str
    perform: Callable[[ActionContext], None]
    keywords: tuple[str, ...] = ()
    subtitle: Callable[[AppState], str] | None = None
    shortcut: str | None = None


@dataclass(frozen=True)
class StaticEntries:
    """Actions and pages that are part of every corpus."""

    actions: tuple[ActionEntry, ...] = ()
    pages: tuple[PageEntry, ...] = ()
