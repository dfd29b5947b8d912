# darwin_palette/config/models.py
"""Pydantic configuration models for the palette engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from darwin_palette.config.defaults import (
    DEFAULT_CORRECTION_MAX_DISTANCE,
    DEFAULT_LOCALE,
    DEFAULT_MAX_EMPTY_QUERY_RESULTS,
    DEFAULT_MAX_RECENT,
    DEFAULT_MAX_RELATED,
    DEFAULT_MAX_RESULTS,
    DEFAULT_MAX_TRENDING,
    DEFAULT_STORE_DIR,
    DEFAULT_STORE_FILENAME,
    DEFAULT_THRESHOLD,
)
from darwin_palette.config.enums import EnterPolicy
from darwin_palette.config.env_vars import EnvVar, get_env, get_env_float, get_env_int

logger = logging.getLogger(__name__)


class PaletteConfig(BaseModel):
    """Tunable limits and policies for one palette session.

    Immutable after creation.
    """

    threshold: float = Field(
        default=DEFAULT_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Field score above which a match is rejected",
    )
    max_results: int = Field(
        default=DEFAULT_MAX_RESULTS, gt=0, description="Ranked result cap"
    )
    max_empty_results: int = Field(
        default=DEFAULT_MAX_EMPTY_QUERY_RESULTS,
        gt=0,
        description="Always-visible item cap for an empty query",
    )
    max_recent: int = Field(
        default=DEFAULT_MAX_RECENT, gt=0, description="Recent search cap"
    )
    max_trending: int = Field(
        default=DEFAULT_MAX_TRENDING, ge=0, description="Trending term cap"
    )
    max_related: int = Field(
        default=DEFAULT_MAX_RELATED, ge=0, description="Related topic cap"
    )
    correction_max_distance: int = Field(
        default=DEFAULT_CORRECTION_MAX_DISTANCE,
        ge=0,
        description="Maximum edit distance for a typo correction",
    )
    locale: str = Field(default=DEFAULT_LOCALE, description="Label locale")
    enter_policy: EnterPolicy = Field(
        default=EnterPolicy.NOOP,
        description="What Enter does when nothing is highlighted",
    )
    store_path: Path = Field(
        default_factory=lambda: Path(DEFAULT_STORE_DIR).expanduser()
        / DEFAULT_STORE_FILENAME,
        description="JSON file backing the key-value store",
    )

    model_config = {"frozen": True}

    @field_validator("locale")
    @classmethod
    def normalize_locale(cls, v: str) -> str:
        """Lower-case locale tags, keeping only the language part."""
        return v.strip().lower().replace("_", "-").split("-")[0] or DEFAULT_LOCALE

    @classmethod
    def from_env(cls, **overrides: Any) -> "PaletteConfig":
        """Build a config from DARWIN_PALETTE_* variables.

        Explicit ``overrides`` win over the environment. Values that fail
        validation are logged and dropped one by one, so the default wins
        for that field only. Invalid overrides raise ``ValidationError``.
        """
        values: dict[str, Any] = {}

        threshold = get_env_float(EnvVar.THRESHOLD)
        if threshold is not None:
            values["threshold"] = threshold
        max_results = get_env_int(EnvVar.MAX_RESULTS)
        if max_results is not None:
            values["max_results"] = max_results
        max_empty = get_env_int(EnvVar.MAX_EMPTY_RESULTS)
        if max_empty is not None:
            values["max_empty_results"] = max_empty
        max_recent = get_env_int(EnvVar.MAX_RECENT)
        if max_recent is not None:
            values["max_recent"] = max_recent
        locale = get_env(EnvVar.LOCALE)
        if locale:
            values["locale"] = locale
        policy = get_env(EnvVar.ENTER_POLICY)
        if policy:
            values["enter_policy"] = policy.strip().lower()
        store_path = get_env(EnvVar.STORE_PATH)
        if store_path:
            values["store_path"] = Path(store_path).expanduser()

        valid: dict[str, Any] = {}
        for name, value in values.items():
            try:
                cls(**{name: value})
            except ValidationError as exc:
                logger.warning(
                    f"Ignoring invalid environment setting for {name}: "
                    f"{exc.errors()[0]['msg']}"
                )
                continue
            valid[name] = value

        valid.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**valid)
