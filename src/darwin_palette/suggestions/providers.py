# darwin_palette/suggestions/providers.py
"""Built-in suggestion providers and the provider call wrapper.

The dictionaries below are the default, static knowledge used for
"did you mean?", related topics and trending terms. Integrators can swap
in any object satisfying the protocols in ``darwin_palette.protocols``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar

from darwin_palette.config.defaults import DEFAULT_CORRECTION_MAX_DISTANCE
from darwin_palette.search.fuzzy import fold, levenshtein_distance

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ============================================================================
# Static knowledge
# ============================================================================

# Common medical term corrections (typo -> correct)
MEDICAL_CORRECTIONS: dict[str, str] = {
    # Portuguese typos
    "diabete": "diabetes",
    "diabets": "diabetes",
    "diabeters": "diabetes",
    "hipertensao": "hipertensao",
    "hipertencao": "hipertensao",
    "hipertenso": "hipertensao",
    "depresao": "depressao",
    "anciedade": "ansiedade",
    "ansciedade": "ansiedade",
    "infecao": "infeccao",
    "antibiotico": "antibioticos",
    "medicamenro": "medicamento",
    "medicamneto": "medicamento",
    "prontuario": "prontuario",
    "protcolo": "protocolo",
    "protoclo": "protocolo",
    # English typos
    "hypertention": "hypertension",
    "diabetis": "diabetes",
    "anxeity": "anxiety",
    "depresion": "depression",
    "medicaiton": "medication",
    "antibiotic": "antibiotics",
    "protocal": "protocol",
    # Common abbreviations expansion
    "has": "hipertensao arterial sistemica",
    "dm": "diabetes mellitus",
    "dm2": "diabetes mellitus tipo 2",
    "itu": "infeccao trato urinario",
    "dpoc": "doenca pulmonar obstrutiva cronica",
    "icc": "insuficiencia cardiaca congestiva",
    "iam": "infarto agudo miocardio",
    "avc": "acidente vascular cerebral",
    "tb": "tuberculose",
    "hiv": "hiv aids",
    "ist": "infeccoes sexualmente transmissiveis",
}

# Related topics mapping
RELATED_TOPICS: dict[str, list[str]] = {
    "diabetes": ["hipertensao", "obesidade", "nefropatia", "retinopatia", "metformina", "insulina"],
    "hipertensao": ["diabetes", "avc", "insuficiencia cardiaca", "losartana", "hidroclorotiazida"],
    "depressao": ["ansiedade", "insonia", "sertralina", "fluoxetina", "escitalopram"],
    "ansiedade": ["depressao", "panico", "insonia", "benzodiazepinicos"],
    "infeccao": ["antibioticos", "amoxicilina", "azitromicina", "ciprofloxacino"],
    "dor": ["analgesicos", "paracetamol", "dipirona", "ibuprofeno", "anti-inflamatorios"],
    "gravidez": ["prenatal", "acido folico", "rastreamento", "gestacao"],
    "cancer": ["rastreamento", "mamografia", "colonoscopia", "psa"],
    "crianca": ["puericultura", "vacinas", "desenvolvimento", "crescimento"],
    "idoso": ["polifarmacia", "quedas", "demencia", "alzheimer"],
}

# Trending searches (static until an analytics source is wired in)
TRENDING_SEARCHES: list[str] = [
    "hipertensao",
    "diabetes",
    "ansiedade",
    "depressao",
    "amoxicilina",
    "paracetamol",
    "gestacao",
    "rastreamento cancer",
]


# ============================================================================
# Provider result wrapper
# ============================================================================


@dataclass(frozen=True)
class ProviderResult(Generic[T]):
    """Outcome of one provider call: a value, or "unavailable"."""

    value: T | None = None
    available: bool = False
    error: str | None = None

    @classmethod
    def success(cls, value: T) -> "ProviderResult[T]":
        return cls(value=value, available=True)

    @classmethod
    def unavailable(cls, error: str | None = None) -> "ProviderResult[T]":
        return cls(value=None, available=False, error=error)

    def value_or(self, default: T) -> T:
        return self.value if self.available and self.value is not None else default


def call_provider(name: str, fn: Callable[..., T | None], *args: Any) -> ProviderResult[T]:
    """Call a provider, turning exceptions and None into ``unavailable``."""
    try:
        value = fn(*args)
    except Exception as exc:
        logger.warning(f"Suggestion provider '{name}' failed: {exc}")
        return ProviderResult.unavailable(str(exc))
    if value is None:
        return ProviderResult.unavailable()
    return ProviderResult.success(value)


# ============================================================================
# Default providers
# ============================================================================


class StaticCorrectionProvider:
    """Dictionary lookup, then nearest dictionary key within an edit budget."""

    def __init__(
        self,
        corrections: Mapping[str, str] | None = None,
        max_distance: int = DEFAULT_CORRECTION_MAX_DISTANCE,
    ) -> None:
        self.corrections = dict(
            MEDICAL_CORRECTIONS if corrections is None else corrections
        )
        self.max_distance = max_distance

    def get_correction(self, query: str) -> str | None:
        normalized = fold(query.strip())
        if not normalized:
            return None
        if normalized in self.corrections:
            return self.corrections[normalized]

        best_match: str | None = None
        best_distance = self.max_distance + 1
        for key, correction in self.corrections.items():
            distance = levenshtein_distance(normalized, key)
            if distance < best_distance:
                best_distance = distance
                best_match = correction
        return best_match


class StaticRelatedTopicsProvider:
    """Related topics for exact keys, or for keys overlapping the query."""

    def __init__(self, topics: Mapping[str, Sequence[str]] | None = None) -> None:
        source = RELATED_TOPICS if topics is None else topics
        self.topics = {key: list(terms) for key, terms in source.items()}

    def get_related(self, query: str) -> list[str]:
        normalized = fold(query.strip())
        if not normalized:
            return []
        if normalized in self.topics:
            return list(self.topics[normalized])

        related: list[str] = []
        for key, terms in self.topics.items():
            if key in normalized or normalized in key:
                for term in terms:
                    if term not in related:
                        related.append(term)
        return related


class StaticTrendingProvider:
    """Fixed trending list."""

    def __init__(self, terms: Sequence[str] | None = None) -> None:
        self.terms = list(TRENDING_SEARCHES if terms is None else terms)

    def get_trending(self) -> list[str]:
        return list(self.terms)
