# darwin_palette/corpus/labels.py
"""Localized labels for static entries and result groups.

Lookup falls back to English, then to the key itself, so a missing
translation never breaks a corpus build.
"""

from __future__ import annotations

from darwin_palette.config.defaults import DEFAULT_LOCALE
from darwin_palette.config.enums import ItemCategory

LABELS: dict[str, dict[str, str]] = {
    "en": {
        "commandPalette.placeholder": "Search diseases, medications, protocols...",
        "commandPalette.noResults": "No results found.",
        "commandPalette.recentSearches": "Recent",
        "commandPalette.trending": "Trending",
        "commandPalette.related": "Related",
        "commandPalette.didYouMean": "Did you mean",
        "commandPalette.quickActions": "Quick Actions",
        "commandPalette.navigation": "Navigation",
        "commandPalette.diseases": "Diseases",
        "commandPalette.medications": "Medications",
        "commandPalette.screenings": "Screenings",
        "commandPalette.toggleTheme": "Toggle theme",
        "commandPalette.toggleContentMode": "Toggle content mode",
        "commandPalette.switchToLight": "Switch to light mode",
        "commandPalette.switchToDark": "Switch to dark mode",
        "commandPalette.switchToCritical": "Switch to Critical Analysis",
        "commandPalette.switchToDescriptive": "Switch to Descriptive",
        "commandPalette.goToHome": "Go to Home",
        "commandPalette.goToDiseases": "Go to Diseases",
        "commandPalette.goToMedications": "Go to Medications",
        "commandPalette.goToProtocols": "Go to Protocols",
        "commandPalette.goToCalculators": "Go to Calculators",
        "commandPalette.goToLearn": "Go to Learning Platform",
        "commandPalette.goToCommunity": "Go to Community",
        "commandPalette.quickConsultation": "Quick Consultation",
        "commandPalette.soapRecord": "SOAP Record",
        "commandPalette.drugInteractions": "Drug Interactions",
        "commandPalette.timeline": "Timeline 2025",
        "commandPalette.analytics": "Analytics",
    },
    "pt": {
        "commandPalette.placeholder": "Buscar doenças, medicamentos, protocolos...",
        "commandPalette.noResults": "Nenhum resultado encontrado.",
        "commandPalette.recentSearches": "Recentes",
        "commandPalette.trending": "Em alta",
        "commandPalette.related": "Relacionados",
        "commandPalette.didYouMean": "Você quis dizer",
        "commandPalette.quickActions": "Ações rápidas",
        "commandPalette.navigation": "Navegação",
        "commandPalette.diseases": "Doenças",
        "commandPalette.medications": "Medicamentos",
        "commandPalette.screenings": "Rastreamentos",
        "commandPalette.toggleTheme": "Alternar tema",
        "commandPalette.toggleContentMode": "Alternar modo de conteúdo",
        "commandPalette.switchToLight": "Mudar para modo claro",
        "commandPalette.switchToDark": "Mudar para modo escuro",
        "commandPalette.switchToCritical": "Mudar para Análise Crítica",
        "commandPalette.switchToDescriptive": "Mudar para Descritivo",
        "commandPalette.goToHome": "Ir para Início",
        "commandPalette.goToDiseases": "Ir para Doenças",
        "commandPalette.goToMedications": "Ir para Medicamentos",
        "commandPalette.goToProtocols": "Ir para Protocolos",
        "commandPalette.goToCalculators": "Ir para Calculadoras",
        "commandPalette.goToLearn": "Ir para Plataforma de Aprendizagem",
        "commandPalette.goToCommunity": "Ir para Comunidade",
        "commandPalette.quickConsultation": "Consulta Rápida",
        "commandPalette.soapRecord": "Prontuário SOAP",
        "commandPalette.drugInteractions": "Interações Medicamentosas",
        "commandPalette.timeline": "Cronograma 2025",
        "commandPalette.analytics": "Análise",
    },
}

# Group heading label keys, one per category
CATEGORY_LABEL_KEYS: dict[ItemCategory, str] = {
    ItemCategory.ACTION: "commandPalette.quickActions",
    ItemCategory.PAGE: "commandPalette.navigation",
    ItemCategory.DISEASE: "commandPalette.diseases",
    ItemCategory.MEDICATION: "commandPalette.medications",
    ItemCategory.SCREENING: "commandPalette.screenings",
}


def translate(key: str, locale: str = DEFAULT_LOCALE) -> str:
    """Resolve ``key`` for ``locale`` with English and key fallbacks."""
    table = LABELS.get(locale)
    if table and key in table:
        return table[key]
    return LABELS[DEFAULT_LOCALE].get(key, key)


def category_label(category: ItemCategory, locale: str = DEFAULT_LOCALE) -> str:
    """Heading shown above a result group."""
    key = CATEGORY_LABEL_KEYS.get(category)
    return translate(key, locale) if key else category.value


def supported_locales() -> list[str]:
    return sorted(LABELS)
