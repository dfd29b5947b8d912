"""Default configuration values - no magic numbers in the engine.

All default values should be defined here, not hardcoded in the code.
"""

from __future__ import annotations


# ================================================================
# Search Defaults
# ================================================================

DEFAULT_MAX_RESULTS = 20
"""Maximum number of ranked results returned for a non-empty query."""

DEFAULT_MAX_EMPTY_QUERY_RESULTS = 12
"""Maximum number of always-visible items shown for an empty query."""

DEFAULT_THRESHOLD = 0.3
"""Similarity threshold: field scores above this are rejected (0 = exact)."""

DEFAULT_AUTOCOMPLETE_THRESHOLD = 0.4
"""Looser threshold used when building autocomplete suggestions."""

DEFAULT_PROXIMITY_DISTANCE = 100
"""How far from the start of a field a match may drift before it scores 1.0."""

WEIGHT_TITLE = 3.0
"""Relative weight of the title field."""

WEIGHT_SUBTITLE = 2.0
"""Relative weight of the subtitle field."""

WEIGHT_KEYWORDS = 2.0
"""Relative weight of each keyword."""

MIN_FIELD_SCORE = 0.001
"""Floor applied to perfect field scores so weighting stays meaningful."""


# ================================================================
# Suggestion Defaults
# ================================================================

MIN_SUGGESTION_QUERY_LENGTH = 2
"""Queries shorter than this get trending terms instead of corrections."""

DEFAULT_MAX_TRENDING = 6
"""Maximum trending terms shown with an empty query."""

DEFAULT_MAX_RELATED = 5
"""Maximum related topics shown for a query."""

DEFAULT_CORRECTION_MAX_DISTANCE = 2
"""Maximum edit distance for a typo-correction candidate."""

DEFAULT_MAX_AUTOCOMPLETE = 5
"""Maximum autocomplete entries in the smart suggestion list."""

DEFAULT_MAX_RECENT_MATCHES = 3
"""Maximum recent terms echoed in the smart suggestion list."""


# ================================================================
# Recent Search Defaults
# ================================================================

DEFAULT_MAX_RECENT = 5
"""Maximum number of recent searches kept."""

RECENT_SEARCHES_KEY = "darwin-mfc-recent-searches"
"""Key used for the recent-search list in the key-value store."""


# ================================================================
# Locale / Path Defaults
# ================================================================

DEFAULT_LOCALE = "en"
"""Default locale for static labels."""

DEFAULT_STORE_DIR = "~/.darwin-palette"
"""Directory holding the persisted key-value store."""

DEFAULT_STORE_FILENAME = "storage.json"
"""File name of the persisted key-value store."""


# ================================================================
# Logging Defaults
# ================================================================

DEFAULT_LOG_MAX_BYTES = 5 * 1024 * 1024
"""Rotate the log file after this many bytes."""

DEFAULT_LOG_BACKUP_COUNT = 3
"""Number of rotated log files to keep."""


# ================================================================
# Application Constants
# ================================================================

APP_NAME = "darwin-palette"
"""Application name."""

PLATFORM_DARWIN = "darwin"
"""macOS platform identifier (from sys.platform)."""
