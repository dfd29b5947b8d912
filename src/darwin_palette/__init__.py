# darwin_palette/__init__.py
"""Darwin palette - an in-memory fuzzy command palette engine.

Locates navigation targets, UI actions and catalog records through a
single fuzzy search input and dispatches the chosen entry.
"""

from __future__ import annotations

from dotenv import load_dotenv

# Pick up DARWIN_PALETTE_* settings from a local .env before config is read
load_dotenv()

__version__ = "0.1.0"

__all__ = ["__version__"]
