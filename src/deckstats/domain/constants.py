"""Centralized constants for deckstats.

Defaults and fixed formats live here so every layer imports from a single
source of truth.
"""

from pathlib import Path

# ---------- Anki collection ----------
FIELD_SEPARATOR = "\x1f"
MIN_CARD_FIELDS = 3

# ---------- Files ----------
DEFAULT_TEMPLATE_PATH = Path("./template.html")
DEFAULT_OUTPUT_PATH = Path("./core2300.html")

# ---------- Rendering ----------
LOOKUP_URL = "https://jisho.org/search/"
UNDEFINED_PERCENTAGE = "n/a"
