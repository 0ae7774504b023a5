"""Rule listing output constants."""

from __future__ import annotations

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})
DEFAULT_OUTPUT_FORMAT: str = "text"

LISTING_SCHEMA_VERSION: str = "1"
LISTING_SCHEMA_FILENAME: str = "rules.schema.json"
