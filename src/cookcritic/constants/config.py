"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "cookcritic.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"rule_paths", "tags", "include_bundled"})

DEFAULT_INCLUDE_BUNDLED: bool = True
