"""Schema constants for rule files."""

from __future__ import annotations

RULE_FILE_EXTENSIONS: frozenset[str] = frozenset({".yaml", ".yml"})

RULE_FILE_VERSION: int = 1

ALLOWED_FILE_KEYS: frozenset[str] = frozenset({"version", "rules"})
REQUIRED_FILE_KEYS: frozenset[str] = frozenset({"rules"})

REQUIRED_RULE_KEYS: frozenset[str] = frozenset({"code", "name"})
OPTIONAL_RULE_KEYS: frozenset[str] = frozenset({"tags"})

STRATEGY_KEY: str = "strategy"

# Terms prefixed with this marker in a tag expression are negated.
TAG_NEGATION_PREFIX: str = "~"
TAG_EXPRESSION_SEPARATOR: str = ","
