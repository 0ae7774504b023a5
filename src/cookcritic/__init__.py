"""Cookcritic rule registry and loader."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from cookcritic.rules import (
    NO_MATCH,
    ArtifactKind,
    Match,
    NoMatch,
    Rule,
    RuleBuilder,
    RuleRegistry,
    load_rules,
    resolve_rule_paths,
    select_rules,
)

__all__ = [
    "NO_MATCH",
    "ArtifactKind",
    "Match",
    "NoMatch",
    "Rule",
    "RuleBuilder",
    "RuleRegistry",
    "__version__",
    "load_rules",
    "resolve_rule_paths",
    "select_rules",
]

try:
    __version__ = version("cookcritic")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
