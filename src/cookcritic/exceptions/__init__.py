"""Shared exception hierarchy for Cookcritic."""

from __future__ import annotations

from .base import CookcriticError
from .config import ConfigError
from .rules import (
    InvalidMatcherKindError,
    NoCurrentRuleError,
    RuleDefinitionError,
    RuleLoadError,
    RulePathError,
    RuleSchemaError,
    StrategyBuildError,
)

__all__ = [
    "ConfigError",
    "CookcriticError",
    "InvalidMatcherKindError",
    "NoCurrentRuleError",
    "RuleDefinitionError",
    "RuleLoadError",
    "RulePathError",
    "RuleSchemaError",
    "StrategyBuildError",
]
