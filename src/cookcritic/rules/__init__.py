"""Rule declaration, discovery and loading."""

from __future__ import annotations

from .discovery import bundled_rules_dir, resolve_rule_paths
from .kinds import ArtifactKind
from .loader import load_registry, load_rule_file, load_rules
from .matchers import CookbookMatcher, Matcher, ProviderMatcher, RecipeMatcher, ResourceMatcher
from .model import Rule
from .registry import RuleBuilder, RuleRegistry
from .results import NO_MATCH, Match, MatchResult, NoMatch, as_match_result
from .selection import select_rules
from .validation import validate_rule_sources

__all__ = [
    "NO_MATCH",
    "ArtifactKind",
    "CookbookMatcher",
    "Match",
    "MatchResult",
    "Matcher",
    "NoMatch",
    "ProviderMatcher",
    "RecipeMatcher",
    "ResourceMatcher",
    "Rule",
    "RuleBuilder",
    "RuleRegistry",
    "as_match_result",
    "bundled_rules_dir",
    "load_registry",
    "load_rule_file",
    "load_rules",
    "resolve_rule_paths",
    "select_rules",
    "validate_rule_sources",
]
