"""Per-kind matcher interfaces."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, Union

from cookcritic.rules.results import MatchResult

# Parsed syntax trees come from the host tool's parser; this layer never inspects them.
RecipeAst = Any
ResourceNode = Any
ProviderNode = Any


class RecipeMatcher(Protocol):
    """Inspects the parsed tree of one recipe."""

    def __call__(self, recipe: RecipeAst) -> MatchResult | object: ...


class ResourceMatcher(Protocol):
    """Inspects the parsed tree of one LWRP resource definition."""

    def __call__(self, resource: ResourceNode) -> MatchResult | object: ...


class ProviderMatcher(Protocol):
    """Inspects the parsed tree of one LWRP provider definition."""

    def __call__(self, provider: ProviderNode) -> MatchResult | object: ...


class CookbookMatcher(Protocol):
    """Inspects a cookbook directory."""

    def __call__(self, cookbook_path: Path) -> MatchResult | object: ...


Matcher = Union[RecipeMatcher, ResourceMatcher, ProviderMatcher, CookbookMatcher]
