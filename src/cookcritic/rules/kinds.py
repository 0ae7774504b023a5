"""Artifact kinds a rule can register matchers against."""

from __future__ import annotations

from enum import Enum

from cookcritic.exceptions import InvalidMatcherKindError


class ArtifactKind(str, Enum):
    """The fixed set of artifacts the linter hands to matchers."""

    RECIPE = "recipe"
    RESOURCE = "resource"
    PROVIDER = "provider"
    COOKBOOK = "cookbook"

    @classmethod
    def coerce(cls, value: ArtifactKind | str) -> ArtifactKind:
        """Return the member for *value*, failing fast on anything outside the fixed set."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidMatcherKindError(
            f"Unknown artifact kind {value!r}; expected one of {[kind.value for kind in cls]}"
        )


ARTIFACT_KIND_NAMES: frozenset[str] = frozenset(kind.value for kind in ArtifactKind)
