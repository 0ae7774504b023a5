"""Match result variants returned by matchers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class Match:
    """A matcher found a violation; *metadata* describes where and why."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class NoMatch:
    """A matcher found nothing."""

    def __bool__(self) -> bool:
        return False


NO_MATCH: NoMatch = NoMatch()

MatchResult = Union[Match, NoMatch]


def as_match_result(value: object) -> MatchResult:
    """Normalize a raw matcher return value into a :data:`MatchResult`.

    ``None``, ``False`` and empty collections mean no match. A mapping becomes
    the match metadata; a non-empty list or tuple of mappings is kept under
    the ``matches`` key.
    """
    if isinstance(value, (Match, NoMatch)):
        return value
    if value is None or value is False:
        return NO_MATCH
    if value is True:
        return Match()
    if isinstance(value, Mapping):
        return Match(dict(value)) if value else NO_MATCH
    if isinstance(value, (list, tuple)):
        if not value:
            return NO_MATCH
        if not all(isinstance(item, Mapping) for item in value):
            raise TypeError("Matcher returned a sequence containing non-mapping items")
        return Match({"matches": [dict(item) for item in value]})
    raise TypeError(f"Matcher returned unsupported value of type {type(value).__name__}")
