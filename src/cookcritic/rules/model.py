"""Rule record: identity, tags and per-kind matchers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from cookcritic.exceptions import RuleDefinitionError
from cookcritic.rules.kinds import ArtifactKind
from cookcritic.rules.matchers import (
    CookbookMatcher,
    Matcher,
    ProviderMatcher,
    RecipeMatcher,
    ResourceMatcher,
)
from cookcritic.rules.results import NO_MATCH, MatchResult, as_match_result


@dataclass(eq=False)
class Rule:
    """One lint check as declared by a rule author.

    Tags only grow. Each artifact kind holds at most one matcher and a later
    registration for the same kind replaces the earlier one. Codes are not
    checked for uniqueness here.
    """

    code: str
    name: str
    tags: set[str] = field(default_factory=set)
    source_path: str | None = None
    line: int | None = None
    _matchers: dict[ArtifactKind, Matcher] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code.strip():
            raise RuleDefinitionError(f"Rule code must be a non-empty string, got {self.code!r}")
        if not isinstance(self.name, str):
            raise RuleDefinitionError(f"Rule {self.code} name must be a string, got {type(self.name).__name__}")

    def add_tags(self, tags: Iterable[str] | str) -> None:
        """Union *tags* into this rule's tag set."""
        incoming = [tags] if isinstance(tags, str) else list(tags)
        for tag in incoming:
            if not isinstance(tag, str):
                raise RuleDefinitionError(f"Rule {self.code} tags must be strings, got {tag!r}")
        self.tags.update(incoming)

    def set_matcher(self, kind: ArtifactKind | str, callback: Matcher) -> None:
        """Register *callback* for *kind*, replacing any earlier matcher."""
        resolved = ArtifactKind.coerce(kind)
        if not callable(callback):
            raise TypeError(f"Rule {self.code} {resolved.value} matcher must be callable")
        self._matchers[resolved] = callback

    def matcher(self, kind: ArtifactKind | str) -> Matcher | None:
        return self._matchers.get(ArtifactKind.coerce(kind))

    @property
    def kinds(self) -> tuple[ArtifactKind, ...]:
        """Kinds with a registered matcher, in fixed enum order."""
        return tuple(kind for kind in ArtifactKind if kind in self._matchers)

    @property
    def recipe_matcher(self) -> RecipeMatcher | None:
        return self._matchers.get(ArtifactKind.RECIPE)

    @property
    def resource_matcher(self) -> ResourceMatcher | None:
        return self._matchers.get(ArtifactKind.RESOURCE)

    @property
    def provider_matcher(self) -> ProviderMatcher | None:
        return self._matchers.get(ArtifactKind.PROVIDER)

    @property
    def cookbook_matcher(self) -> CookbookMatcher | None:
        return self._matchers.get(ArtifactKind.COOKBOOK)

    def match(self, kind: ArtifactKind | str, artifact: object) -> MatchResult:
        """Run the matcher for *kind* against *artifact*.

        Returns :data:`NO_MATCH` when this rule has no matcher for *kind*.
        """
        callback = self.matcher(kind)
        if callback is None:
            return NO_MATCH
        return as_match_result(callback(artifact))
