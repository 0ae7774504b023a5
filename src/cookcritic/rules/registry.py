"""Declaration surface used to build rules.

Two ways to declare matchers are supported. ``rule()`` returns a
:class:`RuleBuilder` bound to the new rule and passes it to the optional body,
so every declaration names its target explicitly. The registry's own
``tags``/``recipe``/``resource``/``provider``/``cookbook`` methods act on the
most recently declared rule instead.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

from cookcritic.exceptions import NoCurrentRuleError
from cookcritic.rules.kinds import ArtifactKind
from cookcritic.rules.model import Rule

logger = logging.getLogger(__name__)

_M = TypeVar("_M", bound=Callable[..., object])


class RuleBuilder:
    """Declarations targeting exactly one rule."""

    def __init__(self, rule: Rule) -> None:
        self.rule = rule

    def tags(self, tags: Iterable[str] | str) -> RuleBuilder:
        self.rule.add_tags(tags)
        return self

    def matcher(self, kind: ArtifactKind | str, callback: _M) -> _M:
        """Register *callback* for *kind* and return it unchanged."""
        self.rule.set_matcher(kind, callback)
        return callback

    def recipe(self, callback: _M) -> _M:
        return self.matcher(ArtifactKind.RECIPE, callback)

    def resource(self, callback: _M) -> _M:
        return self.matcher(ArtifactKind.RESOURCE, callback)

    def provider(self, callback: _M) -> _M:
        return self.matcher(ArtifactKind.PROVIDER, callback)

    def cookbook(self, callback: _M) -> _M:
        return self.matcher(ArtifactKind.COOKBOOK, callback)

    def __repr__(self) -> str:
        return f"RuleBuilder({self.rule.code!r})"


class RuleRegistry:
    """Owns the ordered rule list built up by declarations."""

    def __init__(self) -> None:
        self._rules: list[Rule] = []
        self._current: RuleBuilder | None = None

    def rule(
        self,
        code: str,
        name: str,
        body: Callable[[RuleBuilder], object] | None = None,
        *,
        source_path: str | None = None,
        line: int | None = None,
    ) -> RuleBuilder:
        """Declare a new rule and make it the current rule.

        *body*, when given, is called with the rule's builder before this
        method returns. The rule is only added once *body* returns; if it
        raises, the rule is dropped and the previous current rule restored.
        """
        rule = Rule(code, name, source_path=source_path, line=line)
        builder = RuleBuilder(rule)
        position = len(self._rules)
        previous = self._current
        self._current = builder
        if body is not None:
            try:
                body(builder)
            except Exception:
                self._current = previous
                raise
        # Rules declared inside *body* stay after this one.
        self._rules.insert(position, rule)
        logger.debug("Declared rule %s (%s)", code, name)
        return builder

    def tags(self, tags: Iterable[str] | str) -> None:
        self._require_current().tags(tags)

    def recipe(self, callback: _M) -> _M:
        return self._require_current().recipe(callback)

    def resource(self, callback: _M) -> _M:
        return self._require_current().resource(callback)

    def provider(self, callback: _M) -> _M:
        return self._require_current().provider(callback)

    def cookbook(self, callback: _M) -> _M:
        return self._require_current().cookbook(callback)

    def _require_current(self) -> RuleBuilder:
        if self._current is None:
            raise NoCurrentRuleError("No current rule: declare one with rule(code, name) first")
        return self._current

    @property
    def rules(self) -> list[Rule]:
        """Declared rules in declaration order."""
        return list(self._rules)

    @property
    def codes(self) -> list[str]:
        return [rule.code for rule in self._rules]

    def find(self, code: str) -> Rule | None:
        """Return the first rule declared with *code*."""
        for rule in self._rules:
            if rule.code == code:
                return rule
        return None

    def duplicate_codes(self) -> list[str]:
        """Return codes declared more than once, in first-seen order."""
        counts = Counter(self.codes)
        return [code for code in dict.fromkeys(self.codes) if counts[code] > 1]

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)
