"""Select rules by tag expressions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cookcritic.constants.rules import TAG_EXPRESSION_SEPARATOR, TAG_NEGATION_PREFIX
from cookcritic.rules.model import Rule


def effective_tags(rule: Rule) -> frozenset[str]:
    """Tags a rule can be selected by: its declared tags plus its code."""
    return frozenset(rule.tags | {rule.code})


def parse_tag_expression(expression: str) -> tuple[str, ...]:
    """Split a comma-separated expression into its non-empty terms."""
    return tuple(term.strip() for term in expression.split(TAG_EXPRESSION_SEPARATOR) if term.strip())


def _term_holds(term: str, tags: frozenset[str]) -> bool:
    if term.startswith(TAG_NEGATION_PREFIX):
        return term[len(TAG_NEGATION_PREFIX):] not in tags
    return term in tags


def matches_tags(rule: Rule, expressions: Sequence[str]) -> bool:
    """Return whether *rule* satisfies every expression.

    Terms within one expression are alternatives; an expression with no
    terms is ignored.
    """
    tags = effective_tags(rule)
    for expression in expressions:
        terms = parse_tag_expression(expression)
        if terms and not any(_term_holds(term, tags) for term in terms):
            return False
    return True


def select_rules(rules: Iterable[Rule], expressions: Sequence[str] = ()) -> list[Rule]:
    """Filter *rules* by tag *expressions*, keeping their order."""
    return [rule for rule in rules if matches_tags(rule, expressions)]
