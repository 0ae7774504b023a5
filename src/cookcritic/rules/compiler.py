"""Compile validated rule-file entries into declarations on a registry."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from cookcritic.constants.rules import STRATEGY_KEY
from cookcritic.exceptions import StrategyBuildError
from cookcritic.rules.kinds import ArtifactKind
from cookcritic.rules.matchers import Matcher
from cookcritic.rules.registry import RuleBuilder, RuleRegistry
from cookcritic.rules.schema import validate_document
from cookcritic.rules.strategies import STRATEGY_REGISTRY
from cookcritic.rules.yaml_source import line_of

logger = logging.getLogger(__name__)


def build_matcher(definition: Mapping[str, Any]) -> Matcher:
    """Build the matcher callback described by a validated matcher mapping."""
    strategy = STRATEGY_REGISTRY[definition[STRATEGY_KEY]]
    params = {key: value for key, value in definition.items() if key != STRATEGY_KEY}
    return strategy.build(params)


def compile_entry(registry: RuleRegistry, entry: Mapping[str, Any], source_path: str) -> RuleBuilder:
    """Declare one validated rule entry on *registry*."""

    def body(builder: RuleBuilder) -> None:
        builder.tags(entry.get("tags") or [])
        for kind in ArtifactKind:
            definition = entry.get(kind.value)
            if definition is None:
                continue
            try:
                matcher = build_matcher(definition)
            except StrategyBuildError as exc:
                raise StrategyBuildError(
                    f"rule {entry['code']} {kind.value} matcher: {exc.message}",
                    line=line_of(definition) or line_of(entry),
                    field=kind.value,
                ) from exc
            builder.matcher(kind, matcher)

    return registry.rule(entry["code"], entry["name"], body, source_path=source_path, line=line_of(entry))


def compile_document(registry: RuleRegistry, data: Any, source_path: str) -> int:
    """Validate a parsed rule file and declare its rules in order.

    Returns the number of rules declared.
    """
    entries = validate_document(data)
    for entry in entries:
        compile_entry(registry, entry, source_path)
    logger.debug("Compiled %d rule(s) from %s", len(entries), source_path)
    return len(entries)
