"""Strict schema validation for rule files.

Validates parsed YAML documents at load time. Raises RuleSchemaError on the
first violation, with the line of the offending mapping when known.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from cookcritic.constants.rules import (
    ALLOWED_FILE_KEYS,
    OPTIONAL_RULE_KEYS,
    REQUIRED_FILE_KEYS,
    REQUIRED_RULE_KEYS,
    RULE_FILE_VERSION,
    STRATEGY_KEY,
)
from cookcritic.exceptions import RuleSchemaError
from cookcritic.rules.kinds import ARTIFACT_KIND_NAMES, ArtifactKind
from cookcritic.rules.strategies import STRATEGY_REGISTRY, VALID_STRATEGIES
from cookcritic.rules.yaml_source import line_of

ALLOWED_RULE_KEYS: frozenset[str] = REQUIRED_RULE_KEYS | OPTIONAL_RULE_KEYS | ARTIFACT_KIND_NAMES


def validate_document(data: Any) -> list[Mapping[str, Any]]:
    """Validate a parsed rule file and return its rule entries.

    An empty document is valid and declares no rules.
    """
    if data is None:
        return []
    if not isinstance(data, Mapping):
        raise RuleSchemaError(f"rule file must be a mapping, got {type(data).__name__}", line=line_of(data))

    doc_line = line_of(data)
    unknown = set(data.keys()) - ALLOWED_FILE_KEYS
    if unknown:
        stray_kinds = sorted(unknown & ARTIFACT_KIND_NAMES)
        if stray_kinds:
            raise RuleSchemaError(
                f"matcher {stray_kinds} declared outside a rule; nest it under an entry in 'rules'",
                line=doc_line,
                field=stray_kinds[0],
            )
        raise RuleSchemaError(f"unknown top-level keys: {sorted(unknown, key=str)}", line=doc_line)

    for key in sorted(REQUIRED_FILE_KEYS):
        if key not in data:
            raise RuleSchemaError(f"missing required key '{key}'", line=doc_line, field=key)

    if "version" in data:
        version = data["version"]
        if isinstance(version, bool) or version != RULE_FILE_VERSION:
            raise RuleSchemaError(
                f"'version' must be {RULE_FILE_VERSION}, got {version!r}", line=doc_line, field="version"
            )

    entries = data["rules"]
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise RuleSchemaError("'rules' must be a list", line=doc_line, field="rules")

    for index, entry in enumerate(entries):
        validate_rule_entry(entry, index, parent_line=doc_line)
    return entries


def validate_rule_entry(entry: Any, index: int, *, parent_line: int | None = None) -> None:
    """Validate one item of the ``rules`` list."""
    where = f"rules[{index}]"
    if not isinstance(entry, Mapping):
        raise RuleSchemaError(f"{where} must be a mapping", line=parent_line, field=where)

    line = line_of(entry)
    unknown = set(entry.keys()) - ALLOWED_RULE_KEYS
    if unknown:
        raise RuleSchemaError(f"{where} has unknown keys: {sorted(unknown, key=str)}", line=line, field=where)

    for key in sorted(REQUIRED_RULE_KEYS):
        if key not in entry:
            raise RuleSchemaError(f"{where} missing required key '{key}'", line=line, field=f"{where}.{key}")
        value = entry[key]
        if not isinstance(value, str) or not value.strip():
            raise RuleSchemaError(f"{where}.{key} must be a non-empty string", line=line, field=f"{where}.{key}")

    if "tags" in entry:
        _validate_tags(entry["tags"], where, line)

    for kind in ArtifactKind:
        if kind.value in entry:
            _validate_matcher(entry[kind.value], kind, f"{where}.{kind.value}", line)


def _validate_tags(tags: Any, where: str, line: int | None) -> None:
    if not isinstance(tags, list):
        raise RuleSchemaError(f"{where}.tags must be a list of strings", line=line, field=f"{where}.tags")
    for tag in tags:
        if not isinstance(tag, str) or not tag.strip():
            raise RuleSchemaError(
                f"{where}.tags entries must be non-empty strings, got {tag!r}", line=line, field=f"{where}.tags"
            )


def _validate_matcher(definition: Any, kind: ArtifactKind, where: str, parent_line: int | None) -> None:
    if not isinstance(definition, Mapping):
        raise RuleSchemaError(f"{where} must be a mapping with a '{STRATEGY_KEY}'", line=parent_line, field=where)

    line = line_of(definition) or parent_line
    strategy_name = definition.get(STRATEGY_KEY)
    if not isinstance(strategy_name, str) or strategy_name not in VALID_STRATEGIES:
        raise RuleSchemaError(
            f"{where}.{STRATEGY_KEY} must be one of {sorted(VALID_STRATEGIES)}, got {strategy_name!r}",
            line=line,
            field=f"{where}.{STRATEGY_KEY}",
        )

    strategy = STRATEGY_REGISTRY[strategy_name]
    if kind not in strategy.kinds:
        raise RuleSchemaError(
            f"{where}: strategy '{strategy_name}' does not support {kind.value} matchers",
            line=line,
            field=f"{where}.{STRATEGY_KEY}",
        )

    params = set(definition.keys()) - {STRATEGY_KEY}
    unknown = params - strategy.allowed_keys
    if unknown:
        raise RuleSchemaError(
            f"{where}: unknown keys for strategy '{strategy_name}': {sorted(unknown, key=str)}",
            line=line,
            field=where,
        )
    for key in sorted(strategy.required_keys):
        if key not in definition:
            raise RuleSchemaError(
                f"{where}: strategy '{strategy_name}' requires '{key}'", line=line, field=f"{where}.{key}"
            )
        if not isinstance(definition[key], str) or not definition[key].strip():
            raise RuleSchemaError(f"{where}.{key} must be a non-empty string", line=line, field=f"{where}.{key}")

    if "options" in definition:
        options = definition["options"]
        if not isinstance(options, Mapping) or not all(isinstance(name, str) for name in options):
            raise RuleSchemaError(
                f"{where}.options must be a mapping with string keys", line=line, field=f"{where}.options"
            )
