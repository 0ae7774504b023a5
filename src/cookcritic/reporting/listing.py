"""Render loaded rules for humans and machines."""

from __future__ import annotations

import json
from collections.abc import Sequence
from importlib import resources
from typing import Any

from cookcritic.constants.reporting import LISTING_SCHEMA_FILENAME, LISTING_SCHEMA_VERSION
from cookcritic.rules.model import Rule


def rule_to_dict(rule: Rule) -> dict[str, Any]:
    return {
        "code": rule.code,
        "name": rule.name,
        "tags": sorted(rule.tags),
        "kinds": [kind.value for kind in rule.kinds],
        "source": rule.source_path,
        "line": rule.line,
    }


def listing_payload(rules: Sequence[Rule]) -> dict[str, Any]:
    """Build the JSON listing document, rules in load order."""
    return {
        "schema_version": LISTING_SCHEMA_VERSION,
        "rules": [rule_to_dict(rule) for rule in rules],
    }


def render_json(rules: Sequence[Rule]) -> str:
    return json.dumps(listing_payload(rules), indent=2)


def render_text(rules: Sequence[Rule]) -> str:
    """One aligned line per rule: code, name, tags and matcher kinds."""
    if not rules:
        return "No rules loaded."
    width = max(len(rule.code) for rule in rules)
    lines = []
    for rule in rules:
        tags = ", ".join(sorted(rule.tags)) or "-"
        kinds = ", ".join(kind.value for kind in rule.kinds) or "-"
        lines.append(f"{rule.code.ljust(width)}  {rule.name}  [{tags}]  ({kinds})")
    lines.append("")
    lines.append(f"{len(rules)} rule(s)")
    return "\n".join(lines)


def load_listing_schema() -> dict[str, Any]:
    """Return the JSON Schema the JSON listing conforms to."""
    schema_text = resources.files("cookcritic.reporting").joinpath("schemas").joinpath(LISTING_SCHEMA_FILENAME).read_text(
        encoding="utf-8"
    )
    return json.loads(schema_text)
