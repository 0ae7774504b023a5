"""Collect-all validation for rule sources.

Returns a list of :class:`ValidationError` instances rather than raising,
so callers can report every problem in one pass.
"""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from cookcritic.constants.validation import RULE001, RULE006
from cookcritic.exceptions import RuleLoadError
from cookcritic.exceptions.validation import ValidationError, sort_errors
from cookcritic.rules.discovery import expand_rule_dir
from cookcritic.rules.loader import load_rule_file
from cookcritic.rules.registry import RuleRegistry


def validate_rule_sources(paths: Iterable[str | PathLike[str]]) -> list[ValidationError]:
    """Validate rule files and directories and return all problems found."""
    errors: list[ValidationError] = []
    first_seen: dict[str, tuple[str, int | None]] = {}

    for path in _resolve_sources(paths, errors):
        registry = RuleRegistry()
        try:
            load_rule_file(registry, path)
        except RuleLoadError as exc:
            errors.append(ValidationError.from_load_error(exc))
            continue

        for rule in registry:
            previous = first_seen.get(rule.code)
            if previous is None:
                first_seen[rule.code] = (str(path), rule.line)
                continue
            previous_path, previous_line = previous
            where = previous_path if previous_line is None else f"{previous_path}:{previous_line}"
            errors.append(
                ValidationError(
                    code=RULE006,
                    path=str(path),
                    message="duplicate rule code",
                    line=rule.line,
                    field="code",
                    rule_code=rule.code,
                    hint=f"first declared at {where}",
                )
            )

    return sort_errors(errors)


def _resolve_sources(paths: Iterable[str | PathLike[str]], errors: list[ValidationError]) -> list[Path]:
    resolved: list[Path] = []
    for raw_path in paths:
        path = Path(raw_path)
        if path.is_dir():
            resolved.extend(expand_rule_dir(path))
        elif path.is_file():
            resolved.append(path)
        else:
            errors.append(
                ValidationError(
                    code=RULE001,
                    path=str(path),
                    message="rule path not found",
                )
            )
    return resolved
