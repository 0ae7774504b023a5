"""Load rule files into an ordered list of rules.

Files are loaded strictly in resolved path order against one shared
:class:`RuleRegistry`. The first failing file aborts the whole load.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

import yaml

from cookcritic.constants.validation import RULE002, RULE003, RULE004, RULE005
from cookcritic.exceptions import RuleDefinitionError, RuleLoadError, StrategyBuildError
from cookcritic.rules.compiler import compile_document
from cookcritic.rules.discovery import resolve_rule_paths
from cookcritic.rules.model import Rule
from cookcritic.rules.registry import RuleRegistry
from cookcritic.rules.yaml_source import load_located_yaml, yaml_error_line

logger = logging.getLogger(__name__)


def load_rules(paths: Iterable[str | PathLike[str]], interactive: bool = False) -> list[Rule]:
    """Load every rule declared under *paths*.

    Args:
        paths: Rule files and directories. Directories are expanded to their
            rule files in sorted order; the order of *paths* is kept.
        interactive: Open the development shell on the loaded registry
            before returning.

    Returns:
        Rules in declaration order across all files.
    """
    registry = load_registry(paths)
    if interactive:
        from cookcritic.session import interact

        interact(registry)
    for code in registry.duplicate_codes():
        sources = sorted({rule.source_path or "<declared in code>" for rule in registry if rule.code == code})
        logger.warning("Rule code %s is declared more than once (%s)", code, ", ".join(sources))
    return registry.rules


def load_registry(paths: Iterable[str | PathLike[str]]) -> RuleRegistry:
    """Resolve *paths* and load each rule file into one fresh registry."""
    files = resolve_rule_paths(paths)
    registry = RuleRegistry()
    for path in files:
        load_rule_file(registry, path)
    logger.debug("Loaded %d rule(s) from %d file(s)", len(registry), len(files))
    return registry


def load_rule_file(registry: RuleRegistry, path: Path) -> int:
    """Load a single rule file into *registry* and return how many rules it declared.

    Raises:
        RuleLoadError: The file could not be read, parsed, validated or
            compiled. The error names *path* and, when known, the line.
    """
    source_path = str(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RuleLoadError(path, f"failed to read rule file: {exc}", error_code=RULE002) from exc

    try:
        data = load_located_yaml(text)
    except yaml.YAMLError as exc:
        raise RuleLoadError(
            path, f"invalid YAML: {exc}", line=yaml_error_line(exc), error_code=RULE003
        ) from exc

    try:
        count = compile_document(registry, data, source_path)
    except StrategyBuildError as exc:
        raise RuleLoadError(path, exc.message, line=exc.line, error_code=RULE005, field=exc.field) from exc
    except RuleDefinitionError as exc:
        raise RuleLoadError(path, exc.message, line=exc.line, error_code=RULE004, field=exc.field) from exc

    logger.debug("Loaded %d rule(s) from %s", count, source_path)
    return count
