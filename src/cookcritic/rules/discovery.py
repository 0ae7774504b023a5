"""Resolve rule paths into the ordered list of rule files to load."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from cookcritic.constants.rules import RULE_FILE_EXTENSIONS
from cookcritic.exceptions import RulePathError

logger = logging.getLogger(__name__)

BUNDLED_RULES_DIR: Path = Path(__file__).parent / "bundled"


def bundled_rules_dir() -> Path:
    """Return the directory holding the rule files shipped with the package."""
    return BUNDLED_RULES_DIR


def resolve_rule_paths(
    paths: Iterable[str | PathLike[str]],
    extensions: frozenset[str] = RULE_FILE_EXTENSIONS,
) -> list[Path]:
    """Expand *paths* into concrete rule files in execution order.

    Directories expand to every rule file beneath them, sorted by path.
    Files are kept as given. The order of *paths* itself is preserved.
    """
    resolved: list[Path] = []
    for raw_path in paths:
        path = Path(raw_path)
        if path.is_dir():
            found = expand_rule_dir(path, extensions)
            logger.debug("Expanded %s to %d rule file(s)", path, len(found))
            resolved.extend(found)
        elif path.is_file():
            resolved.append(path)
        else:
            raise RulePathError(path)
    return resolved


def expand_rule_dir(directory: Path, extensions: frozenset[str] = RULE_FILE_EXTENSIONS) -> list[Path]:
    """Return rule files at any depth under *directory*, sorted lexicographically.

    Dotfiles and anything inside a dot-directory below *directory* are skipped.
    """
    files = (
        path
        for path in directory.rglob("*")
        if path.is_file()
        and path.suffix.lower() in extensions
        and not _is_hidden(path.relative_to(directory))
    )
    return sorted(files, key=lambda path: path.as_posix())


def _is_hidden(relative: Path) -> bool:
    return any(part.startswith(".") for part in relative.parts)
