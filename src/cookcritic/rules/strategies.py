"""Audited matcher strategies for rule files.

Rule files name a strategy and its parameters; only strategies registered in
:data:`STRATEGY_REGISTRY` can be used. Rule file text is never evaluated.
"""

from __future__ import annotations

import functools
import importlib
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Any

from cookcritic.exceptions import StrategyBuildError
from cookcritic.rules.kinds import ArtifactKind
from cookcritic.rules.matchers import Matcher
from cookcritic.rules.results import NO_MATCH, Match, MatchResult, as_match_result


@dataclass(frozen=True)
class Strategy:
    """A named matcher factory and the parameters it accepts."""

    name: str
    kinds: frozenset[ArtifactKind]
    required_keys: frozenset[str]
    optional_keys: frozenset[str]
    build: Callable[[Mapping[str, Any]], Matcher]

    @property
    def allowed_keys(self) -> frozenset[str]:
        return self.required_keys | self.optional_keys


def _import_target(target: str) -> Any:
    """Resolve ``package.module:attr.path`` to an object."""
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise StrategyBuildError(f"target must look like 'package.module:function', got {target!r}")
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise StrategyBuildError(f"cannot import module {module_name!r}: {exc}") from exc
    except Exception as exc:
        raise StrategyBuildError(f"importing {module_name!r} failed: {type(exc).__name__}: {exc}") from exc
    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as exc:
            raise StrategyBuildError(f"module {module_name!r} has no attribute {attr_path!r}") from exc
    return obj


def build_callable(params: Mapping[str, Any]) -> Matcher:
    """Matcher implemented by an importable Python callable."""
    target = _import_target(params["target"])
    if not callable(target):
        raise StrategyBuildError(f"target {params['target']!r} is not callable")
    options = params.get("options") or {}
    bound = functools.partial(target, **options) if options else target

    def matcher(artifact: Any) -> MatchResult:
        return as_match_result(bound(artifact))

    matcher.__qualname__ = f"callable[{params['target']}]"
    return matcher


def _cookbook_relative(value: str, key: str) -> str:
    """Reject paths that would resolve outside the cookbook directory."""
    posix = PurePosixPath(value)
    if posix.is_absolute() or PureWindowsPath(value).anchor:
        raise StrategyBuildError(f"{key} must be relative to the cookbook, got {value!r}")
    if ".." in posix.parts or ".." in PureWindowsPath(value).parts:
        raise StrategyBuildError(f"{key} must not contain '..' segments, got {value!r}")
    return value


def build_missing_file(params: Mapping[str, Any]) -> Matcher:
    """Matches when a file is absent from the cookbook."""
    relative = _cookbook_relative(params["path"], "path")

    def matcher(cookbook_path: Path) -> MatchResult:
        expected = Path(cookbook_path) / relative
        if expected.exists():
            return NO_MATCH
        return Match({"path": str(expected), "reason": f"{relative} is missing"})

    return matcher


def build_file_exists(params: Mapping[str, Any]) -> Matcher:
    """Matches when a file is present in the cookbook."""
    relative = _cookbook_relative(params["path"], "path")

    def matcher(cookbook_path: Path) -> MatchResult:
        found = Path(cookbook_path) / relative
        if not found.exists():
            return NO_MATCH
        return Match({"path": str(found), "reason": f"{relative} is present"})

    return matcher


def build_glob(params: Mapping[str, Any]) -> Matcher:
    """Matches every cookbook file selected by a glob pattern."""
    pattern = _cookbook_relative(params["pattern"], "pattern")

    def matcher(cookbook_path: Path) -> MatchResult:
        root = Path(cookbook_path)
        hits = sorted(path.relative_to(root).as_posix() for path in root.glob(pattern) if path.is_file())
        if not hits:
            return NO_MATCH
        return Match({"pattern": pattern, "paths": hits})

    return matcher


STRATEGY_REGISTRY: dict[str, Strategy] = {
    "callable": Strategy(
        name="callable",
        kinds=frozenset(ArtifactKind),
        required_keys=frozenset({"target"}),
        optional_keys=frozenset({"options"}),
        build=build_callable,
    ),
    "missing_file": Strategy(
        name="missing_file",
        kinds=frozenset({ArtifactKind.COOKBOOK}),
        required_keys=frozenset({"path"}),
        optional_keys=frozenset(),
        build=build_missing_file,
    ),
    "file_exists": Strategy(
        name="file_exists",
        kinds=frozenset({ArtifactKind.COOKBOOK}),
        required_keys=frozenset({"path"}),
        optional_keys=frozenset(),
        build=build_file_exists,
    ),
    "glob": Strategy(
        name="glob",
        kinds=frozenset({ArtifactKind.COOKBOOK}),
        required_keys=frozenset({"pattern"}),
        optional_keys=frozenset(),
        build=build_glob,
    ),
}

VALID_STRATEGIES: frozenset[str] = frozenset(STRATEGY_REGISTRY)
