"""YAML parsing that remembers where each mapping starts."""

from __future__ import annotations

from typing import Any

import yaml


class LocatedMapping(dict):  # type: ignore[type-arg]
    """A ``dict`` carrying the 1-based source line it was parsed from."""

    line: int | None = None


class _LocatingLoader(yaml.SafeLoader):
    """Safe loader that builds :class:`LocatedMapping` for every mapping node."""


def _construct_located_mapping(loader: _LocatingLoader, node: yaml.MappingNode) -> LocatedMapping:
    mapping = LocatedMapping(loader.construct_mapping(node, deep=True))
    mapping.line = node.start_mark.line + 1
    return mapping


_LocatingLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG,
    _construct_located_mapping,
)


def load_located_yaml(text: str) -> Any:
    """Parse *text* with ``safe_load`` semantics, tagging mappings with line numbers."""
    return yaml.load(text, Loader=_LocatingLoader)  # noqa: S506


def line_of(value: object) -> int | None:
    """Return the source line of a parsed mapping, if known."""
    return getattr(value, "line", None)


def yaml_error_line(exc: yaml.YAMLError) -> int | None:
    """Return the 1-based line a YAML error points at, if any."""
    mark = getattr(exc, "problem_mark", None) or getattr(exc, "context_mark", None)
    if mark is None:
        return None
    return mark.line + 1
