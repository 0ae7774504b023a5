"""Shared fixtures and helpers for rule test modules."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest
import yaml

MATCHER_MODULE: str = "cookcritic_sample_matchers"

_MATCHER_SOURCE = '''
def symbol_access(recipe):
    return [{"line": line} for line in recipe.get("symbol_lines", [])]


def flagged(artifact, severity="warning"):
    return {"severity": severity, "artifact": artifact}


def never(artifact):
    return None


NOT_CALLABLE = 42
'''


def _rule_entry(code: str = "FC001", name: str = "Test rule", **fields: Any) -> dict[str, Any]:
    """Return a rule-file entry for *code*, merged with *fields*."""
    entry: dict[str, Any] = {"code": code, "name": name}
    entry.update(fields)
    return entry


def _write_rules(path: Path, *entries: dict[str, Any], **top: Any) -> Path:
    """Write a rule file holding *entries* to *path*."""
    payload: dict[str, Any] = {"version": 1, "rules": list(entries)}
    payload.update(top)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture()
def matcher_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Make an importable module of sample matchers and return its name."""
    module_dir = tmp_path / "matcher_pkg"
    module_dir.mkdir()
    (module_dir / f"{MATCHER_MODULE}.py").write_text(_MATCHER_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(module_dir))
    monkeypatch.delitem(sys.modules, MATCHER_MODULE, raising=False)
    return MATCHER_MODULE
