"""Tests for loading rule files into rules."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from cookcritic.constants.validation import RULE002, RULE003, RULE004, RULE005
from cookcritic.exceptions import RuleLoadError
from cookcritic.rules import ArtifactKind, Match, RuleRegistry, load_registry, load_rule_file, load_rules

from .conftest import _rule_entry, _write_rules


def test_single_recipe_rule(tmp_path: Path, matcher_module: str) -> None:
    path = _write_rules(
        tmp_path / "rules" / "recipe_checks.yaml",
        _rule_entry(
            "FC001",
            "Use strings in preference to symbols",
            tags=["style"],
            recipe={"strategy": "callable", "target": f"{matcher_module}:symbol_access"},
        ),
    )

    rules = load_rules([path])

    assert len(rules) == 1
    rule = rules[0]
    assert rule.code == "FC001"
    assert rule.tags == {"style"}
    assert rule.recipe_matcher is not None
    assert rule.resource_matcher is None
    assert rule.provider_matcher is None
    assert rule.cookbook_matcher is None
    assert rule.source_path == str(path)
    assert rule.line == 3


def test_compiled_matcher_runs(tmp_path: Path, matcher_module: str) -> None:
    path = _write_rules(
        tmp_path / "rules.yaml",
        _rule_entry(recipe={"strategy": "callable", "target": f"{matcher_module}:symbol_access"}),
    )

    rule = load_rules([path])[0]

    assert rule.match(ArtifactKind.RECIPE, {"symbol_lines": [4]}) == Match({"matches": [{"line": 4}]})
    assert not rule.match(ArtifactKind.RECIPE, {"symbol_lines": []})


def test_rule_count_and_order_across_files(tmp_path: Path) -> None:
    _write_rules(tmp_path / "dir" / "z.yaml", _rule_entry("FC030"), _rule_entry("FC031"))
    _write_rules(tmp_path / "dir" / "y.yaml", _rule_entry("FC020"))
    first = _write_rules(tmp_path / "a.yaml", _rule_entry("FC010"), _rule_entry("FC002"))

    rules = load_rules([first, tmp_path / "dir"])

    assert [rule.code for rule in rules] == ["FC010", "FC002", "FC020", "FC030", "FC031"]


def test_empty_file_declares_nothing(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_rules([path]) == []


def test_files_share_one_registry(tmp_path: Path) -> None:
    a = _write_rules(tmp_path / "a.yaml", _rule_entry("FC001"))
    b = _write_rules(tmp_path / "b.yaml", _rule_entry("FC002"))

    registry = load_registry([a, b])

    assert registry.codes == ["FC001", "FC002"]


def test_load_rule_file_returns_count(tmp_path: Path) -> None:
    path = _write_rules(tmp_path / "a.yaml", _rule_entry("FC001"), _rule_entry("FC002"))
    registry = RuleRegistry()

    assert load_rule_file(registry, path) == 2


def test_error_in_later_file_fails_whole_load(tmp_path: Path) -> None:
    good = _write_rules(tmp_path / "a.yaml", _rule_entry("FC001"))
    bad = tmp_path / "b.yaml"
    bad.write_text("tags: [x]\nrules: []\n", encoding="utf-8")
    after = _write_rules(tmp_path / "c.yaml", _rule_entry("FC003"))

    with pytest.raises(RuleLoadError) as excinfo:
        load_rules([good, bad, after])

    assert excinfo.value.path == str(bad)
    assert excinfo.value.error_code == RULE004
    assert str(bad) in str(excinfo.value)


def test_matcher_outside_rule_is_attributed_to_file(tmp_path: Path) -> None:
    bad = tmp_path / "orphan.yaml"
    bad.write_text(
        "rules: []\ncookbook:\n  strategy: missing_file\n  path: README.md\n",
        encoding="utf-8",
    )

    with pytest.raises(RuleLoadError, match="outside a rule") as excinfo:
        load_rules([bad])
    assert excinfo.value.path == str(bad)


def test_invalid_yaml_reports_line(tmp_path: Path) -> None:
    bad = tmp_path / "broken.yaml"
    bad.write_text("rules:\n  - code: FC001\n    name: [unclosed\n", encoding="utf-8")

    with pytest.raises(RuleLoadError) as excinfo:
        load_rules([bad])

    assert excinfo.value.error_code == RULE003
    assert excinfo.value.line is not None
    assert str(excinfo.value).startswith(f"{bad}:")


def test_schema_error_reports_entry_line(tmp_path: Path) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text(
        "version: 1\nrules:\n  - code: FC001\n    name: Fine\n  - code: FC002\n",
        encoding="utf-8",
    )

    with pytest.raises(RuleLoadError, match="missing required key 'name'") as excinfo:
        load_rules([bad])

    assert excinfo.value.line == 5
    assert excinfo.value.location == f"{bad}:5"


def test_strategy_build_error_is_reported(tmp_path: Path, matcher_module: str) -> None:
    path = _write_rules(
        tmp_path / "rules.yaml",
        _rule_entry(recipe={"strategy": "callable", "target": f"{matcher_module}:missing"}),
    )

    with pytest.raises(RuleLoadError, match="has no attribute") as excinfo:
        load_rules([path])

    assert excinfo.value.error_code == RULE005
    assert excinfo.value.line == 6


def test_undecodable_file_is_reported(tmp_path: Path) -> None:
    path = tmp_path / "binary.yaml"
    path.write_bytes(b"\xff\xfe\x00rules")

    with pytest.raises(RuleLoadError) as excinfo:
        load_rules([path])
    assert excinfo.value.error_code == RULE002


def test_duplicate_codes_load_with_warning(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    a = _write_rules(tmp_path / "a.yaml", _rule_entry("FC001", "First"))
    b = _write_rules(tmp_path / "b.yaml", _rule_entry("FC001", "Second"))

    with caplog.at_level(logging.WARNING, logger="cookcritic.rules.loader"):
        rules = load_rules([a, b])

    assert [rule.name for rule in rules] == ["First", "Second"]
    assert "FC001 is declared more than once" in caplog.text


def test_interactive_hands_registry_to_shell(tmp_path: Path) -> None:
    path = _write_rules(tmp_path / "a.yaml", _rule_entry("FC001"))

    def add_rule(registry: RuleRegistry) -> None:
        registry.rule("FC900", "Declared in shell")

    with patch("cookcritic.session.interact", side_effect=add_rule) as interact:
        rules = load_rules([path], interactive=True)

    interact.assert_called_once()
    assert [rule.code for rule in rules] == ["FC001", "FC900"]


def test_non_interactive_does_not_open_shell(tmp_path: Path) -> None:
    path = _write_rules(tmp_path / "a.yaml", _rule_entry("FC001"))

    with patch("cookcritic.session.interact") as interact:
        load_rules([path])

    interact.assert_not_called()


def test_absolute_glob_pattern_fails_at_load(tmp_path: Path) -> None:
    path = _write_rules(
        tmp_path / "rules.yaml",
        _rule_entry(cookbook={"strategy": "glob", "pattern": "/etc/*"}),
    )

    with pytest.raises(RuleLoadError, match="relative to the cookbook") as excinfo:
        load_rules([path])

    assert excinfo.value.error_code == RULE005
    assert excinfo.value.field == "cookbook"


def test_failed_entry_leaves_caller_registry_untouched(tmp_path: Path) -> None:
    registry = RuleRegistry()
    registry.rule("FC900", "Declared earlier")
    path = _write_rules(
        tmp_path / "rules.yaml",
        _rule_entry(
            "FC001",
            tags=["style"],
            recipe={"strategy": "callable", "target": "cookcritic_no_such_module_xyz:fn"},
        ),
    )

    with pytest.raises(RuleLoadError):
        load_rule_file(registry, path)

    assert registry.codes == ["FC900"]
    registry.tags(["late"])
    assert registry.rules[0].tags == {"late"}


def test_hidden_rule_files_are_not_loaded(tmp_path: Path) -> None:
    rules_dir = tmp_path / "rules"
    _write_rules(rules_dir / "a.yaml", _rule_entry("FC001"))
    _write_rules(rules_dir / ".a.yaml.swp.yaml", _rule_entry("FC998"))
    _write_rules(rules_dir / ".git" / "x.yaml", _rule_entry("FC999"))

    assert [rule.code for rule in load_rules([rules_dir])] == ["FC001"]
