"""Tests for config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from cookcritic.config import CookcriticConfig, load_config
from cookcritic.exceptions import ConfigError
from cookcritic.rules import bundled_rules_dir


def _write_config(root: Path, text: str) -> Path:
    path = root / "cookcritic.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_default_config_uses_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path) == CookcriticConfig()


def test_missing_explicit_config_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "other.yaml")


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    _write_config(tmp_path, "")

    assert load_config(tmp_path) == CookcriticConfig()


def test_rule_paths_resolve_against_config_dir(tmp_path: Path) -> None:
    config_dir = tmp_path / "conf"
    config_dir.mkdir()
    config_path = _write_config(config_dir, "rule_paths: [rules, /abs/rules]\ntags: ['style,correctness']\n")

    config = load_config(tmp_path, config_path)

    assert config.rule_paths == (config_dir.resolve() / "rules", Path("/abs/rules"))
    assert config.tags == ("style,correctness",)
    assert config.include_bundled is True


def test_effective_paths_put_bundled_first(tmp_path: Path) -> None:
    config = CookcriticConfig(rule_paths=(tmp_path,))

    assert config.effective_rule_paths == (bundled_rules_dir(), tmp_path)
    assert CookcriticConfig(rule_paths=(tmp_path,), include_bundled=False).effective_rule_paths == (tmp_path,)


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("- not\n- a mapping\n", "must be a YAML mapping"),
        ("rules: []\n", "Unknown config keys"),
        ("include_bundled: 'yes'\n", "include_bundled must be a boolean"),
        ("rule_paths: rules\n", "rule_paths must be a list"),
        ("tags: ['', style]\n", "tags must be a list"),
        ("tags: [style\n", "Invalid YAML"),
    ],
)
def test_invalid_config(tmp_path: Path, text: str, message: str) -> None:
    _write_config(tmp_path, text)

    with pytest.raises(ConfigError, match=message):
        load_config(tmp_path)
