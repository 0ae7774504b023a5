"""Config loading and normalization."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from cookcritic.config.model import CookcriticConfig
from cookcritic.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME, DEFAULT_INCLUDE_BUNDLED
from cookcritic.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> CookcriticConfig:
    """Load and validate config from ``cookcritic.yaml`` or an explicit path.

    Relative ``rule_paths`` are resolved against the config file's directory.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return CookcriticConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = set(raw.keys()) - ALLOWED_CONFIG_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {sorted(unknown, key=str)}")

    include_bundled = raw.get("include_bundled", DEFAULT_INCLUDE_BUNDLED)
    if not isinstance(include_bundled, bool):
        raise ConfigError("include_bundled must be a boolean")

    base_dir = path.parent
    rule_paths = tuple(
        _resolve_relative(base_dir, entry) for entry in _ensure_string_list(raw.get("rule_paths", []), "rule_paths")
    )
    tags = tuple(_ensure_string_list(raw.get("tags", []), "tags"))

    logger.debug("Loaded config from %s", path)
    return CookcriticConfig(rule_paths=rule_paths, tags=tags, include_bundled=include_bundled)


def _resolve_relative(base_dir: Path, entry: str) -> Path:
    candidate = Path(entry).expanduser()
    return candidate if candidate.is_absolute() else base_dir / candidate


def _ensure_string_list(value: Any, field_name: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) and item.strip() for item in value):
        raise ConfigError(f"{field_name} must be a list of non-empty strings")
    return [item.strip() for item in value]
