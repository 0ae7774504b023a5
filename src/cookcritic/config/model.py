"""Config data model for cookcritic."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cookcritic.constants.config import DEFAULT_INCLUDE_BUNDLED
from cookcritic.rules.discovery import bundled_rules_dir


@dataclass(frozen=True)
class CookcriticConfig:
    """Resolved rule-loading config."""

    rule_paths: tuple[Path, ...] = ()
    tags: tuple[str, ...] = ()
    include_bundled: bool = DEFAULT_INCLUDE_BUNDLED

    @property
    def effective_rule_paths(self) -> tuple[Path, ...]:
        """Rule paths to load, bundled rules first when enabled."""
        if self.include_bundled:
            return (bundled_rules_dir(), *self.rule_paths)
        return self.rule_paths
