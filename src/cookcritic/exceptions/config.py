"""Configuration-related exceptions."""

from __future__ import annotations

from cookcritic.exceptions.base import CookcriticError


class ConfigError(CookcriticError, ValueError):
    """Raised when cookcritic configuration is invalid."""
