"""Config loading for cookcritic."""

from __future__ import annotations

from .loader import load_config
from .model import CookcriticConfig

__all__ = ["CookcriticConfig", "load_config"]
