"""Root exception type."""

from __future__ import annotations


class CookcriticError(Exception):
    """Base class for all errors raised by Cookcritic."""
