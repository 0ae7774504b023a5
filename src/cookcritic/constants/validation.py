"""Stable validation error codes for rule-source validation."""

from __future__ import annotations

RULE001: str = "RULE001"  # rule path not found
RULE002: str = "RULE002"  # rule file unreadable
RULE003: str = "RULE003"  # invalid YAML parse
RULE004: str = "RULE004"  # schema violation
RULE005: str = "RULE005"  # matcher strategy failed to build
RULE006: str = "RULE006"  # duplicate rule code
