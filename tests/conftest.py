"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture()
def cookbook_root(tmp_path: Path) -> Path:
    """Return an empty cookbook directory."""
    root = tmp_path / "cookbooks" / "apache2"
    root.mkdir(parents=True)
    return root
