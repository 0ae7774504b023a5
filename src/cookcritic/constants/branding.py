"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "cookcritic"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: lint rule registry for infrastructure-as-code cookbooks"
SHELL_BANNER: str = (
    f"{BRAND_NAME} rule shell\n"
    "The live registry is `registry`; `registry.rules` lists every declared rule.\n"
    "Declare more with rule(code, name), tags([...]), recipe(fn), resource(fn), provider(fn), cookbook(fn)."
)
