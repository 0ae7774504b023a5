"""Interactive development shell over a live rule registry."""

from __future__ import annotations

import code
import logging
from typing import Any

from cookcritic.constants.branding import SHELL_BANNER
from cookcritic.rules.registry import RuleRegistry

logger = logging.getLogger(__name__)


def shell_namespace(registry: RuleRegistry) -> dict[str, Any]:
    """Names available in the shell: the live registry and the declaration vocabulary."""
    return {
        "registry": registry,
        "rule": registry.rule,
        "tags": registry.tags,
        "recipe": registry.recipe,
        "resource": registry.resource,
        "provider": registry.provider,
        "cookbook": registry.cookbook,
    }


def interact(registry: RuleRegistry, *, banner: str = SHELL_BANNER) -> None:
    """Block in an interactive console bound to *registry* until the operator exits."""
    logger.debug("Opening rule shell with %d rule(s)", len(registry))
    console = code.InteractiveConsole(locals=shell_namespace(registry))
    console.interact(banner=banner, exitmsg="")
