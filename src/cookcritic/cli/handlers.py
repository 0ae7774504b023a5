"""Handlers for cookcritic subcommands."""

from __future__ import annotations

import argparse
import logging
import sys

from cookcritic.config import CookcriticConfig, load_config
from cookcritic.exceptions import ConfigError, CookcriticError
from cookcritic.exceptions.validation import format_errors
from cookcritic.reporting import render_json, render_text
from cookcritic.rules import load_rules, select_rules
from cookcritic.rules.validation import validate_rule_sources

logger = logging.getLogger(__name__)


def _resolve_config(args: argparse.Namespace) -> CookcriticConfig:
    config = load_config(args.root, args.config)
    return CookcriticConfig(
        rule_paths=(*config.rule_paths, *args.include),
        tags=(*config.tags, *getattr(args, "tags", [])),
        include_bundled=config.include_bundled and not args.no_bundled,
    )


def handle_rules(args: argparse.Namespace) -> int:
    """List rules after config and tag selection."""
    try:
        config = _resolve_config(args)
        rules = load_rules(config.effective_rule_paths)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except CookcriticError as exc:
        print(f"Rule load error: {exc}", file=sys.stderr)
        return 2

    selected = select_rules(rules, config.tags)
    logger.debug("Selected %d of %d rule(s)", len(selected), len(rules))
    if args.format == "json":
        print(render_json(selected))
    else:
        print(render_text(selected))
    return 0


def handle_validate_rules(args: argparse.Namespace) -> int:
    """Validate rule sources and report every problem found."""
    errors = validate_rule_sources(args.paths)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        print(f"\n{len(errors)} error(s) found", file=sys.stderr)
        return 1
    print("Rule files are valid.")
    return 0


def handle_shell(args: argparse.Namespace) -> int:
    """Load rules and hand the live registry to the interactive shell."""
    try:
        config = _resolve_config(args)
        load_rules(config.effective_rule_paths, interactive=True)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except CookcriticError as exc:
        print(f"Rule load error: {exc}", file=sys.stderr)
        return 2
    return 0
