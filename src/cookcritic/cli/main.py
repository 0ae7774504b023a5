"""CLI entrypoint for cookcritic."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cookcritic import __version__
from cookcritic.constants.branding import CLI_DESCRIPTION
from cookcritic.constants.reporting import DEFAULT_OUTPUT_FORMAT, VALID_OUTPUT_FORMATS
from cookcritic.cli.handlers import handle_rules, handle_shell, handle_validate_rules


def _add_rule_source_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root holding cookcritic.yaml")
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    parser.add_argument(
        "-I",
        "--include",
        type=Path,
        action="append",
        default=[],
        help="Additional rule file or directory (repeat flag for multiple paths)",
    )
    parser.add_argument(
        "--no-bundled",
        action="store_true",
        help="Do not load the rules shipped with cookcritic",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="cookcritic",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    rules = subparsers.add_parser("rules", help="List the rules that would be applied")
    _add_rule_source_flags(rules)
    rules.add_argument(
        "-t",
        "--tags",
        action="append",
        default=[],
        help="Tag expression, e.g. 'style,correctness' or '~FC011' (repeat to require all)",
    )
    rules.add_argument(
        "--format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=DEFAULT_OUTPUT_FORMAT,
        help="Listing format (default: text)",
    )

    validate = subparsers.add_parser("validate-rules", help="Validate rule files without loading them for use")
    validate.add_argument("paths", type=Path, nargs="+", help="Rule files or directories")

    shell = subparsers.add_parser("shell", help="Load rules and open an interactive shell on the registry")
    _add_rule_source_flags(shell)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.command == "rules":
        return handle_rules(args)
    if args.command == "validate-rules":
        return handle_validate_rules(args)
    if args.command == "shell":
        return handle_shell(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
