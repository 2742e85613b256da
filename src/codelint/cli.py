# SPDX-License-Identifier: MIT
"""Command line entry point — walk, lint, print, and map results to an exit code.

Usage:
    python -m codelint --root src --checks formatting,header-guards

Environment variables:
    CODELINT_RULES_CONFIG: local JSON rules config (overridden by --rules-config)

Exit codes: 0 clean, 1 error diagnostics present, 2 fatal walk failure.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from codelint.output import print_results
from codelint.rules import DEFAULT_CHECKS, RuleEngine, has_errors, load_rules_config
from codelint.walker import WalkerConfig, WalkError, walk

EXIT_OK = 0
EXIT_LINT_ERRORS = 1
EXIT_FATAL = 2

_CHECKS_HELP = """\
Available checks:
  - license-headers: Check for license headers
  - header-guards: Verify header include guards
  - naming-conventions: Check naming standards
  - formatting: Check code formatting
  - trailing-whitespace: Check for trailing whitespace
"""


def parse_csv(value: str) -> list[str]:
    """Split a comma-separated option, dropping blank entries."""
    return [part.strip() for part in value.split(",") if part.strip()]


def build_parser() -> argparse.ArgumentParser:
    defaults = WalkerConfig()
    parser = argparse.ArgumentParser(
        prog="codelint",
        description="Code Linter - A fast C/C++ code quality checker",
        epilog=_CHECKS_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--root", default=defaults.root_dir, help="Root directory to scan")
    parser.add_argument(
        "--include",
        default="",
        help="Comma-separated list of directories to include",
    )
    parser.add_argument(
        "--exclude",
        default=",".join(defaults.exclude_dirs),
        help="Comma-separated list of directories to exclude",
    )
    parser.add_argument(
        "--types",
        default=",".join(defaults.file_types),
        help="Comma-separated list of file extensions",
    )
    parser.add_argument(
        "--checks",
        default=",".join(DEFAULT_CHECKS),
        help="Comma-separated list of checks",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument(
        "--max-errors",
        type=int,
        default=None,
        help="Maximum number of errors before stopping (0 = no limit; "
        "default: global.max_errors from the rules config)",
    )
    parser.add_argument(
        "--rules-config",
        default=None,
        help="Local JSON rules configuration (overrides CODELINT_RULES_CONFIG env var)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the linter and return the process exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )
    loaded = load_rules_config(args.rules_config)
    verbose = args.verbose or loaded.config.global_.verbose
    if verbose:
        logging.getLogger().setLevel(logging.INFO)

    walker_config = WalkerConfig(
        root_dir=args.root,
        include_dirs=parse_csv(args.include) or ["."],
        exclude_dirs=parse_csv(args.exclude),
        file_types=parse_csv(args.types),
    )
    checks = parse_csv(args.checks)

    if verbose:
        print(f"Starting code lint in {walker_config.root_dir}")
        print(f"Include dirs: {walker_config.include_dirs}")
        print(f"Exclude dirs: {walker_config.exclude_dirs}")
        print(f"File types: {walker_config.file_types}")
        print(f"Checks: {checks}")
        print(f"Rules config: {loaded.source}")

    engine = RuleEngine(loaded.config, checks, max_errors=args.max_errors)
    try:
        results = engine.run(walk(walker_config))
    except WalkError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FATAL

    print_results(results)
    return EXIT_LINT_ERRORS if has_errors(results) else EXIT_OK
