#!/usr/bin/env python3
"""Command-line entry point: lint Java files and print the issues found."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import LintConfig
from .errors import JavalintError
from .syntaxer import Linter, LintReport, build_rules
from .syntaxer.checks import RULES

log = logging.getLogger(__name__)

EXIT_CLEAN = 0
EXIT_ISSUES = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="javalint",
        description="Java source checks - unused private constructors and required Javadoc tags",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single file, all rules
  javalint src/main/java/com/example/Foo.java

  # Whole source tree, one rule
  javalint --rule unused-private-constructor src/main/java

  # Require @since and @author in class comments
  javalint --tag 'since=^\\d+(\\.\\d+)*$' --tag 'author=.+' src/main/java
        """
    )
    parser.add_argument("paths", nargs="+", help="Java source files or directories")
    parser.add_argument("--rule", action="append", metavar="NAME",
                        help=f"Enable only this rule (repeatable; one of: {', '.join(sorted(RULES))})")
    parser.add_argument("--tag", action="append", metavar="NAME=REGEX",
                        help="Required Javadoc tag and its content pattern (repeatable; default: since)")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Quiet mode: only print issues, no summary")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Debug logging")
    return parser


def print_report(report: LintReport, quiet: bool = False) -> None:
    for result in report.files:
        for issue in result.issues:
            print(f"{result.path}:{issue.line}: {issue.message} [{issue.kind}]")
    if not quiet:
        print(f"{report.issue_count} issue(s) in {len(report.files)} file(s)")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        config = LintConfig.from_args(args)
    except JavalintError as e:
        logging.basicConfig(level=logging.WARNING, format="%(message)s")
        log.error("Error: %s", e)
        return EXIT_ERROR

    logging.basicConfig(level=config.log_level, format="%(message)s")

    try:
        linter = Linter(build_rules(config.rules, config.tags))
        report = linter.lint_paths(args.paths)
    except JavalintError as e:
        log.error("Error: %s", e)
        return EXIT_ERROR

    print_report(report, quiet=args.quiet)
    return EXIT_ISSUES if report.has_issues else EXIT_CLEAN


if __name__ == "__main__":
    sys.exit(main())
