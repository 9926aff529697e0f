#!/usr/bin/env python3
"""CLI interface for log_graph."""

import argparse
import sys
from pathlib import Path

from rich.markup import escape

from common.logger import error, setup_logging, success

from .enricher import parse_log
from .history_query import GitCommandError, run_git_log
from .log_io import write_result_file
from .models import LogMode, LogResult
from .reporters import LogReporter


def _mode_and_target(args) -> tuple[LogMode, Path]:
    if args.file:
        return LogMode.FILE, args.file
    return LogMode.REPO, args.repo


def _report(args, result: LogResult | None) -> int:
    reporter = LogReporter(show_commits=not args.authors_only)

    if args.format == "json":
        if args.output:
            write_result_file(args.output, result)
            success(f"History written to {args.output}")
        else:
            print(reporter.report_json(result))
        return 0

    return reporter.report_console(result)


def cmd_parse(args):
    """Parse captured git log text from a file or stdin.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if str(args.input) == "-":
        data = sys.stdin.read()
    elif not args.input.is_file():
        error(f"{args.input} is not a file")
        return 1
    else:
        data = args.input.read_text(encoding="utf-8")

    mode, target = _mode_and_target(args)
    result = parse_log(data, mode, str(target))
    return _report(args, result)


def cmd_query(args):
    """Run git log for a file or repository and parse its output.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    mode, target = _mode_and_target(args)
    target = target.resolve()
    if mode is LogMode.REPO and not target.is_dir():
        error(f"{target} is not a directory")
        return 1
    if mode is LogMode.FILE and not target.parent.is_dir():
        error(f"{target.parent} is not a directory")
        return 1

    try:
        data = run_git_log(mode, target, max_count=args.max_count)
    except (ValueError, GitCommandError) as e:
        error(escape(str(e)))
        return 1

    result = parse_log(data, mode, str(target))
    return _report(args, result)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument(
        "--repo",
        type=Path,
        help="Repository root (whole-history mode)",
    )
    target.add_argument(
        "--file",
        type=Path,
        help="Absolute path of the file whose history was queried (single-path mode)",
    )
    parser.add_argument(
        "--format",
        choices=["console", "json"],
        default="console",
        help="Output format",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write JSON output to this file instead of stdout",
    )
    parser.add_argument(
        "--authors-only",
        action="store_true",
        help="Only list ranked authors in console output",
    )


def main(argv: list[str] | None = None):
    """Main entry point for the CLI."""
    setup_logging()

    parser = argparse.ArgumentParser(
        description="Build a commit and author graph from git log output"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse captured git log text")
    parse_parser.add_argument(
        "input",
        type=Path,
        help="File holding git log output, or - for stdin",
    )
    _add_common_arguments(parse_parser)
    parse_parser.set_defaults(func=cmd_parse)

    # Query command
    query_parser = subparsers.add_parser("query", help="Run git log and parse its output")
    query_parser.add_argument(
        "--max-count",
        type=int,
        default=None,
        help="Limit the number of commits (default: GIT_LOG_MAX_COUNT or unlimited)",
    )
    _add_common_arguments(query_parser)
    query_parser.set_defaults(func=cmd_query)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
