"""Command-line entry point for seo-tech-check."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from rich.console import Console

from .audit import run_audit
from .models import AuditInput
from .report import render_report
from .source import NoInputError

EXIT_OK = 0
EXIT_NO_INPUT = 1
EXIT_BAD_ROOT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seo-tech-check",
        description="Static SEO audit for legacy projects using schema.org, meta tags, favicons, and more",
    )
    parser.add_argument("dir", help="Root directory to audit")
    parser.add_argument(
        "--ignore-file",
        default=".gitignore",
        help="Ignore file at the root of the tree (default: .gitignore)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the audit and print the report.

    Returns:
        Exit code: 0 after a report, 1 when no files were found, 2 when the
        root is not a directory.
    """
    args = build_parser().parse_args(argv)

    # Logs go to stderr, the report to stdout
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    console = Console(highlight=False)
    config = AuditInput(path=args.dir, ignore_file=args.ignore_file)

    try:
        report = run_audit(config)
    except NoInputError:
        console.print("[yellow]⚠️ No files found for analysis.[/yellow]")
        return EXIT_NO_INPUT
    except NotADirectoryError as e:
        console.print(f"[red]❌ {e}[/red]")
        return EXIT_BAD_ROOT

    render_report(report, console)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
