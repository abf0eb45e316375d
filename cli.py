"""
indentcheck CLI — indentation compliance scanner.

Commands:
  scan      Walk the configured scan roots and write a report
  check     Validate the indentation of a single file
"""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path

import click
from rich.console import Console

from indentcheck.config_loader import ConfigError, ConfigMissingError, load_config
from indentcheck.file_loader import DEFAULT_ENCODING, ScanFileError
from indentcheck.indentation import IndentMode
from indentcheck.report import Severity, print_message, print_summary, report_path, write_report
from indentcheck.scanner import scan, scan_file
from indentcheck.statistics import ScanStatistics

_console = Console()

EXIT_ISSUES = 1
EXIT_CONFIG = 2
EXIT_UNEXPECTED = 3


def _default_reports_dir() -> Path:
    desktop = Path.home() / "Desktop"
    return desktop if desktop.is_dir() else Path.cwd()


def _resolve_config(config_dir: Path | None):
    """Load ScanConfiguration, exiting with a user-friendly message on failure."""
    try:
        return load_config(config_dir)
    except ConfigMissingError as exc:
        for path in exc.missing:
            print_message(f"Required file missing: {path}", Severity.ERROR)
        sys.exit(EXIT_CONFIG)
    except ConfigError as exc:
        print_message(f"Config error: {exc}", Severity.ERROR)
        sys.exit(EXIT_CONFIG)


@click.group()
@click.version_option("1.0.0", prog_name="indentcheck")
def cli() -> None:
    """indentcheck — leading-whitespace compliance scanner."""


@cli.command("scan")
@click.option("--config-dir", "-c", default=None, type=click.Path(file_okay=False, path_type=Path),
              help="Directory holding the ignore lists, scan roots and maps")
@click.option("--reports-dir", "-r", default=None, type=click.Path(file_okay=False, path_type=Path),
              help="Directory the report is written to [default: ~/Desktop or cwd]")
@click.option("--fail-on-issues", is_flag=True, default=False,
              help="Exit with code 1 when any file has an indentation issue")
def cmd_scan(config_dir: Path | None, reports_dir: Path | None, fail_on_issues: bool) -> None:
    """Scan every configured root and write an indentChecker report."""
    cfg = _resolve_config(config_dir)
    stats = ScanStatistics()

    start = time.monotonic()
    scan(cfg.scan_roots, cfg, stats)
    elapsed = time.monotonic() - start

    destination = report_path(reports_dir or _default_reports_dir())
    write_report(stats, destination)

    if not stats.has_issues:
        print_message("No indentation issues found.", Severity.SUCCESS)

    print_summary(stats, elapsed=elapsed)
    print_message(f"Report written to {destination}")

    if fail_on_issues and stats.has_issues:
        sys.exit(EXIT_ISSUES)


@cli.command("check")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--encoding", "-e", default=DEFAULT_ENCODING, show_default=True, help="Text encoding of FILE")
@click.option("--mode", "-m", default=IndentMode.STRICT.value, show_default=True,
              type=click.Choice([m.value for m in IndentMode], case_sensitive=False),
              help="Indentation policy")
def cmd_check(file: Path, encoding: str, mode: str) -> None:
    """Validate the indentation of a single FILE."""
    try:
        issue = scan_file(file, encoding, IndentMode.parse(mode))
    except ScanFileError as exc:
        print_message(str(exc), Severity.ERROR)
        sys.exit(EXIT_ISSUES)

    if issue is None:
        print_message(f"{file}: ok", Severity.SUCCESS)
        return

    print_message(f"{file}: {issue.message}", Severity.WARNING)
    sys.exit(EXIT_ISSUES)


def main() -> None:
    """Console entry point; any error escaping a command is reported here."""
    try:
        cli(standalone_mode=True)
    except Exception as exc:  # noqa: BLE001
        print_message(f"Error: {exc!r}", Severity.ERROR)
        if os.environ.get("INDENTCHECK_DEBUG"):
            _console.print_exception()
        sys.exit(EXIT_UNEXPECTED)
