"""
Console output and report generation for indentcheck.

Console messages carry a Severity that maps to a rich style. The scan
report is a plain UTF-8 (BOM-prefixed) text file with fixed, sorted
sections so that two runs over the same tree differ only in the
timestamp embedded in the file name.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Iterable

from rich.console import Console

from indentcheck.statistics import ScanStatistics

REPORT_PREFIX = "indentChecker"
REPORT_TIMESTAMP_FORMAT = "%Y%m%dT%H%M%SZ"


class Severity(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


_SEVERITY_STYLES: dict[Severity, str] = {
    Severity.INFO: "default",
    Severity.SUCCESS: "green",
    Severity.WARNING: "yellow",
    Severity.ERROR: "bold red",
}

_console = Console(highlight=False)


def print_message(message: str, severity: Severity = Severity.INFO) -> None:
    """Print one console line styled for its severity."""
    _console.print(message, style=_SEVERITY_STYLES.get(severity, "default"), markup=False, soft_wrap=True)


def print_summary(stats: ScanStatistics, elapsed: float | None = None) -> None:
    """Print a short summary of the scan counts."""
    ignored = len(stats.ignored_by_full_path) + len(stats.ignored_by_name) + len(stats.ignored_by_extension)
    issue_count = len(stats.files_with_issues)

    _console.print()
    _console.print("[bold]--- Scan Summary ---[/bold]")
    _console.print(f"  Directories   : [bold]{len(stats.scanned_directories)}[/bold]")
    _console.print(f"  Files checked : [bold]{len(stats.checked_files)}[/bold]")
    _console.print(f"  Ignored       : [dim]{ignored}[/dim]")
    _console.print(f"  With issues   : [{'yellow' if issue_count else 'green'}]{issue_count}[/]")
    _console.print(f"  Errors        : [{'red' if stats.has_errors else 'green'}]{len(stats.errors)}[/]")
    if elapsed is not None:
        _console.print(f"  Elapsed       : [dim]{elapsed:.2f}s[/dim]")
    _console.print()


def _sorted_paths(paths: Iterable[str]) -> list[str]:
    return sorted(paths, key=lambda p: (p.lower(), p))


def _section(title: str, lines: list[str]) -> list[str]:
    return [f"[{title}]", *lines]


def build_report(stats: ScanStatistics) -> str:
    """Render the statistics as the text of a scan report."""
    checked = sorted(stats.checked_files, key=lambda c: (c.path.lower(), c.path, c.encoding))
    issues = sorted(stats.files_with_issues, key=lambda i: (i.path.lower(), i.path))

    sections = [
        _section("Scanned Directories", _sorted_paths(stats.scanned_directories)),
        _section("Detected Extensions", _sorted_paths(stats.detected_extensions)),
        _section("Checked Files", [f"{c.path} (encoding: {c.encoding})" for c in checked]),
        _section("Ignored by Full Path", _sorted_paths(stats.ignored_by_full_path)),
        _section("Ignored by Name", _sorted_paths(stats.ignored_by_name)),
        _section("Ignored by Extension", _sorted_paths(stats.ignored_by_extension)),
        _section("Files with Issues", [f"{i.path} (encoding: {i.encoding}): {i.message}" for i in issues]),
    ]
    if stats.errors:
        sections.append(_section("Errors", list(stats.errors)))

    lines = ["Scan Report"]
    for section in sections:
        lines.append("")
        lines.extend(section)
    return "\n".join(lines) + "\n"


def report_path(reports_dir: Path, now: datetime | None = None) -> Path:
    """Return the report file path for a run started at now (UTC)."""
    timestamp = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return reports_dir / f"{REPORT_PREFIX}-{timestamp.strftime(REPORT_TIMESTAMP_FORMAT)}.log"


def write_report(stats: ScanStatistics, destination: Path) -> None:
    """Write the scan report to destination as BOM-prefixed UTF-8."""
    destination.parent.mkdir(parents=True, exist_ok=True)
    with open(destination, "w", encoding="utf-8-sig", newline="") as f:
        f.write(build_report(stats))
