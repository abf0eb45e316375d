"""
Directory walker for indentcheck.

Walks the scan roots depth-first, applies the ignore rules, and runs
every surviving file through encoding resolution and indentation
validation, recording what it sees into ScanStatistics.
"""

from __future__ import annotations

import os
from pathlib import Path

from indentcheck.config_loader import ScanConfiguration
from indentcheck.file_loader import ScanFileError, load_lines
from indentcheck.indentation import IndentMode, LineIssue, validate_lines
from indentcheck.report import Severity, print_message
from indentcheck.statistics import ScanStatistics


def _sort_key(path: Path) -> tuple[str, str]:
    text = str(path)
    return text.lower(), text


def _list_directory(directory: Path) -> tuple[list[Path], list[Path]]:
    """
    Return (subdirectories, files) of directory, each sorted case-insensitively.

    Symbolic links to directories are neither descended into nor checked.
    """
    subdirs: list[Path] = []
    files: list[Path] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                subdirs.append(directory / entry.name)
            elif not entry.is_dir():
                files.append(directory / entry.name)
    subdirs.sort(key=_sort_key)
    files.sort(key=_sort_key)
    return subdirs, files


def scan_file(path: Path, encoding_name: str, mode: IndentMode) -> LineIssue | None:
    """Decode a single file and return its first indentation violation, if any."""
    content = load_lines(path, encoding_name)
    return validate_lines(content.lines, mode)


def check_file(path: Path, config: ScanConfiguration, stats: ScanStatistics) -> None:
    """Apply the file ignore tiers, then decode and validate the file."""
    file_path = str(path)
    if config.is_ignored_full_path(path):
        stats.add_ignored_by_full_path(file_path)
        return
    if config.is_ignored_name(path):
        stats.add_ignored_by_name(file_path)
        return

    extension = os.path.splitext(path.name)[1]
    if config.is_ignored_extension(extension):
        stats.add_ignored_by_extension(file_path)
        return
    stats.add_detected_extension(extension)

    encoding_name = config.encoding_for(path, extension)
    mode = config.indent_mode_for(path, extension)
    try:
        content = load_lines(path, encoding_name)
    except ScanFileError as exc:
        print_message(str(exc), Severity.ERROR)
        stats.add_error(str(exc))
        return

    stats.add_checked_file(file_path, encoding_name, mode)

    issue = validate_lines(content.lines, mode)
    if issue is not None:
        stats.add_file_with_issue(file_path, encoding_name, mode, issue.message)
        print_message(f"{file_path}: {issue.message}", Severity.WARNING)


def _enter_directory(directory: Path, config: ScanConfiguration, stats: ScanStatistics) -> bool:
    """Record the directory and return True if it should be descended into."""
    if config.is_ignored_full_path(directory):
        stats.add_ignored_by_full_path(str(directory))
        return False
    if config.is_ignored_name(directory):
        stats.add_ignored_by_name(str(directory))
        return False
    stats.add_scanned_directory(str(directory))
    return True


def scan_tree(root: Path, config: ScanConfiguration, stats: ScanStatistics) -> None:
    """
    Walk one root in pre-order, subdirectories before files.

    Uses an explicit stack: entering a directory pushes a marker for its
    files and then its subdirectories in reverse order, so every subtree
    is finished before the files of its parent are checked.
    """
    stack: list[tuple[Path, list[Path] | None]] = [(root, None)]
    while stack:
        directory, files = stack.pop()
        if files is not None:
            for file_path in files:
                check_file(file_path, config, stats)
            continue

        if not _enter_directory(directory, config, stats):
            continue

        subdirs, files = _list_directory(directory)
        stack.append((directory, files))
        stack.extend((subdir, None) for subdir in reversed(subdirs))


def scan(roots: list[str] | tuple[str, ...], config: ScanConfiguration, stats: ScanStatistics) -> None:
    """Scan every root in order; missing roots are reported and skipped."""
    for root in roots:
        root_path = Path(root)
        if not root_path.is_dir():
            print_message(f"Root directory not found: {root}", Severity.WARNING)
            continue
        scan_tree(root_path, config, stats)
