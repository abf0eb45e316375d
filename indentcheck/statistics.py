"""
Scan statistics collected over a single indentcheck run.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from indentcheck.indentation import IndentMode


@dataclass(frozen=True)
class CheckedFile:
    """A file that was decoded and validated."""

    path: str
    encoding: str
    indent_mode: IndentMode = IndentMode.STRICT


@dataclass(frozen=True)
class FileIssue:
    """The first indentation violation found in a file."""

    path: str
    encoding: str
    indent_mode: IndentMode
    message: str


@dataclass
class ScanStatistics:
    """Everything observed during a scan, consumed by the report writer."""

    scanned_directories: set[str] = field(default_factory=set)
    detected_extensions: set[str] = field(default_factory=set)  # lower-cased
    checked_files: set[CheckedFile] = field(default_factory=set)
    ignored_by_full_path: set[str] = field(default_factory=set)
    ignored_by_name: set[str] = field(default_factory=set)
    ignored_by_extension: set[str] = field(default_factory=set)
    files_with_issues: list[FileIssue] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def add_scanned_directory(self, path: str) -> None:
        self.scanned_directories.add(path)

    def add_detected_extension(self, extension: str) -> None:
        if extension:
            self.detected_extensions.add(extension.lower())

    def add_checked_file(self, path: str, encoding: str, indent_mode: IndentMode) -> None:
        self.checked_files.add(CheckedFile(path, encoding, indent_mode))

    def add_ignored_by_full_path(self, path: str) -> None:
        self.ignored_by_full_path.add(path)

    def add_ignored_by_name(self, path: str) -> None:
        self.ignored_by_name.add(path)

    def add_ignored_by_extension(self, path: str) -> None:
        self.ignored_by_extension.add(path)

    def add_file_with_issue(self, path: str, encoding: str, indent_mode: IndentMode, message: str) -> None:
        self.files_with_issues.append(FileIssue(path, encoding, indent_mode, message))

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    @property
    def has_issues(self) -> bool:
        return bool(self.files_with_issues)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
