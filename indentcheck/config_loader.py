"""
Configuration loader for indentcheck.

Reads the ignore lists, scan roots and encoding/indent-mode maps from a
config directory and provides a single ScanConfiguration consumed by
the scanner.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from indentcheck.file_loader import resolve_encoding
from indentcheck.indentation import IndentMode

_DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"

IGNORED_FULL_PATHS_FILE = "ignoredFullPaths.txt"
IGNORED_NAMES_FILE = "ignoredNames.txt"
IGNORED_EXTENSIONS_FILE = "ignoredExtensions.txt"
SCAN_ROOTS_FILE = "scanRoots.txt"
ENCODING_MAP_FILE = "encodingMap.json"
INDENT_MODE_MAP_FILE = "indentModeMap.json"  # optional

REQUIRED_FILES: tuple[str, ...] = (
    IGNORED_FULL_PATHS_FILE,
    IGNORED_NAMES_FILE,
    IGNORED_EXTENSIONS_FILE,
    SCAN_ROOTS_FILE,
    ENCODING_MAP_FILE,
)


class ConfigError(Exception):
    """Fatal configuration problem; the scan never starts."""


class ConfigMissingError(ConfigError):
    """One or more required configuration files do not exist."""

    def __init__(self, missing: list[Path]) -> None:
        self.missing = missing
        super().__init__("Required file(s) missing: " + ", ".join(str(p) for p in missing))


class ConfigParseError(ConfigError):
    """A configuration file exists but could not be parsed."""


def _normalize_path(value: str) -> str:
    return str(Path(value)).lower()


@dataclass(frozen=True)
class ScanConfiguration:
    """Immutable scan settings shared by the whole walk."""

    ignored_full_paths: frozenset[str] = frozenset()
    ignored_names: frozenset[str] = frozenset()
    ignored_extensions: frozenset[str] = frozenset()
    scan_roots: tuple[str, ...] = ()
    encoding_map: Mapping[str, str] = field(default_factory=dict)
    indent_mode_map: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        ignored_full_paths: list[str] | None = None,
        ignored_names: list[str] | None = None,
        ignored_extensions: list[str] | None = None,
        scan_roots: list[str] | None = None,
        encoding_map: Mapping[str, str] | None = None,
        indent_mode_map: Mapping[str, str] | None = None,
    ) -> "ScanConfiguration":
        """Normalise raw config values: lower-cased ignore sets, sorted roots."""
        return cls(
            ignored_full_paths=frozenset(_normalize_path(p) for p in ignored_full_paths or []),
            ignored_names=frozenset(n.lower() for n in ignored_names or []),
            ignored_extensions=frozenset(e.lower() for e in ignored_extensions or []),
            scan_roots=tuple(sorted(scan_roots or [], key=lambda r: (r.lower(), r))),
            encoding_map=dict(encoding_map or {}),
            indent_mode_map=dict(indent_mode_map or {}),
        )

    def is_ignored_full_path(self, path: Path | str) -> bool:
        return _normalize_path(str(path)) in self.ignored_full_paths

    def is_ignored_name(self, path: Path | str) -> bool:
        return Path(path).name.lower() in self.ignored_names

    def is_ignored_extension(self, extension: str) -> bool:
        return bool(extension) and extension.lower() in self.ignored_extensions

    def encoding_for(self, path: Path | str, extension: str) -> str:
        return resolve_encoding(path, extension, self.encoding_map)

    def indent_mode_for(self, path: Path | str, extension: str) -> IndentMode:
        value = self.indent_mode_map.get(str(path))
        if value is None:
            value = self.indent_mode_map.get(extension)
        return IndentMode.parse(value)


def read_trimmed_lines(path: Path) -> list[str]:
    """Return the trimmed, non-blank lines of a UTF-8 text file."""
    try:
        with open(path, encoding="utf-8-sig") as f:
            return [stripped for stripped in (line.strip() for line in f) if stripped]
    except UnicodeDecodeError as exc:
        raise ConfigParseError(f"Failed to read {path} as UTF-8: {exc}") from exc


def read_mapping(path: Path) -> dict[str, str]:
    """Parse a flat JSON object of string keys to string values."""
    try:
        with open(path, encoding="utf-8-sig") as f:
            raw = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigParseError(f"Failed to parse mapping file {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigParseError(f"Failed to parse mapping file {path}: expected a JSON object")

    for key, value in raw.items():
        if not isinstance(value, str):
            raise ConfigParseError(
                f"Failed to parse mapping file {path}: value for '{key}' is not a string"
            )
    return raw


def load_config(config_dir: Path | None = None) -> ScanConfiguration:
    """
    Load every configuration file from config_dir.

    Falls back to the bundled config directory if no path is provided.
    All required files are checked before anything is parsed so that
    every missing file is reported at once.
    """
    directory = config_dir or _DEFAULT_CONFIG_DIR
    missing = [directory / name for name in REQUIRED_FILES if not (directory / name).is_file()]
    if missing:
        raise ConfigMissingError(missing)

    mode_map_path = directory / INDENT_MODE_MAP_FILE
    return ScanConfiguration.build(
        ignored_full_paths=read_trimmed_lines(directory / IGNORED_FULL_PATHS_FILE),
        ignored_names=read_trimmed_lines(directory / IGNORED_NAMES_FILE),
        ignored_extensions=read_trimmed_lines(directory / IGNORED_EXTENSIONS_FILE),
        scan_roots=read_trimmed_lines(directory / SCAN_ROOTS_FILE),
        encoding_map=read_mapping(directory / ENCODING_MAP_FILE),
        indent_mode_map=read_mapping(mode_map_path) if mode_map_path.is_file() else {},
    )
