"""
File loading for indentcheck.

Resolves the text encoding configured for a file and decodes it into
lines. Failures are raised as ScanFileError subclasses so the walk can
record them and move on to the next file.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

DEFAULT_ENCODING = "utf-8"

_BOM = "\ufeff"


class ScanFileError(Exception):
    """A recoverable failure confined to a single file."""


class InvalidEncodingError(ScanFileError):
    """The configured encoding name is not a known codec."""


class FileReadError(ScanFileError):
    """The file could not be read or decoded with its encoding."""


@dataclass
class FileContent:
    """Holds the decoded lines of a file."""

    path: Path
    lines: list[str]
    encoding: str = DEFAULT_ENCODING


def resolve_encoding(path: Path | str, extension: str, encoding_map: Mapping[str, str]) -> str:
    """Return the encoding for path: exact full path first, then extension, then utf-8."""
    name = encoding_map.get(str(path))
    if name is None:
        name = encoding_map.get(extension)
    return name if name is not None else DEFAULT_ENCODING


def split_lines(text: str) -> list[str]:
    """Split on CRLF, CR or LF without keeping terminators or a trailing empty line."""
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def load_lines(path: Path, encoding_name: str) -> FileContent:
    """
    Read and decode a file with the given encoding.

    Raises InvalidEncodingError for an unknown codec name and
    FileReadError for I/O or decoding failures.
    """
    try:
        codecs.lookup(encoding_name)
        b"".decode(encoding_name)  # rejects binary codecs such as base64
    except LookupError as exc:
        raise InvalidEncodingError(
            f"Invalid encoding '{encoding_name}' for file '{path}': {exc}"
        ) from exc

    try:
        with open(path, "rb") as f:
            raw = f.read()
        text = raw.decode(encoding_name)
    except (OSError, UnicodeError) as exc:
        raise FileReadError(
            f"Failed to read file '{path}' with encoding '{encoding_name}': {exc}"
        ) from exc

    if text.startswith(_BOM):
        text = text[1:]

    return FileContent(path=path, lines=split_lines(text), encoding=encoding_name)
