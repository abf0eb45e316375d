"""
Indentation validation engine for indentcheck.

Classifies the leading whitespace of each line and reports the first
line that breaks the configured indentation policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

INDENT_WIDTH = 4


class IndentMode(str, Enum):
    """Indentation policy applied to a file."""

    STRICT = "strict"  # >= 4 and a multiple of 4
    FLEX = "flex"  # >= 4

    @classmethod
    def parse(cls, value: str | None) -> "IndentMode":
        """Map a configured mode name to an IndentMode, defaulting to STRICT."""
        if value is None:
            return cls.STRICT
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.STRICT


@dataclass(frozen=True)
class Ok:
    def describe(self, line_number: int) -> str:
        return ""


@dataclass(frozen=True)
class BlankWithIndentation:
    def describe(self, line_number: int) -> str:
        return f"Line {line_number} contains only indentation and no visible characters."


@dataclass(frozen=True)
class ForeignIndentChar:
    codepoint: int

    def describe(self, line_number: int) -> str:
        return (
            f"Non-ASCII-space char (U+{self.codepoint:04X}) "
            f"used for indentation at line {line_number}."
        )


@dataclass(frozen=True)
class InsufficientIndent:
    found_spaces: int

    def describe(self, line_number: int) -> str:
        return (
            f"Indentation less than {INDENT_WIDTH} spaces at line {line_number} "
            f"(found {self.found_spaces} spaces)."
        )


@dataclass(frozen=True)
class NonMultipleIndent:
    found_spaces: int

    def describe(self, line_number: int) -> str:
        return (
            f"Indentation not a multiple of {INDENT_WIDTH} spaces at line {line_number} "
            f"(found {self.found_spaces} spaces)."
        )


LineVerdict = Union[Ok, BlankWithIndentation, ForeignIndentChar, InsufficientIndent, NonMultipleIndent]

OK = Ok()


@dataclass(frozen=True)
class LineIssue:
    """The first violating line of a file."""

    line_number: int  # 1-based
    verdict: LineVerdict

    @property
    def message(self) -> str:
        return self.verdict.describe(self.line_number)


def leading_whitespace(line: str) -> int:
    """Return the length of the run of Unicode whitespace at the start of line."""
    length = 0
    while length < len(line) and line[length].isspace():
        length += 1
    return length


def classify_line(line: str, mode: IndentMode) -> LineVerdict:
    """
    Classify a single line against the indentation policy.

    Checks run in a fixed order: whitespace-only line, non-space
    character in the run, run shorter than the indent width, and
    (STRICT only) run not a multiple of the indent width.
    """
    run = leading_whitespace(line)
    if run == 0:
        return OK

    if run == len(line):
        return BlankWithIndentation()

    for ch in line[:run]:
        if ch != " ":
            return ForeignIndentChar(ord(ch))

    if run < INDENT_WIDTH:
        return InsufficientIndent(run)

    if mode is IndentMode.STRICT and run % INDENT_WIDTH != 0:
        return NonMultipleIndent(run)

    return OK


def validate_lines(lines: Iterable[str], mode: IndentMode) -> LineIssue | None:
    """Return the first violating line, or None if every line passes."""
    for line_number, line in enumerate(lines, start=1):
        verdict = classify_line(line, mode)
        if not isinstance(verdict, Ok):
            return LineIssue(line_number=line_number, verdict=verdict)
    return None
