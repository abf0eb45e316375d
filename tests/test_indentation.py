"""Tests for the indentation validation engine."""

from __future__ import annotations

import pytest

from indentcheck.indentation import (
    BlankWithIndentation,
    ForeignIndentChar,
    IndentMode,
    InsufficientIndent,
    NonMultipleIndent,
    OK,
    Ok,
    classify_line,
    leading_whitespace,
    validate_lines,
)


# ── leading_whitespace ─────────────────────────────────────────────────────


@pytest.mark.parametrize("line,expected", [
    ("", 0),
    ("value", 0),
    ("    value", 4),
    ("\tvalue", 1),
    ("\u3000\u00a0x", 2),
    ("   ", 3),
])
def test_leading_whitespace(line, expected):
    assert leading_whitespace(line) == expected


# ── IndentMode.parse ───────────────────────────────────────────────────────


@pytest.mark.parametrize("value,expected", [
    ("strict", IndentMode.STRICT),
    ("flex", IndentMode.FLEX),
    ("FLEX", IndentMode.FLEX),
    (" Flex ", IndentMode.FLEX),
    ("loose", IndentMode.STRICT),
    ("", IndentMode.STRICT),
    (None, IndentMode.STRICT),
])
def test_indent_mode_parse(value, expected):
    assert IndentMode.parse(value) is expected


# ── classify_line ──────────────────────────────────────────────────────────


def test_four_spaces_strict_ok():
    assert classify_line("    value", IndentMode.STRICT) == OK


@pytest.mark.parametrize("mode", list(IndentMode))
def test_three_spaces_insufficient_in_any_mode(mode):
    assert classify_line("   value", mode) == InsufficientIndent(3)


@pytest.mark.parametrize("mode", list(IndentMode))
def test_tab_is_foreign_char(mode):
    assert classify_line("\tvalue", mode) == ForeignIndentChar(0x0009)


def test_six_spaces_flex_ok():
    assert classify_line("      value", IndentMode.FLEX) == OK


def test_six_spaces_strict_non_multiple():
    assert classify_line("      value", IndentMode.STRICT) == NonMultipleIndent(6)


@pytest.mark.parametrize("mode", list(IndentMode))
def test_whitespace_only_line_is_blank_with_indentation(mode):
    assert classify_line("    ", mode) == BlankWithIndentation()


def test_blank_check_wins_over_foreign_char():
    assert classify_line("\t\t", IndentMode.STRICT) == BlankWithIndentation()


def test_empty_line_ok():
    assert classify_line("", IndentMode.STRICT) == OK


def test_unindented_line_ok():
    assert classify_line("value    ", IndentMode.STRICT) == OK


def test_first_foreign_char_reported():
    line = "  \u00a0\tvalue"
    assert classify_line(line, IndentMode.STRICT) == ForeignIndentChar(0x00A0)


def test_ideographic_space_is_foreign():
    assert classify_line("\u3000x", IndentMode.FLEX) == ForeignIndentChar(0x3000)


def test_information_separator_counts_as_indentation():
    assert classify_line("\x1cx", IndentMode.STRICT) == ForeignIndentChar(0x1C)


def test_foreign_char_checked_before_length():
    # 2-char run, would be insufficient, but the tab is reported first
    assert classify_line(" \tx", IndentMode.STRICT) == ForeignIndentChar(9)


def test_two_spaces_insufficient_before_multiple_rule():
    assert classify_line("  x", IndentMode.STRICT) == InsufficientIndent(2)


@pytest.mark.parametrize("spaces,mode,expected", [
    (4, IndentMode.STRICT, OK),
    (8, IndentMode.STRICT, OK),
    (5, IndentMode.STRICT, NonMultipleIndent(5)),
    (5, IndentMode.FLEX, OK),
    (1, IndentMode.FLEX, InsufficientIndent(1)),
    (12, IndentMode.FLEX, OK),
])
def test_length_rules(spaces, mode, expected):
    assert classify_line(" " * spaces + "x", mode) == expected


# ── messages ───────────────────────────────────────────────────────────────


def test_messages():
    assert BlankWithIndentation().describe(3) == (
        "Line 3 contains only indentation and no visible characters."
    )
    assert ForeignIndentChar(9).describe(1) == (
        "Non-ASCII-space char (U+0009) used for indentation at line 1."
    )
    assert ForeignIndentChar(0x3000).describe(2) == (
        "Non-ASCII-space char (U+3000) used for indentation at line 2."
    )
    assert InsufficientIndent(3).describe(7) == (
        "Indentation less than 4 spaces at line 7 (found 3 spaces)."
    )
    assert NonMultipleIndent(6).describe(5) == (
        "Indentation not a multiple of 4 spaces at line 5 (found 6 spaces)."
    )


# ── validate_lines ─────────────────────────────────────────────────────────


def test_validate_clean_file():
    lines = ["def f():", "    return 1", "", "x = 2"]
    assert validate_lines(lines, IndentMode.STRICT) is None


def test_validate_empty_file():
    assert validate_lines([], IndentMode.STRICT) is None


def test_validate_reports_first_violation_only():
    lines = ["ok", "   three", "\ttab", "      six"]
    issue = validate_lines(lines, IndentMode.STRICT)
    assert issue is not None
    assert issue.line_number == 2
    assert issue.verdict == InsufficientIndent(3)
    assert issue.message == "Indentation less than 4 spaces at line 2 (found 3 spaces)."


def test_validate_flex_skips_non_multiple():
    lines = ["x", "      six", "\ttab"]
    issue = validate_lines(lines, IndentMode.FLEX)
    assert issue is not None
    assert issue.line_number == 3
    assert isinstance(issue.verdict, ForeignIndentChar)


def test_validate_stops_at_first_violation():
    consumed = []

    def lines():
        for line in ["ok", "    ", "never"]:
            consumed.append(line)
            yield line

    issue = validate_lines(lines(), IndentMode.STRICT)
    assert issue.line_number == 2
    assert consumed == ["ok", "    "]


def test_ok_has_empty_message():
    assert Ok().describe(1) == ""
