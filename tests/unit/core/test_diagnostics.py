#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/core/test_diagnostics.py
"""Unit tests for parse error location.

Tests cover:
- Each recognized position phrasing
- Pattern precedence
- Messages without a position

"""

import pytest

from mdxdoc.diagnostics import ErrorLocation, locate_error


@pytest.mark.unit
class TestLocateError:
    """Tests for locate_error."""

    @pytest.mark.parametrize(
        "message,line",
        [
            ("Expected a closing tag for `<Card>` (3:1-3:10) before the end of `document`", 3),
            ("Unexpected end of file (12:4)", 12),
            ("5:2: Unexpected closing tag `</Tab>`", 5),
            ("Invalid YAML frontmatter at line 7", 7),
            ("Unexpected token on Line 9", 9),
            ("Unexpected character at position 42", 42),
        ],
    )
    def test_recognized_positions(self, message, line):
        """Test the supported message formats."""
        assert locate_error(message) == ErrorLocation(line)

    def test_range_takes_start_line(self):
        """Test that a range resolves to its start."""
        assert locate_error("Unclosed `<Tabs>` (4:1-8:7)").line == 4

    def test_first_pattern_wins(self):
        """Test that a parenthesized position beats a line phrase."""
        assert locate_error("line 20 has `<Card>` (2:1-2:7) unclosed").line == 2

    @pytest.mark.parametrize("message", [None, "", "something went wrong", "version 1.2"])
    def test_no_position(self, message):
        """Test messages without a position."""
        assert locate_error(message) is None
