#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_cli.py
"""Unit tests for the mdxdoc command line interface.

Tests cover:
- parse, serialize, check and format subcommands
- Reading from stdin and writing to files
- Exit codes for parse, file and validation errors
- Argument errors and --version

"""

import io
import json
from pathlib import Path

import pytest

from mdxdoc.cli import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    FileError,
    get_exit_code_for_exception,
    main,
)
from mdxdoc.exceptions import DependencyError, ParseException, SerializationError


@pytest.mark.cli
@pytest.mark.unit
class TestParseCommand:
    """Test the parse subcommand."""

    def test_parse_to_stdout(self, tmp_path: Path, capsys):
        """Test converting a file to TipTap JSON."""
        source = tmp_path / "page.mdx"
        source.write_text("# Title\n\nHello\n", encoding="utf-8")

        assert main(["parse", str(source), "--no-ids"]) == EXIT_SUCCESS

        data = json.loads(capsys.readouterr().out)
        assert data["type"] == "doc"
        assert [block["type"] for block in data["content"]] == ["heading", "paragraph"]

    def test_parse_to_file(self, tmp_path: Path):
        """Test the --output option."""
        source = tmp_path / "page.mdx"
        source.write_text("<Card title=\"Hi\">\n\nBody\n\n</Card>\n", encoding="utf-8")
        output = tmp_path / "page.json"

        assert main(["parse", str(source), "-o", str(output)]) == EXIT_SUCCESS

        card = json.loads(output.read_text(encoding="utf-8"))["content"][0]
        assert card["type"] == "cardBlock"
        assert card["attrs"]["id"].startswith("card-")

    def test_parse_file_with_byte_order_mark(self, tmp_path: Path, capsys):
        """Test that a file saved with a byte order mark parses normally."""
        source = tmp_path / "page.mdx"
        source.write_text("# Title\n", encoding="utf-8-sig")

        assert main(["parse", str(source), "--no-ids"]) == EXIT_SUCCESS

        data = json.loads(capsys.readouterr().out)
        assert data["content"][0]["type"] == "heading"

    def test_parse_from_stdin(self, monkeypatch, capsys):
        """Test reading MDX from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("Hello\n"))

        assert main(["parse", "-", "--indent", "4"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert out.startswith('{\n    "type": "doc"')

    def test_parse_error(self, tmp_path: Path, capsys):
        """Test that a syntax error is reported with its line."""
        source = tmp_path / "broken.mdx"
        source.write_text("<Card>\n\nno closing tag\n", encoding="utf-8")

        assert main(["parse", str(source)]) == EXIT_PARSING_ERROR

        err = capsys.readouterr().err
        assert f"{source}:1: Expected a closing tag for `<Card>`" in err

    def test_missing_file(self, tmp_path: Path, capsys):
        """Test the exit code for an unreadable input."""
        assert main(["parse", str(tmp_path / "missing.mdx")]) == EXIT_FILE_ERROR
        assert "Cannot read" in capsys.readouterr().err


@pytest.mark.cli
@pytest.mark.unit
class TestSerializeCommand:
    """Test the serialize subcommand."""

    def test_serialize(self, tmp_path: Path, capsys):
        """Test converting TipTap JSON to MDX."""
        source = tmp_path / "page.json"
        source.write_text(
            json.dumps(
                {
                    "type": "doc",
                    "content": [
                        {"type": "heading", "attrs": {"level": 1}, "content": [{"type": "text", "text": "Title"}]},
                        {"type": "paragraph", "content": [{"type": "text", "text": "Hello"}]},
                    ],
                }
            ),
            encoding="utf-8",
        )

        assert main(["serialize", str(source)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "# Title\n\nHello\n"

    def test_invalid_json(self, tmp_path: Path, capsys):
        """Test the exit code for malformed input."""
        source = tmp_path / "page.json"
        source.write_text("not json", encoding="utf-8")

        assert main(["serialize", str(source)]) == EXIT_VALIDATION_ERROR
        assert capsys.readouterr().err.startswith("Error:")


@pytest.mark.cli
@pytest.mark.unit
class TestCheckCommand:
    """Test the check subcommand."""

    def test_all_valid(self, tmp_path: Path):
        """Test that valid files exit cleanly."""
        first = tmp_path / "a.mdx"
        second = tmp_path / "b.mdx"
        first.write_text("# A\n", encoding="utf-8")
        second.write_text("<Note>Fine</Note>\n", encoding="utf-8")

        assert main(["check", str(first), str(second)]) == EXIT_SUCCESS

    def test_reports_each_failure(self, tmp_path: Path, capsys):
        """Test that every broken file is reported."""
        good = tmp_path / "good.mdx"
        bad = tmp_path / "bad.mdx"
        good.write_text("# Fine\n", encoding="utf-8")
        bad.write_text("Intro\n\n<Tabs>\n\nBody\n", encoding="utf-8")

        assert main(["check", str(good), str(bad), str(tmp_path / "missing.mdx")]) == EXIT_PARSING_ERROR

        err = capsys.readouterr().err
        assert f"{bad}:3:" in err
        assert "missing.mdx" in err
        assert str(good) not in err


@pytest.mark.cli
@pytest.mark.unit
class TestFormatCommand:
    """Test the format subcommand."""

    def test_format_normalizes(self, tmp_path: Path, capsys):
        """Test that formatting rewrites non-canonical syntax."""
        source = tmp_path / "page.mdx"
        source.write_text("Title\n=====\n\n* one\n* two\n", encoding="utf-8")

        assert main(["format", str(source)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "# Title\n\n- one\n- two\n"

    def test_format_check_changed(self, tmp_path: Path, capsys):
        """Test --check on a file that would change."""
        source = tmp_path / "page.mdx"
        source.write_text("* one\n* two\n", encoding="utf-8")

        assert main(["format", str(source), "--check"]) == EXIT_ERROR

        captured = capsys.readouterr()
        assert "would be reformatted" in captured.err
        assert captured.out == ""
        assert source.read_text(encoding="utf-8") == "* one\n* two\n"

    def test_format_check_clean(self, tmp_path: Path):
        """Test --check on a canonical file."""
        source = tmp_path / "page.mdx"
        source.write_text("- one\n- two\n", encoding="utf-8")

        assert main(["format", str(source), "--check"]) == EXIT_SUCCESS

    def test_format_to_file(self, tmp_path: Path):
        """Test writing the formatted text to a file."""
        source = tmp_path / "page.mdx"
        output = tmp_path / "out.mdx"
        source.write_text("> [!tip] Save often\n", encoding="utf-8")

        assert main(["format", str(source), "-o", str(output)]) == EXIT_SUCCESS
        assert output.read_text(encoding="utf-8") == "> [!TIP]\n> Save often\n"


@pytest.mark.cli
@pytest.mark.unit
class TestArguments:
    """Test argument handling and exit codes."""

    def test_missing_command(self, capsys):
        """Test that a subcommand is required."""
        assert main([]) == 2
        assert "usage:" in capsys.readouterr().err

    def test_version(self, capsys):
        """Test the --version flag."""
        assert main(["--version"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.startswith("mdxdoc ")

    def test_invalid_indent(self, tmp_path: Path):
        """Test that the indent must be positive."""
        source = tmp_path / "page.mdx"
        source.write_text("x\n", encoding="utf-8")
        assert main(["parse", str(source), "--indent", "0"]) == 2

    @pytest.mark.parametrize(
        "exception,code",
        [
            (DependencyError("mdx", [("pyyaml", ">=6.0")]), 2),
            (FileError("gone"), EXIT_FILE_ERROR),
            (ParseException("bad"), EXIT_PARSING_ERROR),
            (SerializationError("bad"), 7),
            (RuntimeError("boom"), EXIT_ERROR),
        ],
    )
    def test_exit_codes(self, exception, code):
        """Test the exception to exit code mapping."""
        assert get_exit_code_for_exception(exception) == code
