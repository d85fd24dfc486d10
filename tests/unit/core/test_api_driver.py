#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/core/test_api_driver.py
"""Unit tests for the public API and the validation driver.

Tests cover:
- ParseResult invariants
- parse_mdx success and error reporting
- Async wrappers
- Debounced validation with superseded edits

"""

import asyncio

import pytest

import mdxdoc
from mdxdoc.api import ParseResult, parse_mdx, parse_mdx_async, serialize_document_async
from mdxdoc.document import doc, paragraph
from mdxdoc.driver import ValidationDriver
from mdxdoc.options import MdxParserOptions


@pytest.mark.unit
class TestParseResult:
    """Tests for the ParseResult container."""

    def test_document_result(self):
        """Test a successful result."""
        result = ParseResult(document=doc())
        assert result.ok
        assert result.parse_error is None

    def test_error_result(self):
        """Test a failed result."""
        result = ParseResult(parse_error="bad", error_line=2)
        assert not result.ok
        assert result.error_line == 2

    @pytest.mark.parametrize(
        "kwargs",
        [
            {},
            {"document": doc(), "parse_error": "bad"},
            {"document": doc(), "error_line": 1},
        ],
    )
    def test_invalid_combinations(self, kwargs):
        """Test that a result is exactly one of a document and an error."""
        with pytest.raises(ValueError):
            ParseResult(**kwargs)


@pytest.mark.unit
class TestParseMdx:
    """Tests for parse_mdx."""

    def test_success(self):
        """Test that valid MDX produces a document."""
        result = parse_mdx("# Title\n\nHello\n")
        assert result.ok
        assert [node.type for node in result.document.content] == ["heading", "paragraph"]

    def test_syntax_error_is_returned(self):
        """Test that a missing closing tag is reported with its line."""
        result = parse_mdx("<Card>\n\nno closing tag\n")
        assert result.document is None
        assert "Expected a closing tag for `<Card>`" in result.parse_error
        assert result.error_line == 1

    def test_error_line_of_nested_component(self):
        """Test the line of an error deeper in the file."""
        result = parse_mdx("# Title\n\n<Tabs>\n<Tab title=\"A\">\n\nAlpha\n\n</Tabs>\n")
        assert result.error_line == 4

    def test_unknown_component_is_not_an_error(self):
        """Test that an unknown component degrades to a placeholder paragraph."""
        result = parse_mdx("<FooBar>text</FooBar>\n")
        assert result.ok
        assert result.document.content == [paragraph("[Unknown component: FooBar]")]

    def test_options_are_used(self):
        """Test that parser options reach the converter."""
        result = parse_mdx("<Card>\n\nBody\n\n</Card>\n", MdxParserOptions(generate_ids=False))
        assert "id" not in result.document.content[0].attrs

    def test_package_exports(self):
        """Test the top-level entry points."""
        assert mdxdoc.parse_mdx is parse_mdx
        assert mdxdoc.serialize_document(mdxdoc.parse_mdx("Hello\n").document) == "Hello\n"


@pytest.mark.unit
class TestAsyncApi:
    """Tests for the async wrappers."""

    def test_parse_mdx_async(self):
        """Test parsing off the event loop."""
        result = asyncio.run(parse_mdx_async("Hello\n"))
        assert result.document.content == [paragraph("Hello")]

    def test_serialize_document_async(self):
        """Test serializing off the event loop."""
        assert asyncio.run(serialize_document_async(doc([paragraph("Hello")]))) == "Hello\n"


@pytest.mark.unit
class TestValidationDriver:
    """Tests for ValidationDriver."""

    def test_negative_debounce_rejected(self):
        """Test the debounce range."""
        with pytest.raises(ValueError, match="debounce must be non-negative"):
            ValidationDriver(debounce=-1)

    def test_latest_edit_wins(self):
        """Test that a newer edit supersedes a pending one."""
        published = []

        async def main():
            driver = ValidationDriver(on_result=published.append, debounce=0.01)
            first = driver.submit("# Draft\n")
            driver.submit("# Final\n")
            result = await driver.flush()
            return driver, first, result

        driver, first, result = asyncio.run(main())
        assert first.cancelled()
        assert driver.generation == 2
        assert result.document.content[0].text_content() == "Final"
        assert published == [result]
        assert driver.latest is result

    def test_error_results_are_published(self):
        """Test that parse errors reach the callback with their line."""
        published = []

        async def main():
            driver = ValidationDriver(on_result=published.append, debounce=0)
            driver.submit("Intro\n\n<Card>\n\nno closing tag\n")
            return await driver.flush()

        result = asyncio.run(main())
        assert result.parse_error is not None
        assert result.error_line == 3
        assert published == [result]

    def test_cancel_discards_pending_edit(self):
        """Test that a cancelled edit never publishes."""
        published = []

        async def main():
            driver = ValidationDriver(on_result=published.append, debounce=0.01)
            driver.submit("# Draft\n")
            driver.cancel()
            return driver, await driver.flush()

        driver, result = asyncio.run(main())
        assert result is None
        assert not driver.pending
        assert published == []

    def test_sequential_edits_each_publish(self):
        """Test that edits far enough apart are all validated."""
        published = []

        async def main():
            driver = ValidationDriver(on_result=published.append, debounce=0)
            driver.submit("One\n")
            await driver.flush()
            driver.submit("Two\n")
            await driver.flush()

        asyncio.run(main())
        assert [result.document.content[0].text_content() for result in published] == ["One", "Two"]
