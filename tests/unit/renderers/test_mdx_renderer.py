#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_mdx_renderer.py
"""Unit tests for the MDX renderer.

Tests cover:
- Markdown block and inline output
- Escaping of text that would otherwise be read as syntax
- Callouts, components and tables
- Frontmatter and ESM output
- Parse/serialize round trips and idempotence
- Rejection of invalid trees

"""

import pytest

from mdxdoc.api import parse_mdx
from mdxdoc.document import DocumentNode, Mark, doc, hard_break, heading, paragraph, strip_ids, text_node
from mdxdoc.exceptions import InvalidOptionsError, SerializationError
from mdxdoc.options import MdxParserOptions, MdxSerializerOptions
from mdxdoc.renderers.mdx import MdxRenderer, serialize_document


def _item(*blocks):
    return DocumentNode("listItem", content=list(blocks))


def _parse(source):
    result = parse_mdx(source)
    assert result.ok, result.parse_error
    return result.document


@pytest.mark.unit
class TestMarkdownBlocks:
    """Tests for plain markdown output."""

    def test_empty_document(self):
        """Test that an empty document writes nothing."""
        assert serialize_document(doc()) == ""

    def test_heading_and_paragraph(self):
        """Test blank-line separated blocks ending in one newline."""
        text = serialize_document(doc([heading(2, "Title"), paragraph("Body")]))
        assert text == "## Title\n\nBody\n"

    def test_paragraph_line_start_is_escaped(self):
        """Test that text looking like a list marker stays text."""
        assert serialize_document(doc([paragraph("1. not a list")])) == "1\\. not a list\n"

    def test_hard_break(self):
        """Test the backslash form of hard breaks."""
        assert serialize_document(doc([paragraph("a", hard_break(), "b")])) == "a\\\nb\n"

    def test_trailing_hard_break_dropped(self):
        """Test that a hard break at the end of a paragraph is not written."""
        assert serialize_document(doc([paragraph("a", hard_break())])) == "a\n"

    def test_bullet_list(self):
        """Test bullet list items."""
        tree = doc([DocumentNode("bulletList", content=[_item(paragraph("one")), _item(paragraph("two"))])])
        assert serialize_document(tree) == "- one\n- two\n"

    def test_adjacent_lists_alternate_markers(self):
        """Test that consecutive lists stay separate."""
        tree = doc(
            [
                DocumentNode("bulletList", content=[_item(paragraph("a"))]),
                DocumentNode("bulletList", content=[_item(paragraph("b"))]),
                DocumentNode("orderedList", attrs={"start": 1}, content=[_item(paragraph("c"))]),
                DocumentNode("orderedList", attrs={"start": 1}, content=[_item(paragraph("d"))]),
            ]
        )
        assert serialize_document(tree) == "- a\n\n* b\n\n1. c\n\n1) d\n"

    def test_ordered_list_start(self):
        """Test numbering from a start attribute."""
        tree = doc([DocumentNode("orderedList", attrs={"start": 3}, content=[_item(paragraph("c")), _item(paragraph("d"))])])
        assert serialize_document(tree) == "3. c\n4. d\n"

    def test_task_list(self):
        """Test checkbox markers."""
        tree = doc(
            [
                DocumentNode(
                    "taskList",
                    content=[
                        DocumentNode("taskItem", attrs={"checked": True}, content=[paragraph("done")]),
                        DocumentNode("taskItem", attrs={"checked": False}, content=[paragraph("todo")]),
                    ],
                )
            ]
        )
        assert serialize_document(tree) == "- [x] done\n- [ ] todo\n"

    def test_task_item_starting_with_heading(self):
        """Test that the checkbox stands alone when the item does not start with a paragraph."""
        tree = doc(
            [
                DocumentNode(
                    "taskList",
                    content=[DocumentNode("taskItem", attrs={"checked": False}, content=[heading(1, "h")])],
                )
            ]
        )
        assert serialize_document(tree) == "- [ ]\n\n  # h\n"

    def test_nested_list_is_indented(self):
        """Test that continuation blocks align with the item text."""
        inner = DocumentNode("bulletList", content=[_item(paragraph("inner"))])
        tree = doc([DocumentNode("bulletList", content=[_item(paragraph("outer"), inner)])])
        assert serialize_document(tree) == "- outer\n\n  - inner\n"

    def test_code_block(self):
        """Test fenced code with and without a language."""
        python = DocumentNode("codeBlock", attrs={"language": "python"}, content=[text_node("print(1)")])
        plain = DocumentNode("codeBlock", attrs={"language": "plaintext"}, content=[text_node("x")])
        assert serialize_document(doc([python])) == "```python\nprint(1)\n```\n"
        assert serialize_document(doc([plain])) == "```\nx\n```\n"

    def test_code_fence_longer_than_backtick_runs(self):
        """Test that code containing a fence gets a longer fence."""
        code = DocumentNode("codeBlock", attrs={"language": "md"}, content=[text_node("```\nx\n```")])
        assert serialize_document(doc([code])) == "````md\n```\nx\n```\n````\n"

    def test_leading_horizontal_rule(self):
        """Test that a leading rule is not mistaken for a frontmatter fence."""
        tree = doc([DocumentNode("horizontalRule"), paragraph("x")])
        assert serialize_document(tree) == "***\n\nx\n"

    def test_image_block(self):
        """Test an image with a caption."""
        image = DocumentNode("imageBlock", attrs={"src": "a.png", "alt": "Alt", "caption": "Cap", "type": "url"})
        assert serialize_document(doc([image])) == '![Alt](a.png "Cap")\n'


@pytest.mark.unit
class TestInline:
    """Tests for marks and inline escaping."""

    def test_marks(self):
        """Test bold, italic, strike, code and underline."""
        para = paragraph(
            text_node("b", [Mark("bold")]),
            " ",
            text_node("i", [Mark("italic")]),
            " ",
            text_node("s", [Mark("strike")]),
            " ",
            text_node("c", [Mark("code")]),
            " ",
            text_node("u", [Mark("underline")]),
        )
        assert serialize_document(doc([para])) == "**b** *i* ~~s~~ `c` <u>u</u>\n"

    def test_link_is_outermost(self):
        """Test that link marks wrap other marks."""
        para = paragraph(text_node("docs", [Mark("bold"), Mark.link("/docs")]))
        assert serialize_document(doc([para])) == "[**docs**](/docs)\n"

    def test_shared_mark_spans_runs(self):
        """Test that adjacent runs sharing a mark are written inside one delimiter pair."""
        para = paragraph(
            text_node("bold ", [Mark("bold")]),
            text_node("both", [Mark("bold"), Mark("italic")]),
        )
        assert serialize_document(doc([para])) == "**bold *both***\n"

    def test_delimiters_touch_text(self):
        """Test that edge whitespace moves outside emphasis delimiters."""
        para = paragraph("a", text_node(" b ", [Mark("bold")]), "c")
        assert serialize_document(doc([para])) == "a **b** c\n"

    def test_syntax_characters_escaped(self):
        """Test that component-like text is escaped."""
        assert serialize_document(doc([paragraph("<Card> *x*")])) == "\\<Card> \\*x\\*\n"


@pytest.mark.unit
class TestCallouts:
    """Tests for infoBlock output."""

    def test_untitled_callout(self):
        """Test the blockquote form."""
        tree = doc([DocumentNode("infoBlock", attrs={"type": "tip", "title": ""}, content=[paragraph("Save often")])])
        assert serialize_document(tree) == "> [!TIP]\n> Save often\n"

    def test_empty_callout(self):
        """Test a callout without a body."""
        tree = doc([DocumentNode("infoBlock", attrs={"type": "note", "title": ""}, content=[paragraph()])])
        assert serialize_document(tree) == "> [!NOTE]\n"

    def test_titled_callout(self):
        """Test the component form."""
        tree = doc(
            [DocumentNode("infoBlock", attrs={"type": "warning", "title": "Heads up"}, content=[paragraph("Careful")])]
        )
        assert serialize_document(tree) == '<Warning title="Heads up">\n  Careful\n</Warning>\n'

    def test_unknown_type_written_as_info(self, caplog):
        """Test the fallback for unknown callout types."""
        tree = doc([DocumentNode("infoBlock", attrs={"type": "shout", "title": ""}, content=[paragraph("x")])])
        assert serialize_document(tree, MdxSerializerOptions(validate_input=False)) == "> [!INFO]\n> x\n"
        assert "Unknown callout type" in caplog.text


@pytest.mark.unit
class TestComponents:
    """Tests for component output."""

    def test_card(self):
        """Test a card with a body and non-default attributes."""
        card = DocumentNode(
            "cardBlock",
            attrs={"id": "card-1", "title": "Hi", "icon": "star", "iconAlign": "left", "href": ""},
            content=[paragraph("Body")],
        )
        assert serialize_document(doc([card])) == '<Card title="Hi" icon="star">\n  Body\n</Card>\n'

    def test_empty_card_is_self_closing(self):
        """Test a card whose body is a single empty paragraph."""
        card = DocumentNode(
            "cardBlock", attrs={"title": "Hi", "icon": "", "iconAlign": "left", "href": ""}, content=[paragraph()]
        )
        assert serialize_document(doc([card])) == '<Card title="Hi" />\n'

    def test_indent_option(self):
        """Test the component body indent width."""
        card = DocumentNode("cardBlock", attrs={"title": "", "iconAlign": "left"}, content=[paragraph("Body")])
        assert serialize_document(doc([card]), MdxSerializerOptions(indent=4)) == "<Card>\n    Body\n</Card>\n"

    def test_endpoint(self):
        """Test an atomic component."""
        endpoint = DocumentNode("endpointBlock", attrs={"method": "POST", "path": "/users"})
        assert serialize_document(doc([endpoint])) == '<Endpoint method="POST" path="/users" />\n'

    def test_param_field(self):
        """Test that a one-line description is written as the element body."""
        param = DocumentNode(
            "paramBlock",
            attrs={"path": "id", "type": "number", "required": True, "default": "", "description": "The id"},
        )
        assert serialize_document(doc([param])) == '<ParamField path="id" type="number" required>The id</ParamField>\n'

    def test_accordion(self):
        """Test accordion flags."""
        tab = DocumentNode(
            "accordionTab", attrs={"header": "Q1", "disabled": True, "isActive": False}, content=[paragraph("A1")]
        )
        tree = doc([DocumentNode("accordionBlock", attrs={"multiple": False}, content=[tab])])
        assert serialize_document(tree) == (
            "<Accordion multiple={false}>\n"
            '  <AccordionTab title="Q1" disabled={true}>\n'
            "    A1\n"
            "  </AccordionTab>\n"
            "</Accordion>\n"
        )

    def test_code_group(self):
        """Test code group files written as fenced blocks."""
        group = DocumentNode(
            "codeGroup",
            attrs={"files": [{"filename": "app.py", "language": "python", "code": "print(1)"}]},
        )
        assert serialize_document(doc([group])) == (
            "<CodeGroup>\n"
            '  <Code lang="python" filename="app.py">\n'
            "    ```python\n"
            "    print(1)\n"
            "    ```\n"
            "  </Code>\n"
            "</CodeGroup>\n"
        )


@pytest.mark.unit
class TestTables:
    """Tests for tableBlock output."""

    def test_pipe_table(self):
        """Test that a plain table uses pipe syntax."""
        text = serialize_document(_parse("| A | B |\n| --- | --- |\n| 1 | 2 |\n"))
        assert text == "| A | B |\n| --- | --- |\n| 1 | 2 |\n"

    def test_pipe_cells_escaped(self):
        """Test that a pipe inside a cell is escaped."""
        text = serialize_document(_parse("| A |\n| --- |\n| x \\| y |\n"))
        assert text == "| A |\n| --- |\n| x \\| y |\n"

    def test_sortable_table_uses_component(self):
        """Test that column flags are kept through the component form."""
        text = serialize_document(_parse('<Table data={[["Name<sortable>"], ["Ada"]]} />\n'))
        assert text == '<Table\n  data={[\n    ["Name<sortable>"],\n    ["Ada"]\n  ]}\n/>\n'

    def test_table_props(self):
        """Test that non-default table props are written."""
        document = _parse('<Table pagination rowsPerPage={5} data={[["A"], ["1"]]} />\n')
        text = serialize_document(document)
        assert text.startswith("<Table\n  pagination={true}\n  rowsPerPage={5}\n")


@pytest.mark.unit
class TestDocumentData:
    """Tests for frontmatter and ESM output."""

    def test_frontmatter(self):
        """Test a YAML block before the body."""
        tree = doc([paragraph("x")], attrs={"frontmatter": {"title": "Hi"}})
        assert serialize_document(tree) == "---\ntitle: Hi\n---\n\nx\n"

    def test_frontmatter_can_be_skipped(self):
        """Test the emit_frontmatter option."""
        tree = doc([paragraph("x")], attrs={"frontmatter": {"title": "Hi"}})
        assert serialize_document(tree, MdxSerializerOptions(emit_frontmatter=False)) == "x\n"

    def test_esm(self):
        """Test that ESM statements are written before the body."""
        tree = doc([heading(1, "T")], attrs={"esm": ["import { Card } from './card'"]})
        assert serialize_document(tree) == "import { Card } from './card'\n\n# T\n"


@pytest.mark.unit
class TestErrors:
    """Tests for rejected input."""

    def test_root_must_be_doc(self):
        """Test that a bare block is rejected."""
        with pytest.raises(SerializationError, match="Expected a `doc` node"):
            serialize_document(paragraph("x"))

    def test_invalid_tree(self):
        """Test that schema violations are reported."""
        with pytest.raises(SerializationError, match="Invalid document"):
            serialize_document(doc([_item(paragraph("x"))]))

    def test_wrong_options_type(self):
        """Test that parser options are rejected."""
        with pytest.raises(InvalidOptionsError):
            MdxRenderer(MdxParserOptions())  # type: ignore[arg-type]


@pytest.mark.unit
class TestEdgeWhitespace:
    """Tests for whitespace at the edges of paragraph and heading lines."""

    def test_paragraph_edges(self):
        """Test that edge spaces are written as character references."""
        tree = doc([paragraph("A "), paragraph(" B")])
        assert serialize_document(tree) == "A&#32;\n\n&#32;B\n"

    def test_heading_edge(self):
        """Test a heading left with a trailing space."""
        assert serialize_document(doc([heading(1, "a ")])) == "# a&#32;\n"

    def test_line_after_hard_break(self):
        """Test that a continuation line keeps its leading space."""
        tree = doc([paragraph("a", hard_break(), " b")])
        assert serialize_document(tree) == "a\\\n&#32;b\n"

    def test_leading_space_before_block_marker(self):
        """Test that a reference in front of a marker keeps the line a paragraph."""
        assert serialize_document(doc([paragraph(" # x")])) == "&#32;# x\n"

    @pytest.mark.parametrize(
        "block",
        [
            paragraph("A "),
            paragraph("\tindented"),
            paragraph(" # x"),
            paragraph("literal &#32; reference"),
            heading(2, " both "),
        ],
    )
    def test_edges_survive_round_trip(self, block):
        """Test that parsing the output gives back the same text."""
        tree = doc([block])
        assert _parse(serialize_document(tree)).content == tree.content


ROUND_TRIP_SOURCES = [
    "# Title\n\nSome **bold**, *italic* and `code` with a [link](https://example.com).\n",
    "- one\n- two\n\n1. first\n2. second\n",
    "- [x] done\n- [ ] todo\n",
    "> [!WARNING]\n> Careful here\n",
    "> A plain quote\n",
    '<Card title="Hi" icon="star">\n  Body text\n</Card>\n',
    '<Tabs>\n  <Tab title="A">\n    Alpha\n  </Tab>\n\n  <Tab title="B">\n    Beta\n  </Tab>\n</Tabs>\n',
    '<Steps>\n  <Step title="Install">\n    Run it\n  </Step>\n</Steps>\n',
    "| A | B |\n| --- | --- |\n| 1 | 2 |\n",
    "```python\nprint(1)\n```\n",
    "---\ntitle: Page\n---\n\n# Body\n",
    '<Endpoint method="POST" path="/users" />\n',
    '![Alt](a.png "Cap")\n',
]


@pytest.mark.unit
class TestRoundTrip:
    """Tests for parse/serialize round trips."""

    @pytest.mark.parametrize("source", ROUND_TRIP_SOURCES)
    def test_canonical_source_is_stable(self, source):
        """Test that canonical MDX serializes back to itself."""
        assert serialize_document(_parse(source)) == source

    @pytest.mark.parametrize("source", ROUND_TRIP_SOURCES)
    def test_document_survives_round_trip(self, source):
        """Test that the document is unchanged by serializing and parsing again."""
        document = _parse(source)
        again = _parse(serialize_document(document))
        assert strip_ids(again) == strip_ids(document)


# Sources whose canonical form differs from the input
NORMALIZED_SOURCES = [
    ("A ![alt](x.png) B\n", "A&#32;\n\n![alt](x.png)\n\n&#32;B\n"),
    ("A ![alt](x.png)\n", "A&#32;\n\n![alt](x.png)\n"),
    ("# a ![i](p.png)\n", "# a&#32;\n"),
    ("- [x] a\n- # h\n", "- [x] a\n- [ ]\n\n  # h\n"),
]

UNSTABLE_SOURCES = [source for source, _ in NORMALIZED_SOURCES] + [
    "a <FooBar />\n",
    "<Table data={[['a', 'b'], ['1', '2']]} columns={[{ id: 'x', label: 'A' }]} />\n",
]


@pytest.mark.unit
class TestNormalizedRoundTrip:
    """Tests for sources that are rewritten into canonical MDX."""

    @pytest.mark.parametrize("source,expected", NORMALIZED_SOURCES)
    def test_canonical_output(self, source, expected):
        """Test the canonical text written for the source."""
        assert serialize_document(_parse(source)) == expected

    @pytest.mark.parametrize("source", UNSTABLE_SOURCES)
    def test_document_survives_round_trip(self, source):
        """Test that the document is unchanged by serializing and parsing again."""
        document = _parse(source)
        again = _parse(serialize_document(document))
        assert strip_ids(again) == strip_ids(document)

    @pytest.mark.parametrize("source", UNSTABLE_SOURCES)
    def test_serialization_is_idempotent(self, source):
        """Test that a second pass writes the same text as the first."""
        first = serialize_document(_parse(source))
        assert serialize_document(_parse(first)) == first
