#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/core/test_converter.py
"""Unit tests for the source AST to document model converter.

Tests cover:
- Markdown blocks: paragraphs, images, callouts, lists, code, tables
- Inline marks and line breaks
- Every catalogue component, with defaults
- Table data written as markdown or as a ``<Table>`` component
- Unknown components and generated ids

"""

import logging

import pytest

from mdxdoc.converter import MdxConverter, convert, convert_document
from mdxdoc.document import DocumentNode, Mark, hard_break, heading, paragraph, text_node
from mdxdoc.options import MdxParserOptions
from mdxdoc.parsers import parse_source
from mdxdoc.utils.ids import is_generated_id

NO_IDS = MdxParserOptions(generate_ids=False)


def _blocks(source, options=NO_IDS):
    return convert_document(parse_source(source, options), options).content


def _table_attrs(columns, rows):
    return {
        "scrollable": False,
        "scrollHeight": 400,
        "pagination": False,
        "rowsPerPage": 10,
        "rowsPerPageOptions": [5, 10, 25, 50],
        "columns": columns,
        "rows": rows,
    }


def _col(index, label, sortable=False, filterable=False):
    return {"id": f"col{index}", "label": label, "sortable": sortable, "filterable": filterable}


@pytest.mark.unit
class TestMarkdownBlocks:
    """Tests for markdown block conversion."""

    def test_heading_and_paragraph(self):
        """Test the simplest document."""
        assert _blocks("## Title\n\nHello\n") == [heading(2, "Title"), paragraph("Hello")]

    def test_paragraph_image_split(self):
        """Test that an image splits its paragraph, keeping order."""
        blocks = _blocks('Before ![Alt](a.png "Cap") after\n')
        assert blocks == [
            paragraph("Before "),
            DocumentNode("imageBlock", attrs={"src": "a.png", "alt": "Alt", "caption": "Cap", "type": "url"}),
            paragraph(" after"),
        ]

    def test_image_only_paragraph(self):
        """Test that a lone image becomes a single image block."""
        blocks = _blocks("![](pic.png)\n")
        assert blocks == [
            DocumentNode("imageBlock", attrs={"src": "pic.png", "alt": "Image", "caption": "", "type": "url"})
        ]

    def test_callout(self):
        """Test a GitHub-style callout blockquote."""
        blocks = _blocks("> [!WARNING]\n> Be careful\n")
        assert blocks == [
            DocumentNode("infoBlock", attrs={"type": "warning", "title": ""}, content=[paragraph("Be careful")])
        ]

    def test_callout_on_one_line_lowercase(self):
        """Test a callout marker followed by text, in lower case."""
        blocks = _blocks("> [!tip] Save often\n")
        assert blocks[0].attrs == {"type": "tip", "title": ""}
        assert blocks[0].content == [paragraph("Save often")]

    def test_callout_without_body(self):
        """Test that an empty callout gets an empty paragraph."""
        blocks = _blocks("> [!NOTE]\n")
        assert blocks[0].content == [paragraph()]

    def test_plain_blockquote(self):
        """Test that other blockquotes stay blockquotes."""
        assert _blocks("> quoted\n") == [DocumentNode("blockquote", content=[paragraph("quoted")])]

    def test_task_list(self):
        """Test that checkbox items produce a task list."""
        blocks = _blocks("- [x] done\n- [ ] todo\n")
        assert blocks == [
            DocumentNode(
                "taskList",
                content=[
                    DocumentNode("taskItem", attrs={"checked": True}, content=[paragraph("done")]),
                    DocumentNode("taskItem", attrs={"checked": False}, content=[paragraph("todo")]),
                ],
            )
        ]

    def test_checkbox_on_its_own_line(self):
        """Test that a checkbox above another block leaves no empty paragraph."""
        blocks = _blocks("- [x] done\n- [ ]\n\n  # Heading\n")
        assert blocks[0].content[1] == DocumentNode("taskItem", attrs={"checked": False}, content=[heading(1, "Heading")])

    def test_mixed_list_becomes_task_list(self):
        """Test that any checkbox makes the whole list a task list."""
        blocks = _blocks("- [x] done\n- plain\n")
        assert blocks[0].type == "taskList"
        assert [item.attrs["checked"] for item in blocks[0].content] == [True, False]

    def test_bullet_and_ordered_lists(self):
        """Test plain lists and the ordered start number."""
        bullet = _blocks("- a\n- b\n")[0]
        assert bullet.type == "bulletList"
        assert [item.type for item in bullet.content] == ["listItem", "listItem"]
        ordered = _blocks("3. c\n4. d\n")[0]
        assert ordered.type == "orderedList"
        assert ordered.attrs == {"start": 3}
        assert _blocks("1. a\n")[0].attrs == {}

    def test_code_blocks(self):
        """Test code language defaults and empty code."""
        assert _blocks("```\nx = 1\n```\n") == [
            DocumentNode("codeBlock", attrs={"language": "plaintext"}, content=[text_node("x = 1")])
        ]
        assert _blocks("```js\n```\n") == [DocumentNode("codeBlock", attrs={"language": "js"})]

    def test_horizontal_rule(self):
        """Test thematic breaks."""
        assert _blocks("a\n\n***\n\nb\n")[1] == DocumentNode("horizontalRule")

    def test_frontmatter_and_esm_in_doc_attrs(self):
        """Test that document-level data is kept on the doc node."""
        source = "---\ntitle: Guide\n---\n\nimport { Card } from './card'\n\n# Guide\n"
        document = convert_document(parse_source(source, NO_IDS), NO_IDS)
        assert document.attrs == {"frontmatter": {"title": "Guide"}, "esm": ["import { Card } from './card'"]}
        assert document.content == [heading(1, "Guide")]

    def test_block_html_dropped(self):
        """Test that raw HTML blocks do not produce nodes."""
        assert _blocks("<div>\nhtml\n</div>\n\ntext\n") == [paragraph("text")]


@pytest.mark.unit
class TestInline:
    """Tests for inline marks."""

    def test_marks(self):
        """Test code, link, underline, strike, bold and italic marks."""
        blocks = _blocks("Some `code`, [link](https://x.io) and <u>under</u> ~~gone~~ **b** *i*\n")
        assert blocks[0].content == [
            text_node("Some "),
            text_node("code", [Mark("code")]),
            text_node(", "),
            text_node("link", [Mark.link("https://x.io")]),
            text_node(" and "),
            text_node("under", [Mark("underline")]),
            text_node(" "),
            text_node("gone", [Mark("strike")]),
            text_node(" "),
            text_node("b", [Mark("bold")]),
            text_node(" "),
            text_node("i", [Mark("italic")]),
        ]

    def test_nested_marks(self):
        """Test that marks accumulate through nesting."""
        blocks = _blocks("**bold *both***\n")
        assert blocks[0].content == [
            text_node("bold ", [Mark("bold")]),
            text_node("both", [Mark("bold"), Mark("italic")]),
        ]

    def test_line_breaks(self):
        """Test that hard and soft line breaks become hard break nodes."""
        assert _blocks("a\\\nb\n")[0].content == [text_node("a"), hard_break(), text_node("b")]
        assert _blocks("a\nb\n")[0].content == [text_node("a"), hard_break(), text_node("b")]

    def test_escaped_text(self):
        """Test that escaped syntax characters are plain text."""
        assert _blocks("\\<Card\\> \\*x\\*\n") == [paragraph("<Card> *x*")]


@pytest.mark.unit
class TestTables:
    """Tests for both table forms."""

    def test_markdown_table(self):
        """Test flattening of a pipe table."""
        blocks = _blocks("| Name | Age |\n| --- | --- |\n| Ada | 36 |\n")
        assert blocks == [
            DocumentNode(
                "tableBlock",
                attrs=_table_attrs([_col(1, "Name"), _col(2, "Age")], [{"id": "row1", "col1": "Ada", "col2": "36"}]),
            )
        ]

    def test_table_component_matches_markdown_table(self):
        """Test that the component form flattens to the same attrs."""
        markdown = _blocks("| Name | Age |\n| --- | --- |\n| Ada | 36 |\n")
        component = _blocks('<Table data={[["Name", "Age"], ["Ada", 36]]} />\n')
        assert component == markdown

    def test_header_only_table(self):
        """Test that a table without body rows gets a placeholder row."""
        blocks = _blocks("| A | B |\n| --- | --- |\n")
        assert blocks[0].attrs["rows"] == [{"id": "row1", "col1": "No data", "col2": ""}]

    def test_empty_header_cell_label(self):
        """Test the label of an empty header cell."""
        blocks = _blocks("| A |  |\n| --- | --- |\n| 1 | 2 |\n")
        assert [col["label"] for col in blocks[0].attrs["columns"]] == ["A", "Column 2"]

    def test_sortable_and_filterable_tags(self):
        """Test column flags written as tags in header labels."""
        blocks = _blocks('<Table data={[["Name<sortable>", "Age<filterable>"], ["Ada", "36"]]} />\n')
        assert blocks[0].attrs["columns"] == [_col(1, "Name", sortable=True), _col(2, "Age", filterable=True)]

    def test_table_settings_and_columns_config(self):
        """Test table props and an explicit columns config."""
        source = (
            "<Table\n"
            "  pagination\n"
            "  rowsPerPage={5}\n"
            "  columns={[{ id: 'name', label: 'Full name', sortable: true }]}\n"
            "  data={[['Name'], ['Ada']]}\n"
            "/>\n"
        )
        attrs = _blocks(source)[0].attrs
        assert attrs["pagination"] is True
        assert attrs["rowsPerPage"] == 5
        assert attrs["columns"] == [{"id": "name", "label": "Full name", "sortable": True, "filterable": False}]
        assert attrs["rows"] == [{"id": "row1", "name": "Ada"}]

    def test_columns_config_shorter_than_rows(self):
        """Test that cells past the configured columns get columns labelled from the header row."""
        attrs = _blocks("<Table data={[['a', 'b'], ['1', '2']]} columns={[{ id: 'x', label: 'A' }]} />\n")[0].attrs
        assert attrs["columns"] == [
            {"id": "x", "label": "A", "sortable": False, "filterable": False},
            _col(2, "b"),
        ]
        assert attrs["rows"] == [{"id": "row1", "x": "1", "col2": "2"}]

    def test_rows_wider_than_header(self):
        """Test that every cell of a ragged row belongs to a column."""
        attrs = _blocks("<Table data={[['a'], ['1', '2']]} />\n")[0].attrs
        assert attrs["columns"] == [_col(1, "a"), _col(2, "Column 2")]
        assert attrs["rows"] == [{"id": "row1", "col1": "1", "col2": "2"}]

    def test_cells_past_a_clashing_column_are_dropped(self, caplog):
        """Test that a configured id equal to a generated one stops column synthesis."""
        source = "<Table data={[['a', 'b'], ['1', '2']]} columns={[{ id: 'col2', label: 'A' }]} />\n"
        with caplog.at_level(logging.WARNING, logger="mdxdoc"):
            attrs = _blocks(source)[0].attrs
        assert [col["id"] for col in attrs["columns"]] == ["col2"]
        assert attrs["rows"] == [{"id": "row1", "col2": "1"}]
        assert "has cells past its last column" in caplog.text

    def test_table_without_data(self):
        """Test the placeholder data of an empty table."""
        attrs = _blocks("<Table />\n")[0].attrs
        assert [col["label"] for col in attrs["columns"]] == ["Column 1", "Column 2", "Column 3"]
        assert attrs["rows"][1] == {"id": "row2", "col1": "Data 2-1", "col2": "Data 2-2", "col3": "Data 2-3"}

    def test_table_with_opaque_data(self, caplog):
        """Test that non-literal data is rejected."""
        with caplog.at_level(logging.WARNING, logger="mdxdoc"):
            attrs = _blocks("<Table data={rows} />\n")[0].attrs
        assert len(attrs["rows"]) == 2
        assert "Ignoring non-literal value for `data` on <Table>" in caplog.text


@pytest.mark.unit
class TestComponents:
    """Tests for catalogue components."""

    def test_card(self):
        """Test a card with attributes and a markdown body."""
        blocks = _blocks('<Card title="Start" href="/start">\n\nGo **now**\n\n</Card>\n')
        assert blocks == [
            DocumentNode(
                "cardBlock",
                attrs={"title": "Start", "icon": "", "iconAlign": "left", "href": "/start"},
                content=[paragraph("Go ", text_node("now", [Mark("bold")]))],
            )
        ]

    def test_empty_card_gets_paragraph(self):
        """Test that a body-less container holds an empty paragraph."""
        assert _blocks('<Card title="T" />\n')[0].content == [paragraph()]

    def test_callout_component(self):
        """Test callout components with a title."""
        blocks = _blocks('<Warning title="Heads up">\n\nCareful\n\n</Warning>\n')
        assert blocks[0].type == "infoBlock"
        assert blocks[0].attrs == {"type": "warning", "title": "Heads up"}
        assert blocks[0].content == [paragraph("Careful")]

    def test_single_line_component(self):
        """Test a component written on one line."""
        blocks = _blocks("<Note>Remember this</Note>\n")
        assert blocks == [
            DocumentNode("infoBlock", attrs={"type": "note", "title": ""}, content=[paragraph("Remember this")])
        ]

    def test_tabs(self):
        """Test tabs, making the first one active."""
        source = (
            '<Tabs>\n<Tab title="A">\n\nAlpha\n\n</Tab>\n'
            '<Tab title="B" icon="code">\n\nBeta\n\n</Tab>\n</Tabs>\n'
        )
        tabs = _blocks(source)[0]
        assert tabs.type == "tabsBlock"
        assert tabs.attrs == {"alignment": "left"}
        assert [tab.attrs for tab in tabs.content] == [
            {"label": "A", "icon": None, "isActive": True},
            {"label": "B", "icon": "code", "isActive": False},
        ]
        assert tabs.content[1].content == [paragraph("Beta")]

    def test_empty_tabs(self):
        """Test the default tab of an empty Tabs component."""
        tabs = _blocks("<Tabs>\n</Tabs>\n")[0]
        assert tabs.content == [
            DocumentNode("tabBlock", attrs={"label": "Tab 1", "icon": None, "isActive": True}, content=[paragraph()])
        ]

    def test_accordion(self):
        """Test accordion tabs and their flags."""
        source = (
            "<Accordion multiple={false}>\n"
            '<AccordionTab title="Q1" disabled>\n\nA1\n\n</AccordionTab>\n'
            "</Accordion>\n"
        )
        accordion = _blocks(source)[0]
        assert accordion.attrs == {"multiple": False}
        assert accordion.content == [
            DocumentNode(
                "accordionTab",
                attrs={"header": "Q1", "disabled": True, "isActive": False},
                content=[paragraph("A1")],
            )
        ]

    def test_empty_accordion(self):
        """Test the default tab of an empty accordion."""
        accordion = _blocks("<Accordion>\n</Accordion>\n")[0]
        assert accordion.content[0].attrs == {"header": "Tab 1", "disabled": False, "isActive": True}

    def test_columns(self):
        """Test that the column count follows the actual columns."""
        source = (
            "<Columns columns={3}>\n"
            "<Column>\n\nLeft\n\n</Column>\n"
            '<Column width="40%">\n\nRight\n\n</Column>\n'
            "</Columns>\n"
        )
        group = _blocks(source)[0]
        assert group.type == "columnGroup"
        assert group.attrs == {"columnCount": 2}
        assert [column.attrs["width"] for column in group.content] == ["auto", "40%"]

    def test_empty_columns(self):
        """Test that an empty column group gets the requested number of columns."""
        group = _blocks("<Columns columns={3} />\n")[0]
        assert group.attrs == {"columnCount": 3}
        assert len(group.content) == 3

    def test_steps(self):
        """Test steps and step titles."""
        steps = _blocks('<Steps>\n<Step title="Install">\n\nRun it\n\n</Step>\n</Steps>\n')[0]
        assert steps.content == [DocumentNode("stepBlock", attrs={"title": "Install"}, content=[paragraph("Run it")])]

    def test_code_group(self):
        """Test code files collected from Code children."""
        source = (
            "<CodeGroup>\n"
            '<Code lang="js" filename="a.js">\n\n```js\nconsole.log(1)\n```\n\n</Code>\n'
            "<Code>\n\n```python\nprint(1)\n```\n\n</Code>\n"
            "</CodeGroup>\n"
        )
        group = _blocks(source)[0]
        assert group.attrs == {
            "files": [
                {"filename": "a.js", "language": "js", "code": "console.log(1)"},
                {"filename": "example.python", "language": "python", "code": "print(1)"},
            ]
        }

    def test_check_list(self):
        """Test CheckList items and their variants."""
        source = '<CheckList>\n<CheckItem variant="do">Ship it</CheckItem>\n<CheckItem>Skip</CheckItem>\n</CheckList>\n'
        task_list = _blocks(source)[0]
        assert task_list.content == [
            DocumentNode("taskItem", attrs={"checked": True}, content=[paragraph("Ship it")]),
            DocumentNode("taskItem", attrs={"checked": False}, content=[paragraph("Skip")]),
        ]

    def test_endpoint(self):
        """Test an atomic component with defaults."""
        assert _blocks('<Endpoint method="POST" />\n')[0] == DocumentNode(
            "endpointBlock", attrs={"method": "POST", "path": "/api/endpoint"}
        )

    def test_label_text_from_children(self):
        """Test a label taking its text from its children."""
        assert _blocks('<Label color="red">New</Label>\n')[0] == DocumentNode(
            "labelBlock", attrs={"label": "New", "color": "red", "size": "md"}
        )

    def test_param_field(self):
        """Test a parameter with its description as children."""
        block = _blocks('<ParamField path="id" type="number" required>The user id</ParamField>\n')[0]
        assert block == DocumentNode(
            "paramBlock",
            attrs={"path": "id", "type": "number", "required": True, "default": "", "description": "The user id"},
        )

    def test_img_element(self):
        """Test an <img> element."""
        assert _blocks('<img src="a.png" alt="A" />\n')[0] == DocumentNode(
            "imageBlock", attrs={"src": "a.png", "alt": "A", "caption": "", "type": "url"}
        )

    def test_stray_child_component_is_skipped(self):
        """Test that a Tab outside Tabs produces nothing."""
        assert _blocks('<Tab title="Lost">\n\ntext\n\n</Tab>\n') == []

    def test_unknown_component(self, caplog):
        """Test that unknown components become a placeholder paragraph."""
        with caplog.at_level(logging.WARNING, logger="mdxdoc"):
            blocks = _blocks('<Chart type="bar" />\n')
        assert blocks == [paragraph("[Unknown component: Chart]")]
        assert "Unknown component: Chart" in caplog.text


@pytest.mark.unit
class TestIdsAndApi:
    """Tests for generated ids and the module-level functions."""

    def test_generated_ids(self):
        """Test that tracked components receive fresh ids."""
        options = MdxParserOptions(generate_ids=True)
        blocks = _blocks("<Card>\n\nA\n\n</Card>\n\n<Card>\n\nB\n\n</Card>\n", options)
        first, second = (block.attrs["id"] for block in blocks)
        assert is_generated_id(first) and first.startswith("card-")
        assert first != second

    def test_callout_id_prefix(self):
        """Test the id prefix of callouts."""
        blocks = _blocks("> [!INFO] x\n", MdxParserOptions())
        assert blocks[0].attrs["id"].startswith("info-")

    def test_untracked_components_have_no_id(self):
        """Test that atomic images carry no id."""
        blocks = _blocks("![a](b.png)\n", MdxParserOptions())
        assert "id" not in blocks[0].attrs

    def test_convert_returns_blocks(self):
        """Test the convert() convenience function."""
        assert convert(parse_source("Hi\n"), NO_IDS) == [paragraph("Hi")]

    def test_converter_class(self):
        """Test MdxConverter.convert_document."""
        document = MdxConverter(NO_IDS).convert_document(parse_source(""))
        assert document == DocumentNode("doc")
