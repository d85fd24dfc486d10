#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/renderers/mdx.py
"""MDX rendering from the document model.

This module provides the MdxRenderer class, which writes a document tree
back out as MDX text. Output is chosen so that parsing it again yields an
equal tree (ignoring generated ids), and so that serializing that tree again
yields the same text.

Output conventions
------------------
- Blocks are separated by one blank line; component bodies are indented.
- Adjacent lists alternate bullet markers (``-``/``*``) and ordered
  delimiters (``.``/``)``) so they stay separate lists.
- Callouts without a title use the ``> [!TYPE]`` form; titled callouts use
  the component form.
- Tables use the pipe syntax when nothing would be lost, and the
  ``<Table data={...} />`` component otherwise.

"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import IO, Any, Optional, Union

from mdxdoc.constants import (
    CALLOUT_TYPES,
    DEFAULT_CARD_ICON_ALIGN,
    DEFAULT_CODE_LANGUAGE,
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_ORDERED_DELIMITERS,
    DEFAULT_TABLE_ROWS_PER_PAGE,
    DEFAULT_TABLE_ROWS_PER_PAGE_OPTIONS,
    DEFAULT_TABLE_SCROLL_HEIGHT,
    DEFAULT_TABS_ALIGNMENT,
    DEPS_YAML,
    TABLE_FILTERABLE_TAG,
    TABLE_SORTABLE_TAG,
)
from mdxdoc.document import DocumentNode, Mark, NodeVisitor, text_node, validate_document
from mdxdoc.exceptions import SerializationError
from mdxdoc.expressions import format_literal
from mdxdoc.options import MdxSerializerOptions
from mdxdoc.renderers.base import BaseRenderer
from mdxdoc.utils.decorators import debug_timer, requires_dependencies
from mdxdoc.utils.escape import (
    escape_heading_text,
    escape_inline_code,
    escape_line_start,
    escape_link_destination,
    escape_link_title,
    escape_markdown_text,
    format_jsx_attribute,
    protect_edge_whitespace,
)

logger = logging.getLogger(__name__)

_BACKTICK_RUN_RE = re.compile(r"`+")

_EMPHASIS_DELIMITERS = {"bold": "**", "italic": "*", "strike": "~~"}

_LIST_FAMILIES = {"bulletList": "bullet", "taskList": "bullet", "orderedList": "ordered"}


class MdxRenderer(NodeVisitor, BaseRenderer):
    """Render a document tree to MDX text.

    Each ``visit_*`` method returns the text of one block; containers render
    their children first and then indent or prefix the resulting lines.

    Parameters
    ----------
    options : MdxSerializerOptions or None, default = None
        Serialization options

    Examples
    --------
        >>> from mdxdoc.document import doc, heading, paragraph
        >>> renderer = MdxRenderer()
        >>> print(renderer.render_to_string(doc([heading(1, "Title"), paragraph("Body")])), end="")
        # Title
        <BLANKLINE>
        Body

    """

    def __init__(self, options: MdxSerializerOptions | None = None):
        """Initialize the MDX renderer with options."""
        BaseRenderer._validate_options_type(options, MdxSerializerOptions, "mdx")
        options = options or MdxSerializerOptions()
        BaseRenderer.__init__(self, options)
        self.options: MdxSerializerOptions = options
        self._output: list[str] = []
        self._bullet = options.bullet_markers[0]
        self._delimiter = DEFAULT_ORDERED_DELIMITERS[0]

    @requires_dependencies("mdx", DEPS_YAML)
    def render_to_string(self, doc: DocumentNode) -> str:
        """Render a ``doc`` node to an MDX string.

        Parameters
        ----------
        doc : DocumentNode
            Document to render

        Returns
        -------
        str
            MDX text ending in a single newline (empty for an empty document)

        Raises
        ------
        SerializationError
            If the tree is not a ``doc`` node or breaks the node schema

        """
        if doc.type != "doc":
            raise SerializationError(f"Expected a `doc` node at the root, got `{doc.type}`")
        if self.options.validate_input:
            errors = validate_document(doc, strict=False)
            if errors:
                raise SerializationError(f"Invalid document: {'; '.join(errors)}")

        self._output = []
        self._bullet = self.options.bullet_markers[0]
        self._delimiter = DEFAULT_ORDERED_DELIMITERS[0]
        with debug_timer(logger, "Serializing (mdx)"):
            doc.accept(self)
        return "".join(self._output)

    def render(self, doc: DocumentNode, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the document to a file path or stream."""
        self.write_text_output(self.render_to_string(doc), output)

    # ------------------------------------------------------------------
    # Document and block sequences
    # ------------------------------------------------------------------

    def visit_doc(self, node: DocumentNode) -> None:
        """Write frontmatter, ESM statements and the top-level blocks."""
        parts: list[str] = []
        frontmatter = node.attrs.get("frontmatter")
        if frontmatter and self.options.emit_frontmatter:
            parts.append(self._frontmatter(frontmatter))
        for statement in node.attrs.get("esm") or ():
            if statement.strip():
                parts.append(statement.strip("\n"))

        body = self._render_blocks(node.content)
        if body:
            if not parts and body.startswith("---"):
                # A leading `---` line would be read as a frontmatter fence
                body = "***" + body[3:]
            parts.append(body)

        text = "\n\n".join(parts)
        self._output.append(text + "\n" if text else "")

    def _frontmatter(self, data: Any) -> str:
        import yaml

        try:
            dumped = yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
        except yaml.YAMLError as e:
            raise SerializationError(f"Frontmatter cannot be written as YAML: {e}", original_error=e) from e
        return f"---\n{dumped}---"

    def _render_blocks(self, nodes: list[DocumentNode]) -> str:
        """Render a sequence of sibling blocks separated by blank lines."""
        parts: list[str] = []
        previous: Optional[str] = None
        bullet_index = 0
        delimiter_index = 0

        for node in nodes:
            family = _LIST_FAMILIES.get(node.type)
            if family == "bullet":
                bullet_index = bullet_index + 1 if previous == "bullet" else 0
                markers = self.options.bullet_markers
                self._bullet = markers[bullet_index % len(markers)]
            elif family == "ordered":
                delimiter_index = delimiter_index + 1 if previous == "ordered" else 0
                self._delimiter = DEFAULT_ORDERED_DELIMITERS[delimiter_index % len(DEFAULT_ORDERED_DELIMITERS)]

            rendered = node.accept(self)
            if rendered:
                parts.append(rendered)
                previous = family
        return "\n\n".join(parts)

    def generic_visit(self, node: DocumentNode) -> str:
        """Render unknown block types through their children."""
        logger.debug(f"No MDX form for `{node.type}`; writing its children")
        return self._render_blocks(node.content)

    # ------------------------------------------------------------------
    # Markdown blocks
    # ------------------------------------------------------------------

    def visit_paragraph(self, node: DocumentNode) -> str:
        text = self._render_inline(_trim_breaks(node.content))
        return "\n".join(escape_line_start(protect_edge_whitespace(line)) for line in text.split("\n"))

    def visit_heading(self, node: DocumentNode) -> str:
        level = min(max(int(node.attrs.get("level") or 1), 1), 6)
        # headings are a single line
        content = [text_node(" ") if child.type == "hardBreak" else child for child in node.content]
        text = protect_edge_whitespace(escape_heading_text(self._render_inline(content).replace("\n", " ")))
        prefix = "#" * level
        return f"{prefix} {text}" if text else prefix

    def visit_blockquote(self, node: DocumentNode) -> str:
        return _quote(self._render_blocks(node.content))

    def visit_bullet_list(self, node: DocumentNode) -> str:
        marker = self._bullet
        return "\n".join(self._list_item(item, f"{marker} ") for item in node.content)

    def visit_ordered_list(self, node: DocumentNode) -> str:
        delimiter = self._delimiter
        start = node.attrs.get("start")
        if not isinstance(start, int) or isinstance(start, bool):
            start = 1
        return "\n".join(
            self._list_item(item, f"{start + offset}{delimiter} ") for offset, item in enumerate(node.content)
        )

    def visit_task_list(self, node: DocumentNode) -> str:
        marker = self._bullet
        return "\n".join(
            self._list_item(item, f"{marker} ", "[x] " if item.attrs.get("checked") else "[ ] ")
            for item in node.content
        )

    def _list_item(self, item: DocumentNode, marker: str, prefix: str = "") -> str:
        """Render one list item; continuation lines are indented to the marker width."""
        body = self._render_blocks(item.content)
        if prefix and item.content and item.content[0].type != "paragraph":
            # a checkbox is only read in front of paragraph text
            body = "\n\n" + body
        lines = body.split("\n")
        pad = " " * len(marker)
        first = (marker + prefix + lines[0]).rstrip()
        rest = [pad + line if line else "" for line in lines[1:]]
        return "\n".join([first, *rest])

    def visit_code_block(self, node: DocumentNode) -> str:
        code = node.text_content()
        language = node.attrs.get("language") or ""
        info = "" if language == DEFAULT_CODE_LANGUAGE else language
        return _fenced(code, info)

    def visit_horizontal_rule(self, node: DocumentNode) -> str:
        return "---"

    def visit_image_block(self, node: DocumentNode) -> str:
        attrs = node.attrs
        alt = escape_markdown_text(str(attrs.get("alt") or ""))
        destination = escape_link_destination(str(attrs.get("src") or ""))
        caption = attrs.get("caption")
        if caption:
            return f"![{alt}]({destination} {escape_link_title(str(caption))})"
        return f"![{alt}]({destination})"

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def visit_table_block(self, node: DocumentNode) -> str:
        attrs = node.attrs
        columns = [col for col in attrs.get("columns") or () if isinstance(col, dict)]
        rows = [row for row in attrs.get("rows") or () if isinstance(row, dict)]
        if _is_pipe_table(attrs, columns, rows):
            return self._pipe_table(columns, rows)
        return self._table_component(attrs, columns, rows)

    def _pipe_table(self, columns: list[dict[str, Any]], rows: list[dict[str, Any]]) -> str:
        lines = [
            _pipe_row(escape_markdown_text(col["label"]) for col in columns),
            _pipe_row("---" for _ in columns),
        ]
        for row in rows:
            lines.append(_pipe_row(escape_markdown_text(str(row.get(col["id"], ""))) for col in columns))
        return "\n".join(lines)

    def _table_component(self, attrs: dict[str, Any], columns: list[dict[str, Any]], rows: list[dict[str, Any]]) -> str:
        """Write a table as ``<Table ... data={[...]} />``."""
        pad = " " * self.options.indent
        props: list[str] = []
        if attrs.get("scrollable"):
            props.append(format_jsx_attribute("scrollable", True))
        if attrs.get("scrollHeight", DEFAULT_TABLE_SCROLL_HEIGHT) != DEFAULT_TABLE_SCROLL_HEIGHT:
            props.append(format_jsx_attribute("scrollHeight", attrs["scrollHeight"]))
        if attrs.get("pagination"):
            props.append(format_jsx_attribute("pagination", True))
        if attrs.get("rowsPerPage", DEFAULT_TABLE_ROWS_PER_PAGE) != DEFAULT_TABLE_ROWS_PER_PAGE:
            props.append(format_jsx_attribute("rowsPerPage", attrs["rowsPerPage"]))
        options = attrs.get("rowsPerPageOptions")
        if options is not None and list(options) != list(DEFAULT_TABLE_ROWS_PER_PAGE_OPTIONS):
            props.append(format_jsx_attribute("rowsPerPageOptions", list(options)))

        # An explicit columns config keeps ids, labels and flags exactly
        use_config = any(
            col.get("id") != f"col{index}"
            or not isinstance(col.get("label"), str)
            or col["label"] != col["label"].strip()
            or TABLE_SORTABLE_TAG in col["label"]
            or TABLE_FILTERABLE_TAG in col["label"]
            for index, col in enumerate(columns, start=1)
        )
        if use_config:
            config = [
                {
                    "id": col.get("id") or f"col{index}",
                    "label": col.get("label") or "",
                    "sortable": bool(col.get("sortable")),
                    "filterable": bool(col.get("filterable")),
                }
                for index, col in enumerate(columns, start=1)
            ]
            props.append(format_jsx_attribute("columns", config))
            header = [col.get("label") or "" for col in columns]
        else:
            header = [_tagged_label(col) for col in columns]

        data = [header] + [[row.get(col.get("id"), "") for col in columns] for row in rows]
        try:
            data_lines = [pad * 2 + format_literal(item) for item in data]
        except TypeError as e:
            raise SerializationError(f"Table cell has no literal form: {e}", original_error=e) from e

        lines = ["<Table"]
        lines.extend(pad + prop for prop in props)
        lines.append(pad + "data={[")
        lines.append(",\n".join(data_lines))
        lines.append(pad + "]}")
        lines.append("/>")
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def _component(self, name: str, props: list[str], body: str) -> str:
        """Write ``<Name props>`` with an indented body, then ``</Name>``."""
        opening = "<" + " ".join([name, *props])
        if not body:
            return f"{opening}>\n</{name}>"
        return f"{opening}>\n{self._indent(body)}\n</{name}>"

    def _self_closing(self, name: str, props: list[str]) -> str:
        return "<" + " ".join([name, *props]) + " />"

    def _indent(self, text: str) -> str:
        pad = " " * self.options.indent
        return "\n".join(pad + line if line else "" for line in text.split("\n"))

    def _body(self, node: DocumentNode) -> str:
        """Render component content; a lone empty paragraph writes nothing."""
        if len(node.content) == 1 and node.content[0].type == "paragraph" and not node.content[0].content:
            return ""
        return self._render_blocks(node.content)

    def visit_info_block(self, node: DocumentNode) -> str:
        callout_type = str(node.attrs.get("type") or "info").lower()
        if callout_type not in CALLOUT_TYPES:
            logger.warning(f"Unknown callout type {callout_type!r}; writing it as `info`")
            callout_type = "info"
        title = node.attrs.get("title")
        body = self._body(node)

        if title:
            return self._component(callout_type.capitalize(), [format_jsx_attribute("title", title)], body)

        marker = f"[!{callout_type.upper()}]"
        if not body:
            return _quote(marker)
        if node.content[0].type == "paragraph" and node.content[0].content:
            return _quote(f"{marker}\n{body}")
        return _quote(f"{marker}\n\n{body}")

    def visit_card_block(self, node: DocumentNode) -> str:
        attrs = node.attrs
        props = [
            format_jsx_attribute(name, attrs[name])
            for name in ("title", "icon")
            if attrs.get(name)
        ]
        if attrs.get("iconAlign") and attrs["iconAlign"] != DEFAULT_CARD_ICON_ALIGN:
            props.append(format_jsx_attribute("iconAlign", attrs["iconAlign"]))
        if attrs.get("href"):
            props.append(format_jsx_attribute("href", attrs["href"]))
        body = self._body(node)
        if not body:
            return self._self_closing("Card", props)
        return self._component("Card", props, body)

    def visit_right_panel(self, node: DocumentNode) -> str:
        return self._component("RightPanel", [], self._body(node))

    def visit_code_group(self, node: DocumentNode) -> str:
        files = [item for item in node.attrs.get("files") or () if isinstance(item, dict)]
        blocks = []
        for item in files:
            language = str(item.get("language") or DEFAULT_CODE_LANGUAGE)
            props = [format_jsx_attribute("lang", language)]
            if item.get("filename"):
                props.append(format_jsx_attribute("filename", str(item["filename"])))
            info = "" if language == DEFAULT_CODE_LANGUAGE else language
            blocks.append(self._component("Code", props, _fenced(str(item.get("code") or ""), info)))
        return self._component("CodeGroup", [], "\n\n".join(blocks))

    def visit_column_group(self, node: DocumentNode) -> str:
        props = [format_jsx_attribute("columns", len(node.content))]
        return self._component("Columns", props, self._render_blocks(node.content))

    def visit_column(self, node: DocumentNode) -> str:
        width = node.attrs.get("width")
        props = [format_jsx_attribute("width", width)] if width and width != DEFAULT_COLUMN_WIDTH else []
        return self._component("Column", props, self._body(node))

    def visit_accordion_block(self, node: DocumentNode) -> str:
        props = [] if node.attrs.get("multiple", True) else [format_jsx_attribute("multiple", False)]
        return self._component("Accordion", props, self._render_blocks(node.content))

    def visit_accordion_tab(self, node: DocumentNode) -> str:
        attrs = node.attrs
        props = [format_jsx_attribute("title", str(attrs.get("header") or ""))]
        if attrs.get("disabled"):
            props.append(format_jsx_attribute("disabled", True))
        if attrs.get("isActive"):
            props.append(format_jsx_attribute("isActive", True))
        return self._component("AccordionTab", props, self._body(node))

    def visit_tabs_block(self, node: DocumentNode) -> str:
        alignment = node.attrs.get("alignment")
        props = [format_jsx_attribute("alignment", alignment)] if alignment and alignment != DEFAULT_TABS_ALIGNMENT else []
        return self._component("Tabs", props, self._render_blocks(node.content))

    def visit_tab_block(self, node: DocumentNode) -> str:
        attrs = node.attrs
        props = [format_jsx_attribute("title", str(attrs.get("label") or ""))]
        if attrs.get("icon"):
            props.append(format_jsx_attribute("icon", attrs["icon"]))
        return self._component("Tab", props, self._body(node))

    def visit_steps_block(self, node: DocumentNode) -> str:
        return self._component("Steps", [], self._render_blocks(node.content))

    def visit_step_block(self, node: DocumentNode) -> str:
        props = [format_jsx_attribute("title", str(node.attrs.get("title") or ""))]
        return self._component("Step", props, self._body(node))

    def visit_endpoint_block(self, node: DocumentNode) -> str:
        props = [format_jsx_attribute(name, str(node.attrs.get(name) or "")) for name in ("method", "path")]
        return self._self_closing("Endpoint", props)

    def visit_label_block(self, node: DocumentNode) -> str:
        props = [format_jsx_attribute(name, str(node.attrs.get(name) or "")) for name in ("label", "color", "size")]
        return self._self_closing("Label", props)

    def visit_param_block(self, node: DocumentNode) -> str:
        attrs = node.attrs
        props = [
            format_jsx_attribute("path", str(attrs.get("path") or "")),
            format_jsx_attribute("type", str(attrs.get("type") or "")),
        ]
        if attrs.get("required"):
            props.append(format_jsx_attribute("required", True, shorthand=True))
        if attrs.get("default"):
            props.append(format_jsx_attribute("default", str(attrs["default"])))

        description = str(attrs.get("description") or "")
        if not description:
            return self._self_closing("ParamField", props)
        if description != description.strip() or "\n" in description:
            props.append(format_jsx_attribute("description", description))
            return self._self_closing("ParamField", props)
        opening = "<" + " ".join(["ParamField", *props]) + ">"
        return f"{opening}{escape_markdown_text(description)}</ParamField>"

    # ------------------------------------------------------------------
    # Inline content
    # ------------------------------------------------------------------

    def _render_inline(self, nodes: list[DocumentNode], active: tuple[Mark, ...] = ()) -> str:
        """Render inline nodes, grouping adjacent runs that share a mark.

        Marks open in canonical order, so links end up outermost and code
        innermost.
        """
        parts: list[str] = []
        index = 0
        while index < len(nodes):
            node = nodes[index]
            outer = None
            if node.type == "text":
                outer = next((mark for mark in node.marks if mark not in active), None)
            if outer is None:
                parts.append(self._render_leaf(node, active))
                index += 1
                continue

            end = index
            while end < len(nodes) and _continues_run(nodes[end], outer, active):
                end += 1
            parts.append(self._wrap(outer, nodes[index:end], active + (outer,)))
            index = end
        return "".join(parts)

    def _render_leaf(self, node: DocumentNode, active: tuple[Mark, ...]) -> str:
        if node.type == "hardBreak":
            return "\\\n"
        if node.type == "text":
            return escape_markdown_text(node.text or "").replace("\n", "\\\n")
        logger.debug(f"Skipping unsupported inline node `{node.type}`")
        return ""

    def _wrap(self, mark: Mark, nodes: list[DocumentNode], active: tuple[Mark, ...]) -> str:
        """Render a run of nodes that all carry ``mark``."""
        if mark.type == "code":
            code = "".join(node.text or "" for node in nodes).replace("\n", " ")
            code, delimiter = escape_inline_code(code)
            return f"{delimiter}{code}{delimiter}"

        inner = self._render_inline(nodes, active)
        if mark.type == "link":
            return f"[{inner}]({escape_link_destination(mark.href or '')})"
        if mark.type == "underline":
            return f"<u>{inner}</u>"

        delimiter = _EMPHASIS_DELIMITERS.get(mark.type)
        if delimiter is None:
            logger.debug(f"No MDX form for mark `{mark.type}`; writing its text")
            return inner

        # delimiters must touch non-whitespace
        core = inner.strip(" \t")
        if not core:
            return inner
        lead = inner[: len(inner) - len(inner.lstrip(" \t"))]
        trail = inner[len(inner.rstrip(" \t")) :]
        return f"{lead}{delimiter}{core}{delimiter}{trail}"

    def visit_text(self, node: DocumentNode) -> str:
        return self._render_inline([node])

    def visit_hard_break(self, node: DocumentNode) -> str:
        return "\\\n"


def _continues_run(node: DocumentNode, mark: Mark, active: tuple[Mark, ...]) -> bool:
    """Return True when a node belongs to the run of ``mark``.

    Code spans cannot hold other markup, so a code run only takes nodes
    without further marks.
    """
    if node.type != "text" or mark not in node.marks:
        return False
    if mark.type == "code":
        return all(each in active or each == mark for each in node.marks)
    return True


def _trim_breaks(content: list[DocumentNode]) -> list[DocumentNode]:
    """Drop trailing hard breaks, which have no MDX form at the end of a block."""
    end = len(content)
    while end and content[end - 1].type == "hardBreak":
        end -= 1
    return content[:end]


def _quote(text: str) -> str:
    return "\n".join("> " + line if line else ">" for line in text.split("\n"))


def _fenced(code: str, info: str) -> str:
    """Write a fenced code block whose fence is longer than any backtick run in the code."""
    longest = max((len(run) for run in _BACKTICK_RUN_RE.findall(code)), default=0)
    fence = "`" * max(3, longest + 1)
    body = code + "\n" if code else ""
    return f"{fence}{info}\n{body}{fence}"


def _pipe_row(cells: Any) -> str:
    return "| " + " | ".join(cells) + " |"


def _tagged_label(column: dict[str, Any]) -> str:
    label = column.get("label") or ""
    if column.get("sortable"):
        label += TABLE_SORTABLE_TAG
    if column.get("filterable"):
        label += TABLE_FILTERABLE_TAG
    return label


def _is_plain_cell(value: Any) -> bool:
    return isinstance(value, str) and value == value.strip() and "\n" not in value and "\r" not in value


def _is_pipe_table(attrs: dict[str, Any], columns: list[dict[str, Any]], rows: list[dict[str, Any]]) -> bool:
    """Return True when a pipe table carries everything the table node holds."""
    if (
        attrs.get("scrollable")
        or attrs.get("pagination")
        or attrs.get("scrollHeight", DEFAULT_TABLE_SCROLL_HEIGHT) != DEFAULT_TABLE_SCROLL_HEIGHT
        or attrs.get("rowsPerPage", DEFAULT_TABLE_ROWS_PER_PAGE) != DEFAULT_TABLE_ROWS_PER_PAGE
        or list(attrs.get("rowsPerPageOptions") or DEFAULT_TABLE_ROWS_PER_PAGE_OPTIONS)
        != list(DEFAULT_TABLE_ROWS_PER_PAGE_OPTIONS)
    ):
        return False
    if not columns or not rows:
        return False
    for index, column in enumerate(columns, start=1):
        label = column.get("label")
        if (
            column.get("id") != f"col{index}"
            or column.get("sortable")
            or column.get("filterable")
            or not label
            or not _is_plain_cell(label)
        ):
            return False
    for index, row in enumerate(rows, start=1):
        if row.get("id") != f"row{index}":
            return False
        if not all(_is_plain_cell(row.get(column["id"], "")) for column in columns):
            return False
    return True


def serialize_document(doc: DocumentNode, options: MdxSerializerOptions | None = None) -> str:
    """Serialize a ``doc`` node to MDX text.

    Parameters
    ----------
    doc : DocumentNode
        Document to serialize
    options : MdxSerializerOptions or None, default = None
        Serialization options

    Returns
    -------
    str
        MDX text

    Raises
    ------
    SerializationError
        If the tree is invalid or has no MDX form

    Examples
    --------
        >>> from mdxdoc.document import doc, paragraph
        >>> serialize_document(doc([paragraph("1. not a list")]))
        '1\\\\. not a list\\n'

    """
    return MdxRenderer(options).render_to_string(doc)


__all__ = [
    "MdxRenderer",
    "serialize_document",
]
