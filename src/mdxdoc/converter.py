#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/converter.py
"""Source AST to document model converter.

This module walks the source AST produced by :mod:`mdxdoc.parsers.mdx` and
emits document model nodes. Dispatch is by node kind; component tags are
further dispatched by name through the component catalogue.

Special cases
-------------
- Paragraphs holding images are split so every image becomes an
  ``imageBlock`` of its own.
- Blockquotes starting with ``[!TIP]``, ``[!INFO]``, ``[!WARNING]``,
  ``[!NOTE]`` or ``[!DANGER]`` become ``infoBlock`` callouts.
- Lists with any checkbox item become task lists.
- Markdown tables and ``<Table data={...} />`` flatten to the same
  ``tableBlock`` attrs.
- Unknown components become a placeholder paragraph; they never fail the
  conversion.

"""

from __future__ import annotations

import json
import logging
import math
import re
from typing import Any, Iterable, Iterator, Optional, Union

from mdxdoc.ast import SourceNode
from mdxdoc.components import ChildPolicy, ComponentRule, extract_attributes, get_rule, literal_attribute
from mdxdoc.components.attributes import resolve_attributes
from mdxdoc.constants import (
    CALLOUT_PATTERN,
    DEFAULT_CODE_GROUP_FILE,
    DEFAULT_CODE_LANGUAGE,
    DEFAULT_FIRST_TAB_LABEL,
    DEFAULT_IMAGE_ALT,
    DEFAULT_IMAGE_TYPE,
    DEFAULT_LABEL_TEXT,
    DEFAULT_LINK_TARGET,
    DEFAULT_STEP_TITLE,
    DEFAULT_TABLE_PLACEHOLDER_DATA,
    DEFAULT_TABLE_ROWS_PER_PAGE,
    DEFAULT_TABLE_ROWS_PER_PAGE_OPTIONS,
    DEFAULT_TABLE_SCROLL_HEIGHT,
    EMPTY_TABLE_CELL,
    EMPTY_TABLE_LABEL,
    TABLE_FILTERABLE_TAG,
    TABLE_SORTABLE_TAG,
    UNKNOWN_COMPONENT_TEMPLATE,
)
from mdxdoc.document import DocumentNode, Mark, hard_break, paragraph, text_node, validate_document
from mdxdoc.options import MdxParserOptions
from mdxdoc.utils.decorators import debug_timer
from mdxdoc.utils.ids import generate_id

logger = logging.getLogger(__name__)

_CALLOUT_RE = re.compile(CALLOUT_PATTERN + r"\s*", re.IGNORECASE)

_MARK_KINDS = {"strong": "bold", "emphasis": "italic", "delete": "strike"}


class MdxConverter:
    """Convert a source AST into document model nodes.

    Parameters
    ----------
    options : MdxParserOptions or None, default = None
        Conversion options (``generate_ids`` and ``validate_output`` apply)

    Examples
    --------
        >>> from mdxdoc.parsers.mdx import parse_source
        >>> converter = MdxConverter(MdxParserOptions(generate_ids=False))
        >>> tree = converter.convert_document(parse_source("> [!TIP] Read this"))
        >>> tree.content[0].type, tree.content[0].attrs
        ('infoBlock', {'type': 'tip', 'title': ''})

    """

    def __init__(self, options: MdxParserOptions | None = None):
        """Initialize the converter with options."""
        self.options = options or MdxParserOptions()

    def convert(self, root: SourceNode) -> list[DocumentNode]:
        """Convert the children of a root node into a list of block nodes."""
        return self._convert_blocks(root.children or [])

    def convert_document(self, root: SourceNode) -> DocumentNode:
        """Convert a root node into a ``doc`` node.

        Frontmatter and top-level ESM statements are kept in ``doc.attrs``.

        Raises
        ------
        DocumentValidationError
            If ``validate_output`` is set and the result breaks the schema
        """
        with debug_timer(logger, "Converting (mdx)"):
            attrs: dict[str, Any] = {}
            frontmatter = root.data.get("frontmatter")
            if frontmatter:
                attrs["frontmatter"] = frontmatter
            esm = [child.value for child in root.children or () if child.kind == "esm" and child.value]
            if esm:
                attrs["esm"] = esm
            document = DocumentNode("doc", attrs=attrs, content=self.convert(root))

        if self.options.validate_output:
            validate_document(document)
        return document

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def _convert_blocks(self, nodes: Iterable[SourceNode]) -> list[DocumentNode]:
        """Convert a sequence of block nodes, flattening multi-node results."""
        result: list[DocumentNode] = []
        for node in nodes:
            result.extend(self._convert_block(node))
        return result

    def _convert_block(self, node: SourceNode) -> list[DocumentNode]:
        """Convert a single block node into zero or more document nodes."""
        kind = node.kind

        if kind == "heading":
            return [DocumentNode("heading", attrs={"level": node.depth or 1}, content=self._convert_inline(node.children))]
        elif kind == "paragraph":
            return self._convert_paragraph(node)
        elif kind == "blockquote":
            return [self._convert_blockquote(node)]
        elif kind == "list":
            return [self._convert_list(node)]
        elif kind == "listItem":
            return [self._convert_list_item(node)]
        elif kind == "code":
            return [self._convert_code(node)]
        elif kind == "image":
            return [self._image_block(node.url, node.alt, node.title)]
        elif kind == "thematicBreak":
            return [DocumentNode("horizontalRule")]
        elif kind == "table":
            return [self._convert_markdown_table(node)]
        elif kind in ("jsxElement", "jsxTextElement"):
            return self._convert_component(node)
        elif kind == "html":
            logger.debug(f"Dropping block HTML: {node.value!r}")
            return []
        elif kind == "esm":
            return []

        # Unknown kinds: keep whatever their children convert to
        if node.children:
            return self._convert_blocks(node.children)
        logger.debug(f"Skipping unsupported node kind: {kind}")
        return []

    def _convert_paragraph(self, node: SourceNode) -> list[DocumentNode]:
        """Convert a paragraph, splitting out images and promoting lone components."""
        children = node.children or []

        if len(children) == 1 and children[0].kind == "jsxTextElement":
            rule = get_rule(children[0].name)
            if children[0].name != "u" and (rule is None or rule.is_block):
                return self._convert_component(children[0])

        if children and any(_is_image(child) for child in children):
            return self._split_paragraph(children)

        return [DocumentNode("paragraph", content=self._convert_inline(children))]

    def _split_paragraph(self, children: list[SourceNode]) -> list[DocumentNode]:
        """Split a paragraph holding images into paragraphs and image blocks, in order."""
        result: list[DocumentNode] = []
        run: list[SourceNode] = []

        def flush() -> None:
            content = self._convert_inline(run)
            # Whitespace between images does not survive as a paragraph of its own
            if any(child.type == "hardBreak" or (child.text or "").strip() for child in content):
                result.append(DocumentNode("paragraph", content=content))
            run.clear()

        for child in children:
            if _is_image(child):
                flush()
                result.append(self._convert_image_node(child))
            else:
                run.append(child)
        flush()
        return result

    def _convert_image_node(self, node: SourceNode) -> DocumentNode:
        """Convert a markdown image or an ``<img>`` element."""
        if node.kind == "image":
            return self._image_block(node.url, node.alt, node.title)
        return self._convert_component(node)[0]

    def _image_block(self, src: Optional[str], alt: Optional[str], caption: Optional[str]) -> DocumentNode:
        return DocumentNode(
            "imageBlock",
            attrs={
                "src": src or "",
                "alt": alt or DEFAULT_IMAGE_ALT,
                "caption": caption or "",
                "type": DEFAULT_IMAGE_TYPE,
            },
        )

    def _convert_blockquote(self, node: SourceNode) -> DocumentNode:
        """Convert a blockquote, detecting ``> [!TYPE]`` callouts."""
        children = node.children or []
        first = children[0] if children else None
        if first is not None and first.kind == "paragraph" and first.children:
            lead = first.children[0]
            match = _CALLOUT_RE.match(lead.value or "") if lead.kind == "text" else None
            if match:
                callout_type = match.group(1).lower()
                remainder = (lead.value or "")[match.end() :]
                rest = ([SourceNode("text", value=remainder)] if remainder else []) + first.children[1:]

                content: list[DocumentNode] = []
                if rest:
                    content.extend(self._convert_paragraph(SourceNode("paragraph", children=rest)))
                content.extend(self._convert_blocks(children[1:]))
                attrs = self._with_id("info", {"type": callout_type, "title": ""})
                return DocumentNode("infoBlock", attrs=attrs, content=_non_empty(content))

        return DocumentNode("blockquote", content=_non_empty(self._convert_blocks(children)))

    def _convert_list(self, node: SourceNode) -> DocumentNode:
        """Convert a list, becoming a task list when any item has a checkbox."""
        items = node.children or []
        if any(item.kind == "listItem" and item.checked is not None for item in items):
            return DocumentNode("taskList", content=[self._convert_task_item(item) for item in items])

        if node.ordered:
            attrs = {"start": node.start} if node.start not in (None, 1) else {}
            return DocumentNode("orderedList", attrs=attrs, content=[self._convert_list_item(item) for item in items])
        return DocumentNode("bulletList", content=[self._convert_list_item(item) for item in items])

    def _convert_list_item(self, node: SourceNode) -> DocumentNode:
        return DocumentNode("listItem", content=_non_empty(self._convert_blocks(node.children or [])))

    def _convert_task_item(self, node: SourceNode) -> DocumentNode:
        blocks = self._convert_blocks(node.children or [])
        # a checkbox on a line of its own leaves an empty paragraph before the first block
        if len(blocks) > 1 and blocks[0].type == "paragraph" and not blocks[0].content:
            blocks = blocks[1:]
        return DocumentNode("taskItem", attrs={"checked": node.checked is True}, content=_non_empty(blocks))

    def _convert_code(self, node: SourceNode) -> DocumentNode:
        content = [text_node(node.value)] if node.value else []
        return DocumentNode("codeBlock", attrs={"language": node.lang or DEFAULT_CODE_LANGUAGE}, content=content)

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _convert_markdown_table(self, node: SourceNode) -> DocumentNode:
        """Flatten a markdown table into ``tableBlock`` columns and rows."""
        rows = [row for row in node.children or () if row.kind == "tableRow"]
        if not rows:
            return _table_block({}, [_column(1, EMPTY_TABLE_LABEL)], [{"id": "row1", "col1": EMPTY_TABLE_CELL}])

        header, body = rows[0], rows[1:]
        columns = [
            _column(index, _cell_text(cell) or f"Column {index}")
            for index, cell in enumerate(header.children or (), start=1)
        ]
        if not columns:
            columns = [_column(1, EMPTY_TABLE_LABEL)]

        table_rows: list[dict[str, Any]] = []
        for row_index, row in enumerate(body, start=1):
            data: dict[str, Any] = {"id": f"row{row_index}"}
            for cell_index, cell in enumerate(row.children or (), start=1):
                data[f"col{cell_index}"] = _cell_text(cell)
            table_rows.append(data)

        if not table_rows:
            table_rows = [_empty_row(columns)]
        return _table_block({}, columns, table_rows)

    def _convert_table_component(self, node: SourceNode, rule: ComponentRule, attrs: dict[str, Any]) -> DocumentNode:
        """Flatten ``<Table data={[[...]]} />`` the same way a markdown table is."""
        raw = extract_attributes(node)
        name = rule.component_name
        data = literal_attribute(raw, "data", name)
        if isinstance(data, str):
            try:
                data = json.loads(data)
            except json.JSONDecodeError:
                logger.warning(f"<{name}> data is not a JSON array; using placeholder data")
                data = None

        columns_config = literal_attribute(raw, "columns", name)
        has_columns_config = isinstance(columns_config, list)
        sortable = literal_attribute(raw, "sortable", name)
        filterable = literal_attribute(raw, "filterable", name)
        global_sortable = sortable if isinstance(sortable, bool) else False
        global_filterable = filterable if isinstance(filterable, bool) else False

        columns: list[dict[str, Any]] = []
        rows: list[dict[str, Any]] = []

        if isinstance(data, list) and data and isinstance(data[0], list):
            headers = data[0]
            if has_columns_config:
                for index, col in enumerate(columns_config, start=1):
                    col = col if isinstance(col, dict) else {}
                    header = headers[index - 1] if index - 1 < len(headers) else None
                    columns.append(
                        {
                            "id": _js_string(col["id"]) if col.get("id") else f"col{index}",
                            "label": _js_string(col.get("label") or header or f"Column {index}"),
                            "sortable": col["sortable"] if isinstance(col.get("sortable"), bool) else global_sortable,
                            "filterable": (
                                col["filterable"] if isinstance(col.get("filterable"), bool) else global_filterable
                            ),
                        }
                    )
            else:
                for index, header in enumerate(headers, start=1):
                    label = _js_string(header)
                    column_sortable, column_filterable = global_sortable, global_filterable
                    if TABLE_SORTABLE_TAG in label:
                        column_sortable = True
                        label = label.replace(TABLE_SORTABLE_TAG, "")
                    if TABLE_FILTERABLE_TAG in label:
                        column_filterable = True
                        label = label.replace(TABLE_FILTERABLE_TAG, "")
                    columns.append(
                        {"id": f"col{index}", "label": label.strip(), "sortable": column_sortable, "filterable": column_filterable}
                    )

            width = max((len(row) for row in data[1:] if isinstance(row, list)), default=0)
            used_ids = {column["id"] for column in columns}
            # cells past the last column get a column of their own
            for index in range(len(columns) + 1, width + 1):
                if f"col{index}" in used_ids:
                    logger.warning(f"<{name}> has cells past its last column; dropping them")
                    break
                header = headers[index - 1] if index - 1 < len(headers) else None
                label = _js_string(header).strip() if header is not None else ""
                columns.append(
                    {
                        "id": f"col{index}",
                        "label": label or f"Column {index}",
                        "sortable": global_sortable,
                        "filterable": global_filterable,
                    }
                )

            for row_index, row in enumerate(data[1:], start=1):
                if isinstance(row, list):
                    row_data: dict[str, Any] = {"id": f"row{row_index}"}
                    for column, cell in zip(columns, row):
                        row_data[column["id"]] = _js_string(cell)
                    rows.append(row_data)
        else:
            if data is not None:
                logger.warning(f"<{name}> has no usable data; using placeholder data")
            placeholder = [list(row) for row in DEFAULT_TABLE_PLACEHOLDER_DATA]
            columns = [_column(index, label) for index, label in enumerate(placeholder[0], start=1)]
            rows = [
                {"id": f"row{row_index}", **{f"col{index}": value for index, value in enumerate(row, start=1)}}
                for row_index, row in enumerate(placeholder[1:], start=1)
            ]

        if not columns:
            columns = [_column(1, EMPTY_TABLE_LABEL)]
        if not rows:
            rows = [
                {"id": f"row{row_index}", **{col["id"]: f"Data {row_index}-{index}" for index, col in enumerate(columns, 1)}}
                for row_index in (1, 2)
            ]
        return _table_block(attrs, columns, rows)

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def _convert_component(self, node: SourceNode) -> list[DocumentNode]:
        """Convert a component tag through its catalogue rule."""
        name = node.name or ""
        rule = get_rule(name)
        if rule is None:
            logger.warning(f"Unknown component: {name}")
            return [paragraph(UNKNOWN_COMPONENT_TEMPLATE.format(name=name))]
        if not rule.standalone or rule.target_kind is None:
            logger.debug(f"<{name}> is only meaningful inside its parent; skipped")
            return []

        attrs = resolve_attributes(rule.attribute_map, extract_attributes(node), name)

        if rule.child_policy is ChildPolicy.FLATTEN_MARKDOWN_TABLE:
            return [self._convert_table_component(node, rule, attrs)]
        if rule.child_policy is ChildPolicy.ATOMIC:
            return [self._convert_atomic(node, rule, attrs)]
        if rule.child_policy is ChildPolicy.EXTRACT_NAMED_CHILDREN:
            return [self._convert_parent(node, rule, attrs)]

        content = _non_empty(self._convert_body(node))
        return [DocumentNode(rule.target_kind, attrs=self._rule_attrs(rule, attrs), content=content)]

    def _convert_body(self, node: SourceNode) -> list[DocumentNode]:
        """Convert the children of a component; inline children form one paragraph."""
        if node.kind == "jsxTextElement":
            content = self._convert_inline(node.children)
            return [DocumentNode("paragraph", content=content)] if content else []
        return self._convert_blocks(node.children or [])

    def _convert_atomic(self, node: SourceNode, rule: ComponentRule, attrs: dict[str, Any]) -> DocumentNode:
        """Convert a component whose data lives entirely in attrs."""
        kind = rule.target_kind or ""
        if kind == "imageBlock":
            return self._image_block(attrs["src"], attrs["alt"], attrs["caption"])
        if kind == "labelBlock":
            attrs["label"] = attrs["label"] or node.text_content().strip() or DEFAULT_LABEL_TEXT
        elif kind == "paramBlock":
            if attrs["description"] is None:
                attrs["description"] = node.text_content().strip()
        elif node.children:
            logger.debug(f"<{rule.component_name}> children ignored")
        return DocumentNode(kind, attrs=self._rule_attrs(rule, attrs))

    def _convert_parent(self, node: SourceNode, rule: ComponentRule, attrs: dict[str, Any]) -> DocumentNode:
        """Convert a component that keeps only its named children."""
        kind = rule.target_kind or ""
        child_rule = get_rule(rule.child_component)
        children = list(_named_children(node, rule.child_component or ""))

        if kind == "codeGroup":
            return DocumentNode("codeGroup", attrs={"files": self._code_files(children, child_rule)})

        items = [self._convert_child(child, child_rule) for child in children] if child_rule else []

        if kind == "columnGroup":
            if not items:
                items = [
                    DocumentNode("column", attrs={"width": "auto"}, content=[paragraph()])
                    for _ in range(max(1, attrs["columnCount"]))
                ]
            attrs["columnCount"] = len(items)
        elif kind == "accordionBlock" and not items:
            items = [
                DocumentNode(
                    "accordionTab",
                    attrs={"header": DEFAULT_FIRST_TAB_LABEL, "disabled": False, "isActive": True},
                    content=[paragraph()],
                )
            ]
        elif kind == "tabsBlock":
            if not items:
                items = [
                    DocumentNode(
                        "tabBlock",
                        attrs={"label": DEFAULT_FIRST_TAB_LABEL, "icon": None, "isActive": False},
                        content=[paragraph()],
                    )
                ]
            items[0].attrs["isActive"] = True
        elif kind == "stepsBlock" and not items:
            items = [DocumentNode("stepBlock", attrs={"title": f"{DEFAULT_STEP_TITLE} 1"}, content=[paragraph()])]
        elif kind == "taskList" and not items:
            items = [DocumentNode("taskItem", attrs={"checked": False}, content=[paragraph()])]

        return DocumentNode(kind, attrs=self._rule_attrs(rule, attrs), content=items)

    def _convert_child(self, node: SourceNode, rule: ComponentRule) -> DocumentNode:
        """Convert a named child (``Tab``, ``Column``, ``CheckItem``...) with its own rule."""
        attrs = resolve_attributes(rule.attribute_map, extract_attributes(node), rule.component_name)
        if rule.target_kind == "taskItem":
            text = node.text_content().strip()
            return DocumentNode(
                "taskItem",
                attrs={"checked": attrs.pop("variant") == "do"},
                content=[paragraph(*([text] if text else []))],
            )
        return DocumentNode(rule.target_kind or "", attrs=attrs, content=_non_empty(self._convert_body(node)))

    def _code_files(self, children: list[SourceNode], rule: Optional[ComponentRule]) -> list[dict[str, str]]:
        """Collect the ``files`` attr of a code group from its ``Code`` children."""
        files: list[dict[str, str]] = []
        for child in children:
            attrs = resolve_attributes(rule.attribute_map, extract_attributes(child), "Code") if rule else {}
            language = attrs.get("language") or _code_language(child) or DEFAULT_CODE_LANGUAGE
            files.append(
                {
                    "filename": attrs.get("filename") or f"example.{language}",
                    "language": language,
                    "code": _code_text(child),
                }
            )
        if not files:
            filename, language = DEFAULT_CODE_GROUP_FILE
            files.append({"filename": filename, "language": language, "code": ""})
        return files

    def _rule_attrs(self, rule: ComponentRule, attrs: dict[str, Any]) -> dict[str, Any]:
        """Attach a generated id for tracked components."""
        if rule.id_prefix:
            return self._with_id(rule.id_prefix, attrs)
        return attrs

    def _with_id(self, prefix: str, attrs: dict[str, Any]) -> dict[str, Any]:
        if not self.options.generate_ids:
            return attrs
        return {"id": generate_id(prefix), **attrs}

    # ------------------------------------------------------------------
    # Inline content
    # ------------------------------------------------------------------

    def _convert_inline(self, nodes: Optional[list[SourceNode]], marks: tuple[Mark, ...] = ()) -> list[DocumentNode]:
        """Convert inline nodes into text and hard break nodes, merging equal runs."""
        return _merge_runs(self._iter_inline(nodes or [], marks))

    def _iter_inline(self, nodes: list[SourceNode], marks: tuple[Mark, ...]) -> Iterator[DocumentNode]:
        for node in nodes:
            kind = node.kind
            if kind == "text":
                yield from _split_lines(node.value or "", marks)
            elif kind in _MARK_KINDS:
                yield from self._iter_inline(node.children or [], marks + (Mark(_MARK_KINDS[kind]),))
            elif kind == "inlineCode":
                if node.value:
                    yield text_node(node.value, list(marks + (Mark("code"),)))
            elif kind == "link":
                link = Mark.link(node.url or "", DEFAULT_LINK_TARGET)
                yield from self._iter_inline(node.children or [], marks + (link,))
            elif kind == "break":
                yield hard_break()
            elif kind == "jsxTextElement":
                if node.name == "u":
                    yield from self._iter_inline(node.children or [], marks + (Mark("underline"),))
                else:
                    logger.debug(f"Inline <{node.name}> kept as its text")
                    yield from self._iter_inline(node.children or [], marks)
            elif kind == "html":
                # Unpaired <u> and </u> carry no text
                if node.value and node.value not in ("<u>", "</u>"):
                    yield text_node(node.value, list(marks))
            elif kind == "image":
                logger.debug(f"Dropping inline image inside a text block: {node.url!r}")
            elif node.children:
                yield from self._iter_inline(node.children, marks)
            elif node.value:
                yield text_node(node.value, list(marks))


def _is_image(node: SourceNode) -> bool:
    return node.kind == "image" or (node.kind == "jsxTextElement" and node.name == "img")


def _non_empty(content: list[DocumentNode]) -> list[DocumentNode]:
    """Return the content, or a single empty paragraph when there is none."""
    return content if content else [paragraph()]


def _split_lines(value: str, marks: tuple[Mark, ...]) -> Iterator[DocumentNode]:
    """Yield text nodes for each line of a text value, with hard breaks between."""
    lines = value.split("\n")
    for index, line in enumerate(lines):
        if line:
            yield text_node(line, list(marks))
        if index < len(lines) - 1:
            yield hard_break()


def _merge_runs(nodes: Iterable[DocumentNode]) -> list[DocumentNode]:
    """Merge adjacent text nodes that carry the same marks."""
    merged: list[DocumentNode] = []
    for node in nodes:
        if (
            merged
            and node.type == "text"
            and merged[-1].type == "text"
            and merged[-1].marks == node.marks
        ):
            merged[-1] = text_node((merged[-1].text or "") + (node.text or ""), merged[-1].marks)
        else:
            merged.append(node)
    return merged


def _named_children(node: SourceNode, name: str) -> Iterator[SourceNode]:
    """Yield the children named ``name``, looking inside single-line paragraphs too."""
    for child in node.children or ():
        if child.is_jsx and child.name == name:
            yield child
        elif child.kind == "paragraph":
            for inline in child.children or ():
                if inline.is_jsx and inline.name == name:
                    yield inline


def _code_language(node: SourceNode) -> Optional[str]:
    for child in node.walk():
        if child.kind == "code" and child.lang:
            return child.lang
    return None


def _code_text(node: SourceNode) -> str:
    """Return the code of a ``Code`` element: its fenced block, or its text."""
    blocks = [child for child in node.children or () if child.kind == "code"]
    if len(blocks) == 1:
        return blocks[0].value or ""
    return node.text_content()


def _cell_text(cell: SourceNode) -> str:
    return cell.text_content().strip()


def _column(index: int, label: str) -> dict[str, Any]:
    return {"id": f"col{index}", "label": label, "sortable": False, "filterable": False}


def _empty_row(columns: list[dict[str, Any]]) -> dict[str, Any]:
    row: dict[str, Any] = {"id": "row1"}
    for index, column in enumerate(columns):
        row[column["id"]] = EMPTY_TABLE_CELL if index == 0 else ""
    return row


def _table_block(attrs: dict[str, Any], columns: list[dict[str, Any]], rows: list[dict[str, Any]]) -> DocumentNode:
    return DocumentNode(
        "tableBlock",
        attrs={
            "scrollable": attrs.get("scrollable", False),
            "scrollHeight": attrs.get("scrollHeight", DEFAULT_TABLE_SCROLL_HEIGHT),
            "pagination": attrs.get("pagination", False),
            "rowsPerPage": attrs.get("rowsPerPage", DEFAULT_TABLE_ROWS_PER_PAGE),
            "rowsPerPageOptions": attrs.get("rowsPerPageOptions", list(DEFAULT_TABLE_ROWS_PER_PAGE_OPTIONS)),
            "columns": columns,
            "rows": rows,
        },
    )


def _js_string(value: Any) -> str:
    """Convert a literal value to text the way JavaScript's ``String()`` does."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, list):
        return ",".join("" if item is None else _js_string(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def convert(root: SourceNode, options: Union[MdxParserOptions, None] = None) -> list[DocumentNode]:
    """Convert the children of a source root into document block nodes.

    Parameters
    ----------
    root : SourceNode
        ``root`` node from :func:`mdxdoc.parsers.mdx.parse_source`
    options : MdxParserOptions or None, default = None
        Conversion options

    Returns
    -------
    list of DocumentNode
        Block nodes in source order

    """
    return MdxConverter(options).convert(root)


def convert_document(root: SourceNode, options: Union[MdxParserOptions, None] = None) -> DocumentNode:
    """Convert a source root into a ``doc`` node.

    Raises
    ------
    DocumentValidationError
        If output validation is enabled and the result breaks the schema

    """
    return MdxConverter(options).convert_document(root)


__all__ = [
    "MdxConverter",
    "convert",
    "convert_document",
]
