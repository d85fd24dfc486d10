#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/parsers/mdx.py
"""MDX to source AST parser.

This module parses MDX (markdown, GFM tables, task lists and strikethrough,
plus component tags) into the generic source AST using mistune and the JSX
grammar extension in :mod:`mdxdoc.parsers.jsx`. Component names are not
interpreted here; that is the converter's job.

"""

from __future__ import annotations

import datetime
import logging
import re
from typing import Any, Optional, Union

from mdxdoc.ast import SourceNode, text
from mdxdoc.constants import DEPS_MDX
from mdxdoc.exceptions import ParseException
from mdxdoc.options import MdxParserOptions
from mdxdoc.parsers.base import BaseParser
from mdxdoc.utils.decorators import debug_timer, requires_dependencies
from mdxdoc.utils.escape import decode_whitespace_refs

logger = logging.getLogger(__name__)

_FRONTMATTER_RE = re.compile(r"\A---[ \t]*\n(.*?\n)?---[ \t]*(?:\n|\Z)", re.S)


class MdxParser(BaseParser):
    r"""Convert MDX source to a source AST.

    Parameters
    ----------
    options : MdxParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = MdxParser()
        >>> root = parser.parse("# Hello\n\n<Card title=\"A\">\n  Body\n</Card>\n")
        >>> [child.kind for child in root.children]
        ['heading', 'jsxElement']

    Frontmatter is kept on the root:

        >>> root = parser.parse("---\ntitle: Doc\n---\n\nText\n")
        >>> root.data["frontmatter"]
        {'title': 'Doc'}

    """

    def __init__(self, options: MdxParserOptions | None = None):
        """Initialize the MDX parser with options."""
        BaseParser._validate_options_type(options, MdxParserOptions, "mdx")
        options = options or MdxParserOptions()
        super().__init__(options)
        self.options: MdxParserOptions = options
        self._markdown: Any = None

    def _get_markdown(self) -> Any:
        """Build the mistune instance on first use; it is reused afterwards."""
        if self._markdown is None:
            import mistune
            from mistune.plugins.formatting import strikethrough
            from mistune.plugins.table import table, table_in_list, table_in_quote
            from mistune.plugins.task_lists import task_lists

            from mdxdoc.parsers.jsx import MdxBlockParser, esm, jsx

            plugins = [strikethrough, table, table_in_quote, table_in_list, task_lists]
            if self.options.parse_esm:
                plugins.append(esm)
            # jsx must come last: its hook consumes the block text
            plugins.append(jsx)
            self._markdown = mistune.Markdown(
                renderer=None,
                block=MdxBlockParser(max_nesting_depth=self.options.max_nesting_depth),
                inline=mistune.InlineParser(),
                plugins=plugins,
            )
        return self._markdown

    @requires_dependencies("mdx", DEPS_MDX)
    def parse(self, input_data: Union[str, bytes]) -> SourceNode:
        """Parse MDX input into a source AST.

        Parameters
        ----------
        input_data : str or bytes
            MDX source

        Returns
        -------
        SourceNode
            ``root`` node; parsed frontmatter is kept in ``root.data``

        Raises
        ------
        ParseException
            If the source is structurally malformed

        """
        content = self._load_text_content(input_data)
        content = content.replace("\r\n", "\n").replace("\r", "\n")

        frontmatter: dict[str, Any] = {}
        if self.options.parse_frontmatter:
            content, frontmatter = self._extract_frontmatter(content)

        with debug_timer(logger, "Parsing (mdx)"):
            tokens, _state = self._get_markdown().parse(content)

        root = SourceNode("root", children=self._process_tokens(tokens), line=1)
        if frontmatter:
            root.data["frontmatter"] = frontmatter
        return root

    def _extract_frontmatter(self, content: str) -> tuple[str, dict[str, Any]]:
        """Split a leading YAML frontmatter block from the content.

        The block is replaced with blank lines so that line numbers in later
        error messages still match the original text.

        Raises
        ------
        ParseException
            If the block is not valid YAML or not a mapping

        """
        match = _FRONTMATTER_RE.match(content)
        if not match:
            return content, {}

        import yaml

        body = match.group(1) or ""
        try:
            data = yaml.safe_load(body)
        except yaml.YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            line = mark.line + 2 if mark is not None else 1
            column = mark.column + 1 if mark is not None else 1
            problem = getattr(e, "problem", None) or str(e)
            raise ParseException(
                f"{line}:{column}: Invalid YAML frontmatter: {problem}", line=line, column=column, original_error=e
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ParseException(
                f"1:1: Invalid YAML frontmatter: expected a mapping, got {type(data).__name__}", line=1, column=1
            )

        data = _to_literal(data)
        logger.debug(f"Parsed frontmatter with {len(data)} keys")
        blank = "\n" * match.group(0).count("\n")
        return blank + content[match.end() :], data

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[SourceNode]:
        """Process a list of mistune block tokens into source nodes."""
        nodes: list[SourceNode] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Optional[SourceNode]:
        """Process a single mistune block token.

        Returns None for tokens without a source node (blank lines).
        """
        token_type = token.get("type", "")
        line = token.get("_line")

        if token_type in ("paragraph", "block_text"):
            return SourceNode("paragraph", children=self._process_inline_tokens(token), line=line)
        elif token_type == "heading":
            level = token.get("attrs", {}).get("level", 1)
            return SourceNode("heading", children=self._process_inline_tokens(token), depth=level, line=line)
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return SourceNode("blockquote", children=self._process_tokens(token.get("children", [])), line=line)
        elif token_type == "list":
            return self._process_list(token)
        elif token_type in ("list_item", "task_list_item"):
            return self._process_list_item(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return SourceNode("thematicBreak", line=line)
        elif token_type == "block_html":
            return SourceNode("html", value=token.get("raw", "").rstrip("\n"), line=line)
        elif token_type == "jsx_block":
            attrs = token["attrs"]
            return SourceNode(
                "jsxElement",
                children=self._process_tokens(token.get("children", [])),
                name=attrs["name"],
                attributes=list(attrs["attributes"]),
                line=attrs.get("line", line),
            )
        elif token_type == "esm":
            return SourceNode("esm", value=token.get("raw", ""), line=line)
        elif token_type == "blank_line":
            return None

        logger.debug(f"Skipping unsupported token type: {token_type}")
        return None

    def _process_code_block(self, token: dict[str, Any]) -> SourceNode:
        """Process a fenced code token; ``raw`` keeps its final newline."""
        raw = token.get("raw", "")
        if raw.endswith("\n"):
            raw = raw[:-1]
        info = (token.get("attrs") or {}).get("info", "").strip()
        lang: Optional[str] = None
        meta: Optional[str] = None
        if info:
            parts = info.split(None, 1)
            lang = parts[0]
            meta = parts[1] if len(parts) > 1 else None
        return SourceNode("code", value=raw, lang=lang, meta=meta, line=token.get("_line"))

    def _process_list(self, token: dict[str, Any]) -> SourceNode:
        """Process a list token."""
        attrs = token.get("attrs", {})
        ordered = bool(attrs.get("ordered", False))
        return SourceNode(
            "list",
            children=[self._process_list_item(item) for item in token.get("children", [])],
            ordered=ordered,
            start=attrs.get("start", 1) if ordered else None,
            line=token.get("_line"),
        )

    def _process_list_item(self, token: dict[str, Any]) -> SourceNode:
        """Process a list item; task items carry their checkbox state."""
        checked = None
        if token.get("type") == "task_list_item":
            checked = bool(token.get("attrs", {}).get("checked", False))
        return SourceNode(
            "listItem",
            children=self._process_tokens(token.get("children", [])),
            checked=checked,
            line=token.get("_line"),
        )

    def _process_table(self, token: dict[str, Any]) -> SourceNode:
        """Process a table token into header and body rows."""
        rows: list[SourceNode] = []
        align: list[Optional[str]] = []
        for section in token.get("children", []):
            if section.get("type") == "table_head":
                cells = section.get("children", [])
                align = [cell.get("attrs", {}).get("align") for cell in cells]
                rows.append(SourceNode("tableRow", children=[self._process_table_cell(cell) for cell in cells]))
            elif section.get("type") == "table_body":
                for row in section.get("children", []):
                    cells = row.get("children", [])
                    rows.append(SourceNode("tableRow", children=[self._process_table_cell(cell) for cell in cells]))
        return SourceNode("table", children=rows, align=align, line=token.get("_line"))

    def _process_table_cell(self, token: dict[str, Any]) -> SourceNode:
        """Process a table cell; ``\\|`` inside code spans is a literal pipe."""
        cell = SourceNode("tableCell", children=self._process_inline_tokens(token))
        for node in cell.walk():
            if node.kind == "inlineCode" and node.value:
                node.value = node.value.replace("\\|", "|")
        return cell

    def _process_inline_tokens(self, token: dict[str, Any]) -> list[SourceNode]:
        """Process the inline children of a block token, pairing component tags."""
        tokens = token.get("children", [])
        nodes, _index, _closed = self._process_inline_run(tokens, 0, ())
        return _merge_text(nodes)

    def _process_inline_run(
        self, tokens: list[dict[str, Any]], index: int, open_names: tuple[str, ...]
    ) -> tuple[list[SourceNode], int, bool]:
        """Process inline tokens up to the closing tag of the innermost open element.

        Returns
        -------
        tuple
            ``(nodes, next_index, closed)``; ``closed`` is False when the
            tokens ran out, or an outer element's closing tag was reached,
            before ``open_names[-1]`` was closed

        """
        nodes: list[SourceNode] = []
        while index < len(tokens):
            token = tokens[index]
            if token.get("type") != "jsx_inline":
                node = self._process_inline_token(token)
                if node is not None:
                    nodes.append(node)
                index += 1
                continue

            attrs = token["attrs"]
            name = attrs["name"]
            if attrs["closing"]:
                if open_names and name == open_names[-1]:
                    return nodes, index + 1, True
                if name in open_names:
                    return nodes, index, False
                if name[0].isupper():
                    raise ParseException(
                        f"{attrs['line']}:{attrs['column']}: Unexpected closing tag `</{name}>`, "
                        "expected a corresponding opening tag",
                        line=attrs["line"],
                        column=attrs["column"],
                    )
                nodes.append(SourceNode("html", value=f"</{name}>"))
                index += 1
                continue

            element = SourceNode("jsxTextElement", name=name, attributes=list(attrs["attributes"]), line=attrs["line"])
            if attrs["self_closing"]:
                nodes.append(element)
                index += 1
                continue

            children, index, closed = self._process_inline_run(tokens, index + 1, open_names + (name,))
            if closed:
                element.children = _merge_text(children)
                nodes.append(element)
            elif name[0].isupper():
                raise ParseException(
                    f"Expected a closing tag for `<{name}>` "
                    f"({attrs['line']}:{attrs['column']}-{attrs['line']}:{attrs['end_column']}) "
                    "before the end of `paragraph`",
                    line=attrs["line"],
                    column=attrs["column"],
                )
            else:
                nodes.append(SourceNode("html", value=f"<{name}>"))
                nodes.extend(children)
        return nodes, index, False

    def _process_inline_token(self, token: dict[str, Any]) -> Optional[SourceNode]:
        """Process a single non-component inline token."""
        token_type = token.get("type", "")

        if token_type == "text":
            return text(decode_whitespace_refs(token.get("raw", "")))
        elif token_type in ("strong", "emphasis", "strikethrough"):
            kind = {"strong": "strong", "emphasis": "emphasis", "strikethrough": "delete"}[token_type]
            return SourceNode(kind, children=self._process_inline_tokens(token))
        elif token_type == "codespan":
            return SourceNode("inlineCode", value=token.get("raw", ""))
        elif token_type == "link":
            attrs = token.get("attrs", {})
            return SourceNode(
                "link",
                children=self._process_inline_tokens(token),
                url=attrs.get("url", ""),
                title=attrs.get("title"),
            )
        elif token_type == "image":
            attrs = token.get("attrs", {})
            alt = "".join(child.text_content() for child in self._process_inline_tokens(token))
            return SourceNode("image", url=attrs.get("url", ""), alt=alt, title=attrs.get("title"))
        elif token_type == "linebreak":
            return SourceNode("break")
        elif token_type == "softbreak":
            return text("\n")
        elif token_type == "inline_html":
            return SourceNode("html", value=token.get("raw", ""))

        logger.debug(f"Skipping unsupported inline token type: {token_type}")
        return None


def _to_literal(value: Any) -> Any:
    """Convert YAML values to JSON-compatible literals (dates become ISO strings)."""
    if isinstance(value, dict):
        return {str(key): _to_literal(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_to_literal(item) for item in value]
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def _merge_text(nodes: list[SourceNode]) -> list[SourceNode]:
    """Merge adjacent text nodes and drop empty ones."""
    merged: list[SourceNode] = []
    for node in nodes:
        if node.kind == "text":
            if not node.value:
                continue
            if merged and merged[-1].kind == "text":
                merged[-1] = text((merged[-1].value or "") + node.value)
                continue
        merged.append(node)
    return merged


def parse_source(text_or_bytes: Union[str, bytes], options: MdxParserOptions | None = None) -> SourceNode:
    r"""Parse MDX source into a source AST.

    This is a convenience function that creates a parser and parses the
    source in one step.

    Parameters
    ----------
    text_or_bytes : str or bytes
        MDX source
    options : MdxParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    SourceNode
        ``root`` node of the source AST

    Raises
    ------
    ParseException
        If the source is structurally malformed

    Examples
    --------
    >>> from mdxdoc.parsers.mdx import parse_source
    >>> root = parse_source("# Hello\n\nWorld")
    >>> len(root.children)
    2

    """
    return MdxParser(options).parse(text_or_bytes)


__all__ = ["MdxParser", "parse_source"]
