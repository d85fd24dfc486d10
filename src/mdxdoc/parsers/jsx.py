#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/parsers/jsx.py
"""JSX grammar extension for mistune.

MDX adds component tags to markdown. This module teaches mistune's block and
inline parsers about them:

- Flow tags: a line starting with ``<Name`` (capitalized, or ``img``) opens a
  component. Self-closing tags end on their line; container tags extend to
  their matching ``</Name>`` and their body is parsed again as markdown.
- Text tags: ``<Name>``, ``</Name>`` and ``<Name />`` inside a paragraph are
  emitted as ``jsx_inline`` tokens and paired by the lowering step in
  :mod:`mdxdoc.parsers.mdx`.
- ESM: top-level ``import``/``export`` statements.

Errors are raised as :class:`mdxdoc.exceptions.ParseException` with the
position written into the message, the way the MDX tool chain reports them.

"""

from __future__ import annotations

import logging
import re
import textwrap
from dataclasses import dataclass
from typing import Any, Callable, Optional

from mistune import BlockParser, BlockState

from mdxdoc.ast import JsxAttribute
from mdxdoc.constants import DEFAULT_MAX_NESTING_DEPTH, JSX_BLOCK_NAME_PATTERN, JSX_INLINE_NAME_PATTERN
from mdxdoc.exceptions import ParseException

logger = logging.getLogger(__name__)

Locator = Callable[[int], tuple[int, int]]

#: env key carrying the source line of the block whose inline text is parsed
LINE_ENV_KEY = "__mdx_line__"

VOID_ELEMENTS = frozenset({"img"})

JSX_BLOCK_PATTERN = r"^ {0,3}<(?P<jsx_close>/?)(?P<jsx_name>" + JSX_BLOCK_NAME_PATTERN + r")(?=[\s/>])"
JSX_INLINE_PATTERN = r"<(?P<jsx_inline_close>/?)(?:" + JSX_INLINE_NAME_PATTERN + r")(?=[\s/>])"
ESM_PATTERN = (
    r"^(?:import\s+(?:[\w*{][^\n]*\s+from\s+)?[\"']"
    r"|export\s+(?:const|let|var|function|class|default|async|\{|\*))"
)

_TAG_NAME_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$.:-]*")
_ATTR_NAME_RE = re.compile(r"[A-Za-z_$:][A-Za-z0-9_$:.-]*")
_INLINE_CLOSE_RE = re.compile(r"</(" + JSX_INLINE_NAME_PATTERN + r")\s*>")
_BLOCK_CLOSE_RE = re.compile(r"</(" + JSX_BLOCK_NAME_PATTERN + r")\s*>")
_FENCE_OPEN_RE = re.compile(r"^[ \t]*(`{3,}|~{3,})(.*)$")
_BLANK_LINE_RE = re.compile(r"^[ \t]*\n", re.M)


@dataclass(frozen=True)
class JsxTag:
    """An opening or self-closing component tag found in source text.

    Parameters
    ----------
    name : str
        Tag name
    attributes : tuple of JsxAttribute
        Attributes in source order
    start : int
        Offset of ``<``
    end : int
        Offset just after ``>``
    self_closing : bool
        Whether the tag ends with ``/>``

    """

    name: str
    attributes: tuple[JsxAttribute, ...]
    start: int
    end: int
    self_closing: bool


def _default_locator(src: str) -> Locator:
    def locate(offset: int) -> tuple[int, int]:
        line = src.count("\n", 0, offset) + 1
        column = offset - (src.rfind("\n", 0, offset) + 1) + 1
        return line, column

    return locate


def _line_end(src: str, pos: int) -> int:
    """Return the offset just after the line ending at or after ``pos``."""
    index = src.find("\n", pos)
    return len(src) if index == -1 else index + 1


def _error(message: str, offset: int, locate: Locator) -> ParseException:
    line, column = locate(offset)
    return ParseException(f"{line}:{column}: {message}", line=line, column=column)


def _skip_string(src: str, pos: int, quote: str, locate: Locator) -> int:
    i = pos + 1
    n = len(src)
    while i < n:
        c = src[i]
        if c == "\\":
            i += 2
            continue
        if c == quote:
            return i + 1
        i += 1
    raise _error("Unexpected end of file in expression, expected a closing quote", pos, locate)


def find_expression_end(src: str, pos: int, locate: Optional[Locator] = None) -> int:
    """Return the offset just after the brace closing the expression at ``pos``.

    JavaScript strings, template literals and comments are skipped so that
    braces inside them do not count.

    Raises
    ------
    ParseException
        If the expression is not closed before the end of the text

    """
    locate = locate or _default_locator(src)
    depth = 0
    i = pos
    n = len(src)
    while i < n:
        c = src[i]
        if c in ("'", '"', "`"):
            i = _skip_string(src, i, c, locate)
            continue
        if c == "/" and src.startswith("//", i):
            newline = src.find("\n", i)
            i = n if newline == -1 else newline + 1
            continue
        if c == "/" and src.startswith("/*", i):
            close = src.find("*/", i + 2)
            if close == -1:
                break
            i = close + 2
            continue
        if c == "{":
            depth += 1
        elif c == "}":
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    raise _error(
        "Unexpected end of file in expression, expected a corresponding closing brace for `{`",
        pos,
        locate,
    )


def scan_tag(src: str, pos: int, locate: Optional[Locator] = None) -> JsxTag:
    """Scan the opening or self-closing tag starting at ``src[pos] == "<"``.

    Attribute values follow JSX rules: ``"..."`` and ``'...'`` have no escape
    sequences, ``{...}`` holds an expression, and a bare name is a boolean
    shorthand.

    Parameters
    ----------
    src : str
        Source text
    pos : int
        Offset of ``<``
    locate : callable, optional
        Maps an offset to a 1-based ``(line, column)`` for error messages

    Returns
    -------
    JsxTag
        The scanned tag

    Raises
    ------
    ParseException
        If the tag is malformed or not terminated

    """
    locate = locate or _default_locator(src)
    n = len(src)
    name_match = _TAG_NAME_RE.match(src, pos + 1)
    if not name_match:
        raise _error("Unexpected character before name, expected a character that can start a name", pos + 1, locate)
    name = name_match.group(0)
    attributes: list[JsxAttribute] = []
    i = name_match.end()

    while True:
        while i < n and src[i].isspace():
            i += 1
        if i >= n:
            raise _error(f"Unexpected end of file in tag, expected `>` to close `<{name}>`", pos, locate)

        c = src[i]
        if c == ">":
            return JsxTag(name, tuple(attributes), pos, i + 1, False)
        if c == "/":
            if src.startswith("/>", i):
                return JsxTag(name, tuple(attributes), pos, i + 2, True)
            raise _error(f"Unexpected character after self-closing slash in `<{name}>`, expected `>`", i, locate)
        if c == "{":
            # spread attributes carry nothing literal
            end = find_expression_end(src, i, locate)
            logger.debug(f"Ignoring spread attribute {src[i:end]!r} on <{name}>")
            i = end
            continue

        attr_match = _ATTR_NAME_RE.match(src, i)
        if not attr_match:
            raise _error(f"Unexpected character `{c}` in tag `<{name}>`, expected an attribute name", i, locate)
        attr_name = attr_match.group(0)
        i = attr_match.end()

        j = i
        while j < n and src[j].isspace():
            j += 1
        if j >= n or src[j] != "=":
            attributes.append(JsxAttribute(attr_name))
            continue

        j += 1
        while j < n and src[j].isspace():
            j += 1
        if j >= n:
            raise _error(f"Unexpected end of file in tag, expected a value for `{attr_name}`", pos, locate)

        quote = src[j]
        if quote in ('"', "'"):
            close = src.find(quote, j + 1)
            if close == -1:
                raise _error(
                    f"Unexpected end of file in attribute value, expected a closing `{quote}`",
                    j,
                    locate,
                )
            attributes.append(JsxAttribute(attr_name, src[j + 1 : close]))
            i = close + 1
        elif quote == "{":
            end = find_expression_end(src, j, locate)
            attributes.append(JsxAttribute(attr_name, src[j + 1 : end - 1], is_expression=True))
            i = end
        else:
            raise _error(
                f"Unexpected character `{quote}` before attribute value, "
                "expected a character that can start an attribute value, such as `\"`, `'`, or `{`",
                j,
                locate,
            )


def _skip_code_span(src: str, pos: int, line_end: int) -> int:
    run_end = pos
    while run_end < line_end and src[run_end] == "`":
        run_end += 1
    marker = src[pos:run_end]
    search = run_end
    while True:
        close = src.find(marker, search, line_end)
        if close == -1:
            return run_end
        after = close + len(marker)
        if after < line_end and src[after] == "`":
            search = after
            while search < line_end and src[search] == "`":
                search += 1
            continue
        return after


def find_closing_tag(src: str, pos: int, name: str, locate: Optional[Locator] = None) -> Optional[tuple[int, int]]:
    """Find the ``</name>`` that closes a container opened before ``pos``.

    Tags with the same name nest; fenced code blocks and inline code spans
    are skipped.

    Returns
    -------
    tuple of int or None
        ``(start, end)`` offsets of the closing tag, None when it is missing

    """
    locate = locate or _default_locator(src)
    open_re = re.compile(r"<(/?)" + re.escape(name) + r"(?=[\s/>])")
    close_re = re.compile(r"</" + re.escape(name) + r"\s*>")
    depth = 1
    fence: Optional[str] = None
    n = len(src)

    while pos < n:
        line_end = src.find("\n", pos)
        if line_end == -1:
            line_end = n
        at_line_start = pos == 0 or src[pos - 1] == "\n"

        if at_line_start:
            line = src[pos:line_end]
            if fence is not None:
                stripped = line.strip()
                if stripped and set(stripped) == {fence[0]} and len(stripped) >= len(fence):
                    fence = None
                pos = line_end + 1
                continue
            fence_match = _FENCE_OPEN_RE.match(line)
            if fence_match and not (fence_match.group(1)[0] == "`" and "`" in fence_match.group(2)):
                fence = fence_match.group(1)
                pos = line_end + 1
                continue

        i = pos
        resume: Optional[int] = None
        while i < line_end:
            c = src[i]
            if c == "\\":
                i += 2
                continue
            if c == "`":
                i = _skip_code_span(src, i, line_end)
                continue
            if c == "<":
                tag_match = open_re.match(src, i)
                if tag_match and tag_match.group(1):
                    close_match = close_re.match(src, i)
                    if close_match:
                        depth -= 1
                        if depth == 0:
                            return i, close_match.end()
                        i = close_match.end()
                        continue
                elif tag_match:
                    tag = scan_tag(src, i, locate)
                    if not tag.self_closing and name not in VOID_ELEMENTS:
                        depth += 1
                    if tag.end > line_end:
                        resume = tag.end
                        break
                    i = tag.end
                    continue
            i += 1

        pos = resume if resume is not None else line_end + 1
    return None


class MdxBlockState(BlockState):
    """Block state that tracks source lines and component nesting.

    ``line_offset`` is the number of source lines before this state's text;
    it is exact for component bodies and approximate inside lists and block
    quotes, whose text mistune rebuilds without the markers.
    """

    def __init__(self, parent: Optional[Any] = None) -> None:
        super().__init__(parent)
        self.block_start = 0
        self.line_offset = 0
        self.jsx_depth = 0
        self.jsx_parent: Optional[str] = None
        if parent is not None:
            self.line_offset = parent.position(parent.block_start)[0] - 1
            self.jsx_depth = parent.jsx_depth
            self.jsx_parent = parent.jsx_parent

    def position(self, offset: int) -> tuple[int, int]:
        """Return the 1-based ``(line, column)`` of an offset in this state's text."""
        line = self.line_offset + self.src.count("\n", 0, offset) + 1
        column = offset - (self.src.rfind("\n", 0, offset) + 1) + 1
        return line, column

    def span(self, start: int, end: int) -> str:
        """Format an offset range as ``L:C-L:C``."""
        start_line, start_column = self.position(start)
        end_line, end_column = self.position(end)
        return f"{start_line}:{start_column}-{end_line}:{end_column}"

    def append_token(self, token: dict[str, Any]) -> None:
        token.setdefault("_line", self.position(self.block_start)[0])
        super().append_token(token)

    def prepend_token(self, token: dict[str, Any]) -> None:
        token.setdefault("_line", self.position(self.block_start)[0])
        super().prepend_token(token)

    def add_paragraph(self, text: str) -> None:
        last_token = self.last_token()
        if last_token and last_token["type"] == "paragraph":
            last_token["text"] += text
        else:
            self.tokens.append({"type": "paragraph", "text": text, "_line": self.position(self.cursor)[0]})


class MdxBlockParser(BlockParser):
    """mistune block parser with MDX settings.

    Indented code is disabled, as in MDX, so component bodies can be indented
    freely.

    Parameters
    ----------
    max_nesting_depth : int, default 32
        Maximum nesting of component containers

    """

    state_cls = MdxBlockState
    DEFAULT_RULES = tuple(rule for rule in BlockParser.DEFAULT_RULES if rule != "indent_code")

    def __init__(self, max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.max_nesting_depth = max_nesting_depth

    def parse_method(self, m: re.Match[str], state: BlockState) -> Optional[int]:
        state.block_start = m.start()
        return super().parse_method(m, state)


def _block_token(tag: JsxTag, line: int, children: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "type": "jsx_block",
        "attrs": {"name": tag.name, "attributes": list(tag.attributes), "line": line},
        "children": children,
    }


def parse_jsx_block(block: MdxBlockParser, m: re.Match[str], state: MdxBlockState) -> Optional[int]:
    """Parse a component tag that starts a line."""
    # component tags do not interrupt a paragraph
    end_pos = state.append_paragraph()
    if end_pos:
        return end_pos

    src = state.src
    start = src.index("<", m.start())
    name = m.group("jsx_name")

    if m.group("jsx_close"):
        close_match = _BLOCK_CLOSE_RE.match(src, start)
        tag_end = close_match.end() if close_match else m.end()
        line, column = state.position(start)
        raise ParseException(
            f"Unexpected closing slash `/` in tag, expected an open tag first ({state.span(start, tag_end)})",
            line=line,
            column=column,
        )

    tag = scan_tag(src, start, state.position)
    line_end = _line_end(src, tag.end)
    if src[tag.end : line_end].strip():
        # text after the tag makes the line part of a paragraph
        state.add_paragraph(src[m.start() : line_end])
        return line_end

    line, column = state.position(start)
    if tag.self_closing or tag.name in VOID_ELEMENTS:
        state.append_token(_block_token(tag, line, []))
        return line_end

    close = find_closing_tag(src, line_end, tag.name, state.position)
    if close is None:
        where = f"`<{state.jsx_parent}>`" if state.jsx_parent else "`document`"
        raise ParseException(
            f"Expected a closing tag for `<{name}>` ({state.span(start, tag.end)}) before the end of {where}",
            line=line,
            column=column,
        )

    close_start, close_end = close
    after_end = _line_end(src, close_end)
    if src[close_end:after_end].strip():
        close_line, close_column = state.position(close_end)
        raise ParseException(
            f"Unexpected content after closing tag `</{name}>` ({state.span(close_start, close_end)}), "
            "expected the end of the line",
            line=close_line,
            column=close_column,
        )

    depth = state.jsx_depth + 1
    if depth > block.max_nesting_depth:
        raise ParseException(
            f"Maximum component nesting depth of {block.max_nesting_depth} exceeded by `<{name}>` "
            f"({state.span(start, tag.end)})",
            line=line,
            column=column,
        )

    inner = src[line_end:close_start]
    last_newline = inner.rfind("\n")
    if not inner[last_newline + 1 :].strip():
        inner = inner[: last_newline + 1]

    child = state.child_state(textwrap.dedent(inner))
    child.line_offset = state.position(line_end)[0] - 1
    child.jsx_depth = depth
    child.jsx_parent = tag.name
    block.parse(child)

    state.append_token(_block_token(tag, line, child.tokens))
    return after_end


def parse_esm(block: MdxBlockParser, m: re.Match[str], state: MdxBlockState) -> Optional[int]:
    """Parse a top-level ``import``/``export`` statement up to the next blank line."""
    if state.parent is not None or state.jsx_depth:
        return None
    end_pos = state.append_paragraph()
    if end_pos:
        return end_pos

    blank = _BLANK_LINE_RE.search(state.src, m.end())
    end = blank.start() if blank else state.cursor_max
    state.append_token({"type": "esm", "raw": state.src[m.start() : end].rstrip("\n")})
    return end


def parse_jsx_inline(inline: Any, m: re.Match[str], state: Any) -> Optional[int]:
    """Parse a component tag inside paragraph text into a ``jsx_inline`` token."""
    src = state.src
    start = m.start()
    base_line = state.env.get(LINE_ENV_KEY) or 1

    def locate(offset: int) -> tuple[int, int]:
        line = base_line + src.count("\n", 0, offset)
        column = offset - (src.rfind("\n", 0, offset) + 1) + 1
        return line, column

    line, column = locate(start)
    if m.group("jsx_inline_close"):
        close_match = _INLINE_CLOSE_RE.match(src, start)
        if close_match is None:
            return None
        state.append_token(
            {
                "type": "jsx_inline",
                "attrs": {
                    "name": close_match.group(1),
                    "attributes": [],
                    "closing": True,
                    "self_closing": False,
                    "line": line,
                    "column": column,
                    "end_column": locate(close_match.end())[1],
                },
            }
        )
        return close_match.end()

    tag = scan_tag(src, start, locate)
    state.append_token(
        {
            "type": "jsx_inline",
            "attrs": {
                "name": tag.name,
                "attributes": list(tag.attributes),
                "closing": False,
                "self_closing": tag.self_closing or tag.name in VOID_ELEMENTS,
                "line": line,
                "column": column,
                "end_column": locate(tag.end)[1],
            },
        }
    )
    return tag.end


def _parse_inline_children(md: Any, tokens: list[dict[str, Any]], env: Any, line: int) -> None:
    for token in tokens:
        token_line = token.get("_line", line)
        if "children" in token:
            _parse_inline_children(md, token["children"], env, token_line)
        elif "text" in token:
            env[LINE_ENV_KEY] = token_line
            text = token.pop("text")
            token["children"] = md.inline(text.strip(" \r\n\t\f"), env)


def parse_inline_with_lines(md: Any, state: BlockState) -> None:
    """Run the inline parser over every block, exposing the block's source line.

    Registered as a before-render hook so that component errors inside
    paragraphs can report a line. It must run after the task list hook,
    which reads the raw block text.
    """
    _parse_inline_children(md, state.tokens, state.env, 1)


def jsx(md: Any) -> None:
    """A mistune plugin adding MDX component tags.

    Must be the last plugin given to the ``Markdown`` instance.
    """
    md.block.register("jsx_block", JSX_BLOCK_PATTERN, parse_jsx_block, before="raw_html")
    md.block.insert_rule(md.block.list_rules, "jsx_block", before="raw_html")
    md.block.insert_rule(md.block.block_quote_rules, "jsx_block", before="raw_html")
    md.inline.register("jsx_inline", JSX_INLINE_PATTERN, parse_jsx_inline, before="auto_link")
    md.before_render_hooks.append(parse_inline_with_lines)


def esm(md: Any) -> None:
    """A mistune plugin keeping top-level ``import``/``export`` statements."""
    md.block.register("esm", ESM_PATTERN, parse_esm, before="raw_html")


__all__ = [
    "JsxTag",
    "LINE_ENV_KEY",
    "MdxBlockParser",
    "MdxBlockState",
    "VOID_ELEMENTS",
    "esm",
    "find_closing_tag",
    "find_expression_end",
    "jsx",
    "parse_esm",
    "parse_inline_with_lines",
    "parse_jsx_block",
    "parse_jsx_inline",
    "scan_tag",
]
