#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/utils/escape.py
"""MDX text escaping utilities.

This module provides the escape functions used by the MDX serializer so that
document text is never misread as markdown or JSX syntax when parsed again.

"""

from __future__ import annotations

import re
from typing import Any

from mdxdoc.expressions import format_literal

# Characters that always start markdown or JSX syntax when unescaped:
# \ - Escape character itself
# ` - Code spans and fences
# * - Emphasis/strong/list
# [ ] - Links, images, task markers and reference definitions
# < - JSX and HTML tags
# { } - MDX expressions
# ~ - Strikethrough and tilde fences
# | - Table cells
_ALWAYS_ESCAPED = frozenset("\\`*[]<{}~|")

_ORDERED_MARKER_RE = re.compile(r"^(\d{1,9})([.)])")
_HEADING_CLOSE_RE = re.compile(r"(^|\s)(#+)(\s*)$")

# Whitespace the parser strips from line edges is written as a character
# reference; only these references are decoded when parsing
_WHITESPACE_REFS = {" ": "&#32;", "\t": "&#9;"}
_WHITESPACE_REF_RE = re.compile(r"&#(32|9);")


def escape_markdown_text(text: str) -> str:
    r"""Escape characters that would otherwise be parsed as MDX syntax.

    Underscores are only escaped where they could delimit emphasis, that is
    when they are not surrounded by word characters on both sides.

    Parameters
    ----------
    text : str
        Plain text to escape

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_markdown_text("a <Card> with *stars*")
        'a \\<Card> with \\*stars\\*'
        >>> escape_markdown_text("snake_case but _emphasis_")
        'snake_case but \\_emphasis\\_'

    """
    if not text:
        return text

    result = []
    last = len(text) - 1
    for i, char in enumerate(text):
        if char in _ALWAYS_ESCAPED:
            result.append("\\" + char)
        elif char == "&" and _WHITESPACE_REF_RE.match(text, i):
            result.append("\\&")
        elif char == "_":
            before = text[i - 1] if i > 0 else ""
            after = text[i + 1] if i < last else ""
            if before.isalnum() and after.isalnum():
                result.append(char)
            else:
                result.append("\\_")
        else:
            result.append(char)
    return "".join(result)


def escape_line_start(line: str) -> str:
    r"""Escape a block marker at the start of a rendered line.

    Lines that begin with ``#``, ``>``, ``-``, ``+``, ``=`` or an ordered list
    number would start a heading, quote, list, setext underline or list item.

    Examples
    --------
        >>> escape_line_start("# not a heading")
        '\\# not a heading'
        >>> escape_line_start("1. not a list")
        '1\\. not a list'

    """
    if not line:
        return line

    match = _ORDERED_MARKER_RE.match(line)
    if match:
        return match.group(1) + "\\" + match.group(2) + line[match.end() :]
    if line[0] in "#>-+=":
        return "\\" + line
    return line


def protect_edge_whitespace(line: str) -> str:
    """Write leading and trailing spaces and tabs of a line as character references.

    Markdown strips whitespace at the edges of paragraph and heading lines,
    so text such as the ``"A "`` left before a split-out image would lose its
    space when parsed again.

    Examples
    --------
        >>> protect_edge_whitespace(" a b ")
        '&#32;a b&#32;'

    """
    body = line.strip(" \t")
    if body == line:
        return line
    if not body:
        return "".join(_WHITESPACE_REFS[char] for char in line)
    lead = line[: len(line) - len(line.lstrip(" \t"))]
    trail = line[len(line.rstrip(" \t")) :]
    return (
        "".join(_WHITESPACE_REFS[char] for char in lead)
        + body
        + "".join(_WHITESPACE_REFS[char] for char in trail)
    )


def decode_whitespace_refs(text: str) -> str:
    """Turn the ``&#32;`` and ``&#9;`` references written by the serializer back into whitespace.

    Other character references are left as they are.

    Examples
    --------
        >>> decode_whitespace_refs("&#32;a&amp;b&#9;")
        ' a&amp;b\\t'

    """
    if "&#" not in text:
        return text
    return _WHITESPACE_REF_RE.sub(lambda m: chr(int(m.group(1))), text)


def escape_heading_text(text: str) -> str:
    r"""Protect a trailing run of ``#`` from being read as a closing sequence.

    Examples
    --------
        >>> escape_heading_text("Issue #")
        'Issue \\#'

    """
    return _HEADING_CLOSE_RE.sub(lambda m: m.group(1) + "\\" + m.group(2) + m.group(3), text, count=1)


def escape_inline_code(code: str, delimiter: str = "`") -> tuple[str, str]:
    """Escape inline code and determine appropriate delimiter.

    Handles cases where code contains the delimiter character by
    using a longer delimiter sequence, and pads the code with a space
    where the parser would otherwise strip or merge characters.

    Parameters
    ----------
    code : str
        Code content to escape
    delimiter : str, default = '`'
        Preferred delimiter character

    Returns
    -------
    tuple[str, str]
        (escaped_code, delimiter_to_use)

    Examples
    --------
        >>> escape_inline_code("simple code", "`")
        ('simple code', '`')
        >>> escape_inline_code("code with ` backtick", "`")
        ('code with ` backtick', '``')

    """
    if not code:
        return code, delimiter

    # Count consecutive delimiters in code
    max_consecutive = 0
    current_consecutive = 0

    for char in code:
        if char == delimiter:
            current_consecutive += 1
            max_consecutive = max(max_consecutive, current_consecutive)
        else:
            current_consecutive = 0

    final_delimiter = delimiter * (max_consecutive + 1)

    # A single leading and trailing space is stripped when both are present
    padded = code.startswith(" ") and code.endswith(" ") and code.strip(" ") != ""
    if code.startswith(delimiter) or code.endswith(delimiter) or padded:
        code = " " + code + " "

    return code, final_delimiter


def escape_link_destination(url: str) -> str:
    r"""Write a link or image destination.

    Destinations with spaces or angle brackets use the ``<...>`` form;
    parentheses are backslash-escaped otherwise.

    Examples
    --------
        >>> escape_link_destination("https://example.com/a(1)")
        'https://example.com/a\\(1\\)'
        >>> escape_link_destination("my file.png")
        '<my file.png>'

    """
    if not url or any(c.isspace() for c in url) or "<" in url or ">" in url:
        inner = url.replace("\\", "\\\\").replace("<", "\\<").replace(">", "\\>")
        return f"<{inner}>"
    return url.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def escape_link_title(title: str) -> str:
    r"""Quote a link or image title.

    Examples
    --------
        >>> escape_link_title('a "quoted" title')
        '"a \\"quoted\\" title"'

    """
    return '"' + title.replace("\\", "\\\\").replace('"', '\\"') + '"'


def format_jsx_attribute(name: str, value: Any, shorthand: bool = False) -> str:
    """Write one component attribute.

    Strings without double quotes or newlines are written as ``name="value"``
    (JSX strings have no escapes); every other value is written as a
    JavaScript literal expression ``name={...}``.

    Parameters
    ----------
    name : str
        Attribute name
    value : Any
        Literal value
    shorthand : bool, default False
        Write ``True`` as the bare attribute name

    Returns
    -------
    str
        Attribute source text

    Examples
    --------
        >>> format_jsx_attribute("title", "Hello")
        'title="Hello"'
        >>> format_jsx_attribute("columns", 3)
        'columns={3}'
        >>> format_jsx_attribute("disabled", True, shorthand=True)
        'disabled'

    """
    if value is True and shorthand:
        return name
    if isinstance(value, str) and '"' not in value and "\n" not in value and "\r" not in value:
        return f'{name}="{value}"'
    return f"{name}={{{format_literal(value)}}}"


__all__ = [
    "escape_markdown_text",
    "escape_line_start",
    "protect_edge_whitespace",
    "decode_whitespace_refs",
    "escape_heading_text",
    "escape_inline_code",
    "escape_link_destination",
    "escape_link_title",
    "format_jsx_attribute",
]
