#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/ast/nodes.py
"""Source AST node classes.

The grammar front-end lowers mistune's token stream into a tree of
:class:`SourceNode` objects. A single tagged dataclass is used for every
node kind; the ``kind`` field selects which of the optional fields carry
meaning.

Node Kinds
----------
Block kinds:
    - root, heading, paragraph, blockquote, list, listItem
    - code, thematicBreak, table, tableRow, tableCell, html, esm
    - jsxElement (component tag on its own lines)

Inline kinds:
    - text, strong, emphasis, delete, inlineCode, link, image, break, html
    - jsxTextElement (component tag inside a paragraph)

Leaf kinds never carry a ``children`` list; every other kind always does.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Literal, Optional

SourceKind = Literal[
    "root",
    "heading",
    "paragraph",
    "blockquote",
    "list",
    "listItem",
    "code",
    "image",
    "thematicBreak",
    "table",
    "tableRow",
    "tableCell",
    "jsxElement",
    "jsxTextElement",
    "text",
    "strong",
    "emphasis",
    "delete",
    "inlineCode",
    "link",
    "break",
    "html",
    "esm",
]

LEAF_KINDS: frozenset[str] = frozenset({"text", "thematicBreak", "break", "code", "inlineCode", "image", "html", "esm"})
CONTAINER_KINDS: frozenset[str] = frozenset(
    {
        "root",
        "heading",
        "paragraph",
        "blockquote",
        "list",
        "listItem",
        "table",
        "tableRow",
        "tableCell",
        "jsxElement",
        "jsxTextElement",
        "strong",
        "emphasis",
        "delete",
        "link",
    }
)
JSX_KINDS: frozenset[str] = frozenset({"jsxElement", "jsxTextElement"})


@dataclass(frozen=True)
class JsxAttribute:
    """A single attribute written on a component tag.

    Parameters
    ----------
    name : str
        Attribute name as written
    value : str or None
        Raw value: the string contents for quoted values, the source between
        the braces for expression values, ``None`` for boolean shorthand
    is_expression : bool, default False
        Whether the value was written as ``{...}``

    """

    name: str
    value: Optional[str] = None
    is_expression: bool = False

    @property
    def is_shorthand(self) -> bool:
        """Return True for attributes written without a value (``<Tab disabled>``)."""
        return self.value is None


@dataclass
class SourceNode:
    """Node of the source AST.

    Parameters
    ----------
    kind : str
        Node kind, one of :data:`SourceKind`
    children : list of SourceNode or None
        Child nodes for container kinds; must be None for leaf kinds
    value : str or None
        Payload of text, code, inlineCode, html and esm nodes
    depth : int or None
        Heading level (1-6)
    ordered : bool or None
        Whether a list is ordered
    start : int or None
        First number of an ordered list
    lang : str or None
        Code fence language
    meta : str or None
        Remainder of the code fence info string
    url : str or None
        Link or image target
    alt : str or None
        Image alternative text
    title : str or None
        Link or image title
    name : str or None
        Component tag name
    attributes : list of JsxAttribute
        Component attributes, in source order
    checked : bool or None
        Task state of a list item; None when the item has no checkbox
    align : list of str or None
        Column alignment of a table
    line : int or None
        1-based source line of the node start, when known
    data : dict
        Extra document-level data carried by the root (``frontmatter``)

    """

    kind: str
    children: Optional[list[SourceNode]] = None
    value: Optional[str] = None
    depth: Optional[int] = None
    ordered: Optional[bool] = None
    start: Optional[int] = None
    lang: Optional[str] = None
    meta: Optional[str] = None
    url: Optional[str] = None
    alt: Optional[str] = None
    title: Optional[str] = None
    name: Optional[str] = None
    attributes: list[JsxAttribute] = field(default_factory=list)
    checked: Optional[bool] = None
    align: Optional[list[Optional[str]]] = None
    line: Optional[int] = None
    data: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Enforce the children invariant for leaf and container kinds."""
        if self.kind in LEAF_KINDS:
            if self.children is not None:
                raise ValueError(f"Leaf node '{self.kind}' cannot have children")
        elif self.kind in CONTAINER_KINDS:
            if self.children is None:
                self.children = []
        else:
            raise ValueError(f"Unknown source node kind: {self.kind!r}")

    @property
    def is_leaf(self) -> bool:
        """Return True when the node kind never has children."""
        return self.kind in LEAF_KINDS

    @property
    def is_jsx(self) -> bool:
        """Return True for component tags (flow or text)."""
        return self.kind in JSX_KINDS

    def get_attribute(self, name: str) -> Optional[JsxAttribute]:
        """Return the last attribute with the given name, as JSX does."""
        found = None
        for attribute in self.attributes:
            if attribute.name == name:
                found = attribute
        return found

    def walk(self) -> Iterator[SourceNode]:
        """Iterate over this node and all descendants, depth-first."""
        yield self
        for child in self.children or ():
            yield from child.walk()

    def text_content(self) -> str:
        """Concatenate the text payload below this node.

        Paragraph-level children are joined with newlines, the way the
        editor extracts plain text from a component body.
        """
        if self.value is not None and self.kind in ("text", "inlineCode", "code", "html"):
            return self.value
        if self.kind == "break":
            return "\n"
        if not self.children:
            return ""
        if self.kind in ("root", "jsxElement", "blockquote", "listItem", "tableRow"):
            return "\n".join(child.text_content() for child in self.children)
        return "".join(child.text_content() for child in self.children)


def text(value: str) -> SourceNode:
    """Build a text node."""
    return SourceNode("text", value=value)


__all__ = [
    "SourceKind",
    "SourceNode",
    "JsxAttribute",
    "LEAF_KINDS",
    "CONTAINER_KINDS",
    "JSX_KINDS",
    "text",
]
