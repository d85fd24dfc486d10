#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/document/nodes.py
"""Document model node classes.

The document model is the tree the rich-text editor renders and edits. It
follows the TipTap/ProseMirror JSON shape: every node has a ``type``, an
``attrs`` mapping of literal values and an ordered ``content`` list; text
nodes carry ``text`` and a set of ``marks``.

Node Types
----------
Block types:
    - doc, heading, paragraph, blockquote, codeBlock, horizontalRule
    - bulletList, orderedList, listItem, taskList, taskItem
    - imageBlock, tableBlock, codeGroup
    - cardBlock, infoBlock, columnGroup, column, rightPanel
    - accordionBlock, accordionTab, tabsBlock, tabBlock
    - stepsBlock, stepBlock, endpointBlock, labelBlock, paramBlock

Inline types:
    - text (with marks: link, bold, italic, strike, underline, code)
    - hardBreak

Marks are stored de-duplicated in a canonical order so that two text nodes
with the same set of marks compare equal.

"""

from __future__ import annotations

import copy
import re
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Union

MARK_ORDER: tuple[str, ...] = ("link", "bold", "italic", "strike", "underline", "code")

INLINE_TYPES: frozenset[str] = frozenset({"text", "hardBreak"})
TEXTBLOCK_TYPES: frozenset[str] = frozenset({"paragraph", "heading", "codeBlock"})
ATOMIC_TYPES: frozenset[str] = frozenset(
    {"horizontalRule", "imageBlock", "endpointBlock", "labelBlock", "paramBlock", "tableBlock", "codeGroup"}
)
BLOCK_TYPES: frozenset[str] = frozenset(
    {
        "doc",
        "heading",
        "paragraph",
        "blockquote",
        "bulletList",
        "orderedList",
        "listItem",
        "taskList",
        "taskItem",
        "codeBlock",
        "imageBlock",
        "horizontalRule",
        "tableBlock",
        "cardBlock",
        "infoBlock",
        "columnGroup",
        "column",
        "rightPanel",
        "accordionBlock",
        "accordionTab",
        "tabsBlock",
        "tabBlock",
        "endpointBlock",
        "labelBlock",
        "paramBlock",
        "stepsBlock",
        "stepBlock",
        "codeGroup",
    }
)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _mark_sort_key(mark: Mark) -> tuple[int, str]:
    try:
        return MARK_ORDER.index(mark.type), ""
    except ValueError:
        return len(MARK_ORDER), mark.type


def canonical_marks(marks: Any) -> list[Mark]:
    """Return marks de-duplicated by type and sorted in canonical order.

    The first mark of each type wins.
    """
    seen: dict[str, Mark] = {}
    for mark in marks or ():
        if mark.type not in seen:
            seen[mark.type] = mark
    return sorted(seen.values(), key=_mark_sort_key)


@dataclass(frozen=True)
class Mark:
    """Formatting mark applied to a text node.

    Parameters
    ----------
    type : str
        Mark type (link, bold, italic, strike, underline, code)
    attrs : dict or None
        Mark attributes; only links carry any (``href``, ``target``)

    """

    type: str
    attrs: Optional[dict[str, Any]] = None

    @classmethod
    def link(cls, href: str, target: str = "_self") -> Mark:
        """Build a link mark."""
        return cls("link", {"href": href, "target": target})

    @property
    def href(self) -> Optional[str]:
        """Return the link target URL, if any."""
        return (self.attrs or {}).get("href")


@dataclass
class DocumentNode:
    """Node of the editor document tree.

    Parameters
    ----------
    type : str
        Node type, one of :data:`BLOCK_TYPES` or :data:`INLINE_TYPES`
    attrs : dict
        Attribute mapping; values are literals only
    content : list of DocumentNode
        Ordered child nodes
    text : str or None
        Text payload of ``text`` nodes
    marks : list of Mark
        Marks of ``text`` nodes, kept in canonical order

    """

    type: str
    attrs: dict[str, Any] = field(default_factory=dict)
    content: list[DocumentNode] = field(default_factory=list)
    text: Optional[str] = None
    marks: list[Mark] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Canonicalize the mark set."""
        self.marks = canonical_marks(self.marks)

    @property
    def is_inline(self) -> bool:
        """Return True for text and hard break nodes."""
        return self.type in INLINE_TYPES

    @property
    def is_textblock(self) -> bool:
        """Return True for blocks whose content is inline."""
        return self.type in TEXTBLOCK_TYPES

    @property
    def is_atomic(self) -> bool:
        """Return True for blocks whose data lives entirely in attrs."""
        return self.type in ATOMIC_TYPES

    def has_mark(self, mark_type: str) -> bool:
        """Return True when a mark of the given type is set."""
        return any(mark.type == mark_type for mark in self.marks)

    def get_mark(self, mark_type: str) -> Optional[Mark]:
        """Return the mark of the given type, if set."""
        for mark in self.marks:
            if mark.type == mark_type:
                return mark
        return None

    def walk(self) -> Iterator[DocumentNode]:
        """Iterate over this node and all descendants, depth-first."""
        yield self
        for child in self.content:
            yield from child.walk()

    def text_content(self) -> str:
        """Return the concatenated text below this node."""
        if self.type == "text":
            return self.text or ""
        if self.type == "hardBreak":
            return "\n"
        return "".join(child.text_content() for child in self.content)

    def copy(self) -> DocumentNode:
        """Return a deep copy of this subtree."""
        return copy.deepcopy(self)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_<snake_case_type>`` or its generic_visit."""
        method = getattr(visitor, "visit_" + snake_case(self.type), None)
        if method is None:
            return visitor.generic_visit(self)
        return method(self)


def snake_case(node_type: str) -> str:
    """Convert a camelCase node type to snake_case (``bulletList`` -> ``bullet_list``)."""
    return _CAMEL_BOUNDARY.sub("_", node_type).lower()


def text_node(value: str, marks: Optional[list[Mark]] = None) -> DocumentNode:
    """Build a text node."""
    return DocumentNode("text", text=value, marks=list(marks or ()))


def hard_break() -> DocumentNode:
    """Build a hard break node."""
    return DocumentNode("hardBreak")


def paragraph(*content: Union[DocumentNode, str]) -> DocumentNode:
    """Build a paragraph; a plain string argument becomes a text node."""
    return DocumentNode("paragraph", content=[text_node(c) if isinstance(c, str) else c for c in content])


def heading(level: int, *content: Union[DocumentNode, str]) -> DocumentNode:
    """Build a heading of the given level."""
    return DocumentNode(
        "heading", attrs={"level": level}, content=[text_node(c) if isinstance(c, str) else c for c in content]
    )


def doc(content: Optional[list[DocumentNode]] = None, attrs: Optional[dict[str, Any]] = None) -> DocumentNode:
    """Build a document root."""
    return DocumentNode("doc", attrs=dict(attrs or {}), content=list(content or ()))


__all__ = [
    "MARK_ORDER",
    "INLINE_TYPES",
    "TEXTBLOCK_TYPES",
    "ATOMIC_TYPES",
    "BLOCK_TYPES",
    "Mark",
    "DocumentNode",
    "canonical_marks",
    "snake_case",
    "text_node",
    "hard_break",
    "paragraph",
    "heading",
    "doc",
]
