#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/document/schema.py
"""Node schema of the document model.

Each node type has a :class:`NodeSpec` describing what it may contain. The
table is read-only; :class:`mdxdoc.document.visitors.ValidationVisitor`
checks trees against it.

Content kinds:

- ``blocks``: flow blocks (any block that is not a dedicated child type)
- ``inline``: text and hard breaks
- ``text``: unmarked text only (code blocks)
- ``children``: only the types listed in ``allowed_children``
- ``none``: atomic node, data lives in attrs

"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping, Optional

ContentKind = Literal["blocks", "inline", "text", "children", "none"]


@dataclass(frozen=True)
class NodeSpec:
    """Schema entry for one node type.

    Parameters
    ----------
    name : str
        Node type
    content : str
        One of the content kinds listed in the module docstring
    allowed_children : frozenset of str, optional
        Child types for ``children`` content
    allow_empty : bool, default True
        Whether ``content`` may be empty
    child_only : bool, default False
        Whether the type may only appear inside its dedicated parent

    """

    name: str
    content: ContentKind
    allowed_children: Optional[frozenset[str]] = None
    allow_empty: bool = True
    child_only: bool = False


def _spec(name: str, content: ContentKind, children: tuple[str, ...] = (), **kwargs: bool) -> NodeSpec:
    return NodeSpec(name, content, frozenset(children) if children else None, **kwargs)


_SPECS = (
    _spec("doc", "blocks"),
    _spec("paragraph", "inline"),
    _spec("heading", "inline"),
    _spec("codeBlock", "text"),
    _spec("blockquote", "blocks", allow_empty=False),
    _spec("bulletList", "children", ("listItem",), allow_empty=False),
    _spec("orderedList", "children", ("listItem",), allow_empty=False),
    _spec("listItem", "blocks", allow_empty=False, child_only=True),
    _spec("taskList", "children", ("taskItem",), allow_empty=False),
    _spec("taskItem", "blocks", allow_empty=False, child_only=True),
    _spec("horizontalRule", "none"),
    _spec("imageBlock", "none"),
    _spec("tableBlock", "none"),
    _spec("codeGroup", "none"),
    _spec("endpointBlock", "none"),
    _spec("labelBlock", "none"),
    _spec("paramBlock", "none"),
    _spec("cardBlock", "blocks", allow_empty=False),
    _spec("infoBlock", "blocks", allow_empty=False),
    _spec("rightPanel", "blocks", allow_empty=False),
    _spec("columnGroup", "children", ("column",), allow_empty=False),
    _spec("column", "blocks", allow_empty=False, child_only=True),
    _spec("accordionBlock", "children", ("accordionTab",), allow_empty=False),
    _spec("accordionTab", "blocks", allow_empty=False, child_only=True),
    _spec("tabsBlock", "children", ("tabBlock",), allow_empty=False),
    _spec("tabBlock", "blocks", allow_empty=False, child_only=True),
    _spec("stepsBlock", "children", ("stepBlock",), allow_empty=False),
    _spec("stepBlock", "blocks", allow_empty=False, child_only=True),
)

SCHEMA: Mapping[str, NodeSpec] = MappingProxyType({spec.name: spec for spec in _SPECS})

FLOW_BLOCK_TYPES: frozenset[str] = frozenset(
    name for name, spec in SCHEMA.items() if name != "doc" and not spec.child_only
)

MARK_TYPES: frozenset[str] = frozenset({"link", "bold", "italic", "strike", "underline", "code"})


def get_spec(node_type: str) -> Optional[NodeSpec]:
    """Return the schema entry for a node type, or None for inline/unknown types."""
    return SCHEMA.get(node_type)


def allows_child(parent_type: str, child_type: str) -> bool:
    """Return True when ``child_type`` may appear directly inside ``parent_type``."""
    spec = SCHEMA.get(parent_type)
    if spec is None:
        return False
    if spec.content == "blocks":
        return child_type in FLOW_BLOCK_TYPES
    if spec.content == "inline":
        return child_type in ("text", "hardBreak")
    if spec.content == "text":
        return child_type == "text"
    if spec.content == "children":
        return spec.allowed_children is not None and child_type in spec.allowed_children
    return False


__all__ = [
    "ContentKind",
    "NodeSpec",
    "SCHEMA",
    "FLOW_BLOCK_TYPES",
    "MARK_TYPES",
    "get_spec",
    "allows_child",
]
