#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/document/__init__.py
"""Editor document model.

The document model is the typed block/inline tree the rich-text editor
renders and mutates. This package provides:

- nodes: :class:`DocumentNode`, :class:`Mark` and small builders
- schema: the per-type content rules
- visitors: visitor base class, schema validation and id stripping
- serialization: TipTap JSON conversion

Examples
--------
    >>> from mdxdoc.document import doc, heading, paragraph, validate_document
    >>> tree = doc([heading(1, "Title"), paragraph("Hello")])
    >>> validate_document(tree)
    []

"""

from mdxdoc.document.nodes import (
    ATOMIC_TYPES,
    BLOCK_TYPES,
    INLINE_TYPES,
    MARK_ORDER,
    TEXTBLOCK_TYPES,
    DocumentNode,
    Mark,
    canonical_marks,
    doc,
    hard_break,
    heading,
    paragraph,
    text_node,
)
from mdxdoc.document.schema import FLOW_BLOCK_TYPES, MARK_TYPES, SCHEMA, NodeSpec, allows_child, get_spec
from mdxdoc.document.serialization import from_dict, from_json, to_dict, to_json
from mdxdoc.document.visitors import (
    NodeVisitor,
    ValidationVisitor,
    is_valid_document,
    strip_ids,
    validate_document,
)

__all__ = [
    "ATOMIC_TYPES",
    "BLOCK_TYPES",
    "FLOW_BLOCK_TYPES",
    "INLINE_TYPES",
    "MARK_ORDER",
    "MARK_TYPES",
    "SCHEMA",
    "TEXTBLOCK_TYPES",
    "DocumentNode",
    "Mark",
    "NodeSpec",
    "NodeVisitor",
    "ValidationVisitor",
    "allows_child",
    "canonical_marks",
    "doc",
    "from_dict",
    "from_json",
    "get_spec",
    "hard_break",
    "heading",
    "is_valid_document",
    "paragraph",
    "strip_ids",
    "text_node",
    "to_dict",
    "to_json",
    "validate_document",
]
