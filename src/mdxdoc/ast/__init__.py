#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/ast/__init__.py
"""Source AST produced by the MDX grammar front-end.

The AST is a generic parse tree: component tags are kept as ``jsxElement``
and ``jsxTextElement`` nodes without any interpretation of their names. The
converter in :mod:`mdxdoc.converter` turns it into the document model.

"""

from mdxdoc.ast.nodes import CONTAINER_KINDS, JSX_KINDS, LEAF_KINDS, JsxAttribute, SourceKind, SourceNode, text

__all__ = [
    "CONTAINER_KINDS",
    "JSX_KINDS",
    "LEAF_KINDS",
    "JsxAttribute",
    "SourceKind",
    "SourceNode",
    "text",
]
