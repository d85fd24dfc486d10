#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/document/serialization.py
"""JSON serialization and deserialization for document trees.

Trees are written in the TipTap/ProseMirror JSON shape the editor exchanges:

    {"type": "paragraph", "attrs": {...}, "content": [...]}
    {"type": "text", "text": "Hi", "marks": [{"type": "bold"}]}

Empty ``attrs``, ``content`` and ``marks`` are omitted on output and
optional on input.

Examples
--------
    >>> from mdxdoc.document import doc, paragraph
    >>> to_json(doc([paragraph("Hello")]))
    '{"type": "doc", "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Hello"}]}]}'
    >>> from_json(_).content[0].text_content()
    'Hello'

"""

from __future__ import annotations

import json
from typing import Any

from mdxdoc.document.nodes import DocumentNode, Mark
from mdxdoc.exceptions import DocumentValidationError


def _mark_to_dict(mark: Mark) -> dict[str, Any]:
    result: dict[str, Any] = {"type": mark.type}
    if mark.attrs:
        result["attrs"] = dict(mark.attrs)
    return result


def to_dict(node: DocumentNode) -> dict[str, Any]:
    """Convert a document node and its subtree to plain dicts.

    Parameters
    ----------
    node : DocumentNode
        Node to convert

    Returns
    -------
    dict
        TipTap JSON object

    """
    result: dict[str, Any] = {"type": node.type}
    if node.attrs:
        result["attrs"] = dict(node.attrs)
    if node.content:
        result["content"] = [to_dict(child) for child in node.content]
    if node.text is not None:
        result["text"] = node.text
    if node.marks:
        result["marks"] = [_mark_to_dict(mark) for mark in node.marks]
    return result


def _mark_from_dict(data: Any, path: str) -> Mark:
    if not isinstance(data, dict) or not isinstance(data.get("type"), str):
        raise DocumentValidationError("Mark must be an object with a string 'type'", path=path)
    attrs = data.get("attrs")
    if attrs is not None and not isinstance(attrs, dict):
        raise DocumentValidationError("Mark 'attrs' must be an object", path=path)
    return Mark(data["type"], dict(attrs) if attrs else None)


def _from_dict(data: Any, path: str) -> DocumentNode:
    if not isinstance(data, dict):
        raise DocumentValidationError(f"Expected a node object, got {type(data).__name__}", path=path)

    node_type = data.get("type")
    if not isinstance(node_type, str):
        raise DocumentValidationError("Node must have a string 'type'", path=path)

    attrs = data.get("attrs") or {}
    content = data.get("content") or []
    marks = data.get("marks") or []
    text = data.get("text")
    if not isinstance(attrs, dict):
        raise DocumentValidationError("'attrs' must be an object", path=path, node_type=node_type)
    if not isinstance(content, list):
        raise DocumentValidationError("'content' must be an array", path=path, node_type=node_type)
    if not isinstance(marks, list):
        raise DocumentValidationError("'marks' must be an array", path=path, node_type=node_type)
    if text is not None and not isinstance(text, str):
        raise DocumentValidationError("'text' must be a string", path=path, node_type=node_type)

    return DocumentNode(
        node_type,
        attrs=dict(attrs),
        content=[_from_dict(child, f"{path}/{index}") for index, child in enumerate(content)],
        text=text,
        marks=[_mark_from_dict(mark, path) for mark in marks],
    )


def from_dict(data: dict[str, Any]) -> DocumentNode:
    """Build a document node from a TipTap JSON object.

    Only the JSON shape is checked here; use
    :func:`mdxdoc.document.validate_document` for schema checks.

    Raises
    ------
    DocumentValidationError
        If the object is not shaped like a node

    """
    return _from_dict(data, "$")


def to_json(node: DocumentNode, indent: int | None = None) -> str:
    """Serialize a document tree to a JSON string.

    Parameters
    ----------
    node : DocumentNode
        Root node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON text, non-ASCII characters kept as-is

    """
    return json.dumps(to_dict(node), indent=indent, ensure_ascii=False)


def from_json(json_str: str) -> DocumentNode:
    """Deserialize a JSON string into a document tree.

    Raises
    ------
    DocumentValidationError
        If the text is not valid JSON or not shaped like a node

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise DocumentValidationError(f"Invalid document JSON: {e}") from e
    return from_dict(data)


__all__ = [
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
