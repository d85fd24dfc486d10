#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/document/visitors.py
"""Visitor pattern implementation for document model traversal.

This module provides the visitor base class used by the MDX serializer, the
schema validator and small tree utilities such as :func:`strip_ids`.

"""

from __future__ import annotations

import math
from typing import Any

from mdxdoc.document.nodes import BLOCK_TYPES, DocumentNode
from mdxdoc.document.schema import MARK_TYPES, SCHEMA, allows_child
from mdxdoc.exceptions import DocumentValidationError

_LITERAL_SCALARS = (str, int, float, bool, type(None))


class NodeVisitor:
    """Base class for document model visitors.

    Subclasses implement ``visit_<snake_case_type>`` methods
    (``visit_bullet_list``, ``visit_hard_break``...) for the node types they
    handle; :meth:`DocumentNode.accept` falls back to :meth:`generic_visit`.

    Examples
    --------
    Count paragraphs:

        >>> class ParagraphCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_paragraph(self, node):
        ...         self.count += 1
        ...
        ...     def generic_visit(self, node):
        ...         for child in node.content:
        ...             child.accept(self)

    """

    def visit(self, node: DocumentNode) -> Any:
        """Visit a node through its type-specific method."""
        return node.accept(self)

    def generic_visit(self, node: DocumentNode) -> Any:
        """Fallback visitor for unhandled node types.

        Parameters
        ----------
        node : DocumentNode
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None


class ValidationVisitor(NodeVisitor):
    """Visitor that validates a document tree against the node schema.

    Checks unknown types, child-type constraints, empty containers, attribute
    values that are not literals, text node payloads and marks.

    Parameters
    ----------
    strict : bool, default = True
        Whether to raise on the first validation failure

    Examples
    --------
        >>> validator = ValidationVisitor(strict=False)
        >>> validator.validate(document)
        >>> validator.errors
        []

    """

    def __init__(self, strict: bool = True):
        """Initialize the validator."""
        self.strict = strict
        self.errors: list[str] = []
        self._path: list[str] = []

    def _add_error(self, message: str, node: DocumentNode) -> None:
        """Record a validation error, raising in strict mode."""
        path = "/".join(self._path)
        self.errors.append(f"{message} (at {path})" if path else message)
        if self.strict:
            raise DocumentValidationError(message, path=path or None, node_type=node.type)

    def validate(self, node: DocumentNode) -> list[str]:
        """Validate a tree rooted at ``node`` and return the collected errors."""
        self.errors = []
        self._path = [node.type]
        node.accept(self)
        return self.errors

    def generic_visit(self, node: DocumentNode) -> None:
        """Validate any node, then recurse into its content."""
        if node.type == "text":
            self._check_text(node)
            return
        if node.type == "hardBreak":
            if node.content or node.text is not None:
                self._add_error("hardBreak cannot have content", node)
            return

        spec = SCHEMA.get(node.type)
        if spec is None or node.type not in BLOCK_TYPES:
            self._add_error(f"Unknown node type: {node.type!r}", node)
            return

        if node.text is not None or node.marks:
            self._add_error(f"{node.type} cannot carry text or marks", node)
        self._check_attrs(node)

        if spec.content == "none" and node.content:
            self._add_error(f"{node.type} is atomic and cannot have content", node)
        if not spec.allow_empty and not node.content:
            self._add_error(f"{node.type} must have content", node)

        for index, child in enumerate(node.content):
            if not allows_child(node.type, child.type):
                self._add_error(f"{node.type} cannot contain {child.type}", node)
            if spec.content == "text" and child.type == "text" and child.marks:
                self._add_error(f"{node.type} text cannot carry marks", node)
            self._path.append(f"{child.type}[{index}]")
            try:
                child.accept(self)
            finally:
                self._path.pop()

    def visit_heading(self, node: DocumentNode) -> None:
        """Validate heading level, then the common rules."""
        level = node.attrs.get("level")
        if not isinstance(level, int) or isinstance(level, bool) or not 1 <= level <= 6:
            self._add_error(f"Invalid heading level: {level!r}", node)
        self.generic_visit(node)

    def visit_task_item(self, node: DocumentNode) -> None:
        """Validate the checked flag, then the common rules."""
        if not isinstance(node.attrs.get("checked"), bool):
            self._add_error("taskItem requires a boolean 'checked' attribute", node)
        self.generic_visit(node)

    def _check_text(self, node: DocumentNode) -> None:
        if not isinstance(node.text, str) or not node.text:
            self._add_error("text nodes must carry non-empty text", node)
        if node.content:
            self._add_error("text nodes cannot have content", node)
        for mark in node.marks:
            if mark.type not in MARK_TYPES:
                self._add_error(f"Unknown mark type: {mark.type!r}", node)
            elif mark.type == "link" and not isinstance(mark.href, str):
                self._add_error("link marks require an 'href' attribute", node)

    def _check_attrs(self, node: DocumentNode) -> None:
        for key, value in node.attrs.items():
            if not _is_literal(value):
                self._add_error(f"Attribute {key!r} of {node.type} is not a literal value", node)


def _is_literal(value: Any) -> bool:
    if isinstance(value, float):
        return not math.isnan(value)
    if isinstance(value, _LITERAL_SCALARS):
        return True
    if isinstance(value, (list, tuple)):
        return all(_is_literal(item) for item in value)
    if isinstance(value, dict):
        return all(isinstance(key, str) and _is_literal(item) for key, item in value.items())
    return False


def validate_document(node: DocumentNode, strict: bool = True) -> list[str]:
    """Validate a document tree.

    Parameters
    ----------
    node : DocumentNode
        Root of the tree, usually ``doc``
    strict : bool, default True
        Raise on the first failure instead of collecting errors

    Returns
    -------
    list of str
        Collected error messages (always empty in strict mode)

    Raises
    ------
    DocumentValidationError
        In strict mode, when the tree violates the schema

    """
    return ValidationVisitor(strict=strict).validate(node)


def is_valid_document(node: DocumentNode) -> bool:
    """Return True when the tree satisfies the schema."""
    return not validate_document(node, strict=False)


def strip_ids(node: DocumentNode) -> DocumentNode:
    """Return a copy of the tree without ``attrs["id"]`` on any node.

    Generated ids differ between conversions, so trees are compared after
    stripping them.
    """
    result = node.copy()
    for each in result.walk():
        each.attrs.pop("id", None)
    return result


__all__ = [
    "NodeVisitor",
    "ValidationVisitor",
    "validate_document",
    "is_valid_document",
    "strip_ids",
]
