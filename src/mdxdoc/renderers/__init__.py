#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/renderers/__init__.py
"""Renderers that write the document model back out as text.

Examples
--------
    >>> from mdxdoc.document import doc, paragraph
    >>> from mdxdoc.renderers import serialize_document
    >>> serialize_document(doc([paragraph("Hello")]))
    'Hello\\n'

"""

from mdxdoc.renderers.base import BaseRenderer
from mdxdoc.renderers.mdx import MdxRenderer, serialize_document

__all__ = [
    "BaseRenderer",
    "MdxRenderer",
    "serialize_document",
]
