#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the mdxdoc parse and serialize pipeline.

Options are frozen dataclasses; use ``create_updated()`` to derive a modified
copy.
"""

from __future__ import annotations

from mdxdoc.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from mdxdoc.options.mdx import MdxParserOptions, MdxSerializerOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MdxParserOptions",
    "MdxSerializerOptions",
]
