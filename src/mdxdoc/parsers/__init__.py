#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/parsers/__init__.py
"""Source parsers.

The MDX parser turns source text into the generic source AST
(:class:`mdxdoc.ast.SourceNode`). mistune is imported lazily, so importing
this package does not require it.

"""

from mdxdoc.parsers.base import BaseParser
from mdxdoc.parsers.mdx import MdxParser, parse_source

__all__ = [
    "BaseParser",
    "MdxParser",
    "parse_source",
]
