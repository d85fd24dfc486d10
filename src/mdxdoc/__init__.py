"""mdxdoc - Bidirectional conversion between MDX pages and a rich-text document model.

mdxdoc parses MDX documentation pages (markdown with embedded JSX component
tags, YAML frontmatter and ESM statements) into the typed block/inline tree a
TipTap-style editor works with, and serializes that tree back to MDX.

Pipeline
--------
1. :func:`parse_source` builds a source AST from MDX text (mistune with JSX
   block, inline and ESM extensions).
2. :func:`convert_document` turns the source AST into a ``doc`` node,
   dispatching component tags through the component catalogue.
3. :func:`serialize_document` writes a ``doc`` node back to MDX so that
   parsing the output yields an equal tree.

:func:`parse_mdx` combines the first two steps and reports syntax errors as
a :class:`ParseResult` instead of raising; :class:`ValidationDriver`
debounces editor keystrokes around it.

Examples
--------
    >>> from mdxdoc import parse_mdx, serialize_document
    >>> result = parse_mdx("> [!TIP] Save often")
    >>> result.document.content[0].type
    'infoBlock'
    >>> print(serialize_document(result.document), end="")
    > [!TIP]
    > Save often

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "mdxdoc requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from mdxdoc.api import ParseResult, parse_mdx, parse_mdx_async, serialize_document, serialize_document_async
from mdxdoc.components import CATALOGUE, ComponentRule, get_rule
from mdxdoc.converter import MdxConverter, convert, convert_document
from mdxdoc.diagnostics import ErrorLocation, locate_error
from mdxdoc.document import DocumentNode, Mark, from_json, to_json, validate_document
from mdxdoc.driver import ValidationDriver
from mdxdoc.exceptions import (
    DependencyError,
    DocumentValidationError,
    MdxDocError,
    ParseException,
    ParsingError,
    SerializationError,
)
from mdxdoc.options import MdxParserOptions, MdxSerializerOptions
from mdxdoc.parsers import MdxParser, parse_source
from mdxdoc.renderers import MdxRenderer

__all__ = [
    "__version__",
    "CATALOGUE",
    "ComponentRule",
    "DependencyError",
    "DocumentNode",
    "DocumentValidationError",
    "ErrorLocation",
    "Mark",
    "MdxConverter",
    "MdxDocError",
    "MdxParser",
    "MdxParserOptions",
    "MdxRenderer",
    "MdxSerializerOptions",
    "ParseException",
    "ParseResult",
    "ParsingError",
    "SerializationError",
    "ValidationDriver",
    "convert",
    "convert_document",
    "from_json",
    "get_rule",
    "locate_error",
    "parse_mdx",
    "parse_mdx_async",
    "parse_source",
    "serialize_document",
    "serialize_document_async",
    "to_json",
    "validate_document",
]
