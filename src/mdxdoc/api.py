"""The major exported API functions for MDX document conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/mdxdoc/api.py
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Union

from mdxdoc.converter import MdxConverter
from mdxdoc.diagnostics import locate_error
from mdxdoc.document import DocumentNode
from mdxdoc.exceptions import ParsingError
from mdxdoc.options import MdxParserOptions, MdxSerializerOptions
from mdxdoc.parsers.mdx import MdxParser
from mdxdoc.renderers.mdx import serialize_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing MDX into the document model.

    Exactly one of ``document`` and ``parse_error`` is set.

    Parameters
    ----------
    document : DocumentNode or None
        ``doc`` node, when parsing succeeded
    parse_error : str or None
        Native error message, when parsing failed
    error_line : int or None
        Line the error points at, when it could be located

    """

    document: Optional[DocumentNode] = None
    parse_error: Optional[str] = None
    error_line: Optional[int] = None

    def __post_init__(self) -> None:
        """Check that the result is either a document or an error."""
        if (self.document is None) == (self.parse_error is None):
            raise ValueError("ParseResult needs exactly one of `document` and `parse_error`")
        if self.document is not None and self.error_line is not None:
            raise ValueError("ParseResult.error_line is only meaningful with a parse_error")

    @property
    def ok(self) -> bool:
        """Return True when parsing produced a document."""
        return self.document is not None


def parse_mdx(text: Union[str, bytes], options: MdxParserOptions | None = None) -> ParseResult:
    """Parse MDX source into the editor document model.

    Structural syntax errors do not raise; they are returned as
    ``parse_error`` together with the advisory ``error_line``.

    Parameters
    ----------
    text : str or bytes
        MDX source
    options : MdxParserOptions or None, default = None
        Parser and conversion options

    Returns
    -------
    ParseResult
        The document, or the error message

    Examples
    --------
        >>> result = parse_mdx("# Title\\n\\nHello")
        >>> result.document.content[0].type
        'heading'
        >>> broken = parse_mdx("<Card>\\n\\nno closing tag\\n")
        >>> broken.parse_error is not None, broken.error_line
        (True, 1)

    """
    try:
        root = MdxParser(options).parse(text)
    except ParsingError as e:
        location = locate_error(str(e))
        logger.info(f"MDX parse failed: {e}")
        return ParseResult(parse_error=str(e), error_line=location.line if location else None)

    return ParseResult(document=MdxConverter(options).convert_document(root))


async def parse_mdx_async(text: Union[str, bytes], options: MdxParserOptions | None = None) -> ParseResult:
    """Parse MDX source in a worker thread.

    The work itself is synchronous; running it off the event loop keeps the
    caller responsive and lets a debouncing driver cancel stale calls.
    """
    return await asyncio.to_thread(parse_mdx, text, options)


async def serialize_document_async(doc: DocumentNode, options: MdxSerializerOptions | None = None) -> str:
    """Serialize a document to MDX in a worker thread.

    Raises
    ------
    SerializationError
        If the tree is invalid or has no MDX form

    """
    return await asyncio.to_thread(serialize_document, doc, options)


__all__ = [
    "ParseResult",
    "parse_mdx",
    "parse_mdx_async",
    "serialize_document",
    "serialize_document_async",
]
