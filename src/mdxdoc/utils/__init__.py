#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/utils/__init__.py
"""Utility modules for the mdxdoc package.

This package contains helpers for MDX escaping, identifier generation,
dependency checks and timing.
"""

from mdxdoc.utils.escape import (
    escape_inline_code,
    escape_line_start,
    escape_markdown_text,
    format_jsx_attribute,
)
from mdxdoc.utils.ids import generate_id, is_generated_id

__all__ = [
    "escape_inline_code",
    "escape_line_start",
    "escape_markdown_text",
    "format_jsx_attribute",
    "generate_id",
    "is_generated_id",
]
