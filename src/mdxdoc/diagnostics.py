#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/diagnostics.py
"""Best-effort location of parse errors.

Parse error messages embed their position in a handful of phrasings. This
module recovers the line number from them so an editor can highlight it.
The result is advisory: a message without a recognizable position is still
reported as is.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

# Tried in order; the first match wins
ERROR_LINE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\((\d+):\d+(?:-\d+:\d+)?\)"),  # (3:1) or (3:1-3:10)
    re.compile(r"^(\d+):\d+:"),  # 3:1: at the start
    re.compile(r"(?:at line |line )\s*(\d+)", re.IGNORECASE),  # at line 3, line 3
    re.compile(r"position (\d+)", re.IGNORECASE),
)


@dataclass(frozen=True)
class ErrorLocation:
    """Line a parse error points at.

    Parameters
    ----------
    line : int
        1-based line number

    """

    line: int


def locate_error(message: Optional[str]) -> Optional[ErrorLocation]:
    """Extract the line number a parse error message refers to.

    Parameters
    ----------
    message : str or None
        Error message as raised by the parser

    Returns
    -------
    ErrorLocation or None
        Location of the first recognized position, or None when the message
        has none

    Examples
    --------
        >>> locate_error("Expected a closing tag for `<Card>` (3:1-3:7) before the end of `document`")
        ErrorLocation(line=3)
        >>> locate_error("5:2: Unexpected closing tag `</Tab>`")
        ErrorLocation(line=5)
        >>> locate_error("something went wrong") is None
        True

    """
    if not message:
        return None
    for pattern in ERROR_LINE_PATTERNS:
        match = pattern.search(message)
        if match:
            return ErrorLocation(int(match.group(1)))
    logger.debug(f"No line number found in error message: {message!r}")
    return None


__all__ = [
    "ERROR_LINE_PATTERNS",
    "ErrorLocation",
    "locate_error",
]
