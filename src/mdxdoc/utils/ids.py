#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/utils/ids.py
"""Identifier generation for editor-tracked components."""

from __future__ import annotations

import re
import secrets

_GENERATED_ID_RE = re.compile(r"^[a-z]+-[0-9a-f]{12}$")


def generate_id(prefix: str) -> str:
    """Return a fresh component id such as ``card-3f9a0c1b2d4e``.

    Parameters
    ----------
    prefix : str
        Lowercase component prefix

    Returns
    -------
    str
        ``<prefix>-<12 hex digits>``

    """
    return f"{prefix}-{secrets.token_hex(6)}"


def is_generated_id(value: object) -> bool:
    """Return True when the value looks like an id from :func:`generate_id`."""
    return isinstance(value, str) and bool(_GENERATED_ID_RE.match(value))
