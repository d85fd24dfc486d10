"""Base classes for parser and serializer options.

This module defines the foundation classes for the options objects used by
the mdxdoc parse and serialize pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdxdoc.constants import DEFAULT_VALIDATE_INPUT, DEFAULT_VALIDATE_OUTPUT


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for serializer options.

    Parameters
    ----------
    validate_input : bool, default True
        Check the document tree against the node schema before writing it.

    """

    validate_input: bool = field(
        default=DEFAULT_VALIDATE_INPUT,
        metadata={
            "help": "Validate the document tree against the node schema before serializing",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate base renderer options."""
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options.

    Parameters
    ----------
    validate_output : bool, default True
        Check every produced document tree against the node schema.

    """

    validate_output: bool = field(
        default=DEFAULT_VALIDATE_OUTPUT,
        metadata={
            "help": "Validate produced document trees against the node schema",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate base parser options."""
        pass
