#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for MDX parsing and serialization."""
# src/mdxdoc/options/mdx.py

from __future__ import annotations

from dataclasses import dataclass, field

from mdxdoc.constants import (
    DEFAULT_BULLET_MARKERS,
    DEFAULT_EMIT_FRONTMATTER,
    DEFAULT_GENERATE_IDS,
    DEFAULT_INDENT_WIDTH,
    DEFAULT_MAX_NESTING_DEPTH,
    DEFAULT_PARSE_ESM,
    DEFAULT_PARSE_FRONTMATTER,
)
from mdxdoc.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class MdxParserOptions(BaseParserOptions):
    """Configuration options for MDX-to-document parsing.

    Parameters
    ----------
    generate_ids : bool, default True
        Attach a generated ``id`` attribute to components the editor tracks
        (cards, callouts, accordions, tabs, panels, endpoints, labels, steps,
        parameter fields).
    parse_frontmatter : bool, default True
        Parse a leading YAML frontmatter block into ``doc.attrs["frontmatter"]``.
    parse_esm : bool, default True
        Keep top-level ``import``/``export`` lines in ``doc.attrs["esm"]``.
    max_nesting_depth : int, default 32
        Maximum nesting of component containers before parsing fails.

    """

    generate_ids: bool = field(
        default=DEFAULT_GENERATE_IDS,
        metadata={"help": "Attach generated ids to tracked components", "importance": "core"},
    )
    parse_frontmatter: bool = field(
        default=DEFAULT_PARSE_FRONTMATTER,
        metadata={"help": "Parse leading YAML frontmatter", "importance": "core"},
    )
    parse_esm: bool = field(
        default=DEFAULT_PARSE_ESM,
        metadata={"help": "Keep top-level import/export statements", "importance": "advanced"},
    )
    max_nesting_depth: int = field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        metadata={"help": "Maximum component nesting depth", "type": int, "importance": "security"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()
        if self.max_nesting_depth < 1:
            raise ValueError(f"max_nesting_depth must be at least 1, got {self.max_nesting_depth}")


@dataclass(frozen=True)
class MdxSerializerOptions(BaseRendererOptions):
    """Configuration options for document-to-MDX serialization.

    Parameters
    ----------
    indent : int, default 2
        Spaces used to indent the body of component containers.
    bullet_markers : tuple of str, default ("-", "*")
        Bullet characters; consecutive bullet lists alternate between them so
        that they stay separate lists when parsed again.
    emit_frontmatter : bool, default True
        Write ``doc.attrs["frontmatter"]`` as a YAML block.

    """

    indent: int = field(
        default=DEFAULT_INDENT_WIDTH,
        metadata={"help": "Indent width for component bodies", "type": int, "importance": "core"},
    )
    bullet_markers: tuple[str, ...] = field(
        default=DEFAULT_BULLET_MARKERS,
        metadata={"help": "Bullet characters, alternated between adjacent lists", "importance": "advanced"},
    )
    emit_frontmatter: bool = field(
        default=DEFAULT_EMIT_FRONTMATTER,
        metadata={"help": "Write frontmatter stored on the document", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and marker choices.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()
        if self.indent < 1:
            raise ValueError(f"indent must be positive, got {self.indent}")
        if len(self.bullet_markers) < 2 or len(set(self.bullet_markers)) != len(self.bullet_markers):
            raise ValueError(f"bullet_markers needs at least two distinct markers, got {self.bullet_markers!r}")
        for marker in self.bullet_markers:
            if marker not in ("-", "*", "+"):
                raise ValueError(f"Invalid bullet marker: {marker!r}")
