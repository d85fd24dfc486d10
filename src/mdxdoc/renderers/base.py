#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/renderers/base.py
"""Base classes for document renderers.

This module defines the abstract base class for renderers that turn a
document model tree back into text.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from mdxdoc.document import DocumentNode
from mdxdoc.exceptions import InvalidOptionsError
from mdxdoc.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for document renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from mdxdoc.renderers.base import BaseRenderer
        >>>
        >>> class PlainTextRenderer(BaseRenderer):
        ...     def render(self, doc, output):
        ...         self.write_text_output(self.render_to_string(doc), output)
        ...
        ...     def render_to_string(self, doc):
        ...         return doc.text_content()

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: DocumentNode, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the document to a file path or stream.

        Parameters
        ----------
        doc : DocumentNode
            ``doc`` node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        Raises
        ------
        RenderingError
            If rendering fails

        """
        pass

    def render_to_string(self, doc: DocumentNode) -> str:
        """Render the document to a string.

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or stream.

        Text streams receive the string; binary streams receive UTF-8 bytes.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        Raises
        ------
        TypeError
            If output type is not supported

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("# Hello", buffer)
            >>> buffer.getvalue()
            '# Hello'

        """
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding="utf-8")
            return
        if not hasattr(output, "write"):
            raise TypeError(f"Unsupported output type: {type(output).__name__}")
        try:
            output.write(text)  # type: ignore[arg-type]
        except TypeError:
            output.write(text.encode("utf-8"))  # type: ignore[arg-type]
