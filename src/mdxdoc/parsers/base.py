#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/parsers/base.py
"""Base classes for source parsers.

This module defines the abstract base class for parsers that turn source
text into the generic source AST (:class:`mdxdoc.ast.SourceNode`).

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Union

from mdxdoc.ast import SourceNode
from mdxdoc.exceptions import InvalidOptionsError, ValidationError
from mdxdoc.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for source parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
    Creating a custom parser:

        >>> from mdxdoc.ast import SourceNode
        >>> from mdxdoc.parsers.base import BaseParser
        >>>
        >>> class PlainParser(BaseParser):
        ...     def parse(self, input_data):
        ...         text = self._load_text_content(input_data)
        ...         return SourceNode("root", children=[])

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def _load_text_content(input_data: Union[str, bytes]) -> str:
        """Return the input as text, decoding UTF-8 bytes.

        A leading byte order mark is dropped from both text and bytes.

        Raises
        ------
        ValidationError
            If the input is neither text nor UTF-8 bytes

        """
        if isinstance(input_data, str):
            return input_data[1:] if input_data.startswith("\ufeff") else input_data
        if isinstance(input_data, (bytes, bytearray)):
            try:
                return bytes(input_data).decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise ValidationError(
                    "Source bytes are not valid UTF-8",
                    parameter_name="input_data",
                    original_error=e,
                ) from e
        raise ValidationError(
            f"Unsupported input type: {type(input_data).__name__}",
            parameter_name="input_data",
            parameter_value=input_data,
        )

    @abstractmethod
    def parse(self, input_data: Union[str, bytes]) -> SourceNode:
        """Parse the input text into a source AST.

        Parameters
        ----------
        input_data : str or bytes
            Source text, or UTF-8 encoded bytes

        Returns
        -------
        SourceNode
            ``root`` node of the source AST

        Raises
        ------
        ParseException
            If the source is structurally malformed
        DependencyError
            If required dependencies are not installed

        """
        raise NotImplementedError
