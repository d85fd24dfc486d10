#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/exceptions.py
"""Custom exceptions for the mdxdoc library.

This module defines specialized exception classes for the error conditions
that can occur while parsing MDX, building the document model and serializing
it back to MDX. These exceptions provide more specific error information than
generic built-ins.

Exception Hierarchy
-------------------
- MdxDocError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a parser or renderer)
    - DocumentValidationError (document tree violates the node schema)

  - ParsingError (MDX source parsing failures)
    - ParseException (structural syntax error with a source position)

  - RenderingError (output generation failures)
    - SerializationError (document tree cannot be written as MDX)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class MdxDocError(Exception):
    """Base exception class for all mdxdoc-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(MdxDocError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class DocumentValidationError(ValidationError):
    """Exception raised when a document tree breaks the node schema.

    Parameters
    ----------
    message : str
        Description of the violation
    path : str, optional
        Location of the offending node, e.g. ``doc/content[2]/content[0]``
    node_type : str, optional
        Type of the offending node

    Attributes
    ----------
    path : str or None
        Location of the offending node inside the tree

    """

    def __init__(self, message: str, path: str | None = None, node_type: str | None = None):
        """Initialize the document validation error."""
        full_message = f"{message} (at {path})" if path else message
        super().__init__(full_message, parameter_name="document", parameter_value=node_type)
        self.path = path
        self.node_type = node_type


class ParsingError(MdxDocError):
    """Exception raised when MDX parsing fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    Attributes
    ----------
    parsing_stage : str or None
        Where in the parsing process the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class ParseException(ParsingError):
    """Structural syntax error in MDX source.

    The message follows the wording of the usual MDX tool chain and embeds
    the source position as ``(line:column-line:column)`` or a ``line:column:``
    prefix so that :func:`mdxdoc.diagnostics.locate_error` can recover it.

    Parameters
    ----------
    message : str
        Native error message including the position text
    line : int, optional
        1-based line of the error start
    column : int, optional
        1-based column of the error start
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the parse exception."""
        super().__init__(message, parsing_stage="syntax", original_error=original_error)
        self.line = line
        self.column = column


class RenderingError(MdxDocError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class SerializationError(RenderingError):
    """Exception raised when a document tree cannot be written as MDX."""

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the serialization error."""
        super().__init__(message, rendering_stage="serialize", original_error=original_error)


class DependencyError(MdxDocError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the component requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error
        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{converter_name} requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{converter_name} has version mismatches: {mismatch_str}")

            message = "\n".join(message_parts)

            if install_command:
                message += f"\nInstall with: {install_command}"
            else:
                all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
                if all_packages:
                    packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                    message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.install_command = install_command


__all__ = [
    "MdxDocError",
    "ValidationError",
    "InvalidOptionsError",
    "DocumentValidationError",
    "ParsingError",
    "ParseException",
    "RenderingError",
    "SerializationError",
    "DependencyError",
]
