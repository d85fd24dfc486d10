#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/cli.py
"""Command line interface for mdxdoc.

Subcommands
-----------
parse
    Convert an MDX file to TipTap JSON.
serialize
    Convert a TipTap JSON file back to MDX.
check
    Report parse errors with their line numbers.
format
    Normalize an MDX file by parsing and serializing it again.

Use ``-`` as the file name to read from stdin.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from mdxdoc import __version__
from mdxdoc.api import parse_mdx
from mdxdoc.constants import DEFAULT_INDENT_WIDTH
from mdxdoc.document import from_json, to_json
from mdxdoc.exceptions import DependencyError, ParsingError, RenderingError, ValidationError
from mdxdoc.logging_utils import configure_logging
from mdxdoc.options import MdxParserOptions, MdxSerializerOptions
from mdxdoc.renderers.mdx import serialize_document

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


class FileError(Exception):
    """Input file could not be read or output could not be written."""


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, (FileError, OSError)):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def _positive_int(value: str) -> int:
    """Validate a positive integer argument.

    Raises
    ------
    argparse.ArgumentTypeError
        If value is not a positive integer

    """
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'") from e
    if ivalue < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {ivalue}")
    return ivalue


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="mdxdoc",
        description="Convert MDX documentation pages to and from the TipTap JSON document model",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with very verbose logging and per-stage timing information",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    parse_cmd = subparsers.add_parser("parse", help="Convert MDX to TipTap JSON")
    parse_cmd.add_argument("input", help="MDX file ('-' for stdin)")
    parse_cmd.add_argument("--output", "-o", help="Write JSON to file (default: stdout)")
    parse_cmd.add_argument(
        "--indent",
        type=_positive_int,
        default=DEFAULT_INDENT_WIDTH,
        help=f"JSON indentation (default: {DEFAULT_INDENT_WIDTH})",
    )
    parse_cmd.add_argument(
        "--no-ids",
        dest="generate_ids",
        action="store_false",
        help="Do not generate ids for tracked components",
    )

    serialize_cmd = subparsers.add_parser("serialize", help="Convert TipTap JSON to MDX")
    serialize_cmd.add_argument("input", help="JSON file ('-' for stdin)")
    serialize_cmd.add_argument("--output", "-o", help="Write MDX to file (default: stdout)")
    serialize_cmd.add_argument(
        "--indent",
        type=_positive_int,
        default=DEFAULT_INDENT_WIDTH,
        help=f"Indentation of component bodies (default: {DEFAULT_INDENT_WIDTH})",
    )

    check_cmd = subparsers.add_parser("check", help="Report MDX parse errors")
    check_cmd.add_argument("inputs", nargs="+", help="MDX files to check")

    format_cmd = subparsers.add_parser("format", help="Normalize an MDX file")
    format_cmd.add_argument("input", help="MDX file ('-' for stdin)")
    format_cmd.add_argument("--output", "-o", help="Write MDX to file (default: stdout)")
    format_cmd.add_argument(
        "--check",
        action="store_true",
        help="Do not write anything; exit with 1 if the file would change",
    )

    return parser


def _setup_logging(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    # --trace takes precedence over --log-level
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise FileError(f"Cannot read {path}: {e}") from e


def _write_output(text: str, path: Optional[str]) -> None:
    if not path:
        sys.stdout.write(text)
        return
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as e:
        raise FileError(f"Cannot write {path}: {e}") from e
    logger.info(f"Wrote {path}")


def _report_parse_error(path: str, message: str, line: Optional[int]) -> None:
    where = f"{path}:{line}" if line is not None else path
    print(f"{where}: {message}", file=sys.stderr)


def handle_parse(parsed: argparse.Namespace) -> int:
    """Convert an MDX file to TipTap JSON."""
    options = MdxParserOptions(generate_ids=parsed.generate_ids)
    result = parse_mdx(_read_input(parsed.input), options)
    if result.document is None:
        _report_parse_error(parsed.input, result.parse_error or "", result.error_line)
        return EXIT_PARSING_ERROR
    _write_output(to_json(result.document, indent=parsed.indent) + "\n", parsed.output)
    return EXIT_SUCCESS


def handle_serialize(parsed: argparse.Namespace) -> int:
    """Convert a TipTap JSON file to MDX."""
    document = from_json(_read_input(parsed.input))
    text = serialize_document(document, MdxSerializerOptions(indent=parsed.indent))
    _write_output(text, parsed.output)
    return EXIT_SUCCESS


def handle_check(parsed: argparse.Namespace) -> int:
    """Parse every input and report the ones that fail."""
    exit_code = EXIT_SUCCESS
    for path in parsed.inputs:
        try:
            result = parse_mdx(_read_input(path), MdxParserOptions(generate_ids=False))
        except FileError as e:
            print(f"Error: {e}", file=sys.stderr)
            exit_code = max(exit_code, EXIT_FILE_ERROR)
            continue
        if result.document is None:
            _report_parse_error(path, result.parse_error or "", result.error_line)
            exit_code = max(exit_code, EXIT_PARSING_ERROR)
        else:
            logger.info(f"{path}: ok")
    return exit_code


def handle_format(parsed: argparse.Namespace) -> int:
    """Parse and serialize an MDX file again."""
    source = _read_input(parsed.input)
    result = parse_mdx(source, MdxParserOptions(generate_ids=False))
    if result.document is None:
        _report_parse_error(parsed.input, result.parse_error or "", result.error_line)
        return EXIT_PARSING_ERROR

    formatted = serialize_document(result.document)
    if parsed.check:
        if formatted != source:
            print(f"{parsed.input} would be reformatted", file=sys.stderr)
            return EXIT_ERROR
        return EXIT_SUCCESS
    _write_output(formatted, parsed.output)
    return EXIT_SUCCESS


_HANDLERS = {
    "parse": handle_parse,
    "serialize": handle_serialize,
    "check": handle_check,
    "format": handle_format,
}


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return its exit code.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments (default: ``sys.argv[1:]``)

    Returns
    -------
    int
        Exit code (0 for success)

    """
    parser = create_parser()
    try:
        parsed = parser.parse_args(args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0

    _setup_logging(parsed)

    try:
        return _HANDLERS[parsed.command](parsed)
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)


if __name__ == "__main__":
    sys.exit(main())
