"""Logging setup shared by the mdxdoc CLI and applications embedding the converter."""

from __future__ import annotations

import logging
import sys
from typing import Optional

# Third-party loggers that are chatty at DEBUG and say nothing about conversions
NOISY_LOGGERS: tuple[str, ...] = ("asyncio",)


def _make_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
    return logging.Formatter("%(levelname)s: %(message)s")


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure root logging for an mdxdoc entry point.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "INFO").
    log_file : str, optional
        Path of a file that receives the same messages as stderr.
    trace_mode : bool, default False
        Include timestamps, logger names and line numbers, and keep
        third-party loggers at the requested level.

    Returns
    -------
    logging.Logger
        The configured root logger.

    """
    level = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.INFO)
    formatter = _make_formatter(trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: Optional[OSError] = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if not trace_mode:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(level, logging.WARNING))

    if file_error is not None:
        root_logger.warning(f"Could not create log file {log_file}: {file_error}")
    elif log_file:
        root_logger.info(f"Logging to file: {log_file}")

    return root_logger
