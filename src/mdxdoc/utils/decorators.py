#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/utils/decorators.py
"""Dependency checks and stage timing for the parse/serialize pipeline.

mistune and PyYAML are imported lazily by the parser and renderer. The
checks here turn a missing or too-old package into a :class:`DependencyError`
with an install hint instead of an ImportError deep inside a conversion.
Results are cached per process, because the validation driver parses on
every edit.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import lru_cache, wraps
from typing import Any, Callable, Generator, Iterable, Optional, Tuple

from mdxdoc.exceptions import DependencyError
from mdxdoc.utils.packages import check_version_requirement

PackageSpec = Tuple[str, str, str]


@lru_cache(maxsize=None)
def _check_package(install_name: str, import_name: str, version_spec: str) -> Tuple[Optional[ImportError], Optional[str]]:
    """Return (import error, installed version if it fails version_spec) for one package."""
    try:
        # nosemgrep: python.lang.security.audit.non-literal-import.non-literal-import
        importlib.import_module(import_name)
    except ImportError as e:
        return e, None

    if version_spec:
        meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
        if not meets_requirement:
            return None, installed_version or "unknown"
    return None, None


def ensure_dependencies(converter_name: str, packages: Iterable[PackageSpec]) -> None:
    """Raise if any package is missing or does not meet its version spec.

    Parameters
    ----------
    converter_name : str
        Name shown in the error message (e.g., "mdx")
    packages : iterable of tuple
        (install_name, import_name, version_spec) tuples

    Raises
    ------
    DependencyError
        Listing every missing package and version mismatch

    """
    missing = []
    version_mismatches = []
    original_error = None

    for install_name, import_name, version_spec in packages:
        import_error, bad_version = _check_package(install_name, import_name, version_spec)
        if import_error is not None:
            missing.append((install_name, version_spec))
            original_error = original_error or import_error
        elif bad_version is not None:
            version_mismatches.append((install_name, version_spec, bad_version))

    if missing or version_mismatches:
        raise DependencyError(
            converter_name=converter_name,
            missing_packages=missing,
            version_mismatches=version_mismatches,
            original_import_error=original_error,
        ) from original_error


def requires_dependencies(converter_name: str, packages: Iterable[PackageSpec]) -> Callable:
    """Check required packages before a parser or renderer method runs.

    Parameters
    ----------
    converter_name : str
        Name of the component (e.g., "mdx"). This appears in error messages.
    packages : iterable of tuple
        Required packages as (install_name, import_name, version_spec) tuples where:
        - install_name: Package name for pip install (e.g., "pyyaml")
        - import_name: Module name for import statement (e.g., "yaml")
        - version_spec: Version requirement (e.g., ">=6.0" or "" for any version)

    Returns
    -------
    Callable
        Decorated method that checks dependencies before execution

    Examples
    --------
        >>> @requires_dependencies("mdx", [("mistune", "mistune", ">=3.0.0")])
        ... def parse(self, text):
        ...     import mistune

    """
    required = tuple(packages)

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            ensure_dependencies(converter_name, required)
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log the elapsed time of a block at DEBUG level.

    Nothing is measured when the logger is not enabled for DEBUG.

    Examples
    --------
        >>> with debug_timer(logger, "Parsing (mdx)"):
        ...     root = parser.parse(text)

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    start_time = time.perf_counter()
    yield
    logger.debug(f"{operation} completed in {time.perf_counter() - start_time:.3f}s")
