#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/utils/packages.py
"""Utility functions for checking installed packages."""

from __future__ import annotations

from importlib import metadata
from typing import Optional, Tuple

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version


def get_package_version(package_name: str) -> Optional[str]:
    """Get the installed version of a distribution.

    Parameters
    ----------
    package_name : str
        Distribution name as published on the index (``pyyaml``, not ``yaml``)

    Returns
    -------
    str or None
        Version string if the distribution is installed, None otherwise

    """
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Check if an installed distribution meets a version requirement.

    Parameters
    ----------
    package_name : str
        Distribution name
    version_spec : str
        Version specification (e.g., ">=3.0.0")

    Returns
    -------
    tuple
        (meets_requirement, installed_version)

    """
    installed_version = get_package_version(package_name)
    if not installed_version:
        return False, None

    try:
        return Version(installed_version) in SpecifierSet(version_spec), installed_version
    except (InvalidSpecifier, InvalidVersion):
        return False, installed_version
