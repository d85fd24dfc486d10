"""Pytest configuration and shared fixtures for the mdxdoc test suite.

This module provides shared fixtures and test configuration that are used
across the entire test suite.
"""

import logging

import pytest

from mdxdoc.options import MdxParserOptions


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - parse, convert and serialize together")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def no_ids():
    """Parser options that leave generated ids out of converted documents."""
    return MdxParserOptions(generate_ids=False)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Restore the root logger after tests that run the CLI, which reconfigures it."""
    root_logger = logging.getLogger()
    level = root_logger.level
    handlers = list(root_logger.handlers)
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)
