#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdxdoc library.

This module centralizes hardcoded values, magic numbers and default
configuration constants used across the library.

Constants are organized by category:
1. Type Definitions
2. Dependencies
3. Parsing defaults
4. Document model defaults
5. Serialization defaults
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ChildPolicyName = Literal["pass-through", "extract-named-children", "flatten-markdown-table", "atomic"]
CalloutType = Literal["tip", "info", "warning", "note", "danger"]
LabelSize = Literal["sm", "md", "lg"]

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_MDX = [("mistune", "mistune", ">=3.0.0"), ("pyyaml", "yaml", ">=6.0")]
DEPS_YAML = [("pyyaml", "yaml", ">=6.0")]

# =============================================================================
# Parsing defaults
# =============================================================================

DEFAULT_GENERATE_IDS = True
DEFAULT_PARSE_FRONTMATTER = True
DEFAULT_PARSE_ESM = True
DEFAULT_MAX_NESTING_DEPTH = 32
DEFAULT_VALIDATE_OUTPUT = True
DEFAULT_DEBOUNCE_SECONDS = 0.5

# Component tags handled as block (flow) elements: capitalized names and <img>.
JSX_BLOCK_NAME_PATTERN = r"[A-Z][A-Za-z0-9_.]*|img"
# Inline (text) elements additionally pair <u>...</u>.
JSX_INLINE_NAME_PATTERN = r"[A-Z][A-Za-z0-9_.]*|img|u"

CALLOUT_TYPES: tuple[str, ...] = ("tip", "info", "warning", "note", "danger")
CALLOUT_PATTERN = r"^\[!(TIP|INFO|WARNING|NOTE|DANGER)\]"

# =============================================================================
# Document model defaults
# =============================================================================

DEFAULT_CODE_LANGUAGE = "plaintext"
DEFAULT_IMAGE_ALT = "Image"
DEFAULT_IMAGE_TYPE = "url"
DEFAULT_LINK_TARGET = "_self"

DEFAULT_TABLE_SCROLL_HEIGHT = 400
DEFAULT_TABLE_ROWS_PER_PAGE = 10
DEFAULT_TABLE_ROWS_PER_PAGE_OPTIONS: tuple[int, ...] = (5, 10, 25, 50)
DEFAULT_TABLE_PLACEHOLDER_DATA: tuple[tuple[str, ...], ...] = (
    ("Column 1", "Column 2", "Column 3"),
    ("Data 1-1", "Data 1-2", "Data 1-3"),
    ("Data 2-1", "Data 2-2", "Data 2-3"),
)
EMPTY_TABLE_LABEL = "Column 1"
EMPTY_TABLE_CELL = "No data"
TABLE_SORTABLE_TAG = "<sortable>"
TABLE_FILTERABLE_TAG = "<filterable>"

DEFAULT_CARD_ICON_ALIGN = "left"
DEFAULT_ACCORDION_HEADER = "Accordion Item"
DEFAULT_TAB_LABEL = "Tab"
DEFAULT_FIRST_TAB_LABEL = "Tab 1"
DEFAULT_TABS_ALIGNMENT = "left"
DEFAULT_COLUMN_WIDTH = "auto"
DEFAULT_COLUMN_COUNT = 2
DEFAULT_ENDPOINT_METHOD = "GET"
DEFAULT_ENDPOINT_PATH = "/api/endpoint"
DEFAULT_LABEL_TEXT = "Label"
DEFAULT_LABEL_COLOR = "#3b82f6"
DEFAULT_LABEL_SIZE = "md"
DEFAULT_STEP_TITLE = "Step"
DEFAULT_PARAM_PATH = "param"
DEFAULT_PARAM_TYPE = "string"
DEFAULT_CODE_GROUP_FILE: tuple[str, str] = ("example.js", "javascript")

UNKNOWN_COMPONENT_TEMPLATE = "[Unknown component: {name}]"

# =============================================================================
# Serialization defaults
# =============================================================================

DEFAULT_INDENT_WIDTH = 2
DEFAULT_BULLET_MARKERS: tuple[str, ...] = ("-", "*")
DEFAULT_ORDERED_DELIMITERS: tuple[str, ...] = (".", ")")
DEFAULT_VALIDATE_INPUT = True
DEFAULT_EMIT_FRONTMATTER = True
