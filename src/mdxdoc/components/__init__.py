#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/components/__init__.py
"""Component catalogue and attribute handling.

Examples
--------
    >>> from mdxdoc.components import CATALOGUE
    >>> CATALOGUE["Card"].target_kind
    'cardBlock'

"""

from mdxdoc.components.attributes import AttributeSpec, extract_attributes, literal_attribute, resolve_attributes
from mdxdoc.components.catalogue import CATALOGUE, ChildPolicy, ComponentRule, get_rule, is_known_component

__all__ = [
    "CATALOGUE",
    "AttributeSpec",
    "ChildPolicy",
    "ComponentRule",
    "extract_attributes",
    "get_rule",
    "is_known_component",
    "literal_attribute",
    "resolve_attributes",
]
