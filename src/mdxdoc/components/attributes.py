#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/components/attributes.py
"""Component attribute extraction and resolution.

Extraction turns the raw attributes written on a component tag into plain
Python values. Resolution then maps those values onto document attributes
through the :class:`AttributeSpec` entries of a component rule, applying
defaults and rejecting values that are not usable literals.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal, Optional

from mdxdoc.ast import SourceNode
from mdxdoc.expressions import contains_opaque, evaluate_expression

logger = logging.getLogger(__name__)

AttributeKind = Literal["string", "optional-string", "bool", "int", "list", "any"]

_TRUE_STRINGS = frozenset({"true", "yes", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "0"})


@dataclass(frozen=True)
class AttributeSpec:
    """Mapping of one source attribute onto one document attribute.

    Parameters
    ----------
    target : str
        Document attribute name
    source : str or None
        Attribute name on the component tag; None for attributes that always
        take ``default``
    default : Any
        Value used when the attribute is missing or unusable
    aliases : tuple of str
        Alternative source names, tried in order after ``source``
    kind : str
        Expected value kind: ``string`` (empty falls back to the default),
        ``optional-string``, ``bool``, ``int``, ``list`` or ``any``

    """

    target: str
    source: Optional[str] = None
    default: Any = None
    aliases: tuple[str, ...] = ()
    kind: AttributeKind = "string"

    @property
    def source_names(self) -> tuple[str, ...]:
        """Return every source name this spec reads, in lookup order."""
        if self.source is None:
            return ()
        return (self.source,) + self.aliases


def extract_attributes(node: SourceNode) -> dict[str, Any]:
    """Extract the attributes of a component node as plain values.

    Quoted values are kept as strings, boolean shorthand becomes ``True`` and
    expression values are evaluated as literals (see
    :func:`mdxdoc.expressions.evaluate_expression`). When an attribute is
    written twice, the last one wins.

    Parameters
    ----------
    node : SourceNode
        ``jsxElement`` or ``jsxTextElement`` node

    Returns
    -------
    dict
        Attribute name to value, in source order

    Examples
    --------
        >>> from mdxdoc.ast import JsxAttribute, SourceNode
        >>> node = SourceNode("jsxElement", name="Tab", attributes=[
        ...     JsxAttribute("title", "Setup"), JsxAttribute("disabled"),
        ...     JsxAttribute("order", "[1, 2]", is_expression=True)])
        >>> extract_attributes(node)
        {'title': 'Setup', 'disabled': True, 'order': [1, 2]}

    """
    attrs: dict[str, Any] = {}
    for attribute in node.attributes:
        if attribute.is_shorthand:
            attrs[attribute.name] = True
        elif attribute.is_expression:
            attrs[attribute.name] = evaluate_expression(attribute.value or "")
        else:
            attrs[attribute.name] = attribute.value
    return attrs


def literal_attribute(attrs: dict[str, Any], name: str, component: str) -> Any:
    """Return an extracted attribute value, or None when it is missing or opaque.

    Opaque values (identifiers, calls and other non-literal expressions) are
    rejected with a warning; their meaning cannot be known without running
    code.
    """
    value = attrs.get(name)
    if value is not None and contains_opaque(value):
        logger.warning(f"Ignoring non-literal value for `{name}` on <{component}>: {value!s}")
        return None
    return value


def _coerce(spec: AttributeSpec, value: Any) -> Any:
    """Coerce a value to the kind of a spec; returns ``spec.default`` when not possible."""
    kind = spec.kind
    if kind == "any":
        return value
    if kind in ("string", "optional-string"):
        if isinstance(value, bool) or value is None:
            return spec.default
        if isinstance(value, (int, float)):
            value = str(value)
        if not isinstance(value, str):
            return spec.default
        if not value and kind == "string":
            return spec.default
        return value
    if kind == "bool":
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in _TRUE_STRINGS:
            return True
        if isinstance(value, str) and value.lower() in _FALSE_STRINGS:
            return False
        return spec.default
    if kind == "int":
        if isinstance(value, bool):
            return spec.default
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if isinstance(value, str):
            try:
                value = int(value.strip())
            except ValueError:
                return spec.default
        if isinstance(value, int) and value:
            return value
        return spec.default
    if kind == "list":
        return list(value) if isinstance(value, list) else spec.default
    return spec.default


def resolve_attributes(
    specs: tuple[AttributeSpec, ...], attrs: dict[str, Any], component: str
) -> dict[str, Any]:
    """Map extracted tag attributes onto document attributes.

    Parameters
    ----------
    specs : tuple of AttributeSpec
        Attribute map of the component rule
    attrs : dict
        Result of :func:`extract_attributes`
    component : str
        Component name, for log messages

    Returns
    -------
    dict
        Document attributes in spec order; every spec target is present

    """
    resolved: dict[str, Any] = {}
    for spec in specs:
        value = None
        for name in spec.source_names:
            value = literal_attribute(attrs, name, component)
            if value is not None:
                break
        if value is None:
            resolved[spec.target] = _copy_default(spec.default)
            continue
        coerced = _coerce(spec, value)
        if coerced is spec.default and value != spec.default:
            logger.debug(f"Attribute `{spec.target}` of <{component}> fell back to its default (got {value!r})")
        resolved[spec.target] = _copy_default(coerced) if coerced is spec.default else coerced
    return resolved


def _copy_default(value: Any) -> Any:
    """Return a fresh copy of list and dict defaults so documents never share them."""
    if isinstance(value, (list, tuple)):
        return [_copy_default(item) for item in value]
    if isinstance(value, dict):
        return {key: _copy_default(item) for key, item in value.items()}
    return value


__all__ = [
    "AttributeKind",
    "AttributeSpec",
    "extract_attributes",
    "literal_attribute",
    "resolve_attributes",
]
