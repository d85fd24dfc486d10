#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxdoc/expressions.py
"""Literal evaluation of JSX attribute expressions.

Component attributes written as ``{...}`` hold JavaScript. Only literal
shapes are understood: arrays, objects, strings, numbers, booleans, ``null``
and ``undefined``. The reader builds a closed union of expression nodes

    ArrayLiteral | ObjectLiteral | Primitive | Opaque

and :func:`evaluate` recurses over the first three. Everything else
(identifiers, calls, member access, operators, arrow functions, template
literals with substitutions) is kept as an :class:`Opaque` node holding the
raw source of the smallest enclosing element, and evaluates to an
:class:`OpaqueValue`. Nothing is ever executed and reading never raises.

Examples
--------
    >>> evaluate_expression("[['Name', 'Age'], ['Ada', 36]]")
    [['Name', 'Age'], ['Ada', 36]]
    >>> evaluate_expression("{ sortable: true, width: 0x10 }")
    {'sortable': True, 'width': 16}
    >>> evaluate_expression("items.map(render)")
    OpaqueValue(raw='items.map(render)')

"""

from __future__ import annotations

import json
import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Union

logger = logging.getLogger(__name__)

_KEYWORDS: dict[str, Any] = {"true": True, "false": False, "null": None, "undefined": None}
_FLOAT_KEYWORDS: dict[str, float] = {"Infinity": math.inf, "NaN": math.nan}

_NUMBER_RE = re.compile(
    r"0[xX][0-9a-fA-F](?:_?[0-9a-fA-F])*n?"
    r"|0[oO][0-7](?:_?[0-7])*n?"
    r"|0[bB][01](?:_?[01])*n?"
    r"|(?:\d(?:_?\d)*(?:\.(?:\d(?:_?\d)*)?)?|\.\d(?:_?\d)*)(?:[eE][+-]?\d(?:_?\d)*)?n?"
)
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_SIMPLE_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", "b": "\b", "f": "\f", "v": "\v"}
_OPENERS = {"(": ")", "[": "]", "{": "}"}


@dataclass(frozen=True)
class Primitive:
    """String, number, boolean or null literal."""

    value: Union[str, int, float, bool, None]


@dataclass(frozen=True)
class ArrayLiteral:
    """Array literal; holes read as ``None``."""

    elements: tuple[Expression, ...]


@dataclass(frozen=True)
class ObjectLiteral:
    """Object literal with its properties in source order."""

    properties: tuple[tuple[str, Expression], ...]


@dataclass(frozen=True)
class Opaque:
    """Expression that is not a literal, kept as raw source."""

    raw: str


Expression = Union[ArrayLiteral, ObjectLiteral, Primitive, Opaque]


@dataclass(frozen=True)
class OpaqueValue:
    """Evaluated form of an :class:`Opaque` expression.

    Consumers that need a concrete literal treat this value as unsupported.
    """

    raw: str

    def __str__(self) -> str:
        """Return the raw expression source."""
        return self.raw


class _Unsupported(Exception):
    """Raised inside the reader when the input leaves the literal subset."""


class _LiteralReader:
    """Recursive-descent reader over the literal subset of JavaScript."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def read(self) -> Expression:
        self._skip_space()
        if self.pos >= len(self.source):
            raise _Unsupported("empty expression")
        expression = self._value()
        self._skip_space()
        if self.pos != len(self.source):
            raise _Unsupported(f"unexpected input at offset {self.pos}")
        return expression

    # -- scanning helpers -------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.source[index] if index < len(self.source) else ""

    def _skip_space(self) -> None:
        source = self.source
        while self.pos < len(source):
            char = source[self.pos]
            if char.isspace():
                self.pos += 1
            elif source.startswith("//", self.pos):
                newline = source.find("\n", self.pos)
                self.pos = len(source) if newline == -1 else newline + 1
            elif source.startswith("/*", self.pos):
                end = source.find("*/", self.pos + 2)
                if end == -1:
                    raise _Unsupported("unterminated comment")
                self.pos = end + 2
            else:
                break

    # -- grammar ----------------------------------------------------------

    def _value(self) -> Expression:
        char = self._peek()
        if char == "[":
            return self._array()
        if char == "{":
            return self._object()
        if char in ("'", '"'):
            return Primitive(self._string(char))
        if char == "`":
            return Primitive(self._template())
        if char == "(":
            self.pos += 1
            self._skip_space()
            inner = self._value()
            self._skip_space()
            if self._peek() != ")":
                raise _Unsupported("unbalanced parenthesis")
            self.pos += 1
            return inner
        if char in ("-", "+"):
            return self._signed_number()
        if char.isdigit() or (char == "." and self._peek(1).isdigit()):
            return Primitive(self._number())
        if char.isalpha() or char in ("_", "$"):
            word = self._identifier()
            if word in _KEYWORDS:
                return Primitive(_KEYWORDS[word])
            if word in _FLOAT_KEYWORDS:
                return Primitive(_FLOAT_KEYWORDS[word])
            raise _Unsupported(f"identifier {word!r}")
        raise _Unsupported(f"unexpected character {char!r}")

    def _element(self, stops: str) -> Expression:
        """Read one array element or property value, falling back to Opaque."""
        start = self.pos
        try:
            value = self._value()
            self._skip_space()
            if self._peek() not in tuple(stops):
                raise _Unsupported("operator after literal")
            return value
        except _Unsupported:
            self.pos = start
            raw = self._scan_raw(stops)
            return Opaque(raw.strip())

    def _array(self) -> ArrayLiteral:
        self.pos += 1
        elements: list[Expression] = []
        while True:
            self._skip_space()
            char = self._peek()
            if char == "]":
                self.pos += 1
                return ArrayLiteral(tuple(elements))
            if char == ",":
                elements.append(Primitive(None))
                self.pos += 1
                continue
            if not char:
                raise _Unsupported("unterminated array")
            elements.append(self._element(",]"))
            self._skip_space()
            char = self._peek()
            if char == ",":
                self.pos += 1
            elif char != "]":
                raise _Unsupported("expected ',' or ']'")

    def _object(self) -> ObjectLiteral:
        self.pos += 1
        properties: list[tuple[str, Expression]] = []
        while True:
            self._skip_space()
            char = self._peek()
            if char == "}":
                self.pos += 1
                return ObjectLiteral(tuple(properties))
            if not char:
                raise _Unsupported("unterminated object")
            key = self._property_key()
            self._skip_space()
            char = self._peek()
            if char == ":":
                self.pos += 1
                self._skip_space()
                value = self._element(",}")
            elif char in (",", "}") and _IDENTIFIER_RE.match(key):
                # {name} shorthand refers to a variable
                value = Opaque(key)
            else:
                raise _Unsupported("unsupported property form")
            properties.append((key, value))
            self._skip_space()
            char = self._peek()
            if char == ",":
                self.pos += 1
            elif char != "}":
                raise _Unsupported("expected ',' or '}'")

    def _property_key(self) -> str:
        char = self._peek()
        if char in ("'", '"'):
            return self._string(char)
        if char.isdigit() or char == ".":
            number = self._number()
            return _format_number_key(number)
        if char.isalpha() or char in ("_", "$"):
            return self._identifier()
        raise _Unsupported(f"unsupported property key starting with {char!r}")

    def _identifier(self) -> str:
        start = self.pos
        source = self.source
        while self.pos < len(source) and (source[self.pos].isalnum() or source[self.pos] in ("_", "$")):
            self.pos += 1
        return source[start : self.pos]

    def _signed_number(self) -> Primitive:
        sign = -1 if self._peek() == "-" else 1
        self.pos += 1
        self._skip_space()
        char = self._peek()
        if char.isalpha():
            word = self._identifier()
            if word == "Infinity":
                return Primitive(sign * math.inf)
            if word == "NaN":
                return Primitive(math.nan)
            raise _Unsupported("unary operator on identifier")
        if not (char.isdigit() or char == "."):
            raise _Unsupported("unary operator on non-number")
        return Primitive(sign * self._number())

    def _number(self) -> Union[int, float]:
        match = _NUMBER_RE.match(self.source, self.pos)
        if not match:
            raise _Unsupported("malformed number")
        text = match.group(0)
        self.pos = match.end()
        following = self._peek()
        if following and (following.isalnum() or following in ("_", "$")):
            raise _Unsupported("identifier directly after number")
        text = text.replace("_", "")
        if text.endswith("n"):
            text = text[:-1]
        lowered = text.lower()
        if lowered.startswith("0x"):
            return int(text[2:], 16)
        if lowered.startswith("0o"):
            return int(text[2:], 8)
        if lowered.startswith("0b"):
            return int(text[2:], 2)
        if "." in text or "e" in lowered:
            return float(text)
        return int(text)

    def _string(self, quote: str) -> str:
        self.pos += 1
        parts: list[str] = []
        source = self.source
        while True:
            if self.pos >= len(source):
                raise _Unsupported("unterminated string")
            char = source[self.pos]
            if char == quote:
                self.pos += 1
                return "".join(parts)
            if char == "\n":
                raise _Unsupported("newline in string literal")
            if char == "\\":
                parts.append(self._escape())
            else:
                parts.append(char)
                self.pos += 1

    def _template(self) -> str:
        self.pos += 1
        parts: list[str] = []
        source = self.source
        while True:
            if self.pos >= len(source):
                raise _Unsupported("unterminated template literal")
            char = source[self.pos]
            if char == "`":
                self.pos += 1
                return "".join(parts)
            if source.startswith("${", self.pos):
                raise _Unsupported("template substitution")
            if char == "\\":
                parts.append(self._escape())
            else:
                parts.append(char)
                self.pos += 1

    def _escape(self) -> str:
        source = self.source
        self.pos += 1
        if self.pos >= len(source):
            raise _Unsupported("dangling escape")
        char = source[self.pos]
        self.pos += 1
        if char in _SIMPLE_ESCAPES:
            return _SIMPLE_ESCAPES[char]
        if char == "0" and not self._peek().isdigit():
            return "\0"
        if char == "\n":
            return ""
        if char == "\r":
            if self._peek() == "\n":
                self.pos += 1
            return ""
        if char == "x":
            digits = source[self.pos : self.pos + 2]
            if len(digits) != 2 or not _is_hex(digits):
                raise _Unsupported("bad \\x escape")
            self.pos += 2
            return chr(int(digits, 16))
        if char == "u":
            if self._peek() == "{":
                end = source.find("}", self.pos)
                digits = source[self.pos + 1 : end] if end != -1 else ""
                if not digits or not _is_hex(digits) or int(digits, 16) > 0x10FFFF:
                    raise _Unsupported("bad \\u{} escape")
                self.pos = end + 1
                return chr(int(digits, 16))
            digits = source[self.pos : self.pos + 4]
            if len(digits) != 4 or not _is_hex(digits):
                raise _Unsupported("bad \\u escape")
            self.pos += 4
            code_point = int(digits, 16)
            # combine surrogate pairs written as two escapes
            if 0xD800 <= code_point <= 0xDBFF and source.startswith("\\u", self.pos):
                low_digits = source[self.pos + 2 : self.pos + 6]
                if len(low_digits) == 4 and _is_hex(low_digits) and 0xDC00 <= int(low_digits, 16) <= 0xDFFF:
                    self.pos += 6
                    low = int(low_digits, 16)
                    return chr(0x10000 + ((code_point - 0xD800) << 10) + (low - 0xDC00))
            return chr(code_point)
        return char

    def _scan_raw(self, stops: str) -> str:
        """Consume balanced source up to a top-level stop character."""
        start = self.pos
        source = self.source
        closers: list[str] = []
        while self.pos < len(source):
            char = source[self.pos]
            if not closers and char in stops:
                return source[start : self.pos]
            if char in ("'", '"'):
                self._skip_quoted(char)
                continue
            if char == "`":
                self._skip_quoted("`")
                continue
            if source.startswith("//", self.pos) or source.startswith("/*", self.pos):
                self._skip_space()
                continue
            if char in _OPENERS:
                closers.append(_OPENERS[char])
            elif char in (")", "]", "}"):
                if not closers or closers.pop() != char:
                    raise _Unsupported("unbalanced brackets")
            self.pos += 1
        raise _Unsupported("unterminated element")

    def _skip_quoted(self, quote: str) -> None:
        source = self.source
        self.pos += 1
        while self.pos < len(source):
            char = source[self.pos]
            if char == "\\":
                self.pos += 2
                continue
            self.pos += 1
            if char == quote:
                return
        raise _Unsupported("unterminated string")


def _is_hex(text: str) -> bool:
    return all(c in "0123456789abcdefABCDEF" for c in text)


def _format_number_key(number: Union[int, float]) -> str:
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def parse_expression(source: str) -> Expression:
    """Read attribute expression source into an expression node.

    Parameters
    ----------
    source : str
        Source between the braces of ``attr={...}``

    Returns
    -------
    Expression
        Literal node, or :class:`Opaque` for anything outside the literal subset

    """
    try:
        return _LiteralReader(source).read()
    except (_Unsupported, ValueError, OverflowError) as exc:
        logger.debug(f"Expression kept opaque ({exc}): {source!r}")
        return Opaque(source.strip())


def evaluate(expression: Expression) -> Any:
    """Turn an expression node into plain Python values.

    Arrays become lists, objects become dicts (later keys win), primitives
    become their value and opaque nodes become :class:`OpaqueValue`.
    """
    if isinstance(expression, Primitive):
        return expression.value
    if isinstance(expression, ArrayLiteral):
        return [evaluate(element) for element in expression.elements]
    if isinstance(expression, ObjectLiteral):
        return {key: evaluate(value) for key, value in expression.properties}
    return OpaqueValue(expression.raw)


def evaluate_expression(source: str) -> Any:
    """Read and evaluate attribute expression source in one step."""
    return evaluate(parse_expression(source))


def contains_opaque(value: Any) -> bool:
    """Return True when an evaluated value holds an opaque part anywhere."""
    if isinstance(value, OpaqueValue):
        return True
    if isinstance(value, list):
        return any(contains_opaque(item) for item in value)
    if isinstance(value, dict):
        return any(contains_opaque(item) for item in value.values())
    return False


def format_literal(value: Any) -> str:
    """Write a Python literal value as JavaScript source.

    This is the inverse of :func:`evaluate_expression` for the literal subset.

    Raises
    ------
    TypeError
        If the value has no JavaScript literal form
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return repr(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, OpaqueValue):
        return value.raw
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_literal(item) for item in value) + "]"
    if isinstance(value, dict):
        if not value:
            return "{}"
        items = []
        for key, item in value.items():
            key_text = str(key)
            key_source = key_text if _IDENTIFIER_RE.match(key_text) else json.dumps(key_text, ensure_ascii=False)
            items.append(f"{key_source}: {format_literal(item)}")
        return "{ " + ", ".join(items) + " }"
    raise TypeError(f"Cannot write {type(value).__name__} as a JavaScript literal")


__all__ = [
    "Primitive",
    "ArrayLiteral",
    "ObjectLiteral",
    "Opaque",
    "Expression",
    "OpaqueValue",
    "parse_expression",
    "evaluate",
    "evaluate_expression",
    "contains_opaque",
    "format_literal",
]
