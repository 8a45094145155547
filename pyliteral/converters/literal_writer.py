"""
Value Tree back to literal source text.

The inverse of the parser: scanning and parsing the written text yields
a tree equal to the one written.
"""

import math
from decimal import Decimal
from typing import Sequence

from ..parser.value_tree import (
    Value, ValueVisitor, Scalar, ListValue, TupleValue, SetValue, MappingValue
)

_STRING_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def format_float(number: float) -> str:
    """
    Spell a float without an exponent, which the scanner does not read.

    The shortest round-tripping digits are kept and a '.0' is added when
    needed so the literal scans back as a float.
    """
    if math.isnan(number) or math.isinf(number):
        raise ValueError(f"Non-finite float has no literal spelling: {number!r}")
    text = format(Decimal(repr(number)), "f")
    if "." not in text:
        text += ".0"
    return text


def quote_string(text: str) -> str:
    return "'" + "".join(_STRING_ESCAPES.get(char, char) for char in text) + "'"


class LiteralWriter(ValueVisitor[str]):
    """Renders a Value Tree in the object-literal dialect."""

    def write(self, node: Value) -> str:
        return node.accept(self)

    def visit_scalar(self, node: Scalar) -> str:
        value = node.value
        if value is None or isinstance(value, bool):
            return repr(value)
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return format_float(value)
        if isinstance(value, str):
            return quote_string(value)
        raise TypeError(f"Unsupported scalar type: {type(value).__name__}")

    def visit_list(self, node: ListValue) -> str:
        return "[" + self._join(node.elements) + "]"

    def visit_tuple(self, node: TupleValue) -> str:
        if len(node.elements) == 1:
            return "(" + node.elements[0].accept(self) + ",)"
        return "(" + self._join(node.elements) + ")"

    def visit_set(self, node: SetValue) -> str:
        if not node.elements:
            raise ValueError("An empty set has no literal spelling; '{}' reads back as a mapping")
        return "{" + self._join(node.elements) + "}"

    def visit_mapping(self, node: MappingValue) -> str:
        pairs = [key.accept(self) + ": " + value.accept(self) for key, value in node.entries]
        return "{" + ", ".join(pairs) + "}"

    def _join(self, elements: Sequence[Value]) -> str:
        return ", ".join(element.accept(self) for element in elements)


def to_literal(node: Value) -> str:
    """Render a Value Tree as literal source text."""
    return LiteralWriter().write(node)
