"""
Value Tree to JSON conversion.

Lists, tuples and sets all become arrays in parse order; mappings become
objects whose keys are the text of the converted key.
"""

import json
import logging
from typing import Any, Dict, List, Sequence

from ..parser.value_tree import (
    Value, ValueVisitor, Scalar, ListValue, TupleValue, SetValue, MappingValue
)

logger = logging.getLogger(__name__)

COMPACT_SEPARATORS = (",", ":")

JSON_SCALAR_TYPES = (bool, int, float, str, type(None))


def key_to_text(converted_key: Any) -> str:
    """
    Render a converted mapping key as object-key text.

    Strings are used as-is; anything else becomes its compact JSON
    spelling, so ``1`` -> ``"1"``, ``True`` -> ``"true"`` and
    ``(1, 2)`` -> ``"[1,2]"``.
    """
    if isinstance(converted_key, str):
        return converted_key
    return json.dumps(converted_key, separators=COMPACT_SEPARATORS, ensure_ascii=False)


class JsonConverter(ValueVisitor[Any]):
    """
    Converts a Value Tree into a JSON document.

    The document uses the ``json`` module's data model (dict, list, str,
    int, float, bool, None) and serializes with :meth:`serialize`.
    """

    def convert(self, node: Value) -> Any:
        """Convert a tree into a JSON document."""
        logger.debug("Converting %s to JSON", node.kind.value)
        return node.accept(self)

    def serialize(self, node: Value) -> str:
        """Convert a tree and render it as compact JSON text."""
        document = self.convert(node)
        return json.dumps(
            document,
            separators=COMPACT_SEPARATORS,
            ensure_ascii=False,
            allow_nan=False,
        )

    def visit_scalar(self, node: Scalar) -> Any:
        if not isinstance(node.value, JSON_SCALAR_TYPES):
            raise TypeError(f"Unsupported scalar type: {type(node.value).__name__}")
        return node.value

    def visit_list(self, node: ListValue) -> List[Any]:
        return self._array(node.elements)

    def visit_tuple(self, node: TupleValue) -> List[Any]:
        return self._array(node.elements)

    def visit_set(self, node: SetValue) -> List[Any]:
        return self._array(node.elements)

    def visit_mapping(self, node: MappingValue) -> Dict[str, Any]:
        document: Dict[str, Any] = {}
        for key, value in node.entries:
            document[key_to_text(key.accept(self))] = value.accept(self)
        return document

    def _array(self, elements: Sequence[Value]) -> List[Any]:
        return [element.accept(self) for element in elements]


def to_json_text(node: Value) -> str:
    """Serialize a Value Tree as compact JSON."""
    return JsonConverter().serialize(node)
