"""
Value Tree to native Python objects.

Produces the same shapes ``json.loads`` would give back for the JSON
converter's output, without building the intermediate document.
"""

import logging
from typing import Any, Dict, List

from ..parser.value_tree import (
    Value, ValueVisitor, Scalar, ListValue, TupleValue, SetValue, MappingValue
)
from .json_converter import key_to_text

logger = logging.getLogger(__name__)


class NativeConverter(ValueVisitor[Any]):
    """Converts a Value Tree into Python scalars, lists and dicts."""

    def convert(self, node: Value) -> Any:
        logger.debug("Converting %s to native objects", node.kind.value)
        return node.accept(self)

    def visit_scalar(self, node: Scalar) -> Any:
        return node.value

    def visit_list(self, node: ListValue) -> List[Any]:
        return [element.accept(self) for element in node.elements]

    # Tuples and sets are plain lists; sets keep parse order and duplicates
    def visit_tuple(self, node: TupleValue) -> List[Any]:
        return [element.accept(self) for element in node.elements]

    def visit_set(self, node: SetValue) -> List[Any]:
        return [element.accept(self) for element in node.elements]

    def visit_mapping(self, node: MappingValue) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for key, value in node.entries:
            result[key_to_text(key.accept(self))] = value.accept(self)
        return result


def to_native(node: Value) -> Any:
    """Convert a Value Tree into native Python objects."""
    return NativeConverter().convert(node)
