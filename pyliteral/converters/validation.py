"""
Resource checks over a parsed Value Tree.

The converters accept any tree the parser builds. This visitor is the
separate guard for callers that take literals from untrusted sources: it
bounds nesting depth, container size and string length, and collects
per-type statistics on the way.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from ..parser.value_tree import (
    Value, ValueVisitor, Scalar, ListValue, TupleValue, SetValue, MappingValue
)

logger = logging.getLogger(__name__)


@dataclass
class ValidationConfiguration:
    """Limits enforced by the validation visitor"""
    max_depth: int = 100
    max_container_size: int = 100_000
    max_string_length: int = 10_000


@dataclass
class ValidationResult:
    """Outcome of validating one tree."""
    valid: bool
    error_message: Optional[str] = None
    type_statistics: Dict[str, int] = field(default_factory=dict)
    max_depth: int = 0
    total_elements: int = 0

    def __str__(self) -> str:
        parts = [f"valid={self.valid}"]
        if not self.valid:
            parts.append(f"error={self.error_message!r}")
        parts.append(f"max_depth={self.max_depth}")
        parts.append(f"total_elements={self.total_elements}")
        parts.append(f"statistics={self.type_statistics}")
        return "ValidationResult(" + ", ".join(parts) + ")"


class ValidationVisitor(ValueVisitor[Optional[str]]):
    """
    Walks a tree and stops at the first limit violation.

    Every visit returns None when the subtree is acceptable and an error
    message otherwise. Counters are reset by :meth:`validate`, so one
    instance can check several trees in turn, but not concurrently.
    """

    def __init__(self, configuration: Optional[ValidationConfiguration] = None):
        self.configuration = configuration or ValidationConfiguration()
        self.reset()

    def reset(self):
        self.type_statistics: Dict[str, int] = {}
        self.total_elements = 0
        self.max_depth_reached = 0
        self.current_depth = 0

    def validate(self, node: Value) -> ValidationResult:
        self.reset()
        error = node.accept(self)
        if error is not None:
            logger.info("Validation failed: %s", error)
        return ValidationResult(
            valid=error is None,
            error_message=error,
            type_statistics=dict(self.type_statistics),
            max_depth=self.max_depth_reached,
            total_elements=self.total_elements,
        )

    def visit_scalar(self, node: Scalar) -> Optional[str]:
        self._descend()
        try:
            self.total_elements += 1
            value = node.value
            self._count("null" if value is None else type(value).__name__)

            if isinstance(value, str) and len(value) > self.configuration.max_string_length:
                return f"String too long: {len(value)} characters"
            if isinstance(value, float) and not math.isfinite(value):
                return f"Invalid numeric value: {value}"
            return None
        finally:
            self.current_depth -= 1

    def visit_list(self, node: ListValue) -> Optional[str]:
        return self._validate_container(node, node.elements, len(node.elements))

    def visit_tuple(self, node: TupleValue) -> Optional[str]:
        return self._validate_container(node, node.elements, len(node.elements))

    def visit_set(self, node: SetValue) -> Optional[str]:
        return self._validate_container(node, node.elements, len(node.elements))

    def visit_mapping(self, node: MappingValue) -> Optional[str]:
        # Keys and values are both checked
        return self._validate_container(node, node.children(), len(node.entries))

    def _validate_container(self, node: Value, children: Sequence[Value], size: int) -> Optional[str]:
        self._descend()
        try:
            limit = self.configuration.max_depth
            if self.current_depth > limit:
                return f"Nesting too deep: {self.current_depth} > {limit}"

            name = node.kind.value
            self._count(name)
            self.total_elements += 1

            if size > self.configuration.max_container_size:
                return f"{name} too large: {size} elements"

            for child in children:
                error = child.accept(self)
                if error is not None:
                    return error
            return None
        finally:
            self.current_depth -= 1

    def _descend(self):
        self.current_depth += 1
        self.max_depth_reached = max(self.max_depth_reached, self.current_depth)

    def _count(self, name: str):
        self.type_statistics[name] = self.type_statistics.get(name, 0) + 1
