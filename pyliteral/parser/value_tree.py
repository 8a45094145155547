"""
Value Tree node definitions for pyliteral.

The parser's output and every converter's input: a closed, five-variant
tagged union (scalar, list, tuple, set, mapping). Nodes are immutable,
compare structurally, and dispatch to a ValueVisitor through ``accept``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Generic, Tuple, TypeVar, Union

ScalarType = Union[int, float, bool, str, None]

T = TypeVar("T")


class ValueKind(Enum):
    """Discriminant of the Value Tree union."""
    SCALAR = "Scalar"
    LIST = "List"
    TUPLE = "Tuple"
    SET = "Set"
    MAPPING = "Mapping"


class ValueVisitor(ABC, Generic[T]):
    """
    Visitor interface over the five Value Tree variants.

    Subclasses must implement every method, so adding a target
    representation never requires touching the node classes.
    """

    @abstractmethod
    def visit_scalar(self, node: 'Scalar') -> T:
        pass

    @abstractmethod
    def visit_list(self, node: 'ListValue') -> T:
        pass

    @abstractmethod
    def visit_tuple(self, node: 'TupleValue') -> T:
        pass

    @abstractmethod
    def visit_set(self, node: 'SetValue') -> T:
        pass

    @abstractmethod
    def visit_mapping(self, node: 'MappingValue') -> T:
        pass


class Value(ABC):
    """Base class for all Value Tree nodes."""

    kind: ClassVar[ValueKind]

    @abstractmethod
    def accept(self, visitor: ValueVisitor[T]) -> T:
        """Accept a visitor (double dispatch)."""

    @abstractmethod
    def children(self) -> Tuple['Value', ...]:
        """Get all child nodes, keys included, in source order."""

    def depth(self) -> int:
        """Nesting depth; a scalar has depth 1."""
        child_depths = [child.depth() for child in self.children()]
        return 1 + max(child_depths, default=0)

    def __str__(self) -> str:
        return f"{self.kind.value}@{self.position}"


@dataclass(frozen=True, eq=False)
class Scalar(Value):
    """Leaf value: int, float, bool, str or None."""
    value: ScalarType
    position: int = field(default=-1)

    kind: ClassVar[ValueKind] = ValueKind.SCALAR

    def accept(self, visitor: ValueVisitor[T]) -> T:
        return visitor.visit_scalar(self)

    def children(self) -> Tuple[Value, ...]:
        return ()

    # bool is an int subclass, so the payload type takes part in equality
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Scalar):
            return NotImplemented
        return type(self.value) is type(other.value) and self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self.value), self.value))

    def __repr__(self) -> str:
        return f"Scalar({self.value!r})"


@dataclass(frozen=True)
class ListValue(Value):
    """Ordered sequence written with brackets."""
    elements: Tuple[Value, ...] = ()
    position: int = field(default=-1, compare=False)

    kind: ClassVar[ValueKind] = ValueKind.LIST

    def accept(self, visitor: ValueVisitor[T]) -> T:
        return visitor.visit_list(self)

    def children(self) -> Tuple[Value, ...]:
        return self.elements


@dataclass(frozen=True)
class TupleValue(Value):
    """Ordered sequence written with parentheses."""
    elements: Tuple[Value, ...] = ()
    position: int = field(default=-1, compare=False)

    kind: ClassVar[ValueKind] = ValueKind.TUPLE

    def accept(self, visitor: ValueVisitor[T]) -> T:
        return visitor.visit_tuple(self)

    def children(self) -> Tuple[Value, ...]:
        return self.elements


@dataclass(frozen=True)
class SetValue(Value):
    """Braced sequence without colons. Elements stay in parse order and are not deduplicated."""
    elements: Tuple[Value, ...] = ()
    position: int = field(default=-1, compare=False)

    kind: ClassVar[ValueKind] = ValueKind.SET

    def accept(self, visitor: ValueVisitor[T]) -> T:
        return visitor.visit_set(self)

    def children(self) -> Tuple[Value, ...]:
        return self.elements


@dataclass(frozen=True)
class MappingValue(Value):
    """Ordered key/value pairs. Repeated keys are kept."""
    entries: Tuple[Tuple[Value, Value], ...] = ()
    position: int = field(default=-1, compare=False)

    kind: ClassVar[ValueKind] = ValueKind.MAPPING

    def accept(self, visitor: ValueVisitor[T]) -> T:
        return visitor.visit_mapping(self)

    def children(self) -> Tuple[Value, ...]:
        return tuple(node for entry in self.entries for node in entry)

    def keys(self) -> Tuple[Value, ...]:
        return tuple(key for key, _ in self.entries)


CONTAINER_KINDS = frozenset({
    ValueKind.LIST,
    ValueKind.TUPLE,
    ValueKind.SET,
    ValueKind.MAPPING,
})
