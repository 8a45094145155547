"""
pyliteral Parser Package

Recursive descent parser producing the Value Tree, the tagged union
every converter consumes.
"""

from .value_tree import (
    ScalarType, ValueKind, ValueVisitor, Value,
    Scalar, ListValue, TupleValue, SetValue, MappingValue, CONTAINER_KINDS
)
from .parser import Parser, ParserConfiguration, DEFAULT_MAX_DEPTH, parse_string
from .errors import ParseError, ParseWarning

__all__ = [
    # Core parser
    "Parser",
    "ParserConfiguration",
    "DEFAULT_MAX_DEPTH",
    "parse_string",

    # Value Tree
    "ScalarType", "ValueKind", "ValueVisitor", "Value",
    "Scalar", "ListValue", "TupleValue", "SetValue", "MappingValue",
    "CONTAINER_KINDS",

    # Error handling
    "ParseError", "ParseWarning",
]
