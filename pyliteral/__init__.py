"""
pyliteral

Compiles Python-style object literals (numbers, strings, True/False/None,
lists, tuples, sets and dicts) into JSON text or native Python objects.

Architecture:
    pyliteral/
    ├── lexer/           # Finite-state scanner
    ├── parser/          # Value Tree and recursive descent parser
    ├── converters/      # JSON, native, literal and validation visitors
    ├── pipeline.py      # Text-in, result-out entry points
    └── cli.py           # Command-line front end

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, tokenize_string, DiagnosticError, LexerError
from .parser import (
    Parser, ParserConfiguration, ParseError, parse_string,
    Value, ValueKind, ValueVisitor, Scalar, ListValue, TupleValue, SetValue, MappingValue
)
from .converters import (
    JsonConverter, NativeConverter, LiteralWriter, ValidationVisitor,
    ValidationConfiguration, ValidationResult, to_literal
)
from .pipeline import parse, to_json, to_object, validate

__all__ = [
    # Pipeline
    "parse",
    "to_json",
    "to_object",
    "validate",
    "to_literal",
    "tokenize_string",
    "parse_string",

    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "Parser",
    "ParserConfiguration",
    "Value",
    "ValueKind",
    "ValueVisitor",
    "Scalar",
    "ListValue",
    "TupleValue",
    "SetValue",
    "MappingValue",
    "JsonConverter",
    "NativeConverter",
    "LiteralWriter",
    "ValidationVisitor",
    "ValidationConfiguration",
    "ValidationResult",

    # Errors
    "DiagnosticError",
    "LexerError",
    "ParseError",

    # Version info
    "__version__",
    "__license__",
]
