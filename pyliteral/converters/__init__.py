"""
pyliteral Converters Package

Visitors over the Value Tree: JSON documents, native Python objects,
literal source text, and resource validation.
"""

from .json_converter import JsonConverter, key_to_text, to_json_text
from .native_converter import NativeConverter, to_native
from .literal_writer import LiteralWriter, format_float, to_literal
from .validation import ValidationConfiguration, ValidationResult, ValidationVisitor

__all__ = [
    "JsonConverter",
    "key_to_text",
    "to_json_text",
    "NativeConverter",
    "to_native",
    "LiteralWriter",
    "format_float",
    "to_literal",
    "ValidationConfiguration",
    "ValidationResult",
    "ValidationVisitor",
]
