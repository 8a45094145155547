"""
End-to-end entry points: literal text in, JSON text or Python objects out.

Every call builds its own lexer, parser and tree, so the functions are
safe to call from several threads at once.
"""

import logging
from typing import Any, Optional

from .lexer import tokenize_string
from .parser import Parser, ParserConfiguration, Value
from .converters import (
    JsonConverter, NativeConverter, ValidationConfiguration,
    ValidationResult, ValidationVisitor
)

logger = logging.getLogger(__name__)


def parse(source: str, configuration: Optional[ParserConfiguration] = None) -> Value:
    """
    Scan and parse literal text into a Value Tree.

    Raises:
        LexerError: If scanning fails
        ParseError: If parsing fails
    """
    tokens = tokenize_string(source)
    return Parser(tokens, configuration).parse()


def to_json(source: str, configuration: Optional[ParserConfiguration] = None) -> str:
    """Translate literal text into compact JSON text."""
    return JsonConverter().serialize(parse(source, configuration))


def to_object(source: str, configuration: Optional[ParserConfiguration] = None) -> Any:
    """Translate literal text into Python scalars, lists and dicts."""
    return NativeConverter().convert(parse(source, configuration))


def validate(
    source: str,
    configuration: Optional[ValidationConfiguration] = None,
    parser_configuration: Optional[ParserConfiguration] = None
) -> ValidationResult:
    """
    Parse literal text and check it against resource limits.

    Syntax problems still raise; limit violations come back as an
    invalid result.
    """
    result = ValidationVisitor(configuration).validate(parse(source, parser_configuration))
    logger.debug("Validated input: %s", result)
    return result
