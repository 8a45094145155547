"""
pyliteral Lexer Package

Finite-state scanner for the object-literal dialect: numbers, quoted
strings, True/False/None and the container delimiters.
"""

from .tokens import Token, TokenType
from .lexer import Lexer, LexerState, tokenize_string
from .errors import Diagnostic, DiagnosticError, LexerError, LexerWarning

__all__ = [
    "Lexer",
    "LexerState",
    "Token",
    "TokenType",
    "tokenize_string",
    "Diagnostic",
    "DiagnosticError",
    "LexerError",
    "LexerWarning",
]
