"""
Token definitions for the pyliteral scanner.

The object-literal dialect has a deliberately small lexicon:
- Scalar literals (numbers, quoted strings, True/False, None)
- Identifiers (scanned, but never accepted by the grammar)
- Single-character delimiters for the four container forms
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict, Tuple


class TokenType(Enum):
    """Enumeration of all token types in the literal dialect."""

    # Literals
    NUMBER = auto()                 # 42, -7, 3.14
    STRING = auto()                 # 'hello', "world"
    BOOLEAN = auto()                # True, False
    NULL = auto()                   # None

    IDENTIFIER = auto()             # any other bare word

    # Delimiters
    LEFT_BRACKET = auto()           # [
    RIGHT_BRACKET = auto()          # ]
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    COMMA = auto()                  # ,
    COLON = auto()                  # :

    EOF = auto()                    # End of input


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    Carries the token type, the raw lexeme, the resolved scalar payload
    (None for delimiters and EOF) and the offset of the token's first
    character in the source text.
    """
    type: TokenType
    lexeme: str
    value: Any
    position: int

    def __str__(self) -> str:
        if self.value is not None and self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.position})")

    @property
    def is_scalar(self) -> bool:
        """Check if this token is a scalar literal."""
        return self.type in SCALAR_TYPES


SCALAR_TYPES = frozenset({
    TokenType.NUMBER,
    TokenType.STRING,
    TokenType.BOOLEAN,
    TokenType.NULL,
})

# Keyword spellings resolved by the identifier state
KEYWORDS: Dict[str, Tuple[TokenType, Any]] = {
    "True": (TokenType.BOOLEAN, True),
    "False": (TokenType.BOOLEAN, False),
    "None": (TokenType.NULL, None),
}

DELIMITERS: Dict[str, TokenType] = {
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
}

ESCAPE_SEQUENCES: Dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    "'": "'",
    '"': '"',
}

QUOTES = ("'", '"')
