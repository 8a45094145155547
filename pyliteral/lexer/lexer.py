"""
pyliteral scanner - turns literal text into tokens

A small finite-state machine: the dispatch state looks at the current
character and hands over to the number, string, identifier or delimiter
state, each of which scans one token and hands control back.
"""

import logging
import math
import sys
from enum import Enum, auto
from typing import Callable, Dict, List, Union

from .tokens import (
    Token, TokenType, KEYWORDS, DELIMITERS, ESCAPE_SEQUENCES, QUOTES
)
from .errors import (
    LexerError, LexerWarning, create_invalid_character_error,
    create_invalid_number_error, create_number_overflow_error, create_integer_too_long_error,
    create_unterminated_string_warning, create_unknown_escape_warning
)

logger = logging.getLogger(__name__)


def _int_digit_limit() -> int:
    """The interpreter's int/str conversion limit; 0 when there is none."""
    get_limit = getattr(sys, "get_int_max_str_digits", None)
    return get_limit() if get_limit is not None else 0


class LexerState(Enum):
    """States of the scanner's dispatch loop."""
    DISPATCH = auto()
    NUMBER = auto()
    STRING = auto()
    IDENTIFIER = auto()
    DELIMITER = auto()
    DONE = auto()


class Lexer:
    """
    Scanner for the object-literal dialect.

    One instance holds the cursor for one source string. Scan errors
    abort tokenization immediately; the two string leniencies are kept
    as warnings instead.
    """

    def __init__(self, source: str):
        """
        Initialize the lexer with source text.

        Args:
            source: Literal text to scan
        """
        if source is None:
            raise TypeError("Lexer source cannot be None")
        self.source = source
        self.pos = 0
        self.tokens: List[Token] = []
        self.warnings: List[LexerWarning] = []

        self._handlers: Dict[LexerState, Callable[[], LexerState]] = {
            LexerState.DISPATCH: self._dispatch,
            LexerState.NUMBER: self._scan_number,
            LexerState.STRING: self._scan_string,
            LexerState.IDENTIFIER: self._scan_identifier,
            LexerState.DELIMITER: self._scan_delimiter,
        }

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            List of tokens terminated by an EOF token

        Raises:
            LexerError: On the first character no state accepts
        """
        self.pos = 0
        self.tokens = []
        self.warnings = []

        state = LexerState.DISPATCH
        while state is not LexerState.DONE:
            state = self._handlers[state]()

        self.tokens.append(Token(TokenType.EOF, "", None, self.pos))
        logger.debug("Scanned %d tokens from %d characters", len(self.tokens), len(self.source))
        return self.tokens

    # States

    def _dispatch(self) -> LexerState:
        """Skip whitespace and pick the state for the next token."""
        while not self._at_end() and self._current().isspace():
            self._advance()

        if self._at_end():
            return LexerState.DONE

        char = self._current()
        if char.isdecimal() or char == '-':
            return LexerState.NUMBER
        if char in QUOTES:
            return LexerState.STRING
        if char.isalpha() or char == '_':
            return LexerState.IDENTIFIER
        return LexerState.DELIMITER

    def _scan_number(self) -> LexerState:
        """Scan an optionally signed integer or decimal float."""
        start = self.pos
        if self._current() == '-':
            self._advance()

        has_digits = False
        has_dot = False
        while not self._at_end():
            char = self._current()
            if char.isdecimal():
                has_digits = True
            elif char == '.' and not has_dot:
                has_dot = True
            else:
                break
            self._advance()

        lexeme = self.source[start:self.pos]
        if not has_digits:
            raise create_invalid_number_error(
                lexeme, start, "A number needs at least one digit after the sign."
            )

        value: Union[int, float]
        try:
            if has_dot:
                value = float(lexeme)
            else:
                value = int(lexeme)
        except ValueError:
            digit_count = len(lexeme.lstrip('-'))
            digit_limit = _int_digit_limit()
            if not has_dot and digit_limit and digit_count > digit_limit:
                raise create_integer_too_long_error(lexeme, start, digit_count, digit_limit)
            raise create_invalid_number_error(
                lexeme, start, "The literal cannot be converted to a number."
            )

        if isinstance(value, float) and math.isinf(value):
            raise create_number_overflow_error(lexeme, start)

        self._emit(TokenType.NUMBER, start, value)
        return LexerState.DISPATCH

    def _scan_string(self) -> LexerState:
        """Scan a quoted string, resolving escape sequences."""
        start = self.pos
        quote = self._current()
        self._advance()  # Skip opening quote

        value_parts = []
        while not self._at_end() and self._current() != quote:
            if self._current() == '\\':
                escape_pos = self.pos
                self._advance()  # Skip backslash
                if self._at_end():
                    break
                escaped_char = self._current()
                if escaped_char in ESCAPE_SEQUENCES:
                    value_parts.append(ESCAPE_SEQUENCES[escaped_char])
                else:
                    self._warn(create_unknown_escape_warning(escaped_char, escape_pos))
                    value_parts.append(escaped_char)
            else:
                value_parts.append(self._current())
            self._advance()

        if self._at_end():
            self._warn(create_unterminated_string_warning(quote, start))
        else:
            self._advance()  # Skip closing quote

        self._emit(TokenType.STRING, start, ''.join(value_parts))
        return LexerState.DISPATCH

    def _scan_identifier(self) -> LexerState:
        """Scan a bare word and resolve the True/False/None keywords."""
        start = self.pos
        while not self._at_end() and (self._current().isalnum() or self._current() == '_'):
            self._advance()

        lexeme = self.source[start:self.pos]
        token_type, value = KEYWORDS.get(lexeme, (TokenType.IDENTIFIER, lexeme))
        self._emit(token_type, start, value)
        return LexerState.DISPATCH

    def _scan_delimiter(self) -> LexerState:
        """Scan a single-character delimiter."""
        char = self._current()
        token_type = DELIMITERS.get(char)
        if token_type is None:
            raise create_invalid_character_error(char, self.pos)

        start = self.pos
        self._advance()
        self._emit(token_type, start, None)
        return LexerState.DISPATCH

    # Cursor helpers

    def _emit(self, token_type: TokenType, start: int, value) -> None:
        self.tokens.append(Token(token_type, self.source[start:self.pos], value, start))

    def _warn(self, warning: LexerWarning) -> None:
        logger.warning("%s", warning.diagnostic.message)
        self.warnings.append(warning)

    def _current(self) -> str:
        return self.source[self.pos]

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _advance(self) -> None:
        if self.pos < len(self.source):
            self.pos += 1

    def has_warnings(self) -> bool:
        """Check if the lexer recorded any warnings."""
        return len(self.warnings) > 0


def tokenize_string(source: str) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Literal text

    Returns:
        List of tokens

    Raises:
        LexerError: If scanning fails
    """
    return Lexer(source).tokenize()
