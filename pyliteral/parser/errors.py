"""
Error handling for the pyliteral parser.

Syntax errors name the expected token kind, the token actually found and
its source offset. Parsing stops at the first error; there is no
resynchronization.
"""

from typing import Optional, List, Union

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic, DiagnosticError, ErrorRecovery


class ParseError(DiagnosticError):
    """
    Exception raised when the parser encounters a syntax error.

    Keeps the offending token next to the diagnostic.
    """

    def __init__(
        self,
        message: str,
        position: int,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(
            message,
            position,
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token


class ParseWarning:
    """
    Represents a parser observation that doesn't stop parsing.
    """

    def __init__(
        self,
        message: str,
        position: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            position=position,
            severity="warning",
            code=code,
            help_text=help_text
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class SyntaxErrorRecovery:
    """Suggestion helpers for syntax errors."""

    @staticmethod
    def suggest_missing_token(expected: TokenType, found: Optional[Token]) -> List[str]:
        """Suggest what token might be missing."""
        token_suggestions = {
            TokenType.RIGHT_BRACKET: ["Add a closing bracket ']'", "Separate list elements with ','"],
            TokenType.RIGHT_PAREN: ["Add a closing parenthesis ')'", "Separate tuple elements with ','"],
            TokenType.RIGHT_BRACE: ["Add a closing brace '}'", "Separate entries with ','"],
            TokenType.COLON: ["Add a colon ':' between key and value"],
            TokenType.EOF: ["Wrap multiple values in a list, tuple or set"],
        }

        return list(token_suggestions.get(expected, []))

    @staticmethod
    def suggest_value_start(found: Token) -> List[str]:
        """Suggest literal spellings for a token that cannot start a value."""
        if found.type == TokenType.IDENTIFIER:
            return [f"Did you mean '{keyword}'?"
                    for keyword in ErrorRecovery.suggest_keyword_corrections(found.lexeme)] or \
                   ["Quote bare words to make them strings"]
        return []


PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P004": "Unclosed delimiter",
    "P005": "Invalid value",
    "P010": "Unexpected end of input",
    "P013": "Nesting too deep",
    "W001": "Duplicate mapping key",
}


def _kind_name(kind: Union[TokenType, str]) -> str:
    return kind.name if isinstance(kind, TokenType) else kind


def create_unexpected_token_error(expected: Union[TokenType, str], found: Token) -> ParseError:
    """Create an error for an unexpected token."""
    expected_str = _kind_name(expected)
    found_str = found.type.name

    suggestions = SyntaxErrorRecovery.suggest_missing_token(expected, found) if isinstance(expected, TokenType) else []

    return ParseError(
        message=f"Expected {expected_str}, found {found_str} at position {found.position}",
        position=found.position,
        token=found,
        code="P001",
        help_text=f"The parser expected to see {expected_str} at this position, but found {found_str} instead.",
        suggestions=suggestions
    )


def create_unclosed_delimiter_error(expected: TokenType, opening: Token, found: Token) -> ParseError:
    """Create an error for a container still open at the end of input."""
    return ParseError(
        message=f"Expected {expected.name}, found {found.type.name} at position {found.position}",
        position=found.position,
        token=found,
        code="P004",
        help_text=f"The opening '{opening.lexeme}' at position {opening.position} was never closed.",
        suggestions=SyntaxErrorRecovery.suggest_missing_token(expected, found)
    )


def create_invalid_value_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start a value."""
    if found.type == TokenType.EOF:
        return ParseError(
            message=f"Expected value, found EOF at position {found.position}",
            position=found.position,
            token=found,
            code="P010",
            help_text="The input ended where a value was expected.",
        )

    return ParseError(
        message=f"Expected value, found {found.type.name} at position {found.position}",
        position=found.position,
        token=found,
        code="P005",
        help_text="A value is a number, string, True, False, None, or a bracketed, braced or parenthesized container.",
        suggestions=SyntaxErrorRecovery.suggest_value_start(found)
    )


def create_nesting_too_deep_error(depth: int, limit: int, token: Token) -> ParseError:
    """Create an error for input nested past the configured limit."""
    return ParseError(
        message=f"Nesting depth {depth} exceeds limit of {limit} at position {token.position}",
        position=token.position,
        token=token,
        code="P013",
        help_text="Raise ParserConfiguration.max_depth to accept deeper input.",
    )


def create_duplicate_key_warning(key_text: str, position: int) -> ParseWarning:
    """Note a mapping key that repeats an earlier one."""
    return ParseWarning(
        message=f"Duplicate mapping key {key_text} at position {position}",
        position=position,
        code="W001",
        help_text="Converters keep the last value written for a key.",
    )
