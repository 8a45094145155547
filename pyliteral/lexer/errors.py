"""
Error handling for the pyliteral scanner.

Provides diagnostics with source offsets, keyword suggestions for
misspelled literals, and helpers for the common scan errors.
"""

from typing import Optional, List
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings)."""
    message: str
    position: int
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}"
        if self.code:
            result += f" [{self.code}]"

        if self.help_text:
            result += f"\n  help: {self.help_text}"

        if self.suggestions:
            result += "\n  suggestions:"
            for suggestion in self.suggestions:
                result += f"\n    - {suggestion}"

        return result


class DiagnosticError(ValueError):
    """
    Base exception for every fatal pipeline failure.

    Scan and syntax errors both derive from it so callers can handle the
    whole pipeline with a single ``except`` clause.
    """

    def __init__(
        self,
        message: str,
        position: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.position = position
        self.diagnostic = Diagnostic(
            message=message,
            position=position,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerError(DiagnosticError):
    """Exception raised when the scanner meets an unrecognized character."""


class LexerWarning:
    """
    Represents a lexer leniency that doesn't stop scanning.
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


class ErrorRecovery:
    """
    Suggestion helpers for diagnostics.

    Nothing here resumes scanning or parsing; the helpers only enrich the
    message of the error that aborts the call.
    """

    # Spellings borrowed from other literal syntaxes
    KEYWORD_ALIASES = {
        "true": "True",
        "false": "False",
        "null": "None",
        "nil": "None",
        "none": "None",
    }

    @staticmethod
    def suggest_keyword_corrections(invalid_word: str) -> List[str]:
        """Suggest keyword spellings for a bare word using edit distance."""
        from .tokens import KEYWORDS

        alias = ErrorRecovery.KEYWORD_ALIASES.get(invalid_word.lower())
        if alias:
            return [alias]

        suggestions = []
        for keyword in KEYWORDS.keys():
            distance = ErrorRecovery._edit_distance(invalid_word.lower(), keyword.lower())
            if distance <= 2:
                suggestions.append(keyword)

        return sorted(suggestions, key=lambda k: ErrorRecovery._edit_distance(invalid_word.lower(), k.lower()))[:3]

    @staticmethod
    def _edit_distance(s1: str, s2: str) -> int:
        """Calculate Levenshtein distance between two strings."""
        if len(s1) < len(s2):
            return ErrorRecovery._edit_distance(s2, s1)

        if len(s2) == 0:
            return len(s1)

        previous_row = list(range(len(s2) + 1))
        for i, c1 in enumerate(s1):
            current_row = [i + 1]
            for j, c2 in enumerate(s2):
                insertions = previous_row[j + 1] + 1
                deletions = current_row[j] + 1
                substitutions = previous_row[j] + (c1 != c2)
                current_row.append(min(insertions, deletions, substitutions))
            previous_row = current_row

        return previous_row[-1]


ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Unterminated string literal",
    "L003": "Invalid numeric literal",
    "L006": "Unknown escape sequence",
    "L007": "Number literal overflow",
    "L008": "Integer literal too long",
}


def create_invalid_character_error(char: str, position: int) -> LexerError:
    """Create an error for a character no state accepts."""
    if char.isprintable():
        help_text = f"The character '{char}' cannot start a literal or delimiter."
    else:
        help_text = f"Non-printable character (U+{ord(char):04X}) is not allowed outside strings."

    return LexerError(
        message=f"Unexpected character '{char}' (U+{ord(char):04X}, code {ord(char)}) at position {position}",
        position=position,
        code="L001",
        help_text=help_text,
    )


def create_invalid_number_error(lexeme: str, position: int, reason: str) -> LexerError:
    """Create an error for an invalid numeric literal."""
    return LexerError(
        message=f"Invalid numeric literal '{lexeme}' at position {position}",
        position=position,
        code="L003",
        help_text=reason,
    )


def create_number_overflow_error(lexeme: str, position: int) -> LexerError:
    """Create an error for a float literal too large to represent."""
    shown = lexeme if len(lexeme) <= 24 else lexeme[:21] + "..."
    return LexerError(
        message=f"Numeric literal '{shown}' overflows at position {position}",
        position=position,
        code="L007",
        help_text="Floating-point literals must be finite.",
    )


def create_integer_too_long_error(lexeme: str, position: int, digits: int, limit: int) -> LexerError:
    """Create an error for an integer longer than the interpreter converts."""
    shown = lexeme if len(lexeme) <= 24 else lexeme[:21] + "..."
    return LexerError(
        message=f"Integer literal '{shown}' has {digits} digits, over the limit of {limit} at position {position}",
        position=position,
        code="L008",
        help_text="See sys.set_int_max_str_digits to raise the interpreter's limit.",
    )


def create_unterminated_string_warning(quote: str, position: int) -> LexerWarning:
    """Warn about a string cut short by the end of input."""
    return LexerWarning(
        message=f"Unterminated string literal starting at position {position}",
        position=position,
        code="L002",
        help_text=f"The content up to the end of input was kept; add a closing {quote} quote.",
    )


def create_unknown_escape_warning(char: str, position: int) -> LexerWarning:
    """Warn about an escape sequence passed through literally."""
    return LexerWarning(
        message=f"Unknown escape sequence '\\{char}' at position {position}",
        position=position,
        code="L006",
        help_text=f"The character '{char}' was kept without the backslash.",
    )
