"""
pyliteral Recursive Descent Parser

One method per grammar production with a single token of lookahead,
except after the first value inside braces where the next token decides
between a mapping and a set:

    Value      := Scalar | List | Tuple | DictOrSet
    Scalar     := NUMBER | STRING | BOOLEAN | NULL
    List       := '[' (Value (',' Value)*)? ','? ']'
    Tuple      := '(' (Value (',' Value)*)? ','? ')'
    DictOrSet  := '{' '}'
                | '{' Value ':' Value (',' Value ':' Value)* ','? '}'
                | '{' Value (',' Value)* ','? '}'
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Set, Tuple

from ..lexer.tokens import Token, TokenType
from .value_tree import (
    Value, Scalar, ListValue, TupleValue, SetValue, MappingValue
)
from .errors import (
    ParseError, ParseWarning, create_unexpected_token_error,
    create_unclosed_delimiter_error, create_invalid_value_error,
    create_nesting_too_deep_error, create_duplicate_key_warning
)

logger = logging.getLogger(__name__)

# Three parser frames per nesting level keeps this well inside the
# interpreter's default recursion limit of 1000.
DEFAULT_MAX_DEPTH = 200


@dataclass
class ParserConfiguration:
    """Configuration for the parser"""
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH  # None disables the guard
    warn_duplicate_keys: bool = True


class Parser:
    """
    Recursive descent parser for the object-literal dialect.

    Builds one Value Tree from a token list. The first syntax error
    aborts the parse; nothing partial is returned.
    """

    def __init__(self, tokens: List[Token], configuration: Optional[ParserConfiguration] = None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer, normally EOF-terminated
            configuration: Depth limit and warning switches
        """
        if not tokens:
            raise ValueError("Token list cannot be empty")
        self.tokens = tokens
        self.configuration = configuration or ParserConfiguration()
        self.current = 0
        self.depth = 0
        self.warnings: List[ParseWarning] = []

        self._container_parsers: Dict[TokenType, Callable[[], Value]] = {
            TokenType.LEFT_BRACKET: self._parse_list,
            TokenType.LEFT_PAREN: self._parse_tuple,
            TokenType.LEFT_BRACE: self._parse_dict_or_set,
        }

    def parse(self) -> Value:
        """
        Parse the token list into a single value.

        Returns:
            Root of the Value Tree

        Raises:
            ParseError: On the first token that does not fit the grammar
        """
        self.current = 0
        self.depth = 0
        self.warnings = []

        try:
            root = self._parse_value()
        except RecursionError:
            raise ParseError(
                message=f"Nesting too deep for the interpreter at position {self._peek().position}",
                position=self._peek().position,
                token=self._peek(),
                code="P013",
                help_text="Lower the nesting of the input or configure a max_depth.",
            )

        self._consume(TokenType.EOF)
        logger.debug("Parsed %s from %d tokens", root.kind.value, len(self.tokens))
        return root

    # Productions

    def _parse_value(self) -> Value:
        """Parse any value, dispatching on the current token."""
        token = self._peek()

        if token.is_scalar:
            self._advance()
            return Scalar(token.value, token.position)

        container_parser = self._container_parsers.get(token.type)
        if container_parser is None:
            raise create_invalid_value_error(token)
        return container_parser()

    def _parse_list(self) -> ListValue:
        """Parse '[' elements ']'."""
        opening = self._consume(TokenType.LEFT_BRACKET)
        self._enter(opening)
        elements = self._parse_elements(TokenType.RIGHT_BRACKET, opening)
        self.depth -= 1
        return ListValue(tuple(elements), opening.position)

    def _parse_tuple(self) -> TupleValue:
        """Parse '(' elements ')'."""
        opening = self._consume(TokenType.LEFT_PAREN)
        self._enter(opening)
        elements = self._parse_elements(TokenType.RIGHT_PAREN, opening)
        self.depth -= 1
        return TupleValue(tuple(elements), opening.position)

    def _parse_dict_or_set(self) -> Value:
        """
        Parse a braced container.

        '{}' is an empty mapping. Otherwise the token after the first
        value decides: ':' commits to a mapping, anything else to a set.
        """
        opening = self._consume(TokenType.LEFT_BRACE)
        self._enter(opening)

        result: Value
        if self._match(TokenType.RIGHT_BRACE):
            result = MappingValue((), opening.position)
        elif self._check(TokenType.EOF):
            raise create_unclosed_delimiter_error(TokenType.RIGHT_BRACE, opening, self._peek())
        else:
            first = self._parse_value()
            if self._check(TokenType.COLON):
                result = self._parse_mapping_rest(first, opening)
            else:
                result = self._parse_set_rest(first, opening)

        self.depth -= 1
        return result

    def _parse_mapping_rest(self, first_key: Value, opening: Token) -> MappingValue:
        """Finish a mapping whose first key is already parsed."""
        self._consume(TokenType.COLON)
        entries: List[Tuple[Value, Value]] = [(first_key, self._parse_value())]

        while self._match(TokenType.COMMA):
            if self._at_closing(TokenType.RIGHT_BRACE):
                break
            key = self._parse_value()
            self._consume(TokenType.COLON)
            entries.append((key, self._parse_value()))

        self._consume_closing(TokenType.RIGHT_BRACE, opening)

        if self.configuration.warn_duplicate_keys:
            self._check_duplicate_keys(entries)
        return MappingValue(tuple(entries), opening.position)

    def _parse_set_rest(self, first: Value, opening: Token) -> SetValue:
        """Finish a set whose first element is already parsed."""
        elements = [first]

        while self._match(TokenType.COMMA):
            if self._at_closing(TokenType.RIGHT_BRACE):
                break
            elements.append(self._parse_value())

        self._consume_closing(TokenType.RIGHT_BRACE, opening)
        return SetValue(tuple(elements), opening.position)

    def _parse_elements(self, closing: TokenType, opening: Token) -> List[Value]:
        """Parse comma-separated values up to and including the closing delimiter."""
        elements: List[Value] = []

        if not self._at_closing(closing):
            elements.append(self._parse_value())
            while self._match(TokenType.COMMA):
                if self._at_closing(closing):
                    break  # Trailing comma
                elements.append(self._parse_value())

        self._consume_closing(closing, opening)
        return elements

    # Utility methods

    def _enter(self, opening: Token):
        """Track nesting depth for a container that was just opened."""
        self.depth += 1
        limit = self.configuration.max_depth
        if limit is not None and self.depth > limit:
            raise create_nesting_too_deep_error(self.depth, limit, opening)

    def _check_duplicate_keys(self, entries: List[Tuple[Value, Value]]):
        """Warn about keys that land on an earlier key once converted, e.g. 1 and '1'."""
        from ..converters.json_converter import JsonConverter, key_to_text

        converter = JsonConverter()
        seen: Set[str] = set()
        for key, _ in entries:
            key_text = key_to_text(key.accept(converter))
            if key_text in seen:
                warning = create_duplicate_key_warning(repr(key_text), key.position)
                logger.warning("%s", warning.diagnostic.message)
                self.warnings.append(warning)
            seen.add(key_text)

    def _at_closing(self, closing: TokenType) -> bool:
        """
        Check for the end of a container's element list.

        EOF also ends the list so the error names the missing delimiter
        rather than a missing value.
        """
        return self._check(closing) or self._check(TokenType.EOF)

    def _consume_closing(self, closing: TokenType, opening: Token) -> Token:
        if self._check(closing):
            return self._advance()
        if self._check(TokenType.EOF):
            raise create_unclosed_delimiter_error(closing, opening, self._peek())
        raise create_unexpected_token_error(closing, self._peek())

    def _match(self, token_type: TokenType) -> bool:
        """Check if current token matches type and consume if so."""
        if self._check(token_type):
            self._advance()
            return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token. EOF is never stepped past."""
        token = self._peek()
        if token.type != TokenType.EOF:
            self.current += 1
        return token

    def _peek(self) -> Token:
        """Return current token without consuming."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        # Token lists built by hand may lack the EOF terminator
        last = self.tokens[-1]
        return Token(TokenType.EOF, "", None, last.position + len(last.lexeme))

    def _consume(self, token_type: TokenType) -> Token:
        """Consume token of expected type or raise error."""
        if self._check(token_type):
            return self._advance()
        raise create_unexpected_token_error(token_type, self._peek())


def parse_string(source: str, configuration: Optional[ParserConfiguration] = None) -> Value:
    """
    Convenience function to parse a source string.

    Args:
        source: Literal text
        configuration: Parser configuration

    Returns:
        Root of the Value Tree

    Raises:
        LexerError: If scanning fails
        ParseError: If parsing fails
    """
    from ..lexer import tokenize_string

    tokens = tokenize_string(source)
    parser = Parser(tokens, configuration)
    return parser.parse()
