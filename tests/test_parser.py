"""
Test suite for the pyliteral parser.

Tests cover:
- The four container forms and the dict/set decision
- Trailing commas and empty containers
- Syntax errors with positions and codes
- Nesting depth limits
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from pyliteral.lexer import Token, TokenType, tokenize_string
from pyliteral.parser.errors import PARSER_ERROR_CODES
from pyliteral.parser import (
    Parser, ParserConfiguration, ParseError, parse_string, DEFAULT_MAX_DEPTH,
    Scalar, ListValue, TupleValue, SetValue, MappingValue, ValueKind, CONTAINER_KINDS
)


def _nested_lists(depth):
    return "[" * depth + "]" * depth


class TestScalars(unittest.TestCase):
    """Scalar roots."""

    def test_scalar_roots(self):
        self.assertEqual(parse_string("42"), Scalar(42))
        self.assertEqual(parse_string("'hi'"), Scalar("hi"))
        self.assertEqual(parse_string("None"), Scalar(None))
        self.assertEqual(parse_string("-2.5"), Scalar(-2.5))

    def test_bool_and_int_scalars_differ(self):
        self.assertNotEqual(parse_string("True"), Scalar(1))
        self.assertNotEqual(Scalar(False), Scalar(0))
        self.assertEqual(parse_string("True"), Scalar(True))

    def test_surrounding_whitespace(self):
        self.assertEqual(parse_string("  \n 7 \t"), Scalar(7))


class TestContainers(unittest.TestCase):
    """Lists, tuples, sets and mappings."""

    def test_list(self):
        tree = parse_string("[1, 'two', None]")
        self.assertEqual(tree, ListValue((Scalar(1), Scalar("two"), Scalar(None))))

    def test_empty_containers(self):
        self.assertEqual(parse_string("[]"), ListValue(()))
        self.assertEqual(parse_string("()"), TupleValue(()))
        self.assertEqual(parse_string("{}"), MappingValue(()))

    def test_empty_braces_are_a_mapping(self):
        self.assertEqual(parse_string("{}").kind, ValueKind.MAPPING)
        for source in ["[]", "()", "{}", "{1}"]:
            self.assertIn(parse_string(source).kind, CONTAINER_KINDS)
        self.assertNotIn(parse_string("1").kind, CONTAINER_KINDS)

    def test_parenthesized_value_is_a_tuple(self):
        tree = parse_string("(1)")
        self.assertIsInstance(tree, TupleValue)
        self.assertEqual(tree.elements, (Scalar(1),))

    def test_tuple(self):
        tree = parse_string("(1, 2, 3)")
        self.assertEqual(tree, TupleValue((Scalar(1), Scalar(2), Scalar(3))))

    def test_set(self):
        tree = parse_string("{1, 2, 3}")
        self.assertIsInstance(tree, SetValue)
        self.assertEqual(len(tree.elements), 3)

    def test_single_element_set(self):
        self.assertEqual(parse_string("{1}"), SetValue((Scalar(1),)))

    def test_set_keeps_duplicates_in_order(self):
        tree = parse_string("{3, 1, 3}")
        self.assertEqual(tree.elements, (Scalar(3), Scalar(1), Scalar(3)))

    def test_mapping(self):
        tree = parse_string("{'a': 1, 'b': [2]}")
        self.assertIsInstance(tree, MappingValue)
        self.assertEqual(tree.entries, (
            (Scalar("a"), Scalar(1)),
            (Scalar("b"), ListValue((Scalar(2),))),
        ))
        self.assertEqual(tree.keys(), (Scalar("a"), Scalar("b")))

    def test_non_string_keys(self):
        tree = parse_string("{1: 'a', None: 'b', (1, 2): 'c'}")
        self.assertEqual(tree.keys(), (
            Scalar(1), Scalar(None), TupleValue((Scalar(1), Scalar(2)))
        ))

    def test_trailing_commas(self):
        self.assertEqual(parse_string("[1, 2,]"), parse_string("[1, 2]"))
        self.assertEqual(parse_string("(1,)"), TupleValue((Scalar(1),)))
        self.assertEqual(parse_string("{1, 2,}"), parse_string("{1, 2}"))
        self.assertEqual(parse_string("{'a': 1,}"), parse_string("{'a': 1}"))

    def test_deep_nesting(self):
        tree = parse_string("{'a': [(1, {2, {'b': None}})]}")
        self.assertEqual(tree.depth(), 6)

    def test_duplicate_keys_are_kept(self):
        parser = Parser(tokenize_string("{'a': 1, 'a': 2}"))
        with self.assertLogs("pyliteral.parser.parser", level="WARNING"):
            tree = parser.parse()
        self.assertEqual(len(tree.entries), 2)
        self.assertEqual(len(parser.warnings), 1)
        self.assertEqual(parser.warnings[0].code, "W001")
        self.assertEqual(parser.warnings[0].diagnostic.position, 9)

    def test_keys_with_the_same_text_are_duplicates(self):
        parser = Parser(tokenize_string("{1: 'a', '1': 'b', True: 1, 'true': 2}"))
        with self.assertLogs("pyliteral.parser.parser", level="WARNING"):
            parser.parse()
        self.assertEqual([w.code for w in parser.warnings], ["W001", "W001"])
        self.assertEqual([w.diagnostic.position for w in parser.warnings], [9, 28])
        self.assertIn("'1'", parser.warnings[0].diagnostic.message)
        self.assertIn("'true'", parser.warnings[1].diagnostic.message)

    def test_distinct_key_text_is_not_a_duplicate(self):
        parser = Parser(tokenize_string("{1: 'a', 1.0: 'b', (1, 2): 'c', '[1, 2]': 'd'}"))
        parser.parse()
        self.assertEqual(parser.warnings, [])

    def test_container_keys_can_collide(self):
        parser = Parser(tokenize_string("{(1, 2): 'a', [1, 2]: 'b'}"))
        with self.assertLogs("pyliteral.parser.parser", level="WARNING"):
            parser.parse()
        self.assertEqual(len(parser.warnings), 1)
        self.assertEqual(parser.warnings[0].diagnostic.position, 14)

    def test_duplicate_key_warning_can_be_disabled(self):
        parser = Parser(tokenize_string("{1: 1, 1: 2}"), ParserConfiguration(warn_duplicate_keys=False))
        parser.parse()
        self.assertEqual(parser.warnings, [])

    def test_node_positions(self):
        tree = parse_string("{'a': [1]}")
        key, value = tree.entries[0]
        self.assertEqual(tree.position, 0)
        self.assertEqual(key.position, 1)
        self.assertEqual(value.position, 6)
        self.assertEqual(value.elements[0].position, 7)
        self.assertEqual(str(value), "List@6")

    def test_positions_do_not_affect_equality(self):
        self.assertEqual(parse_string("[ 1 ]"), parse_string("[1]"))


class TestSyntaxErrors(unittest.TestCase):
    """Malformed input is rejected at the first bad token."""

    def assertParseError(self, source, code, position, message=None):
        with self.assertRaises(ParseError) as ctx:
            parse_string(source)
        error = ctx.exception
        self.assertEqual(error.code, code)
        self.assertIn(code, PARSER_ERROR_CODES)
        self.assertEqual(error.position, position)
        if message is not None:
            self.assertEqual(error.message, message)
        return error

    def test_unclosed_list(self):
        error = self.assertParseError(
            "[1, 2,", "P004", 6, "Expected RIGHT_BRACKET, found EOF at position 6"
        )
        self.assertEqual(error.token.type, TokenType.EOF)

    def test_unclosed_tuple_and_braces(self):
        self.assertParseError("(", "P004", 1, "Expected RIGHT_PAREN, found EOF at position 1")
        self.assertParseError("{", "P004", 1, "Expected RIGHT_BRACE, found EOF at position 1")
        self.assertParseError("{'a': 1", "P004", 7)
        self.assertParseError("{1, 2", "P004", 5)

    def test_missing_comma(self):
        self.assertParseError("[1 2 3]", "P001", 3, "Expected RIGHT_BRACKET, found NUMBER at position 3")
        self.assertParseError("{'a': 1 'b': 2}", "P001", 8, "Expected RIGHT_BRACE, found STRING at position 8")

    def test_double_colon(self):
        self.assertParseError("{'key':: 'value'}", "P005", 7, "Expected value, found COLON at position 7")

    def test_mismatched_delimiters(self):
        self.assertParseError("([)]", "P005", 2)
        self.assertParseError("{[}]", "P005", 2)

    def test_missing_values(self):
        self.assertParseError("[,]", "P005", 1)
        self.assertParseError("[1,,2]", "P005", 3)

    def test_empty_input(self):
        self.assertParseError("", "P010", 0, "Expected value, found EOF at position 0")
        self.assertParseError("   ", "P010", 3)

    def test_trailing_content(self):
        self.assertParseError("1 2", "P001", 2, "Expected EOF, found NUMBER at position 2")
        self.assertParseError("[1] [2]", "P001", 4)

    def test_mapping_entry_without_colon(self):
        self.assertParseError("{1: 2, 3}", "P001", 8, "Expected COLON, found RIGHT_BRACE at position 8")

    def test_colon_inside_set(self):
        self.assertParseError("{1, 2: 3}", "P001", 5)

    def test_bare_word_suggests_keyword(self):
        error = self.assertParseError("[true]", "P005", 1, "Expected value, found IDENTIFIER at position 1")
        self.assertIn("Did you mean 'True'?", error.diagnostic.suggestions)

    def test_unknown_bare_word(self):
        error = self.assertParseError("[hello]", "P005", 1)
        self.assertIn("Quote bare words to make them strings", error.diagnostic.suggestions)

    def test_error_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_string("[1")

    def test_error_str_includes_code(self):
        with self.assertRaises(ParseError) as ctx:
            parse_string("]")
        self.assertIn("[P005]", str(ctx.exception))


class TestNestingLimits(unittest.TestCase):
    """Depth guard on container nesting."""

    def test_within_limit(self):
        tree = parse_string("[[[[1]]]]", ParserConfiguration(max_depth=4))
        self.assertEqual(tree.depth(), 5)

    def test_over_limit(self):
        with self.assertRaises(ParseError) as ctx:
            parse_string("[[[[1]]]]", ParserConfiguration(max_depth=3))
        error = ctx.exception
        self.assertEqual(error.code, "P013")
        self.assertEqual(error.position, 3)
        self.assertEqual(error.message, "Nesting depth 4 exceeds limit of 3 at position 3")

    def test_mixed_containers_count(self):
        with self.assertRaises(ParseError):
            parse_string("[({1: (2,)})]", ParserConfiguration(max_depth=3))

    def test_default_limit(self):
        self.assertEqual(DEFAULT_MAX_DEPTH, 200)
        tree = parse_string(_nested_lists(DEFAULT_MAX_DEPTH))
        self.assertEqual(tree.depth(), DEFAULT_MAX_DEPTH)
        with self.assertRaises(ParseError) as ctx:
            parse_string(_nested_lists(DEFAULT_MAX_DEPTH + 1))
        self.assertEqual(ctx.exception.code, "P013")

    def test_unbounded_parse_fails_cleanly(self):
        with self.assertRaises(ParseError) as ctx:
            parse_string(_nested_lists(5000), ParserConfiguration(max_depth=None))
        self.assertEqual(ctx.exception.code, "P013")


class TestParserInput(unittest.TestCase):
    """Parser construction and hand-built token lists."""

    def test_empty_token_list_rejected(self):
        with self.assertRaises(ValueError):
            Parser([])

    def test_tokens_without_eof(self):
        tokens = [
            Token(TokenType.LEFT_BRACKET, "[", None, 0),
            Token(TokenType.NUMBER, "1", 1, 1),
            Token(TokenType.RIGHT_BRACKET, "]", None, 2),
        ]
        self.assertEqual(Parser(tokens).parse(), ListValue((Scalar(1),)))

    def test_unclosed_tokens_without_eof(self):
        tokens = [Token(TokenType.LEFT_BRACKET, "[", None, 0)]
        with self.assertRaises(ParseError) as ctx:
            Parser(tokens).parse()
        self.assertEqual(ctx.exception.code, "P004")
        self.assertEqual(ctx.exception.position, 1)

    def test_parser_is_reusable(self):
        parser = Parser(tokenize_string("(1, 2)"))
        self.assertEqual(parser.parse(), parser.parse())


if __name__ == '__main__':
    unittest.main()
