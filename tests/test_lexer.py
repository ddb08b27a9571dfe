"""
Test suite for the lpl lexer.

Tests cover:
- Character classification and dispatch precedence
- Double-space folding into TAB
- String literals, terminated and unterminated
- Fatal conditions (unknown characters, integer overflow)
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lpl.config import LexerConfig
from lpl.lexer.lexer import Lexer, tokenize
from lpl.lexer.tokens import (
    Token, TokenType, COLON, SLASH, TAB, SPACE, NEWLINE
)
from lpl.lexer.errors import LexerError


class TestLexer(unittest.TestCase):
    """Test cases for well-formed input."""

    def test_empty_input(self):
        self.assertEqual(tokenize(""), [])

    def test_block_header(self):
        """Test the two-line block example."""
        tokens = tokenize("x:\n\ty:\n")

        self.assertEqual(tokens, [
            Token.name("x"), COLON, NEWLINE,
            TAB, Token.name("y"), COLON, NEWLINE,
        ])

    def test_names(self):
        tokens = tokenize("foo _bar x1 snake_case2")

        self.assertEqual(tokens, [
            Token.name("foo"), SPACE,
            Token.name("_bar"), SPACE,
            Token.name("x1"), SPACE,
            Token.name("snake_case2"),
        ])

    def test_unicode_name(self):
        self.assertEqual(tokenize("über"), [Token.name("über")])

    def test_combining_marks_continue_name(self):
        self.assertEqual(tokenize("a\u0345b"), [Token.name("a\u0345b")])
        self.assertEqual(tokenize("\u0915\u093f"), [Token.name("\u0915\u093f")])

    def test_combining_mark_cannot_start_name(self):
        with self.assertRaises(LexerError):
            tokenize("\u0345a")

    def test_integer(self):
        tokens = tokenize("42 007")

        self.assertEqual(tokens, [Token.integer(42), SPACE, Token.integer(7)])
        self.assertIsInstance(tokens[0].value, int)

    def test_digits_then_letters_split(self):
        """A digit cannot start a name, so the run is split."""
        self.assertEqual(tokenize("12ab"), [Token.integer(12), Token.name("ab")])

    def test_name_absorbs_digits(self):
        self.assertEqual(tokenize("ab12"), [Token.name("ab12")])

    def test_punctuation(self):
        self.assertEqual(tokenize("a/b:"), [Token.name("a"), SLASH, Token.name("b"), COLON])

    def test_tab_character(self):
        self.assertEqual(tokenize("\t\t"), [TAB, TAB])

    def test_single_space(self):
        self.assertEqual(tokenize(" "), [SPACE])

    def test_two_spaces_fold_to_one_tab(self):
        self.assertEqual(tokenize("  "), [TAB])

    def test_three_spaces(self):
        """Folding is not recursive: the third space stays a SPACE."""
        self.assertEqual(tokenize("   "), [TAB, SPACE])

    def test_four_spaces(self):
        self.assertEqual(tokenize("    "), [TAB, TAB])

    def test_string_literal(self):
        self.assertEqual(tokenize("'ab'\n"), [Token.string("ab"), NEWLINE])

    def test_empty_string_literal(self):
        self.assertEqual(tokenize("''"), [Token.string("")])

    def test_string_keeps_inner_characters(self):
        """Characters that would be errors outside a literal are fine inside one."""
        self.assertEqual(tokenize("'a @ b'"), [Token.string("a @ b")])

    def test_token_types(self):
        tokens = tokenize("name 1 'text'")
        types = [token.type for token in tokens]

        self.assertEqual(types, [
            TokenType.NAME, TokenType.SPACE,
            TokenType.INT, TokenType.SPACE,
            TokenType.STRING,
        ])

    def test_never_produces_structural_tokens(self):
        tokens = tokenize("a:\n\t\tb\n  c\n")

        self.assertFalse(any(token.is_structural for token in tokens))

    def test_largest_int(self):
        self.assertEqual(tokenize("2147483647"), [Token.integer(2147483647)])

    def test_wider_int_config(self):
        config = LexerConfig(int_bits=64)

        self.assertEqual(tokenize("2147483648", config), [Token.integer(2147483648)])

    def test_tokenize_is_repeatable(self):
        lexer = Lexer("a\n")
        first = lexer.tokenize()
        second = lexer.tokenize()

        self.assertEqual(first.tokens, second.tokens)
        self.assertIsNot(first.tokens, second.tokens)


class TestLexerErrors(unittest.TestCase):
    """Test cases for malformed input."""

    def test_unknown_character_raises(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize("@")

        self.assertEqual(ctx.exception.code, "L001")

    def test_unknown_character_location(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize("ab\ncd #", LexerConfig(filename="main.lpl"))

        location = ctx.exception.location
        self.assertEqual(location.filename, "main.lpl")
        self.assertEqual(location.line, 2)
        self.assertEqual(location.column, 4)
        self.assertEqual(location.offset, 6)

    def test_carriage_return_is_unknown(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize("a\r\n")

        self.assertIn("LF", ctx.exception.diagnostic.help_text)

    def test_errors_collected_in_result(self):
        """The lexer reports every bad character in one run."""
        lexer = Lexer("a @ b # c")
        result = lexer.tokenize()

        self.assertTrue(result.has_errors())
        self.assertTrue(lexer.has_errors())
        self.assertFalse(lexer.has_warnings())
        self.assertEqual([e.code for e in result.errors], ["L001", "L001"])
        with self.assertRaises(LexerError):
            result.raise_for_errors()

    def test_integer_overflow(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize("2147483648")

        self.assertEqual(ctx.exception.code, "L007")

    def test_very_long_integer_overflow(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize("9" * 5000)

        self.assertEqual(ctx.exception.code, "L007")

    def test_leading_zeros_do_not_overflow(self):
        self.assertEqual(tokenize("0" * 20 + "5"), [Token.integer(5)])

    def test_many_leading_zeros(self):
        """Zero padding longer than int() accepts is still a valid literal."""
        self.assertEqual(tokenize("0" * 5000 + "5"), [Token.integer(5)])

        result = Lexer("0" * 5000 + "7\n").tokenize()
        self.assertFalse(result.has_errors())
        self.assertEqual(result.tokens, [Token.integer(7), NEWLINE])

    def test_all_zeros(self):
        self.assertEqual(tokenize("0000"), [Token.integer(0)])

    def test_overflow_consumes_whole_literal(self):
        result = Lexer("99999999999 x\n").tokenize()

        self.assertEqual(len(result.errors), 1)
        self.assertEqual(result.tokens, [SPACE, Token.name("x"), NEWLINE])


class TestUnterminatedStrings(unittest.TestCase):
    """Unterminated literals are skipped with a warning by default."""

    def test_unterminated_before_newline(self):
        result = Lexer("'ab\n").tokenize()

        self.assertEqual(result.tokens, [NEWLINE])
        self.assertFalse(result.has_errors())
        self.assertTrue(result.has_warnings())
        self.assertEqual(result.warnings[0].code, "L002")

    def test_unterminated_at_end_of_input(self):
        result = Lexer("x 'ab").tokenize()

        self.assertEqual(result.tokens, [Token.name("x"), SPACE])
        self.assertEqual(len(result.warnings), 1)

    def test_unterminated_is_logged(self):
        with self.assertLogs("lpl.lexer.lexer", level="WARNING") as logs:
            tokenize("'ab\n")

        self.assertIn("Unclosed string literal", logs.output[0])

    def test_lexing_continues_on_next_line(self):
        tokens = tokenize("'ab\nc\n")

        self.assertEqual(tokens, [NEWLINE, Token.name("c"), NEWLINE])

    def test_strict_strings(self):
        config = LexerConfig(strict_strings=True)

        with self.assertRaises(LexerError) as ctx:
            tokenize("'ab\n", config)

        self.assertEqual(ctx.exception.code, "L002")

    def test_diagnostics_include_warnings(self):
        result = Lexer("'a\n@\n").tokenize()

        codes = [d.code for d in result.get_diagnostics()]
        self.assertEqual(codes, ["L002", "L001"])


if __name__ == '__main__':
    unittest.main()
