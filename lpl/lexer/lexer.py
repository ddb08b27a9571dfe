"""
lpl Lexer - turns source text into a flat token stream

Single pass, one cursor, never more than one character of lookahead.
Indentation is not interpreted here: leading tabs come out as TAB tokens
and the indentation normalizer turns them into INDENT/UNINDENT later.
"""

import logging
import unicodedata
from dataclasses import dataclass, field
from typing import List, Optional, Union

from ..config import LexerConfig, DEFAULT_LEXER_CONFIG
from .tokens import (
    Token, TokenType, SourceLocation, SINGLE_CHAR_TOKENS, DECIMAL_DIGITS,
    STRING_QUOTE, TAB, SPACE
)
from .errors import (
    LexerError, LexerWarning, create_invalid_character_error,
    create_unterminated_string_error, create_unterminated_string_warning,
    create_integer_overflow_error
)

logger = logging.getLogger(__name__)

NAME_MARK_CATEGORIES = frozenset({"Mn", "Mc"})


@dataclass
class LexResult:
    """Results of lexing. The tokens are only usable when there are no errors."""
    tokens: List[Token]
    errors: List[LexerError] = field(default_factory=list)
    warnings: List[LexerWarning] = field(default_factory=list)

    def has_errors(self) -> bool:
        """Check if lexing found any errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if lexing found any warnings."""
        return len(self.warnings) > 0

    def get_diagnostics(self) -> List[Union[LexerError, LexerWarning]]:
        """Get all diagnostics (errors and warnings) in source order."""
        diagnostics: List[Union[LexerError, LexerWarning]] = self.errors + self.warnings
        return sorted(diagnostics, key=lambda d: d.diagnostic.location.offset)

    def raise_for_errors(self) -> List[Token]:
        """Return the tokens, or raise the first error encountered."""
        if self.errors:
            raise self.errors[0]
        return self.tokens


class Lexer:
    """
    lpl lexical analyzer.

    Classifies characters greedily into NAME, INT, STRING, punctuation and
    whitespace tokens. Malformed input is collected as diagnostics so one
    run reports every problem; the bad character is skipped and lexing
    continues.
    """

    def __init__(self, source: str, config: Optional[LexerConfig] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Complete source text, already read into memory
            config: Lexer options (filename, integer width, string strictness)
        """
        self.source = source
        self.config = config or DEFAULT_LEXER_CONFIG
        self.filename = self.config.filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []
        self.warnings: List[LexerWarning] = []

    def tokenize(self) -> LexResult:
        """
        Tokenize the entire source code.

        Returns:
            LexResult holding a fresh token list and the diagnostics
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []
        self.errors = []
        self.warnings = []

        while self.pos < len(self.source):
            start_pos = self.pos
            try:
                token = self._next_token()
                if token:
                    self.tokens.append(token)
            except LexerError as e:
                logger.debug("%s", e.diagnostic.message)
                self.errors.append(e)
                # Skip the offending character unless the scan already moved past it
                if self.pos == start_pos:
                    self._advance()

        logger.debug(
            "Lexed %s: %d tokens, %d errors, %d warnings",
            self.filename, len(self.tokens), len(self.errors), len(self.warnings)
        )
        return LexResult(self.tokens, self.errors, self.warnings)

    def _next_token(self) -> Optional[Token]:
        """Get the next token from the source, or None if nothing was produced."""
        current_char = self.source[self.pos]

        if current_char.isalpha() or current_char == '_':
            return self._tokenize_name()

        if current_char in DECIMAL_DIGITS:
            return self._tokenize_int()

        if current_char in SINGLE_CHAR_TOKENS:
            self._advance()
            return SINGLE_CHAR_TOKENS[current_char]

        if current_char == ' ':
            # Two spaces make one indentation unit; a third starts over
            self._advance()
            if self._current() == ' ':
                self._advance()
                return TAB
            return SPACE

        if current_char == STRING_QUOTE:
            return self._tokenize_string()

        raise create_invalid_character_error(current_char, self._location())

    def _tokenize_name(self) -> Token:
        """Tokenize a name: a letter or underscore, then letters, digits and underscores."""
        start_pos = self.pos
        self._advance()

        while self.pos < len(self.source) and self._is_name_continue(self.source[self.pos]):
            self._advance()

        return Token(TokenType.NAME, self.source[start_pos:self.pos])

    def _tokenize_int(self) -> Token:
        """Tokenize a decimal integer literal."""
        location = self._location()
        start_pos = self.pos

        while self.pos < len(self.source) and self.source[self.pos] in DECIMAL_DIGITS:
            self._advance()

        digits = self.source[start_pos:self.pos]
        limit = self.config.int_max
        # Length check first: int() refuses very long digit strings
        significant = digits.lstrip('0')
        if len(significant) > len(str(limit)):
            raise create_integer_overflow_error(digits, limit, location)

        value = int(significant or '0')
        if value > limit:
            raise create_integer_overflow_error(digits, limit, location)

        return Token(TokenType.INT, value)

    def _tokenize_string(self) -> Optional[Token]:
        """
        Tokenize a quoted string literal.

        A literal may not span lines. If the line or the input ends before
        the closing quote, no token is produced and the newline is left for
        the next token.
        """
        location = self._location()
        self._advance()  # Skip opening quote
        start_pos = self.pos

        while self.pos < len(self.source) and self.source[self.pos] not in (STRING_QUOTE, '\n'):
            self._advance()

        text = self.source[start_pos:self.pos]

        if self._current() != STRING_QUOTE:
            if self.config.strict_strings:
                raise create_unterminated_string_error(text, location)
            warning = create_unterminated_string_warning(text, location)
            logger.warning("%s: %s", location, warning.diagnostic.message)
            self.warnings.append(warning)
            return None

        self._advance()  # Skip closing quote
        return Token(TokenType.STRING, text)

    def _is_name_continue(self, char: str) -> bool:
        # Combining marks (vowel signs, accents) continue a name
        return char.isalnum() or char == '_' or unicodedata.category(char) in NAME_MARK_CATEGORIES

    def _current(self) -> Optional[str]:
        """Character under the cursor, or None at end of input."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return None

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if lexer encountered any warnings."""
        return len(self.warnings) > 0


def tokenize(source: str, config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        config: Lexer options

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, config).tokenize().raise_for_errors()
