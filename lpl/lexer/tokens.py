"""
Token definitions for the lpl lexer.

This module defines the token types produced by the front end:
- Literals (names, integers, strings)
- Punctuation and whitespace markers
- Structural markers inserted by the indentation normalizer

Tokens deliberately carry no source position. Two tokens are equal when
their type and value are equal, which keeps expected streams in tests
and in the future parser short to write.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Iterable, List


class TokenType(Enum):
    """
    Enumeration of all token types in lpl.
    """
    
    # ========================================================================
    # Literals
    # ========================================================================
    NAME = auto()                   # foo, _bar, x1
    INT = auto()                    # 42
    STRING = auto()                 # 'hello'
    
    # ========================================================================
    # Punctuation
    # ========================================================================
    COLON = auto()                  # :
    SLASH = auto()                  # /
    
    # ========================================================================
    # Whitespace
    # ========================================================================
    TAB = auto()                    # \t or two spaces
    SPACE = auto()                  # single space
    NEWLINE = auto()                # \n
    
    # ========================================================================
    # Structural markers (normalizer output only)
    # ========================================================================
    INDENT = auto()                 # indentation increase
    UNINDENT = auto()               # indentation decrease


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.
    
    Only diagnostics carry locations; tokens do not.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input
    
    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"
    
    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the lpl language.
    
    ``value`` holds the text of a NAME or STRING and the integer of an INT.
    It is None for every other token type.
    """
    type: TokenType
    value: Any = None
    
    @classmethod
    def name(cls, text: str) -> "Token":
        return cls(TokenType.NAME, text)
    
    @classmethod
    def integer(cls, value: int) -> "Token":
        return cls(TokenType.INT, value)
    
    @classmethod
    def string(cls, text: str) -> "Token":
        return cls(TokenType.STRING, text)
    
    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.value!r})"
        return self.type.name
    
    def __repr__(self) -> str:
        if self.value is not None:
            return f"Token({self.type.name}, {self.value!r})"
        return f"Token({self.type.name})"
    
    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERAL_TYPES
    
    @property
    def is_whitespace(self) -> bool:
        """Check if this token is a tab, space or newline."""
        return self.type in WHITESPACE_TYPES
    
    @property
    def is_structural(self) -> bool:
        """Check if this token was inserted by the indentation normalizer."""
        return self.type in STRUCTURAL_TYPES


LITERAL_TYPES = frozenset({TokenType.NAME, TokenType.INT, TokenType.STRING})
WHITESPACE_TYPES = frozenset({TokenType.TAB, TokenType.SPACE, TokenType.NEWLINE})
STRUCTURAL_TYPES = frozenset({TokenType.INDENT, TokenType.UNINDENT})

# Shared instances of the valueless tokens
COLON = Token(TokenType.COLON)
SLASH = Token(TokenType.SLASH)
TAB = Token(TokenType.TAB)
SPACE = Token(TokenType.SPACE)
NEWLINE = Token(TokenType.NEWLINE)
INDENT = Token(TokenType.INDENT)
UNINDENT = Token(TokenType.UNINDENT)

# Single characters that map straight to a token.
# Space is not here because it needs one character of lookahead.
SINGLE_CHAR_TOKENS = {
    ":": COLON,
    "/": SLASH,
    "\t": TAB,
    "\n": NEWLINE,
}

DECIMAL_DIGITS = frozenset("0123456789")
STRING_QUOTE = "'"


def format_tokens(tokens: Iterable[Token], indent: str = "    ") -> str:
    """Render a token stream one line per source line, nested by INDENT/UNINDENT."""
    lines = []
    current: List[Token] = []
    depth = 0
    for token in tokens:
        if token.type == TokenType.INDENT:
            depth += 1
        elif token.type == TokenType.UNINDENT:
            depth = max(depth - 1, 0)
        elif token.type == TokenType.NEWLINE:
            lines.append(indent * depth + " ".join(str(t) for t in current))
            current = []
        else:
            current.append(token)
    if current:
        lines.append(indent * depth + " ".join(str(t) for t in current))
    return "\n".join(lines)
