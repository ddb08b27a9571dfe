"""
lpl Lexer Package

Implements the two front-end passes of the lpl language:

- Lexer: source text to a flat token stream
- Indentation normalizer: leading TAB runs to INDENT/UNINDENT markers

Both passes collect diagnostics into a result object; the ``tokenize`` and
``normalize`` shortcuts raise the first error instead.
"""

from .tokens import Token, TokenType, SourceLocation, format_tokens
from .lexer import Lexer, LexResult, tokenize
from .indentation import IndentationNormalizer, NormalizeResult, iter_normalized, normalize
from .errors import Diagnostic, LplError, LexerError, LexerWarning, NormalizerError

__all__ = [
    "Lexer",
    "LexResult",
    "tokenize",
    "IndentationNormalizer",
    "NormalizeResult",
    "iter_normalized",
    "normalize",
    "Token",
    "TokenType",
    "SourceLocation",
    "format_tokens",
    "Diagnostic",
    "LplError",
    "LexerError",
    "LexerWarning",
    "NormalizerError",
]
