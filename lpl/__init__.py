"""
lpl Compiler Package

Front end of lpl, a small indentation-sensitive language.

Architecture:
    lpl/
    ├── config.py        # Lexer and normalizer options
    ├── lexer/           # Tokenization and indentation normalization
    └── parser/          # Syntax tree contract (parser not written yet)

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from typing import List, Optional

from .config import LexerConfig, NormalizerConfig
from .lexer import (
    Lexer, IndentationNormalizer, Token, TokenType,
    LplError, LexerError, NormalizerError, tokenize, normalize
)


def lex_source(
    source: str,
    lexer_config: Optional[LexerConfig] = None,
    normalizer_config: Optional[NormalizerConfig] = None
) -> List[Token]:
    """
    Run both front-end passes over ``source``.

    Raises:
        LexerError: If the source cannot be tokenized
        NormalizerError: If a line lacks its trailing newline
    """
    if normalizer_config is None and lexer_config is not None:
        normalizer_config = NormalizerConfig(filename=lexer_config.filename)
    return normalize(tokenize(source, lexer_config), normalizer_config)


__all__ = [
    # Core classes
    "Lexer",
    "IndentationNormalizer",
    "LexerConfig",
    "NormalizerConfig",
    "Token",
    "TokenType",

    # Errors
    "LplError",
    "LexerError",
    "NormalizerError",

    # Pipeline
    "tokenize",
    "normalize",
    "lex_source",

    # Version info
    "__version__",
    "__license__",
]
