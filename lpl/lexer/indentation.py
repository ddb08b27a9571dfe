"""
Indentation normalizer - rewrites leading TAB runs as INDENT/UNINDENT

The lexer leaves indentation as plain TAB tokens. This pass works line by
line: it counts the TAB tokens that open a line, moves the running block
level to that count by emitting INDENT or UNINDENT markers (as many as the
jump needs), and copies the rest of the line through untouched.

Every line must end in NEWLINE, including the last one.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

from ..config import NormalizerConfig, DEFAULT_NORMALIZER_CONFIG
from .tokens import Token, TokenType, SourceLocation, INDENT, UNINDENT
from .errors import NormalizerError, create_missing_newline_error

logger = logging.getLogger(__name__)


def iter_normalized(
    tokens: Sequence[Token],
    close_blocks: bool = False,
    filename: str = "<string>"
) -> Iterator[Token]:
    """
    Lazily yield the indentation-normalized form of ``tokens``.

    Args:
        tokens: Lexer output
        close_blocks: After the last line, emit UNINDENT tokens until the
            level is back to 0
        filename: Name reported in diagnostics

    Raises:
        NormalizerError: When a line runs out of input before its NEWLINE.
            Tokens of the earlier lines have already been yielded.
    """
    level = 0
    line = 1
    i = 0
    n = len(tokens)

    while i < n:
        # Line start: the TAB run sets this line's level
        line_level = 0
        while i < n and tokens[i].type == TokenType.TAB:
            line_level += 1
            i += 1

        while level < line_level:
            yield INDENT
            level += 1
        while level > line_level:
            yield UNINDENT
            level -= 1

        # Line body: copy through to the NEWLINE
        line_start = i
        while i < n and tokens[i].type != TokenType.NEWLINE:
            yield tokens[i]
            i += 1

        if i >= n:
            column = line_level + (i - line_start) + 1
            raise create_missing_newline_error(SourceLocation(filename, line, column, i))

        yield tokens[i]
        i += 1
        line += 1

    if close_blocks:
        while level > 0:
            yield UNINDENT
            level -= 1


@dataclass
class NormalizeResult:
    """Results of indentation normalization."""
    tokens: List[Token]
    errors: List[NormalizerError] = field(default_factory=list)

    def has_errors(self) -> bool:
        """Check if normalization found any errors."""
        return len(self.errors) > 0

    def raise_for_errors(self) -> List[Token]:
        """Return the tokens, or raise the first error encountered."""
        if self.errors:
            raise self.errors[0]
        return self.tokens

    @property
    def level(self) -> int:
        """Block level after the last token (0 if blocks were closed)."""
        depth = 0
        for token in self.tokens:
            if token.type == TokenType.INDENT:
                depth += 1
            elif token.type == TokenType.UNINDENT:
                depth -= 1
        return depth


class IndentationNormalizer:
    """
    Converts a flat lexer token stream into one with explicit block markers.

    The input sequence is only read; the output is a new list.
    """

    def __init__(self, tokens: Sequence[Token], config: Optional[NormalizerConfig] = None):
        self.input = tokens
        self.config = config or DEFAULT_NORMALIZER_CONFIG

    def __iter__(self) -> Iterator[Token]:
        return iter_normalized(self.input, self.config.close_blocks, self.config.filename)

    def normalize(self) -> NormalizeResult:
        """
        Normalize the whole token stream.

        On error the result holds whatever was produced before the failure;
        it is not a usable stream.
        """
        output: List[Token] = []
        errors: List[NormalizerError] = []
        try:
            for token in self:
                output.append(token)
        except NormalizerError as e:
            logger.debug("%s", e.diagnostic.message)
            errors.append(e)

        result = NormalizeResult(output, errors)
        logger.debug(
            "Normalized %s: %d tokens in, %d tokens out, final level %d",
            self.config.filename, len(self.input), len(output), result.level
        )
        return result


def normalize(tokens: Sequence[Token], config: Optional[NormalizerConfig] = None) -> List[Token]:
    """
    Convenience function to normalize a lexer token stream.

    Raises:
        NormalizerError: If a line lacks its trailing NEWLINE
    """
    return IndentationNormalizer(tokens, config).normalize().raise_for_errors()
