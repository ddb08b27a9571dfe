"""
Configuration for the lpl front end.

Both stages take an immutable config object. Defaults reproduce the
language's reference behavior, so ``Lexer(source)`` and
``IndentationNormalizer(tokens)`` need no config at all.

Usage:
    config = LexerConfig(filename="main.lpl", strict_strings=True)
    result = Lexer(source, config).tokenize()
"""

from dataclasses import dataclass, fields
from typing import Any, Dict


@dataclass(frozen=True)
class LexerConfig:
    """Immutable lexer configuration.

    Attributes:
        filename: Name reported in diagnostics
        int_bits: Width of the signed integer type INT literals must fit in
        strict_strings: Report unterminated string literals as errors
            instead of warnings
    """

    filename: str = "<string>"
    int_bits: int = 32
    strict_strings: bool = False

    def __post_init__(self):
        if self.int_bits <= 0:
            raise ValueError(f"int_bits must be positive, got {self.int_bits}")

    @property
    def int_max(self) -> int:
        """Largest INT literal value that fits in ``int_bits``."""
        return 2 ** (self.int_bits - 1) - 1

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "LexerConfig":
        """Create a LexerConfig from a dictionary, ignoring unknown keys."""
        return cls(**_known_fields(cls, config_dict))


@dataclass(frozen=True)
class NormalizerConfig:
    """Immutable indentation normalizer configuration.

    Attributes:
        filename: Name reported in diagnostics
        close_blocks: Emit UNINDENT tokens at end of input until the
            indentation level is back to 0
    """

    filename: str = "<string>"
    close_blocks: bool = False

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "NormalizerConfig":
        """Create a NormalizerConfig from a dictionary, ignoring unknown keys."""
        return cls(**_known_fields(cls, config_dict))


def _known_fields(cls, config_dict: Dict[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {key: value for key, value in config_dict.items() if key in names}


DEFAULT_LEXER_CONFIG = LexerConfig()
DEFAULT_NORMALIZER_CONFIG = NormalizerConfig()
