"""
Error handling for the lpl front end.

Every malformed-input condition, in the lexer or in the indentation
normalizer, becomes a Diagnostic. Stages collect diagnostics instead of
stopping at the first one, and the caller decides whether to halt.
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A single front-end diagnostic (error, warning, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None
    
    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"
        
        if self.help_text:
            result += f"  help: {self.help_text}\n"
        
        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"
        
        return result


class LplError(Exception):
    """
    Base class for fatal front-end errors.
    
    Contains the diagnostic describing what went wrong and where.
    """
    
    def __init__(
        self, 
        message: str, 
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location, 
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
    
    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code
    
    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location
    
    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerError(LplError):
    """Raised when the lexer cannot turn the input into tokens."""


class NormalizerError(LplError):
    """Raised when the token stream breaks the one-NEWLINE-per-line rule."""


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop tokenization.
    """
    
    def __init__(
        self, 
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning", 
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
    
    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code
    
    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Unterminated string literal",
    "L007": "Number literal overflow",
    "I001": "Missing newline at end of line",
}

# Characters people commonly type that lpl spells differently
CHARACTER_ALTERNATIVES = {
    '"': ["'"],
    '\r': ["\\n (use LF line endings)"],
    '\u00a0': ["' ' (regular space)"],
}


# Helper functions for creating common errors
def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for an invalid character."""
    suggestions = CHARACTER_ALTERNATIVES.get(char, [])
    
    if suggestions:
        help_text = f"Did you mean {', '.join(suggestions)}?"
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in lpl source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."
    
    return LexerError(
        message=f"Unknown character: {char!r}",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions or None
    )


def create_unterminated_string_error(text: str, location: SourceLocation) -> LexerError:
    """Create an error for an unterminated string literal."""
    return LexerError(
        message=f"Unclosed string literal that starts with {text!r}",
        location=location,
        code="L002",
        help_text="String literals must be closed with a ' on the same line.",
        suggestions=["Add a closing ' quote"]
    )


def create_unterminated_string_warning(text: str, location: SourceLocation) -> LexerWarning:
    """Same as create_unterminated_string_error, as a non-fatal warning."""
    return LexerWarning(
        message=f"Unclosed string literal that starts with {text!r}",
        location=location,
        code="L002",
        help_text="The literal was skipped. Close it with a ' on the same line."
    )


def create_integer_overflow_error(digits: str, limit: int, location: SourceLocation) -> LexerError:
    """Create an error for an integer literal too large for the INT type."""
    return LexerError(
        message=f"Integer literal too large: '{digits}'",
        location=location,
        code="L007",
        help_text=f"INT literals must not exceed {limit}."
    )


def create_missing_newline_error(location: SourceLocation) -> NormalizerError:
    """Create an error for a line that is not terminated by a newline."""
    return NormalizerError(
        message="Expected newline at the end of every line",
        location=location,
        code="I001",
        help_text="Every line, including the last one, must end with a newline.",
        suggestions=["Add a newline at the end of the file"]
    )
