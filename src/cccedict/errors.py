"""Exception hierarchy for CC-CEDICT parsing and loading.

Grammar failures and source failures are kept apart so callers can tell a
malformed dictionary from one that could not be read at all:

- CedictParseError (and subclasses): a non-ignored line broke the line grammar
- SourceUnavailable: the path, stream or bytes could not be opened, read or decoded
"""

from typing import Optional


class CedictError(Exception):
    """Base class for every error raised by this package."""
    pass


class CedictParseError(CedictError, ValueError):
    """Raised when a dictionary line does not match the entry grammar.

    Attributes:
        line: The offending line as it was passed to the parser
        line_number: 1-based position in the source (set by the loader)
    """

    def __init__(
        self,
        message: str,
        line: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is not None:
            return f"line {self.line_number}: {self.message}"
        return self.message


class MissingCharacters(CedictParseError):
    """Fewer than two leading character tokens (traditional, simplified)."""
    pass


class UnterminatedPinyin(CedictParseError):
    """A '[' was opened but never closed."""
    pass


class UnterminatedJyutping(CedictParseError):
    """A '{' was opened but never closed."""
    pass


class UnterminatedDefinitions(CedictParseError):
    """A '/' opened the definitions section but no closing '/' follows."""
    pass


class UnexpectedContent(CedictParseError):
    """Text left over after the last recognized section (e.g. sections out of order)."""
    pass


class SourceUnavailable(CedictError, OSError):
    """Raised when a dictionary source cannot be opened, read or decoded."""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.source = source

    def __str__(self) -> str:
        return self.message
