"""
Error types for Pratt expression parsing.

Every failure aborts the current parse. Errors carry their details as fields
(kind, position, offending character) and format the human-readable message
only when asked, so callers can decide how to present them.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Which of the terminal parse failures occurred."""

    UNEXPECTED_CHARACTER = "unexpected_character"
    UNMATCHED_DELIMITER = "unmatched_delimiter"
    TRAILING_INPUT = "trailing_input"
    NESTING_TOO_DEEP = "nesting_too_deep"
    OUTPUT_OVERFLOW = "output_overflow"


def describe_char(ch: str) -> str:
    """Render a single input character for messages; '' is end of input."""
    if ch == "":
        return "end of input"
    return repr(ch)


class PrattError(Exception):
    """Base exception for all parse failures."""

    kind: ErrorKind

    def __init__(self, position: int, character: str = "") -> None:
        self.position = position
        self.character = character
        super().__init__(position, character)

    def __str__(self) -> str:
        return self.format()

    def format(self) -> str:
        """Human-readable message built from the error fields."""
        return f"cannot parse {describe_char(self.character)}"

    def format_with_source(self, source: str) -> str:
        """
        Format the message with the source text and a marker under the error.

        Returns:
            Formatted string like::

                unexpected character: '+' at position 0
                   1 | +a
                       ^^^
        """
        prefix = "   1 | "
        marker = " " * (len(prefix) + self.position) + "^^^"
        return f"{self.format()} at position {self.position}\n{prefix}{source}\n{marker}"


class ParseError(PrattError):
    """
    Raised when the input does not match the grammar.

    Examples:
    - A character that cannot start a primary expression
    - An opening parenthesis that is never closed
    - Characters left over after a complete expression
    """


class UnexpectedCharacterError(ParseError):
    kind = ErrorKind.UNEXPECTED_CHARACTER

    def format(self) -> str:
        if self.character == "":
            return "unexpected end of input"
        return f"unexpected character: {self.character!r}"


class UnmatchedDelimiterError(ParseError):
    kind = ErrorKind.UNMATCHED_DELIMITER

    def __init__(self, position: int, character: str = "", expected: str = ")") -> None:
        self.expected = expected
        super().__init__(position, character)

    def format(self) -> str:
        return f"expected {self.expected!r}, got {describe_char(self.character)}"


class TrailingInputError(ParseError):
    kind = ErrorKind.TRAILING_INPUT

    def format(self) -> str:
        return f"expected end of input, got {describe_char(self.character)}"


class NestingTooDeepError(ParseError):
    """Raised when groups nest deeper than the interpreter stack allows."""

    kind = ErrorKind.NESTING_TOO_DEEP

    def format(self) -> str:
        return f"expression nested too deeply near {describe_char(self.character)}"


class OutputOverflowError(PrattError):
    """Raised when emitting would exceed the output sink's capacity."""

    kind = ErrorKind.OUTPUT_OVERFLOW

    def __init__(self, position: int, character: str = "", capacity: int = 0) -> None:
        self.capacity = capacity
        super().__init__(position, character)

    def format(self) -> str:
        return f"output overflow: capacity of {self.capacity} characters exceeded"

    def format_with_source(self, source: str) -> str:
        # position indexes the output, not the source
        return f"{self.format()} while parsing {source!r}"


ERROR_TYPES: dict[ErrorKind, type[PrattError]] = {
    ErrorKind.UNEXPECTED_CHARACTER: UnexpectedCharacterError,
    ErrorKind.UNMATCHED_DELIMITER: UnmatchedDelimiterError,
    ErrorKind.TRAILING_INPUT: TrailingInputError,
    ErrorKind.NESTING_TOO_DEEP: NestingTooDeepError,
    ErrorKind.OUTPUT_OVERFLOW: OutputOverflowError,
}
