"""
Pratt infix-to-postfix converter.

Usage:
    from pratt import parse, try_parse

    parse("(a+b)*c")
    # "ab+c*"

    outcome = try_parse("(a")
    # outcome.error_kind == ErrorKind.UNMATCHED_DELIMITER
"""

from pratt._version import get_version
from pratt.core.errors import (
    ErrorKind,
    OutputOverflowError,
    ParseError,
    PrattError,
    NestingTooDeepError,
    TrailingInputError,
    UnexpectedCharacterError,
    UnmatchedDelimiterError,
)
from pratt.core.parser import parse, try_parse
from pratt.core.results import ParseOutcome

__version__ = get_version()

__all__ = [
    "__version__",
    "parse",
    "try_parse",
    "ParseOutcome",
    # Errors
    "ErrorKind",
    "PrattError",
    "ParseError",
    "UnexpectedCharacterError",
    "UnmatchedDelimiterError",
    "TrailingInputError",
    "NestingTooDeepError",
    "OutputOverflowError",
]
