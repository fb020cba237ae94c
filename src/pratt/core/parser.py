"""
Top-down operator precedence (Pratt) parser.

Turns an infix expression into reverse-Polish notation. Every token is one
ASCII character and no whitespace is allowed between tokens.

Grammar:
    program    → expr END
    expr       → primary | expr binary_op expr     (precedence-climbed)
    primary    → variable | unary_op primary | "(" expr ")"
    variable   → "A".."Z" | "a".."z"
    binary_op  → "+" | "-" | "*" | "/" | "="
    unary_op   → "~"

Operands are emitted as soon as they are read; an operator is emitted once
both of its operands have been emitted.
"""

from __future__ import annotations

import logging

from pratt.core.buffers import DEFAULT_CAPACITY, InputCursor, OutputSink
from pratt.core.errors import (
    NestingTooDeepError,
    PrattError,
    TrailingInputError,
    UnexpectedCharacterError,
    UnmatchedDelimiterError,
)
from pratt.core.operators import (
    CLOSE_GROUP,
    LOWEST_PRECEDENCE,
    OPEN_GROUP,
    PREFIX_OPERATOR,
    is_variable,
    operator_info,
)
from pratt.core.results import ParseOutcome

logger = logging.getLogger(__name__)


def expect(cursor: InputCursor, expected: str) -> None:
    """Consume the next character, which must be ``expected``."""
    pos = cursor.pos
    got = cursor.advance()
    if got != expected:
        raise UnmatchedDelimiterError(pos, got, expected=expected)


def parse_primary(cursor: InputCursor, sink: OutputSink) -> None:
    """variable | '~' primary | '(' expr ')'"""
    pos = cursor.pos
    ch = cursor.advance()

    if ch == PREFIX_OPERATOR:
        # a run of prefixes wraps one primary; emit them innermost first
        count = 1
        while cursor.peek() == PREFIX_OPERATOR:
            cursor.advance()
            count += 1
        parse_primary(cursor, sink)
        for _ in range(count):
            sink.emit(ch)
        return

    if ch == OPEN_GROUP:
        parse_expr(cursor, sink, LOWEST_PRECEDENCE)
        expect(cursor, CLOSE_GROUP)
        return

    if is_variable(ch):
        sink.emit(ch)
        return

    raise UnexpectedCharacterError(pos, ch)


def parse_expr(cursor: InputCursor, sink: OutputSink, min_precedence: int) -> None:
    """Parse a primary followed by every operator binding tighter than ``min_precedence``."""
    parse_primary(cursor, sink)

    while True:
        ch = cursor.peek()
        op = operator_info(ch)
        if op is None or op.precedence <= min_precedence:
            return

        cursor.advance()
        parse_expr(cursor, sink, op.binding_floor)
        sink.emit(op.symbol)


def parse_into(source: str, sink: OutputSink) -> None:
    """Parse a whole program into ``sink`` and terminate it."""
    cursor = InputCursor(source)
    try:
        parse_expr(cursor, sink, LOWEST_PRECEDENCE)
    except RecursionError:
        raise NestingTooDeepError(cursor.pos, cursor.peek()) from None
    if not cursor.at_end:
        raise TrailingInputError(cursor.pos, cursor.peek())
    sink.terminate()


def parse(source: str, capacity: int = DEFAULT_CAPACITY) -> str:
    """Convert an infix expression to postfix.

    Args:
        source: Expression such as ``"(a+b)*c"``.
        capacity: Output size limit, end marker included.

    Returns:
        Postfix text, e.g. ``"ab+c*"``.

    Raises:
        ParseError: If the input does not match the grammar.
        OutputOverflowError: If the postfix text does not fit ``capacity``.
    """
    sink = OutputSink(capacity)
    parse_into(source, sink)
    output = sink.getvalue()
    logger.debug("parsed %r -> %r", source, output)
    return output


def try_parse(source: str, capacity: int = DEFAULT_CAPACITY) -> ParseOutcome:
    """Like :func:`parse`, but report failures as a :class:`ParseOutcome`."""
    try:
        output = parse(source, capacity)
    except PrattError as e:
        logger.debug("failed to parse %r: %s", source, e)
        return ParseOutcome.failure(source, e)
    return ParseOutcome.success(source, output)
