"""
Input cursor and bounded output sink used by a single parse.
"""

from __future__ import annotations

from pratt.core.errors import OutputOverflowError

# Maximum number of characters in the output, end marker included.
DEFAULT_CAPACITY = 1024

END_MARKER = "\0"


class InputCursor:
    """Read-only view over the source text that only moves forward."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def __repr__(self) -> str:
        return f"InputCursor({self.text!r}, pos={self.pos})"

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Next character without consuming it; '' at end of input."""
        if self.at_end:
            return ""
        return self.text[self.pos]

    def advance(self) -> str:
        """Consume the next character. At end of input, returns '' and stays put."""
        ch = self.peek()
        if ch:
            self.pos += 1
        return ch


class OutputSink:
    """Append-only character buffer with a fixed capacity.

    The capacity counts the end marker written by :meth:`terminate`, so a sink
    of capacity ``C`` holds at most ``C - 1`` postfix characters.
    """

    __slots__ = ("capacity", "_chars", "_terminated")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._chars: list[str] = []
        self._terminated = False

    def __len__(self) -> int:
        return len(self._chars)

    def __repr__(self) -> str:
        return f"OutputSink({self.getvalue()!r}, capacity={self.capacity})"

    @property
    def terminated(self) -> bool:
        return self._terminated

    def _reserve(self, ch: str) -> None:
        if self._terminated:
            raise RuntimeError("cannot write to a terminated output sink")
        if len(self._chars) >= self.capacity:
            raise OutputOverflowError(len(self._chars), ch, capacity=self.capacity)

    def emit(self, ch: str) -> None:
        """Append one postfix character."""
        self._reserve(ch)
        self._chars.append(ch)

    def terminate(self) -> None:
        """Write the end marker. Nothing can be emitted afterwards."""
        self._reserve(END_MARKER)
        self._terminated = True

    def getvalue(self) -> str:
        """The postfix text written so far, without the end marker."""
        return "".join(self._chars)
