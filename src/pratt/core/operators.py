"""
Operator table for the Pratt expression language.

Precedences must leave gaps between tiers: the recursive call for a
right-associative operator passes its precedence minus one, which must not
reach the precedence of the next lower tier.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

PREFIX_OPERATOR = "~"
OPEN_GROUP = "("
CLOSE_GROUP = ")"
LOWEST_PRECEDENCE = 0

_ASCII_LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")


class Associativity(StrEnum):
    """How chains of equal-precedence operators group."""

    LEFT = "left"
    RIGHT = "right"


class Operator(BaseModel):
    """A binary infix operator and its binding characteristics."""

    symbol: str = Field(min_length=1, max_length=1, description="Single-character symbol")
    precedence: int = Field(gt=LOWEST_PRECEDENCE, description="Binding strength")
    right_associative: bool = Field(default=False)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.symbol

    @property
    def associativity(self) -> Associativity:
        return Associativity.RIGHT if self.right_associative else Associativity.LEFT

    @property
    def binding_floor(self) -> int:
        """Minimum precedence handed to the recursive parse of the right operand."""
        return self.precedence - (1 if self.right_associative else 0)


OPERATORS: MappingProxyType[str, Operator] = MappingProxyType(
    {
        "=": Operator(symbol="=", precedence=1, right_associative=True),
        "+": Operator(symbol="+", precedence=10),
        "-": Operator(symbol="-", precedence=10),
        "*": Operator(symbol="*", precedence=20),
        "/": Operator(symbol="/", precedence=20),
    }
)


def operator_info(symbol: str) -> Operator | None:
    """Return the binary operator for ``symbol``, or None if it is not one."""
    return OPERATORS.get(symbol)


def is_variable(ch: str) -> bool:
    """True for a single ASCII letter."""
    return ch in _ASCII_LETTERS
