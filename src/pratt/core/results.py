"""
Tagged parse outcome returned by ``try_parse``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pratt.core.errors import (
    ERROR_TYPES,
    ErrorKind,
    OutputOverflowError,
    PrattError,
)


class ParseOutcome(BaseModel):
    """Either the postfix output or the kind and location of the failure."""

    source: str = Field(description="Infix input that was parsed")
    output: str | None = Field(default=None, description="Postfix text on success")
    error_kind: ErrorKind | None = None
    position: int | None = None
    character: str | None = None
    message: str | None = None
    capacity: int | None = Field(default=None, description="Sink capacity on overflow")

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, source: str, output: str) -> ParseOutcome:
        return cls(source=source, output=output)

    @classmethod
    def failure(cls, source: str, error: PrattError) -> ParseOutcome:
        return cls(
            source=source,
            error_kind=error.kind,
            position=error.position,
            character=error.character,
            message=error.format(),
            capacity=getattr(error, "capacity", None),
        )

    def to_error(self) -> PrattError | None:
        """Rebuild the exception this outcome was created from."""
        if self.error_kind is None:
            return None
        error_type = ERROR_TYPES[self.error_kind]
        position = self.position or 0
        character = self.character or ""
        if error_type is OutputOverflowError:
            return OutputOverflowError(position, character, capacity=self.capacity or 0)
        return error_type(position, character)

    def raise_for_error(self) -> str:
        """Return the postfix output, or raise the error this outcome records."""
        error = self.to_error()
        if error is not None:
            raise error
        return self.output or ""
