"""Exception types raised by sdk_add."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pydantic import ValidationError


class SdkError(Exception):
    """Base exception for this package."""


class OperandError(SdkError, ValueError):
    """Raised when a value passed to ``add`` is not an unsigned 32-bit integer."""

    def __init__(
        self,
        operand: str,
        value: object,
        cause: ValidationError | None = None,
    ) -> None:
        """Initialise the error with the offending operand name and value."""
        message = f"{operand} must be an int in [0, 4294967295], got {value!r}"
        if cause is not None and cause.errors():
            message = f"{message} ({cause.errors()[0]['msg']})"
        super().__init__(message)
        self.operand = operand
        self.value = value
