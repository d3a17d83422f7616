"""Fixed-width unsigned 32-bit addition."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, TypeAdapter, ValidationError

from sdk_add.errors import OperandError
from sdk_add.utils.logger import get_logger

UINT32_MAX = 0xFFFFFFFF
UINT32_MODULUS = UINT32_MAX + 1

Uint32 = Annotated[int, Field(strict=True, ge=0, le=UINT32_MAX)]
"""An ``int`` in ``[0, UINT32_MAX]``; strict, so ``bool``/``str``/``float`` are rejected."""

_uint32_adapter: TypeAdapter[int] = TypeAdapter(Uint32)

logger = get_logger(__name__)


def _check_operand(name: str, value: object) -> int:
    """Return ``value`` unchanged if it is a uint32, otherwise raise ``OperandError``."""
    # Exact ints in range skip the adapter.
    if type(value) is int and 0 <= value <= UINT32_MAX:
        return value

    try:
        return _uint32_adapter.validate_python(value)
    except ValidationError as exc:
        logger.debug("Rejected operand", operand=name, value=repr(value))
        raise OperandError(name, value, exc) from exc


def add(lhs: Uint32, rhs: Uint32) -> Uint32:
    """Add two unsigned 32-bit integers with wraparound.

    The result is ``(lhs + rhs) mod 2**32``, so ``add(UINT32_MAX, 1) == 0``.
    Overflow is not an error.

    Args:
        lhs: Left operand in ``[0, UINT32_MAX]``.
        rhs: Right operand in ``[0, UINT32_MAX]``.

    Returns:
        int: The 32-bit unsigned sum.

    Raises:
        OperandError: If either argument is not an ``int`` in the uint32 range.

    """
    a = _check_operand("lhs", lhs)
    b = _check_operand("rhs", rhs)
    return (a + b) & UINT32_MAX
