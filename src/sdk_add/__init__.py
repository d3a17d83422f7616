"""Unsigned 32-bit addition with wraparound."""

from sdk_add.core import UINT32_MAX, UINT32_MODULUS, Uint32, add
from sdk_add.errors import OperandError, SdkError
from sdk_add.utils.logger import configure_logging, get_logger

__all__ = [
    "UINT32_MAX",
    "UINT32_MODULUS",
    "OperandError",
    "SdkError",
    "Uint32",
    "add",
    "configure_logging",
    "get_logger",
]
