"""Checked 256-bit unsigned integers and unit conversion helpers."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation, localcontext
from typing import Any

from .errors import FarmingSDKError

MAX_UINT256 = 2**256 - 1

# Enough digits for any uint256 scaled by 10**decimals.
_PRECISION = 100


class UInt256(int):
    """Integer restricted to ``[0, 2**256 - 1]``.

    Arithmetic between two values stays in range or raises
    :class:`FarmingSDKError` instead of silently wrapping or going negative.
    """

    __slots__ = ()

    def __new__(cls, value: Any = 0) -> "UInt256":
        if isinstance(value, bool):
            value = int(value)
        if isinstance(value, str):
            value = int(value, 0)
        number = int.__new__(cls, value)
        if number < 0:
            raise FarmingSDKError.uint256_underflow_error("construction", int(number))
        if number > MAX_UINT256:
            raise FarmingSDKError.uint256_overflow_error("construction", int(number))
        return number

    def _checked(self, result: int, operation: str) -> "UInt256":
        if result < 0:
            raise FarmingSDKError.uint256_underflow_error(operation, result)
        if result > MAX_UINT256:
            raise FarmingSDKError.uint256_overflow_error(operation, result)
        return UInt256(result)

    def __add__(self, other: int) -> "UInt256":
        if not isinstance(other, int):
            return NotImplemented
        return self._checked(int(self) + int(other), "add")

    __radd__ = __add__

    def __sub__(self, other: int) -> "UInt256":
        if not isinstance(other, int):
            return NotImplemented
        return self._checked(int(self) - int(other), "sub")

    def __rsub__(self, other: int) -> "UInt256":
        if not isinstance(other, int):
            return NotImplemented
        return self._checked(int(other) - int(self), "sub")

    def __mul__(self, other: int) -> "UInt256":
        if not isinstance(other, int):
            return NotImplemented
        return self._checked(int(self) * int(other), "mul")

    __rmul__ = __mul__

    def __floordiv__(self, other: int) -> "UInt256":
        if not isinstance(other, int):
            return NotImplemented
        return self._checked(int(self) // int(other), "div")

    def __repr__(self) -> str:
        return f"UInt256({int(self)})"

    def __str__(self) -> str:
        return str(int(self))


ZERO = UInt256(0)


def parse_units(amount: Any, decimals: int = 18) -> UInt256:
    """Convert a human readable amount (``"1.5"``) into base units."""

    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise FarmingSDKError(
            "Invalid numeric amount: could not be converted to Decimal",
            "VALIDATION_ERROR",
            {"value": amount, "reason": "conversion_error"},
        ) from exc
    if not value.is_finite():
        raise FarmingSDKError(
            "Invalid numeric amount: must be a finite number",
            "VALIDATION_ERROR",
            {"value": str(amount), "reason": "not_finite"},
        )

    with localcontext() as ctx:
        ctx.prec = _PRECISION
        scaled = value.scaleb(decimals)
        if scaled != scaled.to_integral_value():
            raise FarmingSDKError(
                f"Invalid numeric amount: more than {decimals} decimal places",
                "VALIDATION_ERROR",
                {"value": str(amount), "reason": "too_many_decimals"},
            )
        return UInt256(int(scaled))


def format_units(value: int, decimals: int = 18) -> str:
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        text = format(Decimal(int(value)).scaleb(-decimals).normalize(), "f")
    return text
