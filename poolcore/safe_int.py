"""Checked integer wrapper for ledger amount arithmetic.

Ledger execution works on unsigned integers with truncating division.
SafeInt keeps Python's unbounded ints but refuses the operations that
would silently diverge from the ledger:
- Division by zero raises DivisionByZero
- Subtraction below zero raises Underflow
- Values beyond u128 are caught on conversion

Usage pattern:
    from poolcore.safe_int import S

    def compute(dx: int, x: int, y: int) -> int:
        numerator = S(y) * dx
        denominator = S(x) + dx
        return (numerator // denominator).value
"""

from __future__ import annotations

from poolcore.constants import BPS_SCALING, U128_MAX


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Subtraction would produce a negative amount."""

    pass


class UintOverflow(SafeIntError):
    """Value does not fit the requested unsigned width."""

    pass


class SafeInt:
    """Non-negative ledger amount with checked arithmetic.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _extract_value(other))

    def __radd__(self, other: int) -> SafeInt:
        return SafeInt(other + self._value)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __rmul__(self, other: int) -> SafeInt:
        return SafeInt(other * self._value)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Truncating division.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __index__(self) -> int:
        return self._value

    # --- Named operations ---

    def clamp(self, min_val: int, max_val: int) -> SafeInt:
        """Clamp value to range [min_val, max_val]."""
        return SafeInt(max(min_val, min(self._value, max_val)))

    def checked_div(self, other: SafeInt | int) -> SafeInt | None:
        """Divide, returning None on a zero divisor instead of raising."""
        other_val = _extract_value(other)
        if other_val == 0:
            return None
        return SafeInt(self._value // other_val)

    def deduct_bps(self, bps: SafeInt | int) -> SafeInt:
        """Deduct a basis-point fee the way the pool contract does.

        Computes ``self - self * bps // 10000`` with the fee rounded down.
        A fee above 10000 bps clamps the result to zero.
        """
        fee = (self * bps) // BPS_SCALING
        return SafeInt(max(0, self._value - fee._value))

    def to_u128(self) -> int:
        """Convert to int, validating the ledger amount width.

        Raises:
            UintOverflow: If value is negative or exceeds 2^128-1
        """
        if not 0 <= self._value <= U128_MAX:
            raise UintOverflow(f"Value is not a u128 amount: {self._value}")
        return self._value

    @classmethod
    def zero(cls) -> SafeInt:
        return cls(0)


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
