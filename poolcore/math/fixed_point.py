"""Fixed-point decimal values as (mantissa, scale) pairs.

A FixedPointDecimal represents ``mantissa / 10**scale`` exactly. It is used
to carry human-entered decimals (withdrawal ratios, display amounts) into
integer ledger arithmetic without going through floats.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal

__all__ = [
    "FixedPointDecimal",
    "canonicalize_numeric",
]

_DECIMAL_PATTERN = re.compile(r"^[0-9]+(\.[0-9]*)?$")


def canonicalize_numeric(s: str) -> str:
    """Strip redundant zeros from a plain decimal string.

    Leading zeros of the integer part are removed (one ``0`` is kept),
    trailing zeros of the fractional part are removed, and a dangling ``.``
    is dropped. A leading ``-`` is preserved unless the value is zero.

    Examples:
        "007.500" -> "7.5"
        "0.000"   -> "0"
        "120"     -> "120"
    """
    negative = s.startswith("-")
    if negative:
        s = s[1:]

    integer, dot, fraction = s.partition(".")
    integer = integer.lstrip("0") or "0"
    fraction = fraction.rstrip("0") if dot else ""

    result = f"{integer}.{fraction}" if fraction else integer
    if negative and result != "0":
        result = "-" + result
    return result


@dataclass(frozen=True)
class FixedPointDecimal:
    """Immutable ``mantissa / 10**scale`` value.

    A negative scale is clamped to 0 at construction. Every operation that
    changes the scale returns a new instance.
    """

    mantissa: int
    scale: int = 0

    def __post_init__(self) -> None:
        if self.scale < 0:
            object.__setattr__(self, "scale", 0)

    @classmethod
    def parse(cls, s: str) -> FixedPointDecimal | None:
        """Parse ``digits`` or ``digits.digits*`` into a canonical value.

        Returns:
            The parsed value, or None if the string is not a plain
            non-negative decimal.
        """
        if _DECIMAL_PATTERN.match(s) is None:
            return None

        canonical = canonicalize_numeric(s)
        dot = canonical.find(".")
        scale = len(canonical) - 1 - dot if dot >= 0 else 0
        return cls(int(canonical.replace(".", "")), scale)

    def to_string(self, pad_to_scale: bool = False) -> str:
        """Render as a canonical decimal string.

        Args:
            pad_to_scale: Append trailing zeros so exactly ``scale``
                fractional digits are shown.
        """
        if self.scale == 0:
            return canonicalize_numeric(str(self.mantissa))

        sign = "-" if self.mantissa < 0 else ""
        digits = str(abs(self.mantissa)).rjust(self.scale + 1, "0")
        rendered = canonicalize_numeric(f"{sign}{digits[: -self.scale]}.{digits[-self.scale :]}")

        if pad_to_scale:
            integer, _, fraction = rendered.partition(".")
            rendered = f"{integer}.{fraction.ljust(self.scale, '0')}"
        return rendered

    def __str__(self) -> str:
        return self.to_string()

    def to_float(self) -> float:
        """Lossy conversion for display and estimation only."""
        return self.mantissa / (10**self.scale)

    def to_decimal(self) -> Decimal:
        """Exact conversion to Decimal."""
        return Decimal(f"{self.mantissa}E-{self.scale}")

    def can_align_to(self, target: FixedPointDecimal | int) -> bool:
        """True if rescaling to ``target`` widens (or keeps) the scale."""
        return self.scale <= _target_scale(target)

    def align_to(self, target: FixedPointDecimal | int) -> FixedPointDecimal:
        """Rescale to ``target`` without losing precision.

        Raises:
            ValueError: If the target scale is narrower than this value's
        """
        target_scale = _target_scale(target)
        if target_scale < self.scale:
            raise ValueError(f"Cannot narrow scale {self.scale} to {target_scale}")
        return FixedPointDecimal(self.mantissa * 10 ** (target_scale - self.scale), target_scale)


def _target_scale(target: FixedPointDecimal | int) -> int:
    if isinstance(target, FixedPointDecimal):
        return target.scale
    return target
