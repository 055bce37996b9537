"""Numeric utilities for the pricing core.

This package provides:
- FixedPointDecimal: exact (mantissa, scale) decimals
- canonicalize_numeric: canonical form of plain decimal strings
"""

from poolcore.math.fixed_point import FixedPointDecimal, canonicalize_numeric

__all__ = ["FixedPointDecimal", "canonicalize_numeric"]
