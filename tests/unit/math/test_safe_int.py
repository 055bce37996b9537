"""Tests for SafeInt checked arithmetic wrapper."""

import pytest

from poolcore.constants import U128_MAX
from poolcore.safe_int import (
    DivisionByZero,
    S,
    SafeInt,
    SafeIntError,
    UintOverflow,
    Underflow,
)


class TestSafeIntConstruction:
    """Tests for SafeInt construction."""

    def test_from_int(self):
        """SafeInt can be constructed from int."""
        assert SafeInt(42).value == 42

    def test_from_safeint(self):
        """SafeInt can be constructed from another SafeInt."""
        assert SafeInt(SafeInt(42)).value == 42

    def test_from_invalid_type_raises(self):
        """SafeInt rejects strings, floats and bools."""
        with pytest.raises(TypeError):
            SafeInt("42")  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(3.14)  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(True)

    def test_alias_s(self):
        """S is an alias for SafeInt."""
        assert S is SafeInt

    def test_zero_constructor(self):
        """SafeInt.zero() creates zero value."""
        assert SafeInt.zero() == 0
        assert not SafeInt.zero()


class TestSafeIntArithmetic:
    """Tests for checked operators."""

    def test_add_and_radd(self):
        assert (S(2) + 3).value == 5
        assert (3 + S(2)).value == 5

    def test_mul_and_rmul(self):
        assert (S(6) * 7).value == 42
        assert (7 * S(6)).value == 42

    def test_sub_underflow_raises(self):
        """Subtraction below zero raises Underflow."""
        assert (S(5) - 5).value == 0
        with pytest.raises(Underflow):
            S(4) - 5

    def test_floordiv_truncates(self):
        assert (S(7) // 2).value == 3

    def test_floordiv_by_zero_raises(self):
        with pytest.raises(DivisionByZero):
            S(1) // 0

    def test_errors_share_base(self):
        """All arithmetic errors derive from SafeIntError and ArithmeticError."""
        for error in (DivisionByZero, Underflow, UintOverflow):
            assert issubclass(error, SafeIntError)
            assert issubclass(error, ArithmeticError)

    def test_checked_div_returns_none_on_zero(self):
        assert S(10).checked_div(0) is None
        assert S(10).checked_div(3) == 3

    def test_comparisons_with_int(self):
        assert S(3) < 4
        assert S(3) <= 3
        assert S(5) > S(4)
        assert S(5) >= 5
        assert S(5) == 5


class TestSafeIntNamedOperations:
    """Tests for clamp and fee deduction."""

    def test_clamp(self):
        assert S(15).clamp(0, 10) == 10
        assert S(-1).clamp(0, 10) == 0
        assert S(5).clamp(0, 10) == 5

    def test_deduct_bps_rounds_fee_down(self):
        """The fee is floored, so the remainder rounds up."""
        # 9990 * 20 / 10000 = 19.98 -> fee 19
        assert S(9990).deduct_bps(20) == 9971

    def test_deduct_bps_zero_fee(self):
        assert S(12345).deduct_bps(0) == 12345

    def test_deduct_bps_full_fee(self):
        assert S(12345).deduct_bps(10_000) == 0

    def test_deduct_bps_above_full_clamps_to_zero(self):
        assert S(12345).deduct_bps(20_000) == 0


class TestSafeIntWidths:
    """Tests for unsigned width conversion."""

    def test_to_u128_bounds(self):
        assert S(U128_MAX).to_u128() == U128_MAX
        with pytest.raises(UintOverflow):
            S(U128_MAX + 1).to_u128()
        with pytest.raises(UintOverflow):
            S(-1).to_u128()
