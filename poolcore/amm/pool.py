"""Constant-product pool pricing engine.

Pools price trades with x * y = k. Fees are charged in basis points in two
components: the admin-level fee (admin + connect) taken from the side named
by ``fee_direction``, and the LP-level fee (lp + incentive) always taken from
the input. All amount math is unsigned integer arithmetic with truncating
division, so quotes match on-chain execution exactly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from poolcore.amm.sma import WeeklyMovingAverage
from poolcore.config import DEFAULT_PRICING_CONFIG, PricingConfig
from poolcore.constants import BPS_SCALING, MIN_OUTPUT_SCALE, SLIPPAGE_SCALE
from poolcore.models.types import (
    CoinType,
    FeeDirection,
    NotAvailableReason,
    PoolType,
    SwapDirection,
    SwapType,
)
from poolcore.safe_int import S


@dataclass(frozen=True)
class PoolInfo:
    """Immutable snapshot of one pool's on-chain state.

    Fee fractions are derived once at construction and are only used for
    informational prices; amounts always use integer bps arithmetic.
    """

    address: str
    type_descriptor: str
    pool_type: PoolType
    x: int
    y: int
    lsp_supply: int
    # Fees in basis points (30 = 0.3%)
    admin_fee: int = 0
    lp_fee: int = 0
    incentive_fee: int = 0
    connect_fee: int = 0
    withdraw_fee: int = 0
    fee_direction: FeeDirection = FeeDirection.X
    freeze: bool = False
    # Volume counters (informational)
    total_trade_x: int = 0
    total_trade_y: int = 0
    total_trade_x_24h: int = 0
    total_trade_y_24h: int = 0
    total_trade_24h_last_capture_time: int = 0
    yield_sma: WeeklyMovingAverage = field(default_factory=WeeklyMovingAverage.zero)
    index: int = 0
    swap_type: SwapType = SwapType.V2

    admin_fee_fraction: float = field(init=False, repr=False, compare=False)
    lp_fee_fraction: float = field(init=False, repr=False, compare=False)
    admin_fee_complement: float = field(init=False, repr=False, compare=False)
    lp_fee_complement: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        admin_fraction = self.total_admin_fee / BPS_SCALING
        lp_fraction = self.total_lp_fee / BPS_SCALING
        object.__setattr__(self, "admin_fee_fraction", admin_fraction)
        object.__setattr__(self, "lp_fee_fraction", lp_fraction)
        object.__setattr__(self, "admin_fee_complement", 1.0 - admin_fraction)
        object.__setattr__(self, "lp_fee_complement", 1.0 - lp_fraction)

    @property
    def total_admin_fee(self) -> int:
        """Admin-level fee in bps (admin + connect)."""
        return self.admin_fee + self.connect_fee

    @property
    def total_lp_fee(self) -> int:
        """LP-level fee in bps (lp + incentive)."""
        return self.lp_fee + self.incentive_fee

    @property
    def uuid(self) -> str:
        return f"PoolInfo[{self.pool_type.uuid}-{self.address}]"

    # --- Availability ---

    def is_initialized(self) -> bool:
        """True once both reserves hold liquidity."""
        return self.x > 0 and self.y > 0

    def not_available_reason(self) -> NotAvailableReason | None:
        """Why swaps are refused, or None if the pool is active.

        A frozen pool reports FREEZE even when it is also empty.
        """
        if self.freeze:
            return NotAvailableReason.FREEZE
        if self.x == 0 or self.y == 0:
            return NotAvailableReason.EMPTY
        return None

    def is_available_for_swap(self) -> bool:
        return self.not_available_reason() is None

    # --- Prices (informational) ---

    def price(self) -> float:
        """Spot price of X in units of Y (y / x); 0.0 for an empty X side."""
        if self.x == 0:
            return 0.0
        return self.y / self.x

    def price_buy(self) -> float:
        """Zero-slippage price paid when buying X with Y, fees included.

        0.0 when a fee component takes the whole input.
        """
        complement = self.admin_fee_complement * self.lp_fee_complement
        if complement == 0.0:
            return 0.0
        return self.price() / complement

    def price_sell(self) -> float:
        """Zero-slippage price received when selling X for Y, fees included."""
        return self.price() * (self.admin_fee_complement * self.lp_fee_complement)

    def price_buy_with_input(self, dy: int) -> float:
        """Effective price of buying X with ``dy`` of Y."""
        dx = self.y_to_x(dy)
        if dx == 0:
            return 0.0
        return dy / dx

    def price_sell_with_input(self, dx: int) -> float:
        """Effective price of selling ``dx`` of X."""
        if dx <= 0:
            return 0.0
        return self.x_to_y(dx) / dx

    # --- Swap quotes ---

    def x_to_y(self, dx: int) -> int:
        """Output of Y for selling ``dx`` of X."""
        return self._swap(dx, self.x, self.y, admin_on_input=self.fee_direction == FeeDirection.X)

    def y_to_x(self, dy: int) -> int:
        """Output of X for selling ``dy`` of Y."""
        return self._swap(dy, self.y, self.x, admin_on_input=self.fee_direction == FeeDirection.Y)

    def _swap(self, amount_in: int, reserve_in: int, reserve_out: int, admin_on_input: bool) -> int:
        """Constant-product output with the contract's fee order.

        Formula: out = reserve_out * in' / (reserve_in + in'), where in' is the
        input after fees. When the admin fee is charged on the output side it
        is deducted from ``out`` last.
        """
        if amount_in <= 0:
            return 0

        amount = S(amount_in)
        if admin_on_input:
            amount = amount.deduct_bps(self.total_admin_fee)
        amount = amount.deduct_bps(self.total_lp_fee)
        if not amount:
            return 0

        amount_out = (S(reserve_out) * amount).checked_div(S(reserve_in) + amount)
        if amount_out is None:
            return 0

        if not admin_on_input:
            amount_out = amount_out.deduct_bps(self.total_admin_fee)
        return amount_out.to_u128()

    def quote(self, coin_in: CoinType, coin_out: CoinType, amount_in: int) -> int | None:
        """Output for swapping ``amount_in`` of ``coin_in`` into ``coin_out``.

        Returns:
            The output amount, or None if the pool does not trade this pair
        """
        direction = self.swap_direction(coin_in, coin_out)
        if direction is None:
            return None
        if direction == SwapDirection.FORWARD:
            return self.x_to_y(amount_in)
        return self.y_to_x(amount_in)

    # --- Slippage ---

    def sell_slippage(self, dx: int) -> float:
        """Price impact of selling ``dx`` of X for Y."""
        return self._slippage(dx, self.x_to_y(dx), self.x, self.y)

    def buy_slippage(self, dy: int) -> float:
        """Price impact of selling ``dy`` of Y for X."""
        return self._slippage(dy, self.y_to_x(dy), self.y, self.x)

    def slippage(self, amount_in: int, direction: SwapDirection) -> float:
        if direction == SwapDirection.FORWARD:
            return self.sell_slippage(amount_in)
        return self.buy_slippage(amount_in)

    @staticmethod
    def _slippage(amount_in: int, amount_out: int, reserve_in: int, reserve_out: int) -> float:
        """Relative gap between the linear zero-impact output and the quote.

        expected = amount_in * reserve_out / reserve_in. Both amounts are
        scaled by 1e8 before dividing so sub-unit differences survive the
        integer math; the result is converted to float last.
        """
        if amount_in <= 0 or reserve_in == 0:
            return 0.0

        actual = S(amount_out) * SLIPPAGE_SCALE
        expected = S(amount_in) * reserve_out * SLIPPAGE_SCALE // reserve_in
        if not expected:
            return 0.0

        diff = S(abs(expected.value - actual.value))
        return (diff * SLIPPAGE_SCALE // expected).value / SLIPPAGE_SCALE

    # --- Minimum output bounds ---

    def x_to_y_min_output(
        self,
        dx: int,
        slippage_tolerance: float | None = None,
        config: PricingConfig = DEFAULT_PRICING_CONFIG,
    ) -> int:
        """Lowest acceptable Y output for selling ``dx`` of X.

        Raises:
            ValueError: If the tolerance is outside [0, 1]
        """
        return _min_output(self.x_to_y(dx), slippage_tolerance, config)

    def y_to_x_min_output(
        self,
        dy: int,
        slippage_tolerance: float | None = None,
        config: PricingConfig = DEFAULT_PRICING_CONFIG,
    ) -> int:
        """Lowest acceptable X output for selling ``dy`` of Y.

        Raises:
            ValueError: If the tolerance is outside [0, 1]
        """
        return _min_output(self.y_to_x(dy), slippage_tolerance, config)

    # --- Deposits ---

    def deposit_x_amount(self, y_amount: int) -> int:
        """X amount matching ``y_amount`` at the current reserve ratio."""
        result = (S(self.x) * y_amount).checked_div(self.y)
        return 0 if result is None else result.value

    def deposit_y_amount(self, x_amount: int) -> int:
        """Y amount matching ``x_amount`` at the current reserve ratio."""
        result = (S(x_amount) * self.y).checked_div(self.x)
        return 0 if result is None else result.value

    def deposit_amounts(self, x_max: int, y_max: int) -> tuple[int, int]:
        """Largest ratio-preserving deposit within the caller's maxima.

        Returns:
            (dx, dy) with dx <= x_max and dy <= y_max, or (0, 0) if the pool
            is uninitialized or either maximum is non-positive
        """
        if not self.is_initialized() or x_max <= 0 or y_max <= 0:
            return 0, 0

        if self.deposit_x_amount(y_max) > x_max:
            # X is the binding side
            return x_max, min(self.deposit_y_amount(x_max), y_max)
        return min(self.deposit_x_amount(y_max), x_max), y_max

    # --- Direction ---

    def swap_direction(self, coin_a: CoinType, coin_b: CoinType) -> SwapDirection | None:
        """Relation of (coin_a, coin_b) to the pool's (X, Y) ordering."""
        x_type = self.pool_type.x_type
        y_type = self.pool_type.y_type
        if coin_a == x_type and coin_b == y_type:
            return SwapDirection.FORWARD
        if coin_a == y_type and coin_b == x_type:
            return SwapDirection.REVERSE
        return None

    def can_swap(self, coin_a: CoinType, coin_b: CoinType) -> bool:
        return (
            self.is_initialized()
            and self.is_available_for_swap()
            and self.swap_direction(coin_a, coin_b) is not None
        )

    # --- Yield and volume ---

    def annualized_yield(self, config: PricingConfig = DEFAULT_PRICING_CONFIG) -> float | None:
        """Estimated LP APY from the weekly accumulator, None if unavailable."""
        return self.yield_sma.annualized_yield(config.days_per_year)

    def tvl(self, primary_coin_type: CoinType, primary_price: float) -> float | None:
        """Total value locked in primary-coin price terms.

        Both sides of a constant-product pool hold equal value, so the TVL is
        twice the value of the primary side. None if neither side is the
        primary coin.
        """
        if primary_coin_type == self.pool_type.x_type:
            return self.x * primary_price * 2.0
        if primary_coin_type == self.pool_type.y_type:
            return self.y * primary_price * 2.0
        return None

    def trade_volume(self, primary_coin_type: CoinType, primary_price: float) -> float | None:
        """Lifetime traded value in primary-coin price terms."""
        return self._trade_value(primary_coin_type, primary_price, self.total_trade_x, self.total_trade_y)

    def trade_volume_24h(self, primary_coin_type: CoinType, primary_price: float) -> float | None:
        """Traded value of the last 24h window in primary-coin price terms."""
        return self._trade_value(
            primary_coin_type, primary_price, self.total_trade_x_24h, self.total_trade_y_24h
        )

    def _trade_value(
        self,
        primary_coin_type: CoinType,
        primary_price: float,
        traded_x: int,
        traded_y: int,
    ) -> float | None:
        price = self.price()
        if price == 0.0:
            return None

        if primary_coin_type == self.pool_type.x_type:
            px = primary_price
            py = px / price
        elif primary_coin_type == self.pool_type.y_type:
            py = primary_price
            px = py * price
        else:
            return None

        return px * traded_x + py * traded_y


def is_same_pool(a: PoolInfo, b: PoolInfo) -> bool:
    """Same pool instance: same address and same ordered coin pair."""
    return a.address == b.address and a.pool_type == b.pool_type


def _min_output(amount_out: int, slippage_tolerance: float | None, config: PricingConfig) -> int:
    """floor(amount_out * round((1 - tolerance) * 1e9) / 1e9).

    The factor is rounded half-up.
    """
    tolerance = config.default_slippage_tolerance if slippage_tolerance is None else slippage_tolerance
    if not 0.0 <= tolerance <= 1.0:
        raise ValueError(f"Slippage tolerance must be within [0, 1], got {tolerance}")

    factor = Decimal(MIN_OUTPUT_SCALE * (1.0 - tolerance)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return (S(amount_out) * int(factor) // MIN_OUTPUT_SCALE).value


__all__ = [
    "PoolInfo",
    "is_same_pool",
]
