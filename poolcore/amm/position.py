"""Liquidity-position accounting.

A position is a holding of share (LSP) tokens against one pool, optionally
narrowed to a fraction of the holding for planning partial withdrawals.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

import structlog

from poolcore.amm.pool import PoolInfo
from poolcore.config import DEFAULT_PRICING_CONFIG, PricingConfig
from poolcore.math.fixed_point import FixedPointDecimal
from poolcore.models.type_tag import TypeTag, lsp_head
from poolcore.models.types import CoinInfo, CoinType, PoolType
from poolcore.safe_int import S

logger = structlog.get_logger()


@dataclass(frozen=True)
class PositionInfo:
    """Share-token holding against ``pool``.

    Attributes:
        pool: Snapshot of the pool the shares belong to
        share_coin: The held share tokens
        ratio: Fraction of the holding in scope, e.g. 0.25 to plan
            withdrawing a quarter; None means the whole holding
    """

    pool: PoolInfo
    share_coin: CoinInfo
    ratio: FixedPointDecimal | None = None

    @property
    def uuid(self) -> str:
        return f"PositionInfo[{self.pool.uuid}-{self.share_coin.uuid}]"

    def with_ratio(self, ratio: FixedPointDecimal | None) -> PositionInfo:
        """Copy of this position scoped to ``ratio``."""
        return replace(self, ratio=ratio)

    def balance(self) -> int:
        """Share tokens in scope, clamped to [0, held balance].

        The ratio is applied with integer math:
        ``held * mantissa // 10**scale``.
        """
        held = self.share_coin.balance
        if self.ratio is None:
            return held

        scoped = S(held) * self.ratio.mantissa // 10**self.ratio.scale
        return scoped.clamp(0, held).value

    def share_ratio(self) -> float:
        """Fraction of the pool's share supply in scope (informational)."""
        if self.pool.lsp_supply == 0:
            return 0.0
        return self.balance() / self.pool.lsp_supply

    def share_coin_amounts(self) -> tuple[int, int]:
        """Pro-rata (x, y) reserve amounts the shares in scope redeem for."""
        supply = self.pool.lsp_supply
        if supply == 0:
            return 0, 0

        shares = S(self.balance())
        return (
            (shares * self.pool.x // supply).value,
            (shares * self.pool.y // supply).value,
        )


def find_positions(
    pools: Iterable[PoolInfo],
    coins: Iterable[CoinInfo],
    package_address: str,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> list[PositionInfo]:
    """Match held share tokens to the pools they were minted by.

    A share token ``<package>::pool::LSP<X, Y>`` matches every pool whose
    ordered pair is (X, Y) on the coin's network; when several do, the one
    with the largest share supply is chosen.

    Args:
        pools: Pool snapshots to match against
        coins: Coins held by an account (any types)
        package_address: Address of the AMM package minting the shares
        config: Supplies the share token module name

    Returns:
        One PositionInfo per matched share holding, in coin order
    """
    pool_list = list(pools)
    expected_head = lsp_head(package_address, config.lsp_module)
    positions: list[PositionInfo] = []

    for coin in coins:
        if coin.balance <= 0:
            continue
        tag = TypeTag.parse(coin.type.name)
        if tag is None or tag.head != expected_head:
            continue
        if len(tag.args) != 2:
            logger.debug("lsp_coin_unexpected_arity", coin_type=coin.type.name, args=len(tag.args))
            continue

        x_name, y_name = tag.args
        pool_type = PoolType(
            x_type=CoinType(network=coin.type.network, name=x_name),
            y_type=CoinType(network=coin.type.network, name=y_name),
        )
        candidates = [p for p in pool_list if p.pool_type == pool_type]
        if not candidates:
            logger.debug("lsp_coin_without_pool", coin_type=coin.type.name, address=coin.address)
            continue

        # First pool wins ties
        pool = candidates[0]
        for candidate in candidates[1:]:
            if candidate.lsp_supply > pool.lsp_supply:
                pool = candidate
        positions.append(PositionInfo(pool=pool, share_coin=coin))

    return positions


__all__ = [
    "PositionInfo",
    "find_positions",
]
