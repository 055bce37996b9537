"""Pydantic records handed over by chain adapters.

Adapters decode their network's wire format into these records; validation
here guarantees every amount is an exact unsigned integer before it reaches
the pricing core. ``to_*`` methods build the immutable core value types.
"""

from __future__ import annotations

import structlog
from pydantic import BaseModel, Field

from poolcore.amm.pool import PoolInfo
from poolcore.amm.sma import WeeklyMovingAverage
from poolcore.constants import APTOS_COIN_STORE_HEAD, SMA_SLOTS, SUI_COIN_HEAD
from poolcore.models.type_tag import pool_type_from_descriptor, unwrap_coin_type
from poolcore.models.types import (
    Bps,
    CoinInfo,
    CoinType,
    FeeDirection,
    Network,
    SwapType,
    Uint64,
    Uint128,
)

logger = structlog.get_logger()

# Wrapper type each network reports coin holdings under
COIN_WRAPPER_HEADS: dict[Network, str] = {
    Network.APTOS: APTOS_COIN_STORE_HEAD,
    Network.SUI: SUI_COIN_HEAD,
}


class SmaSnapshot(BaseModel):
    """Raw 7-slot yield accumulator."""

    start_time: Uint64 = 0
    current_time: Uint64 = 0
    a: list[Uint128] = Field(default_factory=lambda: [0] * SMA_SLOTS, min_length=SMA_SLOTS, max_length=SMA_SLOTS)
    c: list[Uint128] = Field(default_factory=lambda: [0] * SMA_SLOTS, min_length=SMA_SLOTS, max_length=SMA_SLOTS)

    model_config = {"frozen": True}

    def to_accumulator(self) -> WeeklyMovingAverage:
        return WeeklyMovingAverage(
            start_time=self.start_time,
            current_time=self.current_time,
            a=tuple(self.a),
            c=tuple(self.c),
        )


class PoolSnapshot(BaseModel):
    """Pool state as decoded by a chain adapter."""

    network: Network
    address: str
    type_descriptor: str = Field(description="Raw generic type string of the pool instance.")

    x: Uint128
    y: Uint128
    lsp_supply: Uint128

    admin_fee: Bps = 0
    lp_fee: Bps = 0
    incentive_fee: Bps = 0
    connect_fee: Bps = 0
    withdraw_fee: Bps = 0
    fee_direction: FeeDirection = FeeDirection.X
    freeze: bool = False

    total_trade_x: Uint128 = 0
    total_trade_y: Uint128 = 0
    total_trade_x_24h: Uint128 = 0
    total_trade_y_24h: Uint128 = 0
    total_trade_24h_last_capture_time: Uint64 = 0

    sma: SmaSnapshot = Field(default_factory=SmaSnapshot)
    index: int = Field(default=0, ge=0)
    swap_type: SwapType = SwapType.V2

    model_config = {"frozen": True}

    def to_pool_info(self) -> PoolInfo | None:
        """Build the pricing snapshot.

        The X and Y coin types come from the first two type arguments of
        the descriptor.

        Returns:
            PoolInfo, or None if the descriptor does not name two coins
        """
        pool_type = pool_type_from_descriptor(self.type_descriptor, self.network)
        if pool_type is None:
            logger.warning(
                "pool_descriptor_unparsable",
                address=self.address,
                descriptor=self.type_descriptor,
            )
            return None

        return PoolInfo(
            address=self.address,
            type_descriptor=self.type_descriptor,
            pool_type=pool_type,
            x=self.x,
            y=self.y,
            lsp_supply=self.lsp_supply,
            admin_fee=self.admin_fee,
            lp_fee=self.lp_fee,
            incentive_fee=self.incentive_fee,
            connect_fee=self.connect_fee,
            withdraw_fee=self.withdraw_fee,
            fee_direction=self.fee_direction,
            freeze=self.freeze,
            total_trade_x=self.total_trade_x,
            total_trade_y=self.total_trade_y,
            total_trade_x_24h=self.total_trade_x_24h,
            total_trade_y_24h=self.total_trade_y_24h,
            total_trade_24h_last_capture_time=self.total_trade_24h_last_capture_time,
            yield_sma=self.sma.to_accumulator(),
            index=self.index,
            swap_type=self.swap_type,
        )


class CoinSnapshot(BaseModel):
    """A coin holding as decoded by a chain adapter.

    ``holding_type`` is the raw type the network reports the holding under,
    e.g. ``0x1::coin::CoinStore<T>`` on Aptos or ``0x2::coin::Coin<T>`` on Sui.
    """

    network: Network
    holding_type: str
    address: str
    balance: Uint128

    model_config = {"frozen": True}

    def to_coin_info(self) -> CoinInfo | None:
        """Build the coin value, or None if the holding is not a coin wrapper."""
        name = unwrap_coin_type(self.holding_type, COIN_WRAPPER_HEADS[self.network])
        if name is None:
            logger.debug("coin_holding_not_wrapped", holding_type=self.holding_type, address=self.address)
            return None
        return CoinInfo(
            type=CoinType(network=self.network, name=name),
            address=self.address,
            balance=self.balance,
        )


def build_pools(snapshots: list[PoolSnapshot]) -> list[PoolInfo]:
    """Convert snapshots, dropping those whose descriptor is unusable."""
    pools = []
    for snapshot in snapshots:
        pool = snapshot.to_pool_info()
        if pool is not None:
            pools.append(pool)
    return pools


def build_coins(snapshots: list[CoinSnapshot], skip_empty: bool = True) -> list[CoinInfo]:
    """Convert holdings, dropping non-coin resources and (by default) zero balances."""
    coins = []
    for snapshot in snapshots:
        coin = snapshot.to_coin_info()
        if coin is None:
            continue
        if skip_empty and coin.balance <= 0:
            continue
        coins.append(coin)
    return coins
