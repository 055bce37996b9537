"""Chain adapter capability interface.

The pricing core never talks to a network. A ChainAdapter, implemented once
per network outside this package, fetches ledger state and hands it over as
core value types. The helpers below are pure functions over adapter output.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

import structlog

from poolcore.amm.pool import PoolInfo
from poolcore.amm.position import PositionInfo, find_positions
from poolcore.config import DEFAULT_PRICING_CONFIG, PricingConfig
from poolcore.models.transactions import TransactionRecord
from poolcore.models.types import CoinInfo, CoinType

logger = structlog.get_logger()


@runtime_checkable
class ChainAdapter(Protocol):
    """Protocol for per-network data sources.

    Implementations own all I/O, retries and timeouts. Every method returns
    fresh snapshots; nothing returned is updated afterwards.
    """

    @property
    def package_address(self) -> str:
        """Address of the AMM package on this network."""
        ...

    def primary_coin_type(self) -> CoinType:
        """The network's gas coin, used as the pricing numeraire."""
        ...

    def fetch_pools_and_coins(self) -> tuple[list[CoinType], list[PoolInfo]]:
        """All pools of the package and the distinct coin types they trade."""
        ...

    def fetch_pool(self, pool: PoolInfo) -> PoolInfo | None:
        """A fresh snapshot of ``pool``, or None if it no longer exists."""
        ...

    def fetch_account_coins(self, account: str, coin_filter: list[str] | None = None) -> list[CoinInfo]:
        """Coins with a positive balance held by ``account``.

        Args:
            account: Account address
            coin_filter: If given, only coins whose type name is listed
        """
        ...

    def fetch_primary_coin_price(self) -> float:
        """Current price of the primary coin in the display currency."""
        ...

    def fetch_transactions(self, account: str, limit: int) -> list[TransactionRecord]:
        """Most recent AMM transactions of ``account``."""
        ...


def unique_coin_types(pools: Iterable[PoolInfo]) -> list[CoinType]:
    """Distinct coin types traded by ``pools``, in first-seen order."""
    seen: dict[CoinType, None] = {}
    for pool in pools:
        seen.setdefault(pool.pool_type.x_type, None)
        seen.setdefault(pool.pool_type.y_type, None)
    return list(seen)


def sorted_account_coins(coins: Iterable[CoinInfo], type_names: list[str]) -> list[list[CoinInfo]]:
    """Group held coins by requested type name, largest balance first.

    Returns:
        One list per entry of ``type_names``, in the same order
    """
    ordered = sorted(coins, key=lambda c: c.balance, reverse=True)
    return [[c for c in ordered if c.type.name == name] for name in type_names]


def collect_positions(
    adapter: ChainAdapter,
    account: str,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> list[PositionInfo]:
    """Fetch pools and an account's coins, then match its share holdings."""
    _, pools = adapter.fetch_pools_and_coins()
    coins = adapter.fetch_account_coins(account)
    positions = find_positions(pools, coins, adapter.package_address, config)
    logger.debug(
        "positions_collected",
        account=account,
        pools=len(pools),
        coins=len(coins),
        positions=len(positions),
    )
    return positions
