"""Boundary between chain adapters and the pricing core."""

from poolcore.adapters.base import (
    ChainAdapter,
    collect_positions,
    sorted_account_coins,
    unique_coin_types,
)
from poolcore.adapters.snapshot import (
    CoinSnapshot,
    PoolSnapshot,
    SmaSnapshot,
    build_coins,
    build_pools,
)

__all__ = [
    # Adapter protocol
    "ChainAdapter",
    "collect_positions",
    "sorted_account_coins",
    "unique_coin_types",
    # Snapshot records
    "SmaSnapshot",
    "PoolSnapshot",
    "CoinSnapshot",
    "build_pools",
    "build_coins",
]
