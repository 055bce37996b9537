"""Pool pricing and position accounting."""

from poolcore.amm.pool import PoolInfo, is_same_pool
from poolcore.amm.position import PositionInfo, find_positions
from poolcore.amm.sma import WeeklyMovingAverage

__all__ = [
    # Pricing engine
    "PoolInfo",
    "is_same_pool",
    # Positions
    "PositionInfo",
    "find_positions",
    # Yield estimator
    "WeeklyMovingAverage",
]
