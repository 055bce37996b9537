"""AMM pool pricing and accounting core."""

from poolcore.amm import PoolInfo, PositionInfo, WeeklyMovingAverage
from poolcore.config import DEFAULT_PRICING_CONFIG, PricingConfig
from poolcore.math import FixedPointDecimal
from poolcore.models import CoinInfo, CoinType, PoolType, TypeTag

__version__ = "0.1.0"
__all__ = [
    "PoolInfo",
    "PositionInfo",
    "WeeklyMovingAverage",
    "FixedPointDecimal",
    "TypeTag",
    "CoinType",
    "CoinInfo",
    "PoolType",
    "PricingConfig",
    "DEFAULT_PRICING_CONFIG",
    "__version__",
]
