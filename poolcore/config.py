"""Configuration for the pricing core."""

from __future__ import annotations

import os
from dataclasses import dataclass

import structlog

logger = structlog.get_logger()


@dataclass(frozen=True)
class PricingConfig:
    """Centralized tunables for quoting and yield estimation.

    Ledger conventions (bps scale, rounding scales) are fixed in
    poolcore.constants and are not configurable.

    Attributes:
        default_slippage_tolerance: Tolerance used for minimum-output bounds
            when the caller passes none (default: 0.005 = 0.5%)
        days_per_year: Compounding periods when annualizing daily yield
        lsp_module: Module of the AMM package declaring the share token
    """

    default_slippage_tolerance: float = 0.005
    days_per_year: int = 365
    lsp_module: str = "pool"

    def __post_init__(self) -> None:
        if not 0.0 <= self.default_slippage_tolerance <= 1.0:
            raise ValueError(
                f"default_slippage_tolerance must be within [0, 1], got {self.default_slippage_tolerance}"
            )
        if self.days_per_year <= 0:
            raise ValueError(f"days_per_year must be positive, got {self.days_per_year}")
        if not self.lsp_module:
            raise ValueError("lsp_module must not be empty")

    @classmethod
    def from_env(cls) -> PricingConfig:
        """Build a config from environment variables.

        - POOLCORE_SLIPPAGE_TOLERANCE: default slippage tolerance (default: 0.005)
        - POOLCORE_DAYS_PER_YEAR: annualization periods (default: 365)
        - POOLCORE_LSP_MODULE: share token module (default: pool)

        Raises:
            ValueError: If a variable is set to an invalid value
        """
        defaults = cls()
        try:
            config = cls(
                default_slippage_tolerance=float(
                    os.environ.get("POOLCORE_SLIPPAGE_TOLERANCE", defaults.default_slippage_tolerance)
                ),
                days_per_year=int(os.environ.get("POOLCORE_DAYS_PER_YEAR", defaults.days_per_year)),
                lsp_module=os.environ.get("POOLCORE_LSP_MODULE", defaults.lsp_module),
            )
        except ValueError as err:
            logger.error("pricing_config_invalid", error=str(err))
            raise
        logger.debug(
            "pricing_config_loaded",
            default_slippage_tolerance=config.default_slippage_tolerance,
            days_per_year=config.days_per_year,
            lsp_module=config.lsp_module,
        )
        return config


# Default configuration instance
DEFAULT_PRICING_CONFIG = PricingConfig()
