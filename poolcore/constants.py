"""Ledger constants shared by the pricing and accounting core.

Centralizes the numeric conventions fixed across the adapter and
transaction-builder boundaries, plus the well-known primary coin names.
"""

# Fee fields are basis points out of 10_000
BPS_SCALING = 10_000

# Internal scaling for slippage / price-impact ratios
SLIPPAGE_SCALE = 10**8

# Scaling used when rounding (1 - tolerance) for minimum-output bounds
MIN_OUTPUT_SCALE = 10**9

# The yield accumulator stores numerators pre-multiplied by 1e8 on chain;
# slot ratios are taken at this scale and normalized back by 1e16
SMA_RATIO_SCALE = 10**8
SMA_RATIO_NORMALIZER = 10**16
SMA_SLOTS = 7

SECONDS_PER_DAY = 86_400

U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1

# Wrapper heads that hold a coin balance of type T
APTOS_COIN_STORE_HEAD = "0x1::coin::CoinStore"
SUI_COIN_HEAD = "0x2::coin::Coin"

# Primary (gas) coin names per network
SUI_COIN_NAME = "0x2::sui::SUI"
APTOS_COIN_NAME = "0x1::aptos_coin::AptosCoin"
