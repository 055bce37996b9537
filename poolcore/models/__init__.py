"""Value types, type-string parsing and adapter records."""

from poolcore.models.transactions import (
    DepositTransactionData,
    SwapTransactionData,
    TransactionKind,
    TransactionRecord,
    WithdrawTransactionData,
)
from poolcore.models.type_tag import TypeTag, is_lsp_coin_type, lsp_type_name
from poolcore.models.types import (
    PRIMARY_COIN_TYPES,
    CoinInfo,
    CoinType,
    FeeDirection,
    Network,
    NotAvailableReason,
    PoolType,
    SwapDirection,
    SwapType,
    Uint64,
    Uint128,
    is_same_coin,
)

__all__ = [
    # Types
    "Uint64",
    "Uint128",
    "Network",
    "CoinType",
    "CoinInfo",
    "PoolType",
    "FeeDirection",
    "SwapType",
    "SwapDirection",
    "NotAvailableReason",
    "PRIMARY_COIN_TYPES",
    "is_same_coin",
    # Type strings
    "TypeTag",
    "is_lsp_coin_type",
    "lsp_type_name",
    # Transaction history
    "TransactionKind",
    "TransactionRecord",
    "SwapTransactionData",
    "DepositTransactionData",
    "WithdrawTransactionData",
]
