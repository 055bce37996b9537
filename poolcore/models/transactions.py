"""Transaction-history records reported by chain adapters."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from poolcore.models.types import PoolType, SwapDirection, Uint128


class TransactionKind(str, Enum):
    """What an account did against a pool."""

    SWAP = "swap"
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"


class SwapTransactionData(BaseModel):
    pool_type: PoolType
    direction: SwapDirection
    in_amount: Uint128
    # Known only once the swap event has been indexed
    out_amount: Uint128 | None = None

    model_config = {"frozen": True}


class DepositTransactionData(BaseModel):
    pool_type: PoolType
    in_amount_x: Uint128
    in_amount_y: Uint128

    model_config = {"frozen": True}


class WithdrawTransactionData(BaseModel):
    pool_type: PoolType
    out_amount_x: Uint128 | None = None
    out_amount_y: Uint128 | None = None

    model_config = {"frozen": True}


class TransactionRecord(BaseModel):
    """One entry of an account's AMM history."""

    id: str
    kind: TransactionKind
    success: bool
    data: SwapTransactionData | DepositTransactionData | WithdrawTransactionData
    timestamp: int = Field(ge=0, description="Unix seconds.")

    model_config = {"frozen": True}

    @property
    def pool_type(self) -> PoolType:
        return self.data.pool_type


def filter_by_pool(records: list[TransactionRecord], pool_type: PoolType) -> list[TransactionRecord]:
    """Records touching ``pool_type``, newest first."""
    matching = [r for r in records if r.pool_type == pool_type]
    return sorted(matching, key=lambda r: r.timestamp, reverse=True)
