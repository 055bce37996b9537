"""Shared type definitions for pool and coin snapshots.

Value types are frozen dataclasses: a snapshot is built once by the chain
adapter and never written afterwards. The annotated integer types validate
amounts arriving across the adapter boundary.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from poolcore.constants import APTOS_COIN_NAME, SUI_COIN_NAME, U64_MAX, U128_MAX


class Network(str, Enum):
    """Ledger network a coin or pool lives on."""

    SUI = "sui"
    APTOS = "aptos"


class FeeDirection(str, Enum):
    """Reserve side the admin-level fee is taken from."""

    X = "X"
    Y = "Y"


class SwapType(str, Enum):
    """Curve family of a pool."""

    V2 = "v2"
    STABLE = "stable"


class SwapDirection(str, Enum):
    """Direction of a swap relative to the pool's (X, Y) ordering."""

    FORWARD = "forward"
    REVERSE = "reverse"


class NotAvailableReason(str, Enum):
    """Why a pool currently refuses swaps."""

    FREEZE = "Pool is frozen"
    EMPTY = "Pool is empty, deposit first"


@dataclass(frozen=True)
class CoinType:
    """Coin identity: equal when network and fully-qualified name match."""

    network: Network
    name: str

    @property
    def uuid(self) -> str:
        return f"CoinType[{self.network.value}-{self.name}]"


@dataclass(frozen=True)
class CoinInfo:
    """A coin holding: its type, the object/account address, and balance."""

    type: CoinType
    address: str
    balance: int

    @property
    def uuid(self) -> str:
        return f"CoinInfo[{self.type.uuid}-{self.address}]"


def is_same_coin(a: CoinInfo, b: CoinInfo) -> bool:
    """Check whether two holdings denote the same coin object.

    On Aptos every coin of an account shares the account address, so the
    balance is compared too.
    """
    return a.type == b.type and a.address == b.address and a.balance == b.balance


@dataclass(frozen=True)
class PoolType:
    """Ordered (X, Y) coin pair. (A, B) and (B, A) are different pools."""

    x_type: CoinType
    y_type: CoinType

    @property
    def uuid(self) -> str:
        return f"PoolType[{self.x_type.uuid}-{self.y_type.uuid}]"

    @property
    def lsp_uuid(self) -> str:
        """Identity of the share token minted by pools of this type."""
        return f"LSPCoinType[{self.x_type.uuid}-{self.y_type.uuid}]"

    def reversed(self) -> PoolType:
        return PoolType(x_type=self.y_type, y_type=self.x_type)


PRIMARY_COIN_TYPES: dict[Network, CoinType] = {
    Network.SUI: CoinType(network=Network.SUI, name=SUI_COIN_NAME),
    Network.APTOS: CoinType(network=Network.APTOS, name=APTOS_COIN_NAME),
}


def _make_uint_validator(max_value: int, name: str) -> Callable[[Any], int]:
    def validate(value: Any) -> int:
        """Validate an exact unsigned integer amount.

        Accepts ints and decimal-integer strings. Floats are rejected: an
        amount that went through a float upstream may already be rounded.

        Raises:
            ValueError: If value is not an exact integer within range
        """
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer, got bool")
        if isinstance(value, int):
            int_value = value
        elif isinstance(value, str):
            try:
                int_value = int(value, 10)
            except ValueError as err:
                raise ValueError(f"{name} must be a decimal integer string: '{value}'") from err
        else:
            raise ValueError(f"{name} must be string or int, got {type(value).__name__}")

        if int_value < 0:
            raise ValueError(f"{name} cannot be negative: {value}")
        if int_value > max_value:
            raise ValueError(f"{name} overflow: {value}")
        return int_value

    return validate


validate_uint64 = _make_uint_validator(U64_MAX, "Uint64")
validate_uint128 = _make_uint_validator(U128_MAX, "Uint128")

# Ledger amounts (balances, fee counters, timestamps)
Uint64 = Annotated[
    int,
    BeforeValidator(validate_uint64),
    Field(description="64-bit unsigned integer"),
]

# Reserves, supplies and accumulators that need 128-bit headroom
Uint128 = Annotated[
    int,
    BeforeValidator(validate_uint128),
    Field(description="128-bit unsigned integer"),
]

# Basis points, parts per 10_000
Bps = Annotated[int, BeforeValidator(validate_uint64), Field(le=10_000)]
