"""Parsing of generic on-chain type strings.

Pool, coin and share-token identities arrive as generic type strings such
as ``0xabc::pool::Pool<0x1::aptos_coin::AptosCoin, 0xdef::usdt::USDT>``.
TypeTag splits them into a head and top-level type arguments; nested
arguments are kept verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from poolcore.models.types import CoinType, Network, PoolType

_OUTER_PATTERN = re.compile(r"^(.+?)<(.*)>$", re.DOTALL)

LSP_STRUCT = "LSP"


class _ArgumentSplitter:
    """Depth-tracking scanner over the body of a generic type.

    A comma separates arguments only at depth 0. A single space after a
    separating comma is skipped. Empty arguments are never emitted.
    """

    def __init__(self) -> None:
        self.depth = 0
        self.buffer: list[str] = []
        self.args: list[str] = []
        self.skip_space = False

    def feed(self, c: str) -> None:
        if self.skip_space:
            self.skip_space = False
            if c == " ":
                return

        if c == "<":
            self.depth += 1
        elif c == ">":
            self.depth -= 1

        if c == "," and self.depth == 0:
            self._flush()
            self.skip_space = True
        else:
            self.buffer.append(c)

    def finish(self) -> tuple[str, ...]:
        self._flush()
        return tuple(self.args)

    def _flush(self) -> None:
        if self.buffer:
            self.args.append("".join(self.buffer))
        self.buffer = []


def split_type_args(inner: str) -> tuple[str, ...]:
    """Split the body of ``Head<...>`` into its top-level arguments."""
    splitter = _ArgumentSplitter()
    for c in inner:
        splitter.feed(c)
    return splitter.finish()


@dataclass(frozen=True)
class TypeTag:
    """A parsed ``Head<Arg1, Arg2, ...>`` type string."""

    head: str
    args: tuple[str, ...] = ()

    @classmethod
    def parse(cls, s: str) -> TypeTag | None:
        """Parse a generic type string.

        Returns:
            The parsed tag, or None if ``s`` has no enclosing angle brackets.
        """
        match = _OUTER_PATTERN.match(s)
        if match is None:
            return None
        return cls(head=match.group(1), args=split_type_args(match.group(2)))

    def __str__(self) -> str:
        if not self.args:
            return self.head
        return f"{self.head}<{', '.join(self.args)}>"


def unwrap_coin_type(type_string: str, wrapper_head: str) -> str | None:
    """Extract ``T`` from ``wrapper_head<T>``.

    Used for holdings reported as e.g. ``0x1::coin::CoinStore<T>`` or
    ``0x2::coin::Coin<T>``.
    """
    tag = TypeTag.parse(type_string)
    if tag is None or tag.head != wrapper_head or len(tag.args) != 1:
        return None
    return tag.args[0]


def pool_type_from_descriptor(type_descriptor: str, network: Network) -> PoolType | None:
    """Derive the ordered coin pair from a pool's raw type string.

    The first two type arguments are the X and Y coins.
    """
    tag = TypeTag.parse(type_descriptor)
    if tag is None or len(tag.args) < 2:
        return None
    return PoolType(
        x_type=CoinType(network=network, name=tag.args[0]),
        y_type=CoinType(network=network, name=tag.args[1]),
    )


def lsp_head(package_address: str, module: str = "pool") -> str:
    return f"{package_address}::{module}::{LSP_STRUCT}"


def lsp_type_name(package_address: str, pool_type: PoolType, module: str = "pool") -> str:
    """Type name of the share token minted by pools of ``pool_type``."""
    tag = TypeTag(
        head=lsp_head(package_address, module),
        args=(pool_type.x_type.name, pool_type.y_type.name),
    )
    return str(tag)


def is_lsp_coin_type(
    type_name: str,
    package_address: str,
    pool_type: PoolType | None = None,
    module: str = "pool",
) -> bool:
    """Check whether ``type_name`` is a share token of the package.

    Args:
        type_name: Fully-qualified coin type name
        package_address: Address of the AMM package
        pool_type: If given, additionally require the share token to belong
            to this exact (X, Y) pair
        module: Module declaring the share token struct
    """
    tag = TypeTag.parse(type_name)
    if tag is None or tag.head != lsp_head(package_address, module) or len(tag.args) != 2:
        return False
    if pool_type is None:
        return True
    return tag.args == (pool_type.x_type.name, pool_type.y_type.name)
