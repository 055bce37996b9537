"""Tests for generic type-string parsing."""

import pytest

from poolcore.models.type_tag import (
    TypeTag,
    is_lsp_coin_type,
    lsp_type_name,
    pool_type_from_descriptor,
    split_type_args,
    unwrap_coin_type,
)
from poolcore.models.types import Network, PoolType
from tests.helpers import APT, PACKAGE, USDT, lsp_name, pool_descriptor


class TestSplitTypeArgs:
    """Tests for top-level argument splitting."""

    def test_two_simple_args(self):
        assert split_type_args("0x1::a::A, 0x2::b::B") == ("0x1::a::A", "0x2::b::B")

    def test_nested_commas_stay_inside(self):
        assert split_type_args("0x1::m::W<0x1::a::A, 0x2::b::B>, 0x3::c::C") == (
            "0x1::m::W<0x1::a::A, 0x2::b::B>",
            "0x3::c::C",
        )

    def test_comma_without_space(self):
        assert split_type_args("A,B") == ("A", "B")

    def test_empty_args_dropped(self):
        assert split_type_args("A, , B") == ("A", "B")
        assert split_type_args("") == ()


class TestTypeTagParse:
    """Tests for TypeTag.parse."""

    def test_pool_descriptor(self):
        tag = TypeTag.parse(pool_descriptor(APT, USDT))
        assert tag is not None
        assert tag.head == f"{PACKAGE}::pool::Pool"
        assert tag.args == (APT.name, USDT.name)

    def test_no_generics_returns_none(self):
        assert TypeTag.parse("0x1::aptos_coin::AptosCoin") is None

    def test_nested_generic_kept_verbatim(self):
        tag = TypeTag.parse("0x1::coin::CoinStore<0xa::pool::LSP<0x1::a::A, 0x2::b::B>>")
        assert tag is not None
        assert tag.head == "0x1::coin::CoinStore"
        assert tag.args == ("0xa::pool::LSP<0x1::a::A, 0x2::b::B>",)

    def test_str_round_trip(self):
        raw = pool_descriptor(APT, USDT)
        assert str(TypeTag.parse(raw)) == raw

    def test_str_without_args(self):
        assert str(TypeTag(head="0x1::a::A")) == "0x1::a::A"


class TestCoinUnwrap:
    """Tests for unwrap_coin_type."""

    def test_aptos_coin_store(self):
        assert unwrap_coin_type(f"0x1::coin::CoinStore<{APT.name}>", "0x1::coin::CoinStore") == APT.name

    def test_wrong_wrapper(self):
        assert unwrap_coin_type(f"0x2::coin::Coin<{APT.name}>", "0x1::coin::CoinStore") is None

    def test_not_generic(self):
        assert unwrap_coin_type(APT.name, "0x1::coin::CoinStore") is None


class TestPoolTypeFromDescriptor:
    """Tests for deriving the ordered pair from a descriptor."""

    def test_first_two_args(self):
        pool_type = pool_type_from_descriptor(pool_descriptor(APT, USDT), Network.APTOS)
        assert pool_type == PoolType(x_type=APT, y_type=USDT)

    def test_extra_args_ignored(self):
        descriptor = f"{PACKAGE}::pool::Pool<{APT.name}, {USDT.name}, 0x1::curve::Uncorrelated>"
        pool_type = pool_type_from_descriptor(descriptor, Network.APTOS)
        assert pool_type == PoolType(x_type=APT, y_type=USDT)

    @pytest.mark.parametrize("descriptor", ["0xa::pool::Pool", "0xa::pool::Pool<0x1::a::A>"])
    def test_fewer_than_two_args(self, descriptor):
        assert pool_type_from_descriptor(descriptor, Network.APTOS) is None


class TestLspTypes:
    """Tests for share-token type names."""

    def test_lsp_type_name(self):
        assert lsp_type_name(PACKAGE, PoolType(x_type=APT, y_type=USDT)) == lsp_name(APT, USDT)

    def test_is_lsp_coin_type(self):
        assert is_lsp_coin_type(lsp_name(APT, USDT), PACKAGE)

    def test_is_lsp_for_pool_type_is_ordered(self):
        name = lsp_name(APT, USDT)
        assert is_lsp_coin_type(name, PACKAGE, PoolType(x_type=APT, y_type=USDT))
        assert not is_lsp_coin_type(name, PACKAGE, PoolType(x_type=USDT, y_type=APT))

    def test_other_package_is_not_lsp(self):
        assert not is_lsp_coin_type(lsp_name(APT, USDT), "0xdead")

    def test_plain_coin_is_not_lsp(self):
        assert not is_lsp_coin_type(APT.name, PACKAGE)

    def test_custom_module(self):
        name = f"{PACKAGE}::amm::LSP<{APT.name}, {USDT.name}>"
        assert is_lsp_coin_type(name, PACKAGE, module="amm")
        assert not is_lsp_coin_type(name, PACKAGE)
