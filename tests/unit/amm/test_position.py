"""Tests for liquidity-position accounting and share-token matching."""

import pytest

from poolcore.amm.position import PositionInfo, find_positions
from poolcore.config import PricingConfig
from poolcore.math.fixed_point import FixedPointDecimal
from poolcore.models.types import CoinType, Network
from tests.helpers import APT, BTC, PACKAGE, USDT, lsp_name, make_coin, make_pool


def _lsp_coin(balance: int, x=APT, y=USDT):
    return make_coin(CoinType(network=Network.APTOS, name=lsp_name(x, y)), balance)


def _position(ratio: str | None = None, balance: int = 100_000) -> PositionInfo:
    return PositionInfo(
        pool=make_pool(lsp_supply=1_000_000),
        share_coin=_lsp_coin(balance),
        ratio=FixedPointDecimal.parse(ratio) if ratio is not None else None,
    )


class TestPositionBalance:
    """Shares in scope."""

    def test_whole_holding(self):
        assert _position().balance() == 100_000

    def test_quarter(self):
        assert _position("0.25").balance() == 25_000

    def test_ratio_truncates(self):
        assert _position("0.333").balance() == 33_300

    def test_ratio_above_one_clamped(self):
        assert _position("1.5").balance() == 100_000

    def test_zero_ratio(self):
        assert _position("0").balance() == 0

    def test_with_ratio_copies(self):
        position = _position()
        scoped = position.with_ratio(FixedPointDecimal(25, 2))
        assert scoped.balance() == 25_000
        assert position.ratio is None


class TestPositionAmounts:
    """Pro-rata redemption values."""

    def test_share_coin_amounts(self):
        assert _position("0.25").share_coin_amounts() == (25_000, 50_000)

    def test_share_ratio(self):
        assert _position("0.25").share_ratio() == pytest.approx(0.025)

    def test_zero_supply(self):
        position = PositionInfo(pool=make_pool(lsp_supply=0), share_coin=_lsp_coin(10))
        assert position.share_coin_amounts() == (0, 0)
        assert position.share_ratio() == 0.0

    def test_amounts_do_not_exceed_reserves(self):
        position = PositionInfo(pool=make_pool(lsp_supply=1_000_000), share_coin=_lsp_coin(1_000_000))
        assert position.share_coin_amounts() == (1_000_000, 2_000_000)

    def test_uuid(self):
        position = _position()
        assert position.uuid == f"PositionInfo[{position.pool.uuid}-{position.share_coin.uuid}]"


class TestFindPositions:
    """Matching share tokens to pools."""

    def test_matches_pool(self):
        pool = make_pool()
        positions = find_positions([pool], [_lsp_coin(10)], PACKAGE)
        assert len(positions) == 1
        assert positions[0].pool is pool
        assert positions[0].balance() == 10

    def test_largest_supply_wins(self):
        small = make_pool(lsp_supply=10, address="0x1")
        large = make_pool(lsp_supply=1_000, address="0x2")
        positions = find_positions([small, large], [_lsp_coin(10)], PACKAGE)
        assert positions[0].pool is large

    def test_first_pool_wins_ties(self):
        first = make_pool(address="0x1")
        second = make_pool(address="0x2")
        positions = find_positions([first, second], [_lsp_coin(10)], PACKAGE)
        assert positions[0].pool is first

    def test_pair_order_matters(self):
        reversed_pool = make_pool(x_type=USDT, y_type=APT)
        assert find_positions([reversed_pool], [_lsp_coin(10)], PACKAGE) == []

    def test_skips_plain_coins_and_empty_holdings(self):
        coins = [make_coin(APT, 500), _lsp_coin(0)]
        assert find_positions([make_pool()], coins, PACKAGE) == []

    def test_skips_other_package(self):
        assert find_positions([make_pool()], [_lsp_coin(10)], "0xdead") == []

    def test_no_matching_pool(self):
        assert find_positions([make_pool()], [_lsp_coin(10, APT, BTC)], PACKAGE) == []

    def test_network_must_match(self):
        sui_coin = make_coin(CoinType(network=Network.SUI, name=lsp_name(APT, USDT)), 10)
        assert find_positions([make_pool()], [sui_coin], PACKAGE) == []

    def test_wrong_arity(self):
        coin = make_coin(CoinType(network=Network.APTOS, name=f"{PACKAGE}::pool::LSP<{APT.name}>"), 10)
        assert find_positions([make_pool()], [coin], PACKAGE) == []

    def test_custom_module(self):
        coin = make_coin(
            CoinType(network=Network.APTOS, name=f"{PACKAGE}::amm::LSP<{APT.name}, {USDT.name}>"), 10
        )
        config = PricingConfig(lsp_module="amm")
        assert len(find_positions([make_pool()], [coin], PACKAGE, config)) == 1
        assert find_positions([make_pool()], [coin], PACKAGE) == []
