"""Pytest configuration and fixtures."""

import pytest

from poolcore.amm.pool import PoolInfo
from tests.helpers import ACCOUNT, BTC, make_pool
from tests.helpers.fakes import FakeAdapter


@pytest.fixture
def apt_usdt_pool() -> PoolInfo:
    """APT/USDT pool with 1M/2M reserves and no fees."""
    return make_pool()


@pytest.fixture
def apt_btc_pool() -> PoolInfo:
    """APT/BTC pool with a 30 bps LP fee."""
    return make_pool(x=5_000_000, y=100, y_type=BTC, address="0xb7c", lp_fee=30)


@pytest.fixture
def fake_adapter(apt_usdt_pool: PoolInfo, apt_btc_pool: PoolInfo) -> FakeAdapter:
    """Adapter serving two pools and an empty account."""
    return FakeAdapter(pools=[apt_usdt_pool, apt_btc_pool], coins={ACCOUNT: []})
