"""Tier 2 fixtures: real EVM JSON-RPC endpoint."""

from __future__ import annotations

import os

import pytest

from mint_pricer.chain.reader import Web3ChainReader

LIVE_RPC_ENV = "MINT_PRICER_LIVE_RPC_URL"


@pytest.fixture(scope="session")
def live_rpc_url():
    """RPC endpoint for Base mainnet. Skip tier2 tests if not configured."""
    url = os.environ.get(LIVE_RPC_ENV)
    if not url:
        pytest.skip(f"{LIVE_RPC_ENV} not set")
    return url


@pytest.fixture
async def live_reader(live_rpc_url):
    reader = Web3ChainReader(live_rpc_url, request_timeout=15)
    yield reader
    await reader.close()
