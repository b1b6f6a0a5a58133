"""Live reads against Base mainnet contracts."""

from __future__ import annotations

import pytest

from mint_pricer.chain.abis import KNOWN_CONTRACTS
from mint_pricer.chain.erc20 import fetch_erc20_details
from mint_pricer.errors import ChainReadError
from mint_pricer.models.mint import NFTContractInfo
from mint_pricer.pricing.engine import fetch_price_data

from tests.factories import make_params

BASE_USDC = "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"


@pytest.mark.live
async def test_usdc_details(live_reader):
    details = await fetch_erc20_details(live_reader, BASE_USDC, owner=None, spender=BASE_USDC)

    assert details.symbol == "USDC"
    assert details.decimals == 6
    assert details.allowance is None


@pytest.mark.live
async def test_revert_is_chain_read_error(live_reader):
    with pytest.raises(ChainReadError):
        await live_reader.read(
            BASE_USDC,
            ({"inputs": [], "name": "mintPrice", "outputs": [{"name": "", "type": "uint256"}],
              "stateMutability": "view", "type": "function"},),
            "mintPrice",
        )


@pytest.mark.live
async def test_manifold_extension_fee(live_reader):
    info = NFTContractInfo(
        provider="manifold",
        contract_address=BASE_USDC,
        extension_address=KNOWN_CONTRACTS["manifold_extension"],
    )

    result = await fetch_price_data(live_reader, make_params(contract_address=BASE_USDC), info)

    assert result.error is None
    assert result.mint_price is not None
    assert result.total_cost == result.mint_price
