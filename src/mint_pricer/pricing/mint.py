"""Mint call assembly from a provider record and a price quote."""

from __future__ import annotations

from mint_pricer.models.mint import MintParams, NFTContractInfo
from mint_pricer.models.provider import DiscoveryStrategy
from mint_pricer.models.quote import MintCall, PriceQuoteResult
from mint_pricer.providers.registry import get_provider_config


def build_mint_call(
    params: MintParams,
    contract_info: NFTContractInfo,
    quote: PriceQuoteResult,
) -> MintCall:
    """Build the unsigned mint call for ``params``.

    Manifold mints go through the extension contract when one is known.
    The attached value is the quote's native total cost.

    Raises:
        ValueError: if a parameter the provider requires is missing.
    """
    config = get_provider_config(contract_info.provider)
    missing = config.missing_params(params)
    if missing:
        raise ValueError(f"{config.name} mint requires: {', '.join(missing)}")

    address = contract_info.contract_address
    if (
        config.price_discovery.strategy is DiscoveryStrategy.MANIFOLD
        and contract_info.extension_address
    ):
        address = contract_info.extension_address

    return MintCall(
        address=address,
        abi=config.mint_config.abi,
        function_name=config.mint_config.function_name,
        args=config.mint_config.build_args(params),
        value=quote.total_cost,
    )
