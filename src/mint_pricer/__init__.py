"""mint_pricer - NFT mint cost discovery across minting providers."""

from mint_pricer.models import MintParams, NFTContractInfo, PriceQuoteResult
from mint_pricer.pricing import PriceDiscoveryEngine, build_mint_call, fetch_price_data
from mint_pricer.providers import get_provider_config

__version__ = "0.1.0"

__all__ = [
    "MintParams",
    "NFTContractInfo",
    "PriceQuoteResult",
    "PriceDiscoveryEngine",
    "build_mint_call",
    "fetch_price_data",
    "get_provider_config",
]
