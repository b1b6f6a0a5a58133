"""Data models for mint_pricer."""

from mint_pricer.models.config import PricerConfig
from mint_pricer.models.mint import ZERO_ADDRESS, ClaimData, MintParams, NFTContractInfo
from mint_pricer.models.provider import (
    DiscoveryStrategy,
    MintConfig,
    PriceDiscoveryConfig,
    ProviderConfig,
)
from mint_pricer.models.quote import ERC20Details, MintCall, PriceQuoteResult

__all__ = [
    "PricerConfig",
    "ZERO_ADDRESS", "ClaimData", "MintParams", "NFTContractInfo",
    "DiscoveryStrategy", "MintConfig", "PriceDiscoveryConfig", "ProviderConfig",
    "ERC20Details", "MintCall", "PriceQuoteResult",
]
