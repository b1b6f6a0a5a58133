"""Price discovery and mint call assembly."""

from mint_pricer.pricing.engine import PriceDiscoveryEngine, fetch_price_data
from mint_pricer.pricing.mint import build_mint_call

__all__ = ["PriceDiscoveryEngine", "fetch_price_data", "build_mint_call"]
