"""Minting provider records."""

from mint_pricer.providers.registry import (
    PROVIDER_CONFIGS,
    get_provider_config,
    provider_names,
)

__all__ = ["PROVIDER_CONFIGS", "get_provider_config", "provider_names"]
