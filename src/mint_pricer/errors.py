"""Exception hierarchy for mint_pricer."""

from __future__ import annotations


class MintPricerError(Exception):
    """Base class for all mint_pricer errors."""


class ChainReadError(MintPricerError):
    """A single read-only contract call failed (transport error or revert)."""

    def __init__(self, address: str, function_name: str, reason: str) -> None:
        super().__init__(f"{function_name}() on {address} failed: {reason}")
        self.address = address
        self.function_name = function_name
        self.reason = reason


class PriceDiscoveryError(MintPricerError):
    """Price data was read but could not be turned into a quote."""


class InvalidTokenDecimalsError(PriceDiscoveryError):
    """An ERC-20 token reported decimals outside [0, 255] or a non-number."""

    def __init__(self, token: str, decimals: object) -> None:
        super().__init__(f"Invalid ERC20 decimals for {token}: {decimals!r}")
        self.token = token
        self.decimals = decimals


class ConfigError(MintPricerError):
    """Configuration file or environment value is invalid."""
