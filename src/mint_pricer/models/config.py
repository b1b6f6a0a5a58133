"""Configuration models for the pricer."""

from __future__ import annotations

from dataclasses import dataclass, field

from mint_pricer.errors import ConfigError

DEFAULT_RPC_URLS: dict[int, str] = {
    1: "https://eth.llamarpc.com",
    10: "https://mainnet.optimism.io",
    8453: "https://mainnet.base.org",
    42161: "https://arb1.arbitrum.io/rpc",
    7777777: "https://rpc.zora.energy",
}


@dataclass
class PricerConfig:
    """Complete pricer configuration."""

    log_level: str = "info"
    default_chain_id: int = 8453  # Base
    request_timeout: int = 30  # seconds per RPC request
    rpc_urls: dict[int, str] = field(default_factory=lambda: dict(DEFAULT_RPC_URLS))

    def rpc_url_for(self, chain_id: int) -> str:
        try:
            return self.rpc_urls[chain_id]
        except KeyError:
            raise ConfigError(f"No RPC URL configured for chain {chain_id}") from None
