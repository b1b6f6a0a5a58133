"""Provider descriptor models.

A minting provider is fully described by a ProviderConfig record: which
discovery strategy to run, which functions to probe, and the pure functions
that shape the mint call. Adding a provider means adding a record.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from mint_pricer.models.mint import MintParams

Abi = tuple[dict[str, Any], ...]
BuildArgs = Callable[[MintParams], list[Any]]
CalculateValue = Callable[[int, MintParams], int]


class DiscoveryStrategy(str, Enum):
    """Price discovery algorithm selected by a provider record."""

    MANIFOLD = "manifold"  # extension MINT_FEE + claim struct
    NFTS2ME = "nfts2me"  # ordered pattern fallback with fee constants
    CANDIDATES = "candidates"  # first successful candidate function name


@dataclass(frozen=True)
class PriceDiscoveryConfig:
    function_names: tuple[str, ...]
    abis: tuple[Abi, ...]
    strategy: DiscoveryStrategy = DiscoveryStrategy.CANDIDATES
    requires_instance_id: bool = False
    requires_amount_param: bool = False


@dataclass(frozen=True)
class MintConfig:
    abi: Abi
    function_name: str
    build_args: BuildArgs
    calculate_value: CalculateValue


@dataclass(frozen=True)
class ProviderConfig:
    """Immutable description of one minting provider."""

    name: str
    price_discovery: PriceDiscoveryConfig
    mint_config: MintConfig
    extension_addresses: tuple[str, ...] = ()
    required_params: tuple[str, ...] = ("contract_address", "chain_id")
    supports_erc20: bool = False

    def missing_params(self, params: MintParams) -> list[str]:
        """Names of required parameters that are unset on ``params``."""
        missing = [
            name for name in self.required_params
            if getattr(params, name, None) in (None, "")
        ]
        if self.price_discovery.requires_instance_id and params.instance_id is None:
            missing.append("instance_id")
        return missing
