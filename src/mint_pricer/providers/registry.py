"""Provider registry - static ProviderConfig records keyed by provider name."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from mint_pricer.chain.abis import (
    KNOWN_CONTRACTS,
    MANIFOLD_EXTENSION_ABI,
    MINT_ABI,
    NFTS2ME_MINT_ABI,
    NFTS2ME_MINT_FEE_ABI,
    PRICE_DISCOVERY_ABI,
)
from mint_pricer.models.mint import MintParams
from mint_pricer.models.provider import (
    DiscoveryStrategy,
    MintConfig,
    PriceDiscoveryConfig,
    ProviderConfig,
)

GENERIC = "generic"


# ── Mint argument builders ────────────────────────────────


def _manifold_args(params: MintParams) -> list[Any]:
    return [
        params.contract_address,
        int(params.instance_id or 0),
        int(params.token_id or 0),  # mintIndex
        list(params.merkle_proof),
        params.recipient,
    ]


def _amount_args(params: MintParams) -> list[Any]:
    return [params.amount]


def _recipient_amount_args(params: MintParams) -> list[Any]:
    return [params.recipient, params.amount]


# ── Value calculators ─────────────────────────────────────


def _flat_fee(mint_fee: int, params: MintParams) -> int:
    # Claim cost may be paid in ERC-20, so only the fee is native value
    return mint_fee


def _per_unit(price: int, params: MintParams) -> int:
    return price * params.amount


# ── Records ───────────────────────────────────────────────

_CONFIGS: dict[str, ProviderConfig] = {
    "manifold": ProviderConfig(
        name="manifold",
        extension_addresses=(KNOWN_CONTRACTS["manifold_extension"],),
        price_discovery=PriceDiscoveryConfig(
            function_names=("MINT_FEE",),
            abis=(MANIFOLD_EXTENSION_ABI,),
            strategy=DiscoveryStrategy.MANIFOLD,
            requires_instance_id=True,
        ),
        mint_config=MintConfig(
            abi=MANIFOLD_EXTENSION_ABI,
            function_name="mint",
            build_args=_manifold_args,
            calculate_value=_flat_fee,
        ),
        supports_erc20=True,
    ),
    "opensea": ProviderConfig(
        name="opensea",
        price_discovery=PriceDiscoveryConfig(
            function_names=("mintPrice", "price", "publicMintPrice"),
            abis=(PRICE_DISCOVERY_ABI,),
        ),
        mint_config=MintConfig(
            abi=MINT_ABI,
            function_name="mint",
            build_args=_amount_args,
            calculate_value=_per_unit,
        ),
    ),
    "zora": ProviderConfig(
        name="zora",
        price_discovery=PriceDiscoveryConfig(
            function_names=("mintPrice", "price"),
            abis=(PRICE_DISCOVERY_ABI,),
        ),
        mint_config=MintConfig(
            abi=MINT_ABI,
            function_name="mint",
            build_args=_recipient_amount_args,
            calculate_value=_per_unit,
        ),
    ),
    GENERIC: ProviderConfig(
        name=GENERIC,
        price_discovery=PriceDiscoveryConfig(
            function_names=("mintPrice", "price", "MINT_PRICE", "getMintPrice"),
            abis=(PRICE_DISCOVERY_ABI,),
        ),
        mint_config=MintConfig(
            abi=MINT_ABI,
            function_name="mint",
            build_args=_amount_args,
            calculate_value=_per_unit,
        ),
    ),
    "nfts2me": ProviderConfig(
        name="nfts2me",
        price_discovery=PriceDiscoveryConfig(
            function_names=("mintFee",),
            abis=(NFTS2ME_MINT_FEE_ABI,),
            strategy=DiscoveryStrategy.NFTS2ME,
            requires_amount_param=True,
        ),
        mint_config=MintConfig(
            # mint(amount) takes the number of NFTs; payment is the tx value
            abi=NFTS2ME_MINT_ABI,
            function_name="mint",
            build_args=_amount_args,
            calculate_value=_per_unit,
        ),
    ),
}

PROVIDER_CONFIGS: MappingProxyType[str, ProviderConfig] = MappingProxyType(_CONFIGS)


def get_provider_config(provider: str | None) -> ProviderConfig:
    """Look up a provider record. Unknown providers resolve to ``generic``."""
    return PROVIDER_CONFIGS.get(provider or GENERIC, PROVIDER_CONFIGS[GENERIC])


def provider_names() -> list[str]:
    return list(PROVIDER_CONFIGS)
