"""Price discovery engine.

Dispatches on the provider record's discovery strategy and turns a handful
of read-only contract calls into a PriceQuoteResult. Independent reads are
issued as one concurrent batch; reads that depend on an earlier result (ERC-20
details need the claim's payment token) are issued only after it resolves.

Discovery never raises to the caller. Transient read failures are treated as
"no data"; anything else degrades to a zero-cost quote with ``error`` set.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from mint_pricer.chain.abis import (
    NFTS2ME_MINT_FEE_ABI,
    NFTS2ME_MINT_PRICE_ABI,
    NFTS2ME_PROTOCOL_FEE_ABI,
)
from mint_pricer.chain.erc20 import fetch_erc20_details
from mint_pricer.errors import InvalidTokenDecimalsError
from mint_pricer.interfaces.reader import ChainReader
from mint_pricer.models.mint import ClaimData, MintParams, NFTContractInfo
from mint_pricer.models.provider import DiscoveryStrategy, ProviderConfig
from mint_pricer.models.quote import PriceQuoteResult
from mint_pricer.providers.registry import get_provider_config

log = logging.getLogger(__name__)

# 0.0001 ETH each, per NFT, used when no fee function answers
NFTS2ME_CREATOR_FEE = 100_000_000_000_000
NFTS2ME_PROTOCOL_FEE = 100_000_000_000_000

Strategy = Callable[
    [ChainReader, ProviderConfig, MintParams, NFTContractInfo],
    Awaitable[PriceQuoteResult],
]


async def _read_or_none(
    reader: ChainReader,
    address: str,
    abi: Sequence[dict[str, Any]],
    function_name: str,
    args: Sequence[Any] = (),
) -> Any:
    """Single read with its own fault isolation: failures become None."""
    try:
        return await reader.read(address, abi, function_name, args)
    except Exception as exc:
        log.warning("RPC call %s() on %s failed: %s", function_name, address, exc)
        return None


def _as_wei(value: Any) -> int:
    """Decoded uint256 as a non-negative int; raises on anything else."""
    wei = int(value)
    if wei < 0:
        raise ValueError(f"negative amount {value!r}")
    return wei


# ── Manifold ──────────────────────────────────────────────


async def _discover_manifold(
    reader: ChainReader,
    config: ProviderConfig,
    params: MintParams,
    contract_info: NFTContractInfo,
) -> PriceQuoteResult:
    """Extension MINT_FEE plus claim cost, with optional ERC-20 payment."""
    extension = contract_info.extension_address
    abi = config.mint_config.abi
    try:
        reads = [_read_or_none(reader, extension, abi, "MINT_FEE")]
        if params.instance_id is not None:
            reads.append(
                _read_or_none(
                    reader, extension, abi, "getClaim",
                    [params.contract_address, int(params.instance_id)],
                )
            )
        results = await asyncio.gather(*reads)

        mint_fee = _as_wei(results[0] or 0)
        raw_claim = results[1] if len(results) > 1 else None
        total_cost = mint_fee
        erc20_details = None
        claim = None

        if raw_claim:
            claim = ClaimData.from_struct(raw_claim)
            contract_info.claim = claim

            if config.supports_erc20 and claim.pays_in_erc20:
                erc20_details = await fetch_erc20_details(
                    reader,
                    claim.erc20,
                    owner=params.recipient,
                    spender=extension or params.contract_address,
                )
                # Token covers the claim cost; only the fee is native
                total_cost = mint_fee
            else:
                total_cost = mint_fee + claim.cost

        return PriceQuoteResult(
            total_cost=total_cost,
            mint_price=mint_fee,
            erc20_details=erc20_details,
            claim=claim,
        )
    except InvalidTokenDecimalsError as exc:
        # TODO: surface invalid token data to the caller instead of quoting a free mint
        log.error("Invalid payment token data for %s: %s", params.contract_address, exc)
        return PriceQuoteResult(total_cost=0, error=str(exc))
    except Exception as exc:
        log.error("Failed to fetch Manifold price data for %s: %s", params.contract_address, exc)
        return PriceQuoteResult(total_cost=0, error=str(exc))


# ── NFTs2Me ───────────────────────────────────────────────


async def _discover_nfts2me(
    reader: ChainReader,
    config: ProviderConfig,
    params: MintParams,
    contract_info: NFTContractInfo,
) -> PriceQuoteResult:
    """Try mintPrice(), then mintFee(amount) + protocolFee(), then constants."""
    address = params.contract_address
    amount = params.amount

    # 1. mintPrice() - per-NFT price on simple/free contracts
    try:
        price = await reader.read(address, NFTS2ME_MINT_PRICE_ABI, "mintPrice", [])
        if price is not None:
            price = _as_wei(price)
    except Exception as exc:
        log.debug("mintPrice() not available on %s, trying mintFee: %s", address, exc)
        price = None
    if price is not None:
        return PriceQuoteResult(mint_price=price, total_cost=price * amount)

    # 2. mintFee(amount) is creator revenue, protocolFee() is per NFT
    mint_fee, protocol_fee = await asyncio.gather(
        reader.read(address, NFTS2ME_MINT_FEE_ABI, "mintFee", [amount]),
        reader.read(address, NFTS2ME_PROTOCOL_FEE_ABI, "protocolFee", []),
        return_exceptions=True,
    )
    failures = [r for r in (mint_fee, protocol_fee) if isinstance(r, BaseException)]
    if not failures and mint_fee is not None and protocol_fee is not None:
        try:
            mint_fee = _as_wei(mint_fee)
            total_cost = mint_fee + _as_wei(protocol_fee) * amount
        except (TypeError, ValueError, OverflowError) as exc:
            failures.append(exc)
        else:
            return PriceQuoteResult(mint_price=mint_fee, total_cost=total_cost)
    log.warning(
        "Failed to fetch nfts2me fees for %s, using defaults: %s",
        address, "; ".join(str(f) for f in failures) or "empty result",
    )

    # 3. Default fees
    return PriceQuoteResult(
        mint_price=NFTS2ME_CREATOR_FEE * amount,
        total_cost=(NFTS2ME_CREATOR_FEE + NFTS2ME_PROTOCOL_FEE) * amount,
    )


# ── Candidate function names ──────────────────────────────


async def _discover_candidates(
    reader: ChainReader,
    config: ProviderConfig,
    params: MintParams,
    contract_info: NFTContractInfo,
) -> PriceQuoteResult:
    """Probe candidate price functions in order; the first answer wins."""
    discovery = config.price_discovery
    abi = discovery.abis[0]
    args = [params.amount] if discovery.requires_amount_param else []

    for function_name in discovery.function_names:
        try:
            price = await reader.read(params.contract_address, abi, function_name, args)
            if price is None:
                continue
            price = _as_wei(price)
            total_cost = _as_wei(config.mint_config.calculate_value(price, params))
        except Exception as exc:
            log.debug("%s() not usable on %s: %s", function_name, params.contract_address, exc)
            continue
        return PriceQuoteResult(mint_price=price, total_cost=total_cost)

    log.info("No price function answered on %s, assuming free mint", params.contract_address)
    return PriceQuoteResult(mint_price=0, total_cost=0)


_STRATEGIES: dict[DiscoveryStrategy, Strategy] = {
    DiscoveryStrategy.MANIFOLD: _discover_manifold,
    DiscoveryStrategy.NFTS2ME: _discover_nfts2me,
    DiscoveryStrategy.CANDIDATES: _discover_candidates,
}


async def fetch_price_data(
    reader: ChainReader,
    params: MintParams,
    contract_info: NFTContractInfo,
) -> PriceQuoteResult:
    """Discover the cost of minting from ``contract_info``'s provider.

    ``contract_info.claim`` is written in place when a Manifold claim is
    fetched; the same object is returned as ``result.claim``.
    """
    config = get_provider_config(contract_info.provider)
    strategy = config.price_discovery.strategy
    if strategy is DiscoveryStrategy.MANIFOLD and not contract_info.extension_address:
        # No extension to ask: probe the contract directly
        strategy = DiscoveryStrategy.CANDIDATES

    log.debug(
        "Price discovery for %s (provider=%s, strategy=%s)",
        params.contract_address, config.name, strategy.value,
    )
    return await _STRATEGIES[strategy](reader, config, params, contract_info)


class PriceDiscoveryEngine:
    """PriceQuoter bound to a single chain reader."""

    def __init__(self, reader: ChainReader) -> None:
        self._reader = reader

    async def quote(
        self, params: MintParams, contract_info: NFTContractInfo
    ) -> PriceQuoteResult:
        return await fetch_price_data(self._reader, params, contract_info)
