"""Synthetic input factories for testing."""

from __future__ import annotations

from typing import Any

from mint_pricer.models.mint import ZERO_ADDRESS, MintParams, NFTContractInfo

CONTRACT = "0x1111111111111111111111111111111111111111"
EXTENSION = "0x26BBEA7803DcAc346D5F5f135b57Cf2c752A02bE"
TOKEN = "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"
RECIPIENT = "0x2222222222222222222222222222222222222222"
MERKLE_ROOT = "0x" + "00" * 32


def make_params(
    contract_address: str = CONTRACT,
    chain_id: int = 8453,
    amount: int = 1,
    recipient: str | None = None,
    instance_id: int | None = None,
    token_id: int | None = None,
    merkle_proof: tuple[str, ...] = (),
) -> MintParams:
    return MintParams(
        contract_address=contract_address,
        chain_id=chain_id,
        amount=amount,
        recipient=recipient,
        instance_id=instance_id,
        token_id=token_id,
        merkle_proof=merkle_proof,
    )


def make_contract_info(
    provider: str = "generic",
    contract_address: str = CONTRACT,
    extension_address: str | None = None,
) -> NFTContractInfo:
    return NFTContractInfo(
        provider=provider,
        contract_address=contract_address,
        extension_address=extension_address,
    )


def make_claim_struct(
    cost: int = 1_000_000_000_000_000,
    erc20: str = ZERO_ADDRESS,
    start_date: int = 1_700_000_000,
    end_date: int = 1_800_000_000,
    wallet_max: int = 0,
    merkle_root: bytes | str = MERKLE_ROOT,
) -> dict[str, Any]:
    """Decoded getClaim() struct, as a ChainReader returns it."""
    return {
        "total": 10,
        "totalMax": 100,
        "walletMax": wallet_max,
        "startDate": start_date,
        "endDate": end_date,
        "storageProtocol": 2,
        "merkleRoot": merkle_root,
        "location": "ar://manifest",
        "tokenId": 1,
        "cost": cost,
        "paymentReceiver": RECIPIENT,
        "erc20": erc20,
        "signingAddress": ZERO_ADDRESS,
    }
