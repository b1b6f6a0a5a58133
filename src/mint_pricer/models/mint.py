"""Mint input models: parameters, contract metadata, Manifold claim terms."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


@dataclass(frozen=True)
class MintParams:
    """Caller-supplied parameters for a single mint attempt."""

    contract_address: str
    chain_id: int
    amount: int = 1
    recipient: str | None = None
    instance_id: int | None = None  # Manifold claim selector
    token_id: int | None = None
    merkle_proof: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError(f"amount must be an integer, got {self.amount!r}")
        if self.amount < 1:
            raise ValueError(f"amount must be >= 1, got {self.amount}")
        # Accept lists from callers, store immutably
        object.__setattr__(self, "merkle_proof", tuple(self.merkle_proof))


@dataclass
class ClaimData:
    """Manifold claim terms, cached on NFTContractInfo after discovery."""

    cost: int = 0  # smallest native unit, or token units when erc20 is set
    merkle_root: bytes | str | None = None
    erc20: str = ZERO_ADDRESS
    start_date: int = 0
    end_date: int = 0
    wallet_max: int = 0

    @classmethod
    def from_struct(cls, raw: Mapping[str, Any]) -> ClaimData:
        """Build from a decoded getClaim() struct (camelCase field names)."""
        return cls(
            cost=int(raw.get("cost") or 0),
            merkle_root=raw.get("merkleRoot"),
            erc20=str(raw.get("erc20") or ZERO_ADDRESS),
            start_date=int(raw.get("startDate") or 0),
            end_date=int(raw.get("endDate") or 0),
            wallet_max=int(raw.get("walletMax") or 0),
        )

    @property
    def pays_in_erc20(self) -> bool:
        return bool(self.erc20) and self.erc20.lower() != ZERO_ADDRESS


@dataclass
class NFTContractInfo:
    """Per-contract metadata owned by the caller.

    ``claim`` is an output slot: a successful Manifold discovery stores the
    fetched claim terms here so a later mint against the same instance can
    reuse them without another read.
    """

    provider: str
    contract_address: str
    extension_address: str | None = None
    claim: ClaimData | None = field(default=None)
