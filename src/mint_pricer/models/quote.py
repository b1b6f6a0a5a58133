"""Price discovery output models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mint_pricer.models.mint import ClaimData


@dataclass
class ERC20Details:
    """Payment token details for claims paid in an ERC-20."""

    address: str
    symbol: str
    decimals: int  # 0..255
    allowance: int | None = None  # None = not queried (no recipient)
    balance: int | None = None


@dataclass
class PriceQuoteResult:
    """Normalized price quote for a mint."""

    total_cost: int = 0  # smallest native unit, attach as tx value
    mint_price: int | None = None
    erc20_details: ERC20Details | None = None
    claim: ClaimData | None = None
    error: str | None = None  # set only when the estimate was degraded

    @property
    def pays_in_erc20(self) -> bool:
        return self.erc20_details is not None

    @property
    def degraded(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class MintCall:
    """Everything needed to assemble (not sign) a mint transaction."""

    address: str
    abi: tuple[dict[str, Any], ...]
    function_name: str
    args: list[Any] = field(default_factory=list)
    value: int = 0
