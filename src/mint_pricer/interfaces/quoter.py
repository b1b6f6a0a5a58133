"""PriceQuoter protocol - price discovery for a mint."""

from __future__ import annotations

from typing import Protocol

from mint_pricer.models.mint import MintParams, NFTContractInfo
from mint_pricer.models.quote import PriceQuoteResult


class PriceQuoter(Protocol):
    """Discovers the cost of a mint against a provider's contract."""

    async def quote(
        self, params: MintParams, contract_info: NFTContractInfo
    ) -> PriceQuoteResult:
        """Return a best-effort quote. May enrich ``contract_info.claim``."""
        ...
