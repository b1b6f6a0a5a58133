"""Protocol interfaces for mint_pricer components."""

from mint_pricer.interfaces.quoter import PriceQuoter
from mint_pricer.interfaces.reader import ChainReader

__all__ = ["ChainReader", "PriceQuoter"]
