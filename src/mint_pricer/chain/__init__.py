"""EVM chain integration components."""

from mint_pricer.chain.erc20 import fetch_erc20_details, validate_decimals
from mint_pricer.chain.reader import Web3ChainReader

__all__ = ["Web3ChainReader", "fetch_erc20_details", "validate_decimals"]
