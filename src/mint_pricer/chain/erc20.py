"""ERC-20 payment token queries."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from mint_pricer.chain.abis import (
    ERC20_ALLOWANCE_ABI,
    ERC20_BALANCE_OF_ABI,
    ERC20_DECIMALS_ABI,
    ERC20_SYMBOL_ABI,
)
from mint_pricer.errors import InvalidTokenDecimalsError
from mint_pricer.interfaces.reader import ChainReader
from mint_pricer.models.quote import ERC20Details

log = logging.getLogger(__name__)

MAX_DECIMALS = 255


def validate_decimals(value: Any, token: str) -> int:
    """Return ``value`` as an int in [0, 255] or raise InvalidTokenDecimalsError."""
    if isinstance(value, bool):
        raise InvalidTokenDecimalsError(token, value)
    try:
        decimals = int(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidTokenDecimalsError(token, value) from None
    if decimals != value and not isinstance(value, str):
        # fractional
        raise InvalidTokenDecimalsError(token, value)
    if decimals < 0 or decimals > MAX_DECIMALS:
        raise InvalidTokenDecimalsError(token, value)
    return decimals


async def _zero_on_failure(reader: ChainReader, token: str, abi, name: str, args: list) -> int:
    try:
        return int(await reader.read(token, abi, name, args))
    except Exception as exc:
        log.warning("%s() on %s failed, assuming 0: %s", name, token, exc)
        return 0


async def _none() -> None:
    return None


async def fetch_erc20_details(
    reader: ChainReader,
    token: str,
    owner: str | None,
    spender: str,
) -> ERC20Details:
    """Fetch symbol, decimals and (when ``owner`` is set) allowance and balance.

    All reads run concurrently. symbol/decimals failures propagate; allowance
    and balance failures are treated as zero. Without an owner, allowance and
    balance are left as None rather than queried.
    """
    symbol, decimals, allowance, balance = await asyncio.gather(
        reader.read(token, ERC20_SYMBOL_ABI, "symbol", []),
        reader.read(token, ERC20_DECIMALS_ABI, "decimals", []),
        _zero_on_failure(reader, token, ERC20_ALLOWANCE_ABI, "allowance", [owner, spender])
        if owner else _none(),
        _zero_on_failure(reader, token, ERC20_BALANCE_OF_ABI, "balanceOf", [owner])
        if owner else _none(),
        return_exceptions=True,
    )
    for outcome in (symbol, decimals):
        if isinstance(outcome, BaseException):
            raise outcome

    return ERC20Details(
        address=token,
        symbol=str(symbol),
        decimals=validate_decimals(decimals, token),
        allowance=allowance,
        balance=balance,
    )
