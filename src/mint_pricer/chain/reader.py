"""EVM chain reader built on web3's async HTTP provider."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Any

import aiohttp
from web3 import AsyncHTTPProvider, AsyncWeb3

from mint_pricer.errors import ChainReadError

log = logging.getLogger(__name__)

_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


def _checksum_args(args: Sequence[Any]) -> list[Any]:
    """Checksum every address-looking string; web3 rejects the rest."""
    prepared: list[Any] = []
    for arg in args:
        if isinstance(arg, str) and _ADDRESS_RE.match(arg):
            prepared.append(AsyncWeb3.to_checksum_address(arg))
        elif isinstance(arg, (list, tuple)):
            prepared.append(_checksum_args(arg))
        else:
            prepared.append(arg)
    return prepared


def normalize_output(value: Any) -> Any:
    """Convert decoded struct outputs into plain dicts.

    With ``decode_tuples=True`` web3 returns named tuples for ABI tuples;
    callers of ChainReader only ever see dicts, lists and scalars.
    """
    if hasattr(value, "_asdict"):
        return {k: normalize_output(v) for k, v in value._asdict().items()}
    if isinstance(value, list):
        return [normalize_output(v) for v in value]
    return value


class Web3ChainReader:
    """Read-only contract calls against an EVM JSON-RPC endpoint."""

    def __init__(self, rpc_url: str, request_timeout: int = 30) -> None:
        self._rpc_url = rpc_url
        self._w3 = AsyncWeb3(
            AsyncHTTPProvider(
                rpc_url,
                request_kwargs={"timeout": aiohttp.ClientTimeout(total=request_timeout)},
            )
        )

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    async def close(self) -> None:
        """Close the provider's aiohttp session."""
        try:
            await self._w3.provider.disconnect()
        except Exception as exc:
            log.debug("Provider disconnect failed: %s", exc)

    async def read(
        self,
        address: str,
        abi: Sequence[dict[str, Any]],
        function_name: str,
        args: Sequence[Any] = (),
    ) -> Any:
        try:
            contract = self._w3.eth.contract(
                address=AsyncWeb3.to_checksum_address(address),
                abi=list(abi),
                decode_tuples=True,
            )
            fn = getattr(contract.functions, function_name)
            result = await fn(*_checksum_args(args)).call()
        except Exception as exc:
            log.debug("eth_call %s.%s failed: %s", address[:10], function_name, exc)
            raise ChainReadError(address, function_name, str(exc)) from exc
        return normalize_output(result)
