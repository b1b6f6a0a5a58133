"""ChainReader protocol - read-only contract calls."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class ChainReader(Protocol):
    """Executes a single read-only contract call.

    Implementations return the decoded value, with struct outputs as plain
    dicts keyed by component name, and raise on transport failure or revert.
    """

    async def read(
        self,
        address: str,
        abi: Sequence[dict[str, Any]],
        function_name: str,
        args: Sequence[Any] = (),
    ) -> Any:
        ...
