"""ABI fragments and well-known contract addresses."""

from __future__ import annotations

from typing import Any


def _view(name: str, inputs: list[dict[str, str]], output_type: str) -> dict[str, Any]:
    return {
        "inputs": inputs,
        "name": name,
        "outputs": [{"name": "", "type": output_type}],
        "stateMutability": "view",
        "type": "function",
    }


_UINT_AMOUNT = [{"name": "amount", "type": "uint256"}]

KNOWN_CONTRACTS: dict[str, str] = {
    # Manifold ERC1155 lazy payable claim extension
    "manifold_extension": "0x26BBEA7803DcAc346D5F5f135b57Cf2c752A02bE",
}

# ── Manifold claim extension ──────────────────────────────

MANIFOLD_CLAIM_COMPONENTS = [
    {"name": "total", "type": "uint32"},
    {"name": "totalMax", "type": "uint32"},
    {"name": "walletMax", "type": "uint32"},
    {"name": "startDate", "type": "uint48"},
    {"name": "endDate", "type": "uint48"},
    {"name": "storageProtocol", "type": "uint8"},
    {"name": "merkleRoot", "type": "bytes32"},
    {"name": "location", "type": "string"},
    {"name": "tokenId", "type": "uint256"},
    {"name": "cost", "type": "uint256"},
    {"name": "paymentReceiver", "type": "address"},
    {"name": "erc20", "type": "address"},
    {"name": "signingAddress", "type": "address"},
]

MANIFOLD_EXTENSION_ABI: tuple[dict[str, Any], ...] = (
    _view("MINT_FEE", [], "uint256"),
    _view("MINT_FEE_MERKLE", [], "uint256"),
    {
        "inputs": [
            {"name": "creatorContractAddress", "type": "address"},
            {"name": "instanceId", "type": "uint256"},
        ],
        "name": "getClaim",
        "outputs": [
            {
                "name": "",
                "type": "tuple",
                "components": MANIFOLD_CLAIM_COMPONENTS,
            }
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"name": "creatorContractAddress", "type": "address"},
            {"name": "instanceId", "type": "uint256"},
            {"name": "mintIndex", "type": "uint32"},
            {"name": "merkleProof", "type": "bytes32[]"},
            {"name": "mintFor", "type": "address"},
        ],
        "name": "mint",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    },
)

# ── Generic price discovery / mint ────────────────────────

PRICE_DISCOVERY_ABI: tuple[dict[str, Any], ...] = (
    _view("mintPrice", [], "uint256"),
    _view("price", [], "uint256"),
    _view("publicMintPrice", [], "uint256"),
    _view("MINT_PRICE", [], "uint256"),
    _view("getMintPrice", [], "uint256"),
)

MINT_ABI: tuple[dict[str, Any], ...] = (
    {
        "inputs": _UINT_AMOUNT,
        "name": "mint",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    },
    {
        "inputs": [{"name": "to", "type": "address"}] + _UINT_AMOUNT,
        "name": "mint",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    },
)

# ── NFTs2Me ───────────────────────────────────────────────

NFTS2ME_MINT_PRICE_ABI = (_view("mintPrice", [], "uint256"),)
NFTS2ME_MINT_FEE_ABI = (_view("mintFee", _UINT_AMOUNT, "uint256"),)
NFTS2ME_PROTOCOL_FEE_ABI = (_view("protocolFee", [], "uint256"),)
NFTS2ME_MINT_ABI: tuple[dict[str, Any], ...] = (
    {
        "inputs": _UINT_AMOUNT,
        "name": "mint",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    },
)

# ── ERC-20 ────────────────────────────────────────────────

ERC20_SYMBOL_ABI = (_view("symbol", [], "string"),)
ERC20_DECIMALS_ABI = (_view("decimals", [], "uint8"),)
ERC20_ALLOWANCE_ABI = (
    _view(
        "allowance",
        [{"name": "owner", "type": "address"}, {"name": "spender", "type": "address"}],
        "uint256",
    ),
)
ERC20_BALANCE_OF_ABI = (_view("balanceOf", [{"name": "owner", "type": "address"}], "uint256"),)
