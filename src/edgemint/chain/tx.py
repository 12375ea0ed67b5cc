"""
Transaction Builder - Build, sign, and send the mint transaction.

Uses eth-account for signing and the httpx-based RpcClient for sending.
Gas fields are fixed rather than estimated.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..keys import get_account
from .abi import MINT_ABI, encode_call, keccak256
from .rpc import RpcClient


MINT_AMOUNT = 1
MINT_GAS_LIMIT = 0x2E52A
MINT_MAX_FEE_PER_GAS = 0x3567E0
MINT_MAX_PRIORITY_FEE_PER_GAS = 0x3567E0

_ADDRESS_RE = re.compile(r"^(0x)?[0-9a-fA-F]{40}$")


def to_checksum_address(address: str) -> str:
    """Convert an address to EIP-55 checksummed format.

    Raises:
        ValueError: If the value is not 20 bytes of hex.
    """
    if not isinstance(address, str) or not _ADDRESS_RE.match(address.strip()):
        raise ValueError(f"Invalid address (expected 20 bytes of hex): {address!r}")

    addr = address.strip().lower().replace("0x", "")
    addr_hash = keccak256(addr.encode("utf-8")).hex()
    result = "0x"
    for i, c in enumerate(addr):
        if c in "abcdef":
            result += c.upper() if int(addr_hash[i], 16) >= 8 else c
        else:
            result += c
    return result


@dataclass(frozen=True)
class MintRequest:
    contract_address: str
    to_address: str
    amount: int = MINT_AMOUNT
    gas_limit: int = MINT_GAS_LIMIT
    max_fee_per_gas: int = MINT_MAX_FEE_PER_GAS
    max_priority_fee_per_gas: int = MINT_MAX_PRIORITY_FEE_PER_GAS


def build_mint_tx(rpc: RpcClient, request: MintRequest, private_key: str) -> dict:
    """
    Build an unsigned EIP-1559 ``mint(amount, to)`` transaction.

    Nonce and chain id are read from the node.
    """
    account = get_account(private_key)
    calldata = encode_call(
        MINT_ABI,
        "mint",
        [request.amount, to_checksum_address(request.to_address)],
    )

    return {
        "type": 2,
        "to": to_checksum_address(request.contract_address),
        "data": calldata,
        "value": 0,
        "nonce": rpc.get_nonce(account.address),
        "gas": request.gas_limit,
        "maxFeePerGas": request.max_fee_per_gas,
        "maxPriorityFeePerGas": request.max_priority_fee_per_gas,
        "chainId": rpc.chain_id(),
    }


def sign_transaction(tx: dict, private_key: str) -> str:
    """Sign a transaction dict; returns 0x-prefixed raw transaction hex."""
    signed = get_account(private_key).sign_transaction(tx)
    raw = signed.raw_transaction.hex()
    return raw if raw.startswith("0x") else "0x" + raw


def sign_and_send(rpc: RpcClient, tx: dict, private_key: str) -> str:
    """Sign a transaction and broadcast it; returns the transaction hash."""
    return rpc.send_raw_transaction(sign_transaction(tx, private_key))
