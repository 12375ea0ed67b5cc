"""
ECDSA / secp256k1 helpers for wallet keys.

The same key signs the mint transaction and the verification message.

Dependencies: eth-account (no full web3.py needed)
"""

from __future__ import annotations

from eth_account import Account
from eth_account.messages import encode_defunct
from eth_account.signers.local import LocalAccount


def normalize_private_key(private_key: str) -> str:
    private_key = private_key.strip()
    if not private_key.startswith("0x"):
        private_key = "0x" + private_key
    return private_key


def get_account(private_key: str) -> LocalAccount:
    """Get an eth-account LocalAccount from a hex private key."""
    return Account.from_key(normalize_private_key(private_key))


def get_address(private_key: str) -> str:
    """0x-prefixed checksummed address for a private key."""
    return get_account(private_key).address


def sign_message(message: str, private_key: str) -> str:
    """
    Sign a message using EIP-191 personal_sign.

    Args:
        message: The message string to sign
        private_key: hex private key (0x prefix optional)

    Returns:
        0x-prefixed hex signature
    """
    account = get_account(private_key)
    signed = account.sign_message(encode_defunct(text=message))
    signature = signed.signature.hex()
    if not signature.startswith("0x"):
        signature = "0x" + signature
    return signature
