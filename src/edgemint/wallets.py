"""
Wallet credential file.

``wallets.json`` holds a JSON array of ``{"address": ..., "privateKey": ...}``
objects. A missing file means "no wallets", not an error.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .console import ConsoleLogger
from .errors import WalletFileError


@dataclass(frozen=True)
class Wallet:
    address: str
    private_key: str

    def __repr__(self) -> str:
        return f"Wallet(address={self.address!r})"


def read_wallets(path: Union[str, Path], logger: ConsoleLogger) -> list[Wallet]:
    """
    Load wallets from a JSON credential file.

    Raises:
        WalletFileError: If the file exists but is not an array of wallets
    """
    path = Path(path)
    if not path.exists():
        logger.info(f"No wallets found in {path.name}")
        return []

    try:
        with path.open("r", encoding="utf-8") as f:
            entries = json.load(f)
    except json.JSONDecodeError as exc:
        raise WalletFileError(f"{path} is not valid JSON: {exc}") from exc

    if not isinstance(entries, list):
        raise WalletFileError(f"{path} must contain a JSON array of wallets")

    wallets = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict) or not entry.get("address") or not entry.get("privateKey"):
            raise WalletFileError(f"{path}: entry {index} needs 'address' and 'privateKey'")
        wallets.append(Wallet(address=str(entry["address"]), private_key=str(entry["privateKey"])))

    return wallets


def first_wallet(wallets: list[Wallet]) -> Wallet:
    if not wallets:
        raise WalletFileError("No wallets available. Add one to wallets.json.")
    return wallets[0]
