"""
Mint - Send ``mint(1, to)`` to the SBT contract and wait for confirmation.

Flow:
1. Build the EIP-1559 transaction (fixed gas, nonce + chain id from node)
2. Sign with the wallet key and broadcast
3. Poll for the receipt

Failures are logged and reported in the returned MintResult; they are
never raised and never retried.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional

import click

from ..app import App, pass_app
from ..chain.rpc import RpcClient
from ..chain.tx import MintRequest, build_mint_tx, sign_and_send
from ..config import Settings
from ..console import ConsoleLogger


RECEIPT_TIMEOUT_S = 120


@dataclass(frozen=True)
class MintResult:
    tx_hash: Optional[str] = None
    status: Optional[int] = None
    receipt: Optional[dict] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == 1


def mint(
    to_address: str,
    private_key: str,
    settings: Settings,
    logger: ConsoleLogger,
    rpc: Optional[RpcClient] = None,
) -> MintResult:
    """Mint one token to ``to_address``, signing with ``private_key``."""
    owns_rpc = rpc is None
    rpc = rpc or RpcClient(settings.rpc_url)
    tx_hash: Optional[str] = None

    try:
        request = MintRequest(contract_address=settings.contract_address, to_address=to_address)
        tx = build_mint_tx(rpc, request, private_key)
        tx_hash = sign_and_send(rpc, tx, private_key)
        logger.info("Transaction sent:", tx_hash)

        receipt = rpc.wait_for_receipt(tx_hash, timeout=RECEIPT_TIMEOUT_S)
        status = int(receipt.get("status", "0x0"), 16)
        if status == 1:
            logger.success("Transaction confirmed!", tx_hash)
        else:
            logger.error("Transaction reverted", tx_hash)
        return MintResult(tx_hash=tx_hash, status=status, receipt=receipt)

    except Exception as exc:
        logger.error("Minting failed:", str(exc), exc)
        return MintResult(tx_hash=tx_hash, error=str(exc))

    finally:
        if owns_rpc:
            rpc.close()


@click.command("mint")
@pass_app
def mint_command(app: App) -> None:
    """Mint one SBT to the first wallet in the credential file."""
    wallet = app.load_wallet()
    app.logger.progress(wallet.address, "Minting SBT", "pending")

    result = mint(wallet.address, wallet.private_key, app.settings, app.logger)

    app.logger.progress(wallet.address, "Minting SBT", "success" if result.ok else "failed")
    if not result.ok:
        sys.exit(1)
