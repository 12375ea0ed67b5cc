"""
Verify - Claim SBT verification points through the LayerEdge API.

The wallet signs ``"I am claiming my SBT verification points for
{address} at {timestamp}"`` (EIP-191) and the signature is POSTed with the
address and millisecond timestamp through the retrying RequestHandler.
"""

from __future__ import annotations

import sys
import time
from typing import Any, Optional

import click

from ..app import App, pass_app
from ..config import Settings
from ..console import ConsoleLogger
from ..keys import sign_message
from ..request import RequestHandler, RequestResult, make_request


CLAIM_MESSAGE = "I am claiming my SBT verification points for {address} at {timestamp}"


def timestamp_ms() -> int:
    return int(time.time() * 1000)


def build_verification_payload(
    address: str,
    private_key: str,
    timestamp: Optional[int] = None,
) -> dict[str, Any]:
    """Sign the claim message and return the request body."""
    if timestamp is None:
        timestamp = timestamp_ms()
    message = CLAIM_MESSAGE.format(address=address, timestamp=timestamp)
    return {
        "walletAddress": address,
        "timestamp": timestamp,
        "sign": sign_message(message, private_key),
    }


def submit_verification(
    address: str,
    private_key: str,
    settings: Settings,
    handler: RequestHandler,
    timestamp: Optional[int] = None,
) -> RequestResult:
    payload = build_verification_payload(address, private_key, timestamp)
    return make_request(
        handler,
        "post",
        settings.verify_url,
        json=payload,
        headers={"Content-Type": "application/json"},
    )


def verify_nft(
    address: str,
    private_key: str,
    settings: Settings,
    logger: ConsoleLogger,
    handler: Optional[RequestHandler] = None,
) -> bool:
    """
    Submit the signed verification claim.

    Returns:
        True when the API answered with a response body (``{}`` counts), else False.
    """
    owns_handler = handler is None
    handler = handler or RequestHandler(logger)

    try:
        result = submit_verification(address, private_key, settings, handler)
    except Exception as exc:
        logger.error("Error in NFT Verification:", str(exc), exc)
        return False
    finally:
        if owns_handler:
            handler.close()

    if result.ok and result.has_data:
        logger.success("NFT Verification Result:", result.data)
        return True

    logger.error("Failed NFT Verification", "", result.error)
    return False


@click.command("verify")
@pass_app
def verify_command(app: App) -> None:
    """Submit the signed SBT verification claim for the first wallet."""
    wallet = app.load_wallet()
    app.logger.progress(wallet.address, "NFT verification", "pending")

    verified = verify_nft(wallet.address, wallet.private_key, app.settings, app.logger)

    app.logger.progress(wallet.address, "NFT verification", "success" if verified else "failed")
    if not verified:
        sys.exit(1)
