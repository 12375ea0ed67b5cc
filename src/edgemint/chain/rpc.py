"""
JSON-RPC Client for Base.

Lightweight alternative to web3.py: uses httpx for HTTP. Covers exactly
what a single mint needs: chain id, nonce, raw transaction
broadcast and receipt polling.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Optional

import httpx

from ..errors import RpcError


class RpcClient:
    def __init__(
        self,
        rpc_url: str,
        timeout_s: float = 30.0,
        client: Optional[httpx.Client] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.rpc_url = rpc_url
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=timeout_s)
        self.sleep = sleep

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "RpcClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def call(self, method: str, params: list) -> Any:
        """
        Make a JSON-RPC call.

        Returns:
            Result field from the RPC response

        Raises:
            RpcError: If the node answers with an error object
            httpx.HTTPError: On transport or HTTP status failures
        """
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params,
            "id": 1,
        }
        resp = self.client.post(self.rpc_url, json=payload)
        resp.raise_for_status()
        data = resp.json()
        if "error" in data:
            raise RpcError(f"RPC error: {data['error']}")
        return data.get("result")

    def chain_id(self) -> int:
        return int(self.call("eth_chainId", []), 16)

    def get_nonce(self, address: str) -> int:
        """Next nonce for ``address``, counting pending transactions."""
        return int(self.call("eth_getTransactionCount", [address, "pending"]), 16)

    def send_raw_transaction(self, raw_tx: str) -> str:
        """Broadcast a signed transaction; returns the 0x-prefixed hash."""
        return self.call("eth_sendRawTransaction", [raw_tx])

    def wait_for_receipt(
        self,
        tx_hash: str,
        timeout: float = 120,
        poll_interval: float = 2.0,
    ) -> dict:
        """
        Wait for a transaction receipt.

        Raises:
            TimeoutError: If receipt not found within timeout
        """
        start = time.monotonic()
        while time.monotonic() - start < timeout:
            receipt = self.call("eth_getTransactionReceipt", [tx_hash])
            if receipt is not None:
                return receipt
            self.sleep(poll_interval)

        raise TimeoutError(f"Transaction {tx_hash} not confirmed within {timeout}s")
