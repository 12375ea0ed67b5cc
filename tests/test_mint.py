"""Unit tests for the mint operation against an in-memory node."""

from __future__ import annotations

import io

import pytest
from eth_account import Account

from edgemint.chain.rpc import RpcClient
from edgemint.config import Settings
from edgemint.console import ConsoleLogger
from edgemint.tasks.mint import MintResult, mint

from fake_node import TEST_PRIVATE_KEY, TX_HASH, FakeNode


ADDRESS = Account.from_key(TEST_PRIVATE_KEY).address


@pytest.fixture()
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def logger(out: io.StringIO) -> ConsoleLogger:
    return ConsoleLogger(file=out)


def _rpc(node: FakeNode) -> RpcClient:
    return RpcClient("https://rpc.test", client=node.client(), sleep=lambda _: None)


class TestMint:
    def test_confirmed(self, logger: ConsoleLogger, out: io.StringIO) -> None:
        node = FakeNode()
        result = mint(ADDRESS, TEST_PRIVATE_KEY, Settings(), logger, rpc=_rpc(node))

        assert result.ok
        assert result.tx_hash == TX_HASH
        assert result.status == 1
        assert result.error is None
        assert node.methods() == [
            "eth_getTransactionCount",
            "eth_chainId",
            "eth_sendRawTransaction",
            "eth_getTransactionReceipt",
        ]
        output = out.getvalue()
        assert f"Transaction sent: {TX_HASH}" in output
        assert "Transaction confirmed!" in output

    def test_reverted(self, logger: ConsoleLogger, out: io.StringIO) -> None:
        result = mint(ADDRESS, TEST_PRIVATE_KEY, Settings(), logger, rpc=_rpc(FakeNode(receipt_status="0x0")))

        assert not result.ok
        assert result.status == 0
        assert "Transaction reverted" in out.getvalue()

    def test_broadcast_error_is_logged_not_raised(self, logger: ConsoleLogger, out: io.StringIO) -> None:
        node = FakeNode(errors={"eth_sendRawTransaction": {"code": -32000, "message": "insufficient funds"}})

        result = mint(ADDRESS, TEST_PRIVATE_KEY, Settings(), logger, rpc=_rpc(node))

        assert result == MintResult(error="RPC error: {'code': -32000, 'message': 'insufficient funds'}")
        assert not result.ok
        assert "Minting failed:" in out.getvalue()
        assert "insufficient funds" in out.getvalue()
        # Not retried.
        assert node.methods().count("eth_sendRawTransaction") == 1

    def test_receipt_timeout_keeps_hash(self, logger: ConsoleLogger, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("edgemint.tasks.mint.RECEIPT_TIMEOUT_S", 0)

        result = mint(ADDRESS, TEST_PRIVATE_KEY, Settings(), logger, rpc=_rpc(FakeNode(pending_polls=5)))

        assert not result.ok
        assert result.tx_hash == TX_HASH
        assert "not confirmed" in result.error

    def test_invalid_key_is_logged(self, logger: ConsoleLogger, out: io.StringIO) -> None:
        node = FakeNode()
        result = mint(ADDRESS, "0xnot-a-key", Settings(), logger, rpc=_rpc(node))

        assert result.error
        assert node.raw_transactions == []
        assert "Minting failed:" in out.getvalue()
