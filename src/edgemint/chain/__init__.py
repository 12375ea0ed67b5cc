"""
Chain - On-chain interaction layer.

Provides a JSON-RPC client, the mint ABI, and transaction utilities for
Base mainnet.

Uses httpx + eth-account + eth-abi instead of the heavyweight web3.py.
"""
