from __future__ import annotations


class EdgemintError(RuntimeError):
    exit_code: int = 1


class WalletFileError(EdgemintError):
    exit_code = 2


class RpcError(EdgemintError):
    exit_code = 3
