__all__ = [
    # Configuration
    "Settings",
    # Logging
    "ConsoleLogger",
    # Errors
    "EdgemintError",
    "RpcError",
    "WalletFileError",
    # Wallets
    "Wallet",
    "first_wallet",
    "read_wallets",
    # HTTP
    "RequestError",
    "RequestHandler",
    "RequestResult",
    "RequestSpec",
    "make_request",
    # Chain
    "MintRequest",
    "RpcClient",
    # Operations
    "MintResult",
    "mint",
    "verify_nft",
]

from .config import Settings
from .console import ConsoleLogger
from .errors import EdgemintError, RpcError, WalletFileError
from .wallets import Wallet, first_wallet, read_wallets
from .request import RequestError, RequestHandler, RequestResult, RequestSpec, make_request
from .chain.rpc import RpcClient
from .chain.tx import MintRequest
from .tasks.mint import MintResult, mint
from .tasks.verify import verify_nft
