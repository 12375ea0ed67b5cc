from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .chain.tx import to_checksum_address


DEFAULT_RPC_URL = "https://mainnet.base.org"
DEFAULT_CONTRACT_ADDRESS = "0xb06C68C8f9DE60107eAbda0D7567743967113360"
DEFAULT_VERIFY_URL = "https://referralapi.layeredge.io/api/task/nft-verification/1"
DEFAULT_WALLETS_FILE = "wallets.json"

_FALSY = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    rpc_url: str = DEFAULT_RPC_URL
    contract_address: str = DEFAULT_CONTRACT_ADDRESS
    verify_url: str = DEFAULT_VERIFY_URL
    wallets_file: str = DEFAULT_WALLETS_FILE
    verbose: bool = True

    def __post_init__(self) -> None:
        # Normalizes to EIP-55; raises ValueError for malformed addresses.
        object.__setattr__(self, "contract_address", to_checksum_address(self.contract_address))

    @staticmethod
    def from_env(
        rpc_url: Optional[str] = None,
        contract_address: Optional[str] = None,
        verify_url: Optional[str] = None,
        wallets_file: Optional[str] = None,
        verbose: Optional[bool] = None,
    ) -> "Settings":
        """Build settings from EDGEMINT_* variables (.env is honoured).

        Explicit arguments (CLI options) take precedence over the environment.
        """
        load_dotenv()

        env_verbose = os.getenv("EDGEMINT_VERBOSE", "1").strip().lower() not in _FALSY

        return Settings(
            rpc_url=rpc_url or os.getenv("EDGEMINT_RPC_URL", "").strip() or DEFAULT_RPC_URL,
            contract_address=(
                contract_address
                or os.getenv("EDGEMINT_CONTRACT_ADDRESS", "").strip()
                or DEFAULT_CONTRACT_ADDRESS
            ),
            verify_url=verify_url or os.getenv("EDGEMINT_VERIFY_URL", "").strip() or DEFAULT_VERIFY_URL,
            wallets_file=(
                wallets_file or os.getenv("EDGEMINT_WALLETS_FILE", "").strip() or DEFAULT_WALLETS_FILE
            ),
            verbose=env_verbose if verbose is None else verbose,
        )
