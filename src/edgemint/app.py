from __future__ import annotations

import sys
from dataclasses import dataclass

import click

from .config import Settings
from .console import ConsoleLogger
from .errors import WalletFileError
from .wallets import Wallet, first_wallet, read_wallets


@dataclass
class App:
    """Per-process state shared by CLI commands (click ``ctx.obj``)."""

    settings: Settings
    logger: ConsoleLogger

    def load_wallet(self) -> Wallet:
        """First wallet from the credential file; exits the CLI if none."""
        try:
            return first_wallet(read_wallets(self.settings.wallets_file, self.logger))
        except WalletFileError as exc:
            click.secho(f"ERROR: {exc}", fg="red", err=True)
            sys.exit(exc.exit_code)


pass_app = click.make_pass_decorator(App)
