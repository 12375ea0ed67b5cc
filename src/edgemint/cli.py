"""
edgemint CLI

Mints the LayerEdge SBT for a wallet and claims its verification points.

Commands:
  run     - Mint, then verify (the full flow)
  mint    - Send the mint transaction only
  verify  - Submit the signed verification claim only
  whoami  - Show the wallet that will be used
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from .app import App, pass_app
from .config import Settings
from .console import ConsoleLogger
from .keys import get_address


# ============ Constants ============

VERSION = "1.0.0"


# ============ Banner ============


def _print_banner() -> None:
    border = click.style("  ◆ ═══════════════════════════════════════ ◆", fg="cyan")
    click.echo()
    click.echo(border)
    click.echo(
        click.style("        L A Y E R E D G E   S B T", fg="bright_white", bold=True)
        + click.style(f"   v{VERSION}", dim=True)
    )
    click.echo(border)
    click.echo()


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="edgemint")
@click.option("--wallets", "wallets_file", default=None, help="Wallet credential file (JSON array)")
@click.option("--rpc-url", default=None, help="Base RPC URL")
@click.option("--contract", "contract_address", default=None, help="SBT contract address")
@click.option("--verify-url", default=None, help="Verification API endpoint")
@click.option("--quiet", is_flag=True, help="Hide verbose request logging")
@click.pass_context
def cli(
    ctx: click.Context,
    wallets_file: Optional[str],
    rpc_url: Optional[str],
    contract_address: Optional[str],
    verify_url: Optional[str],
    quiet: bool,
) -> None:
    """edgemint - LayerEdge SBT mint and verification bot."""
    try:
        settings = Settings.from_env(
            rpc_url=rpc_url,
            contract_address=contract_address,
            verify_url=verify_url,
            wallets_file=wallets_file,
            verbose=False if quiet else None,
        )
    except ValueError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(1)

    ctx.obj = App(settings=settings, logger=ConsoleLogger(verbose=settings.verbose))

    if ctx.invoked_subcommand is None:
        _print_banner()
        click.echo(ctx.get_help())


# ============ Top-level Commands ============

from .tasks.mint import mint, mint_command
from .tasks.verify import verify_command, verify_nft

cli.add_command(mint_command)
cli.add_command(verify_command)


@cli.command()
@pass_app
def run(app: App) -> None:
    """Mint the SBT for the first wallet, then claim verification points."""
    _print_banner()
    wallet = app.load_wallet()
    logger = app.logger

    logger.progress(wallet.address, "Minting SBT", "pending")
    minted = mint(wallet.address, wallet.private_key, app.settings, logger)
    logger.progress(wallet.address, "Minting SBT", "success" if minted.ok else "failed")

    logger.progress(wallet.address, "NFT verification", "pending")
    verified = verify_nft(wallet.address, wallet.private_key, app.settings, logger)
    logger.progress(wallet.address, "NFT verification", "success" if verified else "failed")

    if not (minted.ok and verified):
        sys.exit(1)


@cli.command()
@pass_app
def whoami(app: App) -> None:
    """Show the wallet that run/mint/verify will use."""
    wallet = app.load_wallet()
    click.echo(f"Address: {wallet.address}")
    try:
        derived = get_address(wallet.private_key)
    except ValueError as exc:
        click.secho(f"Private key is invalid: {exc}", fg="red")
        sys.exit(1)
    if derived.lower() != wallet.address.lower():
        click.secho(f"Warning: private key belongs to {derived}", fg="yellow")


# ============ Entry Points ============


def main() -> None:
    """edgemint CLI entry point."""
    # Ensure UTF-8 output on Windows (for Unicode box-drawing / symbols)
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass
    cli()


if __name__ == "__main__":
    main()
