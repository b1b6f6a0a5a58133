"""CLI entry point for mint_pricer."""

from __future__ import annotations

import asyncio
import logging
import sys
from datetime import datetime, timezone

import click

from mint_pricer.chain.reader import Web3ChainReader
from mint_pricer.config import load_config
from mint_pricer.errors import ConfigError
from mint_pricer.models.mint import MintParams, NFTContractInfo
from mint_pricer.pricing.engine import fetch_price_data
from mint_pricer.pricing.mint import build_mint_call
from mint_pricer.providers.registry import PROVIDER_CONFIGS, provider_names

WEI_PER_ETH = 10**18


def _eth(wei: int) -> str:
    return f"{wei / WEI_PER_ETH:.6f} ETH"


def _units(value: int, decimals: int, symbol: str) -> str:
    return f"{value / 10**decimals:.6f} {symbol}"


def _date(ts: int) -> str:
    if not ts:
        return "(none)"
    return datetime.fromtimestamp(ts, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """mint-pricer - NFT mint cost discovery."""
    ctx.ensure_object(dict)
    try:
        cfg = load_config(config_path)
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    ctx.obj["config"] = cfg

    level = logging.DEBUG if verbose else getattr(logging, cfg.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# ── Quote ──────────────────────────────────────────────


@cli.command()
@click.argument("contract")
@click.option("--chain-id", type=int, default=None, help="Chain id (default from config)")
@click.option("--provider", type=click.Choice(provider_names()), default="generic", show_default=True)
@click.option("--extension", default=None, help="Extension contract address (Manifold)")
@click.option("--instance-id", type=int, default=None, help="Claim instance id (Manifold)")
@click.option("--token-id", type=int, default=None)
@click.option("--amount", type=click.IntRange(min=1), default=1, show_default=True)
@click.option("--recipient", default=None, help="Minting wallet address")
@click.pass_context
def quote(
    ctx: click.Context,
    contract: str,
    chain_id: int | None,
    provider: str,
    extension: str | None,
    instance_id: int | None,
    token_id: int | None,
    amount: int,
    recipient: str | None,
) -> None:
    """Discover the cost of minting from CONTRACT."""
    cfg = ctx.obj["config"]
    chain_id = chain_id or cfg.default_chain_id
    try:
        rpc_url = cfg.rpc_url_for(chain_id)
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    params = MintParams(
        contract_address=contract,
        chain_id=chain_id,
        amount=amount,
        recipient=recipient,
        instance_id=instance_id,
        token_id=token_id,
    )
    if provider == "manifold" and extension is None:
        extension = PROVIDER_CONFIGS["manifold"].extension_addresses[0]
    info = NFTContractInfo(
        provider=provider,
        contract_address=contract,
        extension_address=extension,
    )

    async def _quote():
        reader = Web3ChainReader(rpc_url, cfg.request_timeout)
        try:
            return await fetch_price_data(reader, params, info)
        finally:
            await reader.close()

    result = asyncio.run(_quote())

    click.echo(f"Provider:   {provider}")
    click.echo(f"Chain:      {chain_id}")
    if result.mint_price is not None:
        click.echo(f"Mint price: {result.mint_price} wei ({_eth(result.mint_price)})")
    click.echo(f"Total cost: {result.total_cost} wei ({_eth(result.total_cost)})")

    if details := result.erc20_details:
        click.echo(f"Token:      {details.symbol} ({details.address}, {details.decimals} decimals)")
        if result.claim is not None:
            click.echo(f"Token cost: {_units(result.claim.cost, details.decimals, details.symbol)}")
        if details.balance is not None:
            click.echo(f"Balance:    {_units(details.balance, details.decimals, details.symbol)}")
        if details.allowance is not None:
            click.echo(f"Allowance:  {_units(details.allowance, details.decimals, details.symbol)}")

    if claim := result.claim:
        click.echo(f"Claim:      {_date(claim.start_date)} -> {_date(claim.end_date)}")
        click.echo(f"Wallet max: {claim.wallet_max or 'unlimited'}")

    if result.error:
        click.echo(f"Warning:    estimate degraded ({result.error})", err=True)
        return

    try:
        call = build_mint_call(params, info, result)
    except ValueError as exc:
        click.echo(f"Mint call:  unavailable ({exc})")
        return
    click.echo(f"Mint call:  {call.function_name}({', '.join(map(str, call.args))}) on {call.address}")
    click.echo(f"Value:      {call.value} wei")


# ── Info ───────────────────────────────────────────────


@cli.command()
def providers() -> None:
    """List registered minting providers."""
    for name, config in PROVIDER_CONFIGS.items():
        discovery = config.price_discovery
        click.echo(
            f"{name:<10} strategy={discovery.strategy.value:<10} "
            f"probes={','.join(discovery.function_names)} "
            f"erc20={'yes' if config.supports_erc20 else 'no'}"
        )


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show resolved configuration."""
    cfg = ctx.obj["config"]
    click.echo(f"Log level:  {cfg.log_level}")
    click.echo(f"Chain:      {cfg.default_chain_id}")
    click.echo(f"Timeout:    {cfg.request_timeout}s")
    for chain_id, url in sorted(cfg.rpc_urls.items()):
        click.echo(f"RPC {chain_id:<8} {url}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
