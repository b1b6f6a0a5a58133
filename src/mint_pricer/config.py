"""Configuration loading: TOML file + environment variables."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from mint_pricer.errors import ConfigError
from mint_pricer.models.config import PricerConfig


def _chain_id(value: object, source: str) -> int:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid chain id {value!r} in {source}") from None


def _timeout(value: object, source: str) -> int:
    try:
        seconds = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid request timeout {value!r} in {source}") from None
    if seconds < 1:
        raise ConfigError(f"Request timeout must be >= 1 second, got {seconds} in {source}")
    return seconds


def load_config(
    config_path: str | Path | None = None,
    env_prefix: str = "MINT_PRICER_",
) -> PricerConfig:
    """Load pricer configuration from a TOML file and env vars.

    Priority (highest wins):
        1. Environment variables (MINT_PRICER_RPC_URL_8453, etc.)
        2. TOML config file
        3. Defaults from PricerConfig
    """
    raw: dict = {}
    if config_path is not None:
        p = Path(config_path).expanduser()
        if p.exists():
            try:
                with open(p, "rb") as f:
                    raw = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"Invalid config file {p}: {exc}") from exc

    cfg = PricerConfig()

    # ── Pricer section ─────────────────────────────────────
    pricer = raw.get("pricer", {})
    if v := pricer.get("log_level"):
        cfg.log_level = str(v)
    if v := pricer.get("default_chain_id"):
        cfg.default_chain_id = _chain_id(v, "[pricer]")
    if v := pricer.get("request_timeout"):
        cfg.request_timeout = _timeout(v, "[pricer]")

    # ── RPC section: "<chain_id>" = "<url>" ────────────────
    for key, url in raw.get("rpc", {}).items():
        cfg.rpc_urls[_chain_id(key, "[rpc]")] = str(url)

    # ── Environment variable overrides (highest priority) ──
    if level := os.environ.get(f"{env_prefix}LOG_LEVEL"):
        cfg.log_level = level
    if chain := os.environ.get(f"{env_prefix}CHAIN_ID"):
        cfg.default_chain_id = _chain_id(chain, f"{env_prefix}CHAIN_ID")
    if rpc := os.environ.get(f"{env_prefix}RPC_URL"):
        cfg.rpc_urls[cfg.default_chain_id] = rpc

    url_prefix = f"{env_prefix}RPC_URL_"
    for name, value in os.environ.items():
        if name.startswith(url_prefix) and value:
            cfg.rpc_urls[_chain_id(name[len(url_prefix):], name)] = value

    return cfg
