"""Configuration loading from TOML and environment."""

from __future__ import annotations

import os

import pytest

from mint_pricer.config import load_config
from mint_pricer.errors import ConfigError
from mint_pricer.models.config import DEFAULT_RPC_URLS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("MINT_PRICER_"):
            monkeypatch.delenv(name)


def test_defaults():
    cfg = load_config()
    assert cfg.default_chain_id == 8453
    assert cfg.log_level == "info"
    assert cfg.rpc_urls == DEFAULT_RPC_URLS


def test_defaults_are_not_shared():
    load_config().rpc_urls[8453] = "http://changed"
    assert load_config().rpc_urls[8453] == DEFAULT_RPC_URLS[8453]


def test_missing_file_uses_defaults(tmp_path):
    cfg = load_config(tmp_path / "missing.toml")
    assert cfg.default_chain_id == 8453


def test_toml_file(tmp_path):
    path = tmp_path / "pricer.toml"
    path.write_text(
        '[pricer]\n'
        'log_level = "debug"\n'
        'default_chain_id = 1\n'
        'request_timeout = 10\n'
        '\n'
        '[rpc]\n'
        '"1" = "https://eth.example"\n'
        '"84532" = "https://sepolia.base.example"\n'
    )

    cfg = load_config(path)

    assert cfg.log_level == "debug"
    assert cfg.default_chain_id == 1
    assert cfg.request_timeout == 10
    assert cfg.rpc_url_for(1) == "https://eth.example"
    assert cfg.rpc_url_for(84532) == "https://sepolia.base.example"
    assert cfg.rpc_url_for(8453) == DEFAULT_RPC_URLS[8453]


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "pricer.toml"
    path.write_text('[pricer]\nlog_level = "debug"\n')
    monkeypatch.setenv("MINT_PRICER_LOG_LEVEL", "warning")
    monkeypatch.setenv("MINT_PRICER_CHAIN_ID", "10")
    monkeypatch.setenv("MINT_PRICER_RPC_URL", "https://op.example")
    monkeypatch.setenv("MINT_PRICER_RPC_URL_7777777", "https://zora.example")

    cfg = load_config(path)

    assert cfg.log_level == "warning"
    assert cfg.default_chain_id == 10
    assert cfg.rpc_url_for(10) == "https://op.example"
    assert cfg.rpc_url_for(7777777) == "https://zora.example"


def test_invalid_chain_key(tmp_path):
    path = tmp_path / "pricer.toml"
    path.write_text('[rpc]\nbase = "https://base.example"\n')

    with pytest.raises(ConfigError):
        load_config(path)


def test_invalid_toml(tmp_path):
    path = tmp_path / "pricer.toml"
    path.write_text("[pricer\n")

    with pytest.raises(ConfigError):
        load_config(path)


def test_unknown_chain():
    with pytest.raises(ConfigError, match="999"):
        load_config().rpc_url_for(999)


@pytest.mark.parametrize("value", ['"soon"', "-3", "[30]"])
def test_invalid_request_timeout(tmp_path, value):
    path = tmp_path / "pricer.toml"
    path.write_text(f"[pricer]\nrequest_timeout = {value}\n")

    with pytest.raises(ConfigError, match="timeout"):
        load_config(path)
