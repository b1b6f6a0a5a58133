"""Shared fixtures for mint_pricer tests."""

from __future__ import annotations

import pytest
from pytest_metadata.plugin import metadata_key

from mint_pricer.models.config import PricerConfig
from mint_pricer.providers.registry import provider_names

from tests.factories import EXTENSION, make_contract_info
from tests.mocks import MockChainReader


# ── Report metadata ───────────────────────────────────────────────


def pytest_configure(config):
    """Add provider info to the HTML report Environment table."""
    meta = config.stash.setdefault(metadata_key, {})
    meta["Providers"] = ", ".join(provider_names())
    meta["Default Chain"] = str(PricerConfig().default_chain_id)


def make_test_config(**overrides) -> PricerConfig:
    """Build a PricerConfig suitable for testing."""
    defaults = dict(
        log_level="debug",
        default_chain_id=8453,
        request_timeout=5,
        rpc_urls={8453: "http://127.0.0.1:8545"},
    )
    defaults.update(overrides)
    return PricerConfig(**defaults)


@pytest.fixture
def test_config():
    return make_test_config()


@pytest.fixture
def reader():
    return MockChainReader()


@pytest.fixture
def manifold_info():
    return make_contract_info(provider="manifold", extension_address=EXTENSION)
