"""Shared fixtures for the argument contract tests."""

import pytest

from arg_contracts.config import EnforceConfig, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against a fresh in-memory configuration."""
    config = EnforceConfig()
    set_config(config)
    yield config
    set_config(None)
