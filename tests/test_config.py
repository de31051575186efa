"""Tests for environment-driven configuration."""

from unittest.mock import patch

import pytest

from arg_contracts import config as config_module
from arg_contracts.config import EnforceConfig, get_config, get_sink, set_config
from arg_contracts.utils.telemetry import TelemetrySink
from arg_contracts.validators.sinks import CompositeSink, LoggingSink


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("ENABLED", "LOG_VIOLATIONS", "TELEMETRY", "DEFAULT_LABEL"):
        monkeypatch.delenv(config_module.ENV_PREFIX + name, raising=False)
    return monkeypatch


class TestEnforceConfig:

    def test_defaults(self, clean_env):
        config = EnforceConfig.from_env(load_env_file=False)

        assert config == EnforceConfig()
        assert config.enabled is True
        assert config.default_label == "<>"

    def test_from_env(self, clean_env):
        clean_env.setenv("ARG_CONTRACTS_ENABLED", "false")
        clean_env.setenv("ARG_CONTRACTS_LOG_VIOLATIONS", "0")
        clean_env.setenv("ARG_CONTRACTS_TELEMETRY", "Yes")
        clean_env.setenv("ARG_CONTRACTS_DEFAULT_LABEL", "anon")

        config = EnforceConfig.from_env(load_env_file=False)

        assert config == EnforceConfig(
            enabled=False, log_violations=False, telemetry=True, default_label="anon")

    def test_unrecognised_flag_keeps_default(self, clean_env, caplog):
        clean_env.setenv("ARG_CONTRACTS_ENABLED", "maybe")

        assert EnforceConfig.from_env(load_env_file=False).enabled is True
        assert "maybe" in caplog.text

    def test_dotenv_loaded(self, clean_env):
        with patch("arg_contracts.config.load_dotenv") as load_dotenv:
            EnforceConfig.from_env(dotenv_path="/tmp/custom.env")

        load_dotenv.assert_called_once_with("/tmp/custom.env")

    def test_dotenv_skipped(self, clean_env):
        with patch("arg_contracts.config.load_dotenv") as load_dotenv:
            EnforceConfig.from_env(load_env_file=False)

        load_dotenv.assert_not_called()


class TestBuildSink:

    def test_logging_only(self):
        assert isinstance(EnforceConfig().build_sink(), LoggingSink)

    def test_no_sink(self):
        assert EnforceConfig(log_violations=False).build_sink() is None

    def test_logging_and_telemetry(self):
        sink = EnforceConfig(telemetry=True).build_sink()

        assert isinstance(sink, CompositeSink)
        assert [type(s) for s in sink.sinks] == [LoggingSink, TelemetrySink]


class TestProcessConfig:

    def test_set_and_get(self):
        config = EnforceConfig(default_label="x")
        set_config(config)

        assert get_config() is config

    def test_sink_cached_until_config_changes(self):
        first = get_sink()
        assert get_sink() is first

        set_config(EnforceConfig(log_violations=False))
        assert get_sink() is None

    def test_reset_reloads_from_env(self, clean_env):
        clean_env.setenv("ARG_CONTRACTS_DEFAULT_LABEL", "from-env")
        set_config(None)

        with patch("arg_contracts.config.load_dotenv"):
            assert get_config().default_label == "from-env"
