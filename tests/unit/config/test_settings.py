"""
Unit tests for Settings and load_config.

Usage:
    pytest tests/unit/config/test_settings.py
"""

import pytest
from pydantic import ValidationError

from virement.config import (
    Settings,
    get_settings,
    load_config,
    override_settings,
    reset_settings,
)

CONFIG_KEYS = [
    "ENV",
    "LOG_LEVEL",
    "SOLANA_NETWORK",
    "SOLANA_RPC_URL",
    "SOLANA_COMMITMENT",
    "RPC_TIMEOUT",
    "REQUEST_TIMEOUT",
    "METRICS_ENABLED",
    "ACTIONS_PREFIX",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove config variables that would shadow YAML values."""
    for key in CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    reset_settings()


class TestSettingsValidation:
    """Test Settings field validators."""

    def test_defaults(self):
        """Test default values."""
        settings = Settings()

        assert settings.SOLANA_NETWORK == "devnet"
        assert settings.SOLANA_COMMITMENT == "confirmed"
        assert settings.ACTIONS_PREFIX == "/api/actions"
        assert settings.REQUEST_TIMEOUT == 30.0

    @pytest.mark.parametrize(
        "network,url",
        [
            ("devnet", "https://api.devnet.solana.com"),
            ("testnet", "https://api.testnet.solana.com"),
            ("mainnet-beta", "https://api.mainnet-beta.solana.com"),
            ("MAINNET-BETA", "https://api.mainnet-beta.solana.com"),
        ],
    )
    def test_rpc_endpoint_follows_network(self, network, url):
        """Test RPC endpoint defaults to the network's public URL."""
        settings = Settings(SOLANA_NETWORK=network)

        assert settings.solana_rpc_endpoint == url

    def test_rpc_url_override(self):
        """Test explicit RPC URL wins over the network default."""
        settings = Settings(
            SOLANA_NETWORK="mainnet-beta",
            SOLANA_RPC_URL="https://rpc.example.com/?api-key=x",
        )

        assert settings.solana_rpc_endpoint == "https://rpc.example.com/?api-key=x"

    def test_invalid_network(self):
        """Test unknown network is rejected."""
        with pytest.raises(ValidationError):
            Settings(SOLANA_NETWORK="localnet")

    def test_invalid_commitment(self):
        """Test unknown commitment is rejected."""
        with pytest.raises(ValidationError):
            Settings(SOLANA_COMMITMENT="max")

    def test_log_level_uppercased(self):
        """Test log level is normalized."""
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self):
        """Test unknown log level is rejected."""
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="VERBOSE")

    @pytest.mark.parametrize(
        "prefix,expected",
        [
            ("/api/actions", "/api/actions"),
            ("api/actions/", "/api/actions"),
            ("/", ""),
            ("", ""),
        ],
    )
    def test_actions_prefix_normalized(self, prefix, expected):
        """Test prefix is normalized to a leading-slash path."""
        assert Settings(ACTIONS_PREFIX=prefix).ACTIONS_PREFIX == expected

    @pytest.mark.parametrize("timeout", [0, -1, 301])
    def test_request_timeout_bounds(self, timeout):
        """Test request timeout must be in (0, 300]."""
        with pytest.raises(ValidationError):
            Settings(REQUEST_TIMEOUT=timeout)


class TestLoadConfig:
    """Test load_config layering."""

    def test_test_environment_yaml(self):
        """Test test.yaml values are applied over default.yaml."""
        settings = load_config(env="test")

        assert settings.ENV == "test"
        assert settings.SOLANA_RPC_URL == "http://127.0.0.1:8899"
        assert settings.RPC_TIMEOUT == 2.0
        assert settings.METRICS_ENABLED is False
        assert settings.ACTIONS_PREFIX == "/api/actions"

    def test_production_environment_yaml(self):
        """Test production.yaml selects mainnet."""
        settings = load_config(env="production")

        assert settings.SOLANA_NETWORK == "mainnet-beta"
        assert settings.solana_rpc_endpoint == "https://api.mainnet-beta.solana.com"

    def test_env_var_beats_yaml(self, monkeypatch):
        """Test environment variables outrank YAML values."""
        monkeypatch.setenv("SOLANA_NETWORK", "testnet")
        monkeypatch.setenv("RPC_TIMEOUT", "7.5")

        settings = load_config(env="test")

        assert settings.SOLANA_NETWORK == "testnet"
        assert settings.RPC_TIMEOUT == 7.5

    def test_unknown_environment_falls_back_to_production(self):
        """Test unknown environment loads production.yaml."""
        settings = load_config(env="staging")

        assert settings.ENV == "staging"
        assert settings.SOLANA_NETWORK == "mainnet-beta"


class TestSettingsSingleton:
    """Test global settings accessors."""

    def test_override_and_reset(self):
        """Test override_settings replaces the singleton."""
        custom = Settings(APP_NAME="Custom")

        override_settings(custom)
        assert get_settings() is custom

        reset_settings()
        override_settings(Settings(APP_NAME="Other"))
        assert get_settings().APP_NAME == "Other"
