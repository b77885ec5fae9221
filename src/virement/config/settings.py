"""
Application settings with environment-based configuration.

Priority (highest to lowest):
1. Environment variables (from .env or system)
2. Environment-specific YAML config file (development.yaml, test.yaml)
3. Default YAML config file (default.yaml)
4. Pydantic defaults
"""

import os
from pathlib import Path
from typing import Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Public RPC endpoints per network
SOLANA_RPC_URLS: Dict[str, str] = {
    "mainnet-beta": "https://api.mainnet-beta.solana.com",
    "testnet": "https://api.testnet.solana.com",
    "devnet": "https://api.devnet.solana.com",
}


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    The RPC URL may embed an API key, so set it from the environment
    rather than from YAML files.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",
    )

    # Application
    APP_NAME: str = "Virement"
    APP_VERSION: str = "0.1.0"
    ENV: str = Field(default="development", description="Environment name")

    # API Server
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000, ge=1024, le=65535)
    API_RELOAD: bool = Field(default=False)

    # Actions
    ACTIONS_PREFIX: str = Field(
        default="/api/actions",
        description="Path prefix for action endpoints",
    )
    ACTION_ICON_PATH: str = Field(
        default="/solana-logo.png",
        description="Icon path, resolved against the request origin",
    )

    # Solana
    SOLANA_NETWORK: str = Field(default="devnet")
    SOLANA_RPC_URL: Optional[str] = Field(
        default=None,
        description="RPC URL override (defaults to the network endpoint)",
    )
    SOLANA_COMMITMENT: str = Field(default="confirmed")

    # Timeouts
    RPC_TIMEOUT: float = Field(
        default=10.0,
        gt=0.0,
        le=60.0,
        description="Per-call ledger RPC timeout in seconds",
    )
    REQUEST_TIMEOUT: float = Field(
        default=30.0,
        gt=0.0,
        le=300.0,
        description="Wall-clock ceiling for a single request in seconds",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # Observability - Metrics
    METRICS_ENABLED: bool = Field(
        default=True,
        description="Expose Prometheus metrics on /metrics",
    )

    @computed_field
    @property
    def solana_rpc_endpoint(self) -> str:
        """RPC URL actually used: explicit override or network default."""
        return self.SOLANA_RPC_URL or SOLANA_RPC_URLS[self.SOLANA_NETWORK]

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"Invalid LOG_LEVEL. Must be one of: {allowed}")
        return v_upper

    @field_validator("SOLANA_NETWORK")
    @classmethod
    def validate_solana_network(cls, v: str) -> str:
        """Validate Solana network."""
        v_lower = v.lower()
        if v_lower not in SOLANA_RPC_URLS:
            raise ValueError(
                f"Invalid SOLANA_NETWORK. Must be one of: {list(SOLANA_RPC_URLS)}"
            )
        return v_lower

    @field_validator("SOLANA_COMMITMENT")
    @classmethod
    def validate_commitment(cls, v: str) -> str:
        """Validate commitment level."""
        allowed = ["processed", "confirmed", "finalized"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid SOLANA_COMMITMENT. Must be one of: {allowed}")
        return v_lower

    @field_validator("ACTIONS_PREFIX")
    @classmethod
    def validate_actions_prefix(cls, v: str) -> str:
        """Normalize prefix to '/segment' form without trailing slash."""
        v = "/" + v.strip("/")
        return "" if v == "/" else v


def _read_yaml(path: Path) -> dict:
    """Read a YAML mapping, returning {} if the file is missing or empty."""
    if not path.exists():
        return {}
    with open(path, "r") as f:
        loaded = yaml.safe_load(f)
    return loaded or {}


def load_config(
    config_file: Optional[str] = None,
    env_file: Optional[str] = None,
    env: Optional[str] = None,
) -> Settings:
    """
    Load configuration from YAML files and environment variables.

    Priority: ENV vars > environment-specific YAML > default YAML > defaults

    Args:
        config_file: Optional YAML config filename override
        env_file: Optional .env filename (e.g., ".env.development")
        env: Optional environment name override (e.g., "development", "test")

    Returns:
        Settings instance

    Raises:
        ValidationError: If a value is out of range
    """
    current_file = Path(__file__).resolve()
    project_root = current_file.parent.parent.parent.parent
    config_dir = project_root / "config"

    environment = env or os.getenv("ENV", "production")

    env_map = {
        "production": (".env.production", "production.yaml"),
        "development": (".env.development", "development.yaml"),
        "test": (".env.test", "test.yaml"),
    }

    default_env_file, default_config_file = env_map.get(
        environment, (".env.production", "production.yaml")
    )
    if env_file is None:
        env_file = default_env_file
    if config_file is None:
        config_file = default_config_file

    env_file_path = project_root / env_file
    if env_file_path.exists():
        load_dotenv(env_file_path, override=True)

    merged_config = _read_yaml(config_dir / "default.yaml")
    merged_config.update(_read_yaml(config_dir / config_file))
    merged_config.setdefault("ENV", environment)

    # Init kwargs outrank env vars in pydantic-settings; drop overridden keys
    merged_config = {
        key: value for key, value in merged_config.items() if key not in os.environ
    }

    return Settings(**merged_config)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or initialize global settings singleton."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """Override global settings (for testing)."""
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """Reset settings to force re-initialization (for testing)."""
    global _settings
    _settings = None
