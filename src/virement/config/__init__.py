"""
Configuration module for Virement.
"""

from virement.config.settings import (
    SOLANA_RPC_URLS,
    Settings,
    get_settings,
    load_config,
    override_settings,
    reset_settings,
)

__all__ = [
    "SOLANA_RPC_URLS",
    "Settings",
    "get_settings",
    "load_config",
    "override_settings",
    "reset_settings",
]
