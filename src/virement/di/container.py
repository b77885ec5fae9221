"""
Dependency Injection Container for Virement.

Manages service instances and their dependencies.
"""

from typing import Optional

from virement.config.settings import Settings, get_settings
from virement.domain.services.i_ledger_client import ILedgerClient
from virement.infrastructure.blockchain.solana_rpc_client import SolanaRPCClient
from virement.infrastructure.monitoring import get_logger

logger = get_logger(__name__)


class DIContainer:
    """
    Dependency injection container.

    Holds settings and the ledger client. The ledger client is stateless
    across requests, so a single instance is shared.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize container.

        Args:
            settings: Optional Settings instance (defaults to global)
        """
        self.settings = settings or get_settings()
        self._ledger_client: Optional[ILedgerClient] = None

    @property
    def ledger_client(self) -> ILedgerClient:
        """Get ledger client (created on first access)."""
        if self._ledger_client is None:
            self._ledger_client = SolanaRPCClient(
                rpc_url=self.settings.solana_rpc_endpoint,
                commitment=self.settings.SOLANA_COMMITMENT,
                timeout=self.settings.RPC_TIMEOUT,
            )
            logger.info(
                f"Ledger client ready ({self.settings.SOLANA_NETWORK}, "
                f"commitment={self.settings.SOLANA_COMMITMENT})"
            )
        return self._ledger_client


_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get global container instance.

    Returns:
        DIContainer instance

    Raises:
        RuntimeError: If container not initialized
    """
    if _container is None:
        raise RuntimeError(
            "Container not initialized. Call initialize_container() first."
        )
    return _container


def initialize_container(settings: Optional[Settings] = None) -> DIContainer:
    """Create the global container."""
    global _container
    _container = DIContainer(settings)
    return _container


def shutdown_container() -> None:
    """Drop the global container."""
    global _container
    _container = None
