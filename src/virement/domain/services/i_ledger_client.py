"""
Ledger client interface.

Narrow read-only view of the Solana ledger used by the transfer pipeline.
"""

from abc import ABC, abstractmethod


class ILedgerClient(ABC):
    """
    Abstract interface for ledger queries.

    Implementations talk to a remote, possibly slow or failing node.
    Callers must not assume any particular transport. Implementations do
    not retry and do not cache.
    """

    @abstractmethod
    async def get_balance(self, address: str) -> int:
        """
        Get account balance.

        Args:
            address: Account public key (base58)

        Returns:
            Balance in lamports

        Raises:
            LedgerUnavailableError: If the ledger call fails
        """

    @abstractmethod
    async def get_latest_blockhash(self) -> str:
        """
        Get a recent block reference for new transactions.

        Returns:
            Blockhash (base58)

        Raises:
            LedgerUnavailableError: If the ledger call fails
        """
