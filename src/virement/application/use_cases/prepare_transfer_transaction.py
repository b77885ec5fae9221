"""
Prepare Transfer Transaction use case.

Generates unsigned SOL transfer transaction for user to sign in wallet.
"""

from dataclasses import dataclass

from virement.domain.entities.transfer import BalanceSnapshot, ValidatedTransfer
from virement.domain.exceptions import (
    InsufficientBalanceError,
    LedgerUnavailableError,
)
from virement.domain.services.i_ledger_client import ILedgerClient
from virement.domain.value_objects.sol_amount import lamports_to_sol
from virement.infrastructure.blockchain.solana_utils import (
    build_transfer_transaction,
    serialize_transaction,
)
from virement.infrastructure.monitoring import get_logger

logger = get_logger(__name__)


@dataclass
class PrepareTransferResult:
    """
    Result of prepare transfer operation.

    Attributes:
        transaction: Unsigned transaction (base64) for user to sign
        message: Human-readable transfer summary
        lamports: Lamports moved by the transaction
        blockhash: Recent blockhash attached to the transaction
    """

    transaction: str
    message: str
    lamports: int
    blockhash: str


class PrepareTransferTransaction:
    """
    Prepare transfer transaction for user signing.

    Business rules:
    - Balance is fetched fresh for every request
    - Requested lamports must not exceed the balance
    - Balance is checked BEFORE any transaction is built
    - Sender pays the fee; blockhash is always attached
    - Ledger failures are not retried
    """

    def __init__(self, ledger_client: ILedgerClient):
        """
        Initialize use case with dependencies.

        Args:
            ledger_client: Ledger client for balance/blockhash lookups
        """
        self.ledger_client = ledger_client

    async def execute(self, transfer: ValidatedTransfer) -> PrepareTransferResult:
        """
        Prepare transfer transaction.

        Args:
            transfer: Validated transfer request

        Returns:
            PrepareTransferResult with unsigned transaction

        Raises:
            InsufficientBalanceError: If sender balance is too low
            LedgerUnavailableError: If a ledger call fails
        """
        lamports = transfer.lamports

        snapshot = await self._fetch_balance(transfer)
        if not snapshot.covers(lamports):
            logger.info(
                f"Insufficient balance for {transfer.sender}: "
                f"requested {lamports}, available {snapshot.lamports}"
            )
            raise InsufficientBalanceError(
                balance_sol=lamports_to_sol(snapshot.lamports),
                required_lamports=lamports,
            )

        blockhash = await self._ledger_call(
            "getLatestBlockhash",
            self.ledger_client.get_latest_blockhash,
        )

        transaction = build_transfer_transaction(
            sender=transfer.sender.pubkey,
            recipient=transfer.recipient.pubkey,
            lamports=lamports,
            blockhash=blockhash,
        )

        message = (
            f"Transfer {transfer.amount.display()} SOL "
            f"to {transfer.recipient.elided()}"
        )

        logger.info(
            f"Prepared transfer of {lamports} lamports "
            f"from {transfer.sender} to {transfer.recipient}"
        )

        return PrepareTransferResult(
            transaction=serialize_transaction(transaction),
            message=message,
            lamports=lamports,
            blockhash=blockhash,
        )

    async def _fetch_balance(self, transfer: ValidatedTransfer) -> BalanceSnapshot:
        """Fetch the sender's current balance."""
        lamports = await self._ledger_call(
            "getBalance",
            self.ledger_client.get_balance,
            str(transfer.sender),
        )
        return BalanceSnapshot(owner=transfer.sender, lamports=lamports)

    async def _ledger_call(self, operation: str, func, *args):
        """Call the ledger, normalizing every failure."""
        try:
            return await func(*args)
        except LedgerUnavailableError as e:
            logger.warning(f"Ledger {operation} failed: {e.message}")
            raise
        except Exception as e:
            logger.warning(f"Ledger {operation} failed: {type(e).__name__}: {e}")
            raise LedgerUnavailableError(
                f"Ledger {operation} failed",
                details={"operation": operation},
            ) from e
