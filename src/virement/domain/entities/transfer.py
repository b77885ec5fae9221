"""
Transfer entities.

ValidatedTransfer is produced by the request validator; BalanceSnapshot is
fetched from the ledger for each request and never reused.
"""

from dataclasses import dataclass

from virement.domain.value_objects.sol_amount import SolAmount
from virement.domain.value_objects.wallet_address import WalletAddress


@dataclass(frozen=True)
class ValidatedTransfer:
    """
    Transfer request that passed every validation step.

    Attributes:
        sender: Wallet paying for the transfer (and the fee)
        recipient: Wallet receiving the lamports
        amount: Requested amount in SOL

    Self-transfer (sender == recipient) is permitted.
    """

    sender: WalletAddress
    recipient: WalletAddress
    amount: SolAmount

    @property
    def lamports(self) -> int:
        """Lamports to move, always > 0."""
        return self.amount.lamports


@dataclass(frozen=True)
class BalanceSnapshot:
    """Sender balance observed on the ledger for a single request."""

    owner: WalletAddress
    lamports: int

    def covers(self, lamports: int) -> bool:
        """Check whether this balance can pay the given lamports."""
        return lamports <= self.lamports
