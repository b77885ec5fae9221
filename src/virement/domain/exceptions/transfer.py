"""
Transfer request exceptions.

Each exception maps to one client-facing validation failure. Messages are
returned to the caller verbatim.
"""

from decimal import Decimal

from virement.domain.exceptions.base import VirementException


class TransferValidationError(VirementException):
    """Base exception for rejected transfer requests."""


class InvalidSenderAddressError(TransferValidationError):
    """Raised when the account field is not a valid Solana address."""

    def __init__(self):
        super().__init__(
            "Invalid account provided",
            code="INVALID_SENDER_ADDRESS",
        )


class MissingParameterError(TransferValidationError):
    """Raised when the to or amount query parameter is absent."""

    def __init__(self):
        super().__init__(
            "Missing required parameters: to and amount",
            code="MISSING_PARAMETER",
        )


class InvalidRecipientAddressError(TransferValidationError):
    """Raised when the to parameter is not a valid Solana address."""

    def __init__(self):
        super().__init__(
            "Invalid recipient address",
            code="INVALID_RECIPIENT_ADDRESS",
        )


class InvalidAmountError(TransferValidationError):
    """Raised when amount is not a positive finite number."""

    def __init__(self):
        super().__init__(
            "Invalid amount specified",
            code="INVALID_AMOUNT",
        )


class InsufficientBalanceError(TransferValidationError):
    """Raised when the sender cannot cover the requested lamports."""

    def __init__(self, balance_sol: Decimal, required_lamports: int):
        """
        Initialize insufficient balance error.

        Args:
            balance_sol: Observed balance in SOL (4 decimal places)
            required_lamports: Lamports the transfer would move
        """
        super().__init__(
            f"Insufficient balance. You have {balance_sol} SOL",
            code="INSUFFICIENT_BALANCE",
        )
        self.balance_sol = balance_sol
        self.required_lamports = required_lamports
