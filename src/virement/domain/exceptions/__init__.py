"""
Domain exceptions package.
"""

# Base exceptions
from virement.domain.exceptions.base import (
    InternalServiceError,
    VirementException,
)

# Ledger exceptions
from virement.domain.exceptions.ledger import LedgerUnavailableError

# Transfer exceptions
from virement.domain.exceptions.transfer import (
    InsufficientBalanceError,
    InvalidAmountError,
    InvalidRecipientAddressError,
    InvalidSenderAddressError,
    MissingParameterError,
    TransferValidationError,
)

__all__ = [
    # Base
    "VirementException",
    "InternalServiceError",
    # Ledger
    "LedgerUnavailableError",
    # Transfer
    "TransferValidationError",
    "InvalidSenderAddressError",
    "MissingParameterError",
    "InvalidRecipientAddressError",
    "InvalidAmountError",
    "InsufficientBalanceError",
]
