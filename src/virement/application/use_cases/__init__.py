"""
Application use cases.
"""

from virement.application.use_cases.describe_transfer_action import (
    DescribeTransferAction,
)
from virement.application.use_cases.prepare_transfer_transaction import (
    PrepareTransferResult,
    PrepareTransferTransaction,
)
from virement.application.use_cases.validate_transfer_request import (
    ValidateTransferRequest,
)

__all__ = [
    "DescribeTransferAction",
    "PrepareTransferResult",
    "PrepareTransferTransaction",
    "ValidateTransferRequest",
]
