"""
Validate Transfer Request use case.

Turns an untrusted account/to/amount triple into a ValidatedTransfer.
"""

from typing import Optional

from virement.domain.entities.transfer import ValidatedTransfer
from virement.domain.exceptions import (
    InvalidAmountError,
    InvalidRecipientAddressError,
    InvalidSenderAddressError,
    MissingParameterError,
)
from virement.domain.value_objects.sol_amount import SolAmount
from virement.domain.value_objects.wallet_address import WalletAddress


class ValidateTransferRequest:
    """
    Validate a transfer request.

    Checks run in a fixed order and the first failure wins:
    1. account is a valid address   -> InvalidSenderAddressError
    2. to and amount are present    -> MissingParameterError
    3. to is a valid address        -> InvalidRecipientAddressError
    4. amount is a positive number  -> InvalidAmountError

    Addresses are not checked for existence on-chain. Self-transfer
    is allowed.
    """

    def execute(
        self,
        account: object,
        to: Optional[str],
        amount: Optional[str],
    ) -> ValidatedTransfer:
        """
        Validate raw request fields.

        Args:
            account: Sender address from the request body (untrusted)
            to: Recipient address query parameter
            amount: SOL amount query parameter

        Returns:
            ValidatedTransfer ready for transaction building

        Raises:
            InvalidSenderAddressError: If account is malformed
            MissingParameterError: If to or amount is absent
            InvalidRecipientAddressError: If to is malformed
            InvalidAmountError: If amount is not a positive number
        """
        sender = self._parse_sender(account)

        if not to or not amount:
            raise MissingParameterError()

        recipient = self._parse_recipient(to)
        sol_amount = self._parse_amount(amount)

        return ValidatedTransfer(
            sender=sender,
            recipient=recipient,
            amount=sol_amount,
        )

    def _parse_sender(self, account: object) -> WalletAddress:
        try:
            return WalletAddress.parse(account)
        except ValueError:
            raise InvalidSenderAddressError()

    def _parse_recipient(self, to: str) -> WalletAddress:
        try:
            return WalletAddress.parse(to)
        except ValueError:
            raise InvalidRecipientAddressError()

    def _parse_amount(self, amount: str) -> SolAmount:
        try:
            return SolAmount.parse(amount)
        except ValueError:
            raise InvalidAmountError()
