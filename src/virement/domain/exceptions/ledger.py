"""
Ledger-related exceptions.
"""

from typing import Optional

from virement.domain.exceptions.base import VirementException


class LedgerUnavailableError(VirementException):
    """
    Raised when a ledger call fails.

    Covers timeouts, unreachable endpoints, RPC errors and malformed
    responses. The message and details are for server-side logs only.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message, code="LEDGER_UNAVAILABLE")
        self.details = details or {}
