"""
Domain service interfaces.
"""

from virement.domain.services.i_ledger_client import ILedgerClient

__all__ = ["ILedgerClient"]
