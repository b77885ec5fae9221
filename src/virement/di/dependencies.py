"""
FastAPI dependency injection.

Provides use cases to routes from the DI container. Tests replace any of
these through app.dependency_overrides.
"""

from fastapi import Depends

from virement.application.use_cases.describe_transfer_action import (
    DescribeTransferAction,
)
from virement.application.use_cases.prepare_transfer_transaction import (
    PrepareTransferTransaction,
)
from virement.application.use_cases.validate_transfer_request import (
    ValidateTransferRequest,
)
from virement.config.settings import Settings
from virement.di.container import get_container
from virement.domain.services.i_ledger_client import ILedgerClient

# ================================================================
# Service Dependencies
# ================================================================


def get_app_settings() -> Settings:
    """Get settings held by the container."""
    return get_container().settings


def get_ledger_client() -> ILedgerClient:
    """Get LedgerClient service dependency."""
    return get_container().ledger_client


# ================================================================
# Use Case Dependencies
# ================================================================


def get_describe_transfer_action(
    settings: Settings = Depends(get_app_settings),
) -> DescribeTransferAction:
    """Get DescribeTransferAction use case dependency."""
    return DescribeTransferAction(icon_path=settings.ACTION_ICON_PATH)


def get_validate_transfer_request() -> ValidateTransferRequest:
    """Get ValidateTransferRequest use case dependency."""
    return ValidateTransferRequest()


def get_prepare_transfer_transaction(
    ledger_client: ILedgerClient = Depends(get_ledger_client),
) -> PrepareTransferTransaction:
    """Get PrepareTransferTransaction use case dependency."""
    return PrepareTransferTransaction(ledger_client=ledger_client)
