"""
Domain entities.
"""

from virement.domain.entities.action import (
    ActionDescriptor,
    ActionParameter,
    LinkedAction,
)
from virement.domain.entities.transfer import BalanceSnapshot, ValidatedTransfer

__all__ = [
    "ActionDescriptor",
    "ActionParameter",
    "LinkedAction",
    "BalanceSnapshot",
    "ValidatedTransfer",
]
