"""
Domain value objects.
"""

from virement.domain.value_objects.sol_amount import (
    LAMPORTS_PER_SOL,
    MAX_LAMPORTS,
    SolAmount,
    lamports_to_sol,
)
from virement.domain.value_objects.wallet_address import WalletAddress

__all__ = [
    "LAMPORTS_PER_SOL",
    "MAX_LAMPORTS",
    "SolAmount",
    "WalletAddress",
    "lamports_to_sol",
]
