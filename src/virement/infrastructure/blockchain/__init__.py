"""
Blockchain infrastructure.
"""

from virement.infrastructure.blockchain.solana_rpc_client import SolanaRPCClient
from virement.infrastructure.blockchain.solana_utils import (
    build_transfer_transaction,
    serialize_transaction,
)

__all__ = [
    "SolanaRPCClient",
    "build_transfer_transaction",
    "serialize_transaction",
]
