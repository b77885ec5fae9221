"""
Solana transaction utilities.

Builds unsigned transactions with solders for wallet-side signing.
"""

import base64

from solders.hash import Hash  # type: ignore
from solders.message import Message  # type: ignore
from solders.pubkey import Pubkey  # type: ignore
from solders.system_program import TransferParams, transfer  # type: ignore
from solders.transaction import Transaction  # type: ignore


def build_transfer_transaction(
    sender: Pubkey,
    recipient: Pubkey,
    lamports: int,
    blockhash: str,
) -> Transaction:
    """
    Build an unsigned SOL transfer transaction.

    The transaction holds exactly one System Program transfer
    instruction, with the sender as fee payer.

    Args:
        sender: Funding account, also the fee payer
        recipient: Receiving account
        lamports: Lamports to move
        blockhash: Recent blockhash (base58)

    Returns:
        Unsigned transaction (signatures zeroed)
    """
    instruction = transfer(
        TransferParams(
            from_pubkey=sender,
            to_pubkey=recipient,
            lamports=lamports,
        )
    )
    message = Message.new_with_blockhash(
        [instruction],
        sender,
        Hash.from_string(blockhash),
    )
    return Transaction.new_unsigned(message)


def serialize_transaction(transaction: Transaction) -> str:
    """
    Serialize a transaction to base64 wire format.

    Args:
        transaction: Signed or unsigned transaction

    Returns:
        Base64 string
    """
    return base64.b64encode(bytes(transaction)).decode("ascii")
