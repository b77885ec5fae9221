"""
Virement - Solana transfer action service.

Validates transfer requests, checks the sender's on-chain balance and
returns unsigned SOL transfer transactions for wallet-side signing.
"""

__version__ = "0.1.0"
