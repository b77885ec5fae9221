"""
WalletAddress value object - Immutable Solana wallet address.
"""

from dataclasses import dataclass, field

from solders.pubkey import Pubkey  # type: ignore


@dataclass(frozen=True)
class WalletAddress:
    """
    Value object representing a parsed Solana wallet address.

    Business rules:
    - Must be a base58 string decoding to exactly 32 bytes
    - Existence on-chain is NOT checked
    - Immutable once created
    """

    address: str
    pubkey: Pubkey = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Parse wallet address on creation."""
        if not self.address or not isinstance(self.address, str):
            raise ValueError("Wallet address cannot be empty")

        try:
            pubkey = Pubkey.from_string(self.address)
        except Exception as e:
            raise ValueError(f"Invalid wallet address: {e}")

        object.__setattr__(self, "pubkey", pubkey)

    @classmethod
    def parse(cls, value: object) -> "WalletAddress":
        """
        Parse an untrusted value into a WalletAddress.

        Args:
            value: Raw value from a request

        Returns:
            WalletAddress instance

        Raises:
            ValueError: If value is not a well-formed address
        """
        if not isinstance(value, str):
            raise ValueError("Wallet address must be a string")
        return cls(value)

    def elided(self, keep: int = 8) -> str:
        """Return address elided for display (e.g., 'ABCDEFGH...STUVWXYZ')."""
        return f"{self.address[:keep]}...{self.address[-keep:]}"

    def __str__(self) -> str:
        """String representation returns full address."""
        return self.address
