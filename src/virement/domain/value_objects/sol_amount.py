"""
SolAmount value object - positive SOL amount with lamport conversion.
"""

import re
from dataclasses import dataclass
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

# Lamports per SOL (fixed by the network)
LAMPORTS_PER_SOL = 1_000_000_000

# Lamport amounts are u64 on-chain
MAX_LAMPORTS = 2**64 - 1

# Enough precision that scaling by LAMPORTS_PER_SOL never rounds
_DECIMAL_PRECISION = 100

# ASCII decimal literal with optional exponent; no underscores or
# non-ASCII digits
_AMOUNT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class SolAmount:
    """
    Value object representing a requested SOL amount.

    Business rules:
    - Must be a finite decimal strictly greater than zero
    - Converted to lamports by floor(amount * LAMPORTS_PER_SOL)
    - Must be worth at least one lamport and fit in a u64
    """

    value: Decimal

    def __post_init__(self):
        """Validate amount on creation."""
        if not self.value.is_finite():
            raise ValueError("Amount must be finite")

        if self.value <= 0:
            raise ValueError("Amount must be greater than 0")

        lamports = self._scaled()
        if lamports > MAX_LAMPORTS:
            raise ValueError("Amount exceeds maximum lamport value")

        if lamports < 1:
            raise ValueError("Amount is smaller than one lamport")

    @classmethod
    def parse(cls, raw: str) -> "SolAmount":
        """
        Parse a decimal string into a SolAmount.

        Args:
            raw: Decimal string (e.g., "1.5")

        Returns:
            SolAmount instance

        Raises:
            ValueError: If raw is not a positive finite decimal
        """
        if not isinstance(raw, str) or not _AMOUNT_PATTERN.fullmatch(raw.strip()):
            raise ValueError(f"Amount is not a number: {raw!r}")

        try:
            value = Decimal(raw.strip())
        except InvalidOperation as e:
            raise ValueError(f"Amount is not a number: {raw!r}") from e
        return cls(value)

    def _scaled(self) -> Decimal:
        """Return amount in lamports, floored, as an exact Decimal."""
        with localcontext() as ctx:
            ctx.prec = _DECIMAL_PRECISION
            if self.value > Decimal(MAX_LAMPORTS):
                # Anything this large overflows u64 regardless of scale
                return Decimal(MAX_LAMPORTS) + 1
            return (self.value * LAMPORTS_PER_SOL).to_integral_value(
                rounding=ROUND_FLOOR
            )

    @property
    def lamports(self) -> int:
        """Amount in integer lamports (floor, never rounded up)."""
        return int(self._scaled())

    def display(self) -> str:
        """Plain decimal text without trailing zeros (e.g., '1.5')."""
        with localcontext() as ctx:
            ctx.prec = _DECIMAL_PRECISION
            return format(self.value.normalize(), "f")

    def __str__(self) -> str:
        return self.display()


def lamports_to_sol(lamports: int, places: int = 4) -> Decimal:
    """
    Convert lamports to SOL rounded for display.

    Args:
        lamports: Amount in lamports
        places: Decimal places to keep

    Returns:
        SOL amount quantized to the given places

    Examples:
        >>> lamports_to_sol(1_000_000_000)
        Decimal('1.0000')
    """
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION
        return (Decimal(lamports) / LAMPORTS_PER_SOL).quantize(
            quantum, rounding=ROUND_HALF_UP
        )
