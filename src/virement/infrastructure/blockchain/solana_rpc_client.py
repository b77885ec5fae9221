"""
Solana JSON-RPC ledger client.

Implements ILedgerClient over HTTP with aiohttp. Every failure (transport,
timeout, RPC error, malformed payload) surfaces as LedgerUnavailableError.
No retries: a failed call is terminal for the request that made it.
"""

import asyncio
import time
from typing import Any, Dict, Optional

import aiohttp
from solders.hash import Hash  # type: ignore

from virement.domain.exceptions import LedgerUnavailableError
from virement.domain.services.i_ledger_client import ILedgerClient
from virement.infrastructure.monitoring import get_logger, metrics

logger = get_logger(__name__)


class SolanaRPCClient(ILedgerClient):
    """
    Solana RPC client for balance and blockhash lookups.

    Opens a short-lived HTTP session per call; holds no state between
    requests.
    """

    def __init__(
        self,
        rpc_url: str,
        commitment: str = "confirmed",
        timeout: float = 10.0,
    ):
        """
        Initialize Solana RPC client.

        Args:
            rpc_url: Solana RPC endpoint URL
            commitment: Commitment level for reads
            timeout: Per-call timeout in seconds
        """
        self.rpc_url = rpc_url
        self.commitment = commitment
        self.rpc_timeout = timeout

    async def call_rpc(
        self,
        method: str,
        params: Optional[list] = None,
    ) -> Any:
        """
        Call Solana RPC method.

        Args:
            method: RPC method name
            params: Optional method parameters

        Returns:
            The "result" member of the RPC response

        Raises:
            LedgerUnavailableError: On any failure
        """
        start_time = time.time()
        status = "error"

        try:
            result = await self._call_rpc_inner(method, params)
            status = "ok"
            return result
        finally:
            metrics.ledger_calls_total.labels(method=method, status=status).inc()
            metrics.ledger_call_duration_seconds.labels(method=method).observe(
                time.time() - start_time
            )

    async def _call_rpc_inner(
        self,
        method: str,
        params: Optional[list] = None,
    ) -> Any:
        """Inner RPC call implementation."""
        payload = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": method,
            "params": params or [],
        }

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    self.rpc_url,
                    json=payload,
                    timeout=aiohttp.ClientTimeout(total=self.rpc_timeout),
                ) as response:
                    response.raise_for_status()
                    data = await response.json(content_type=None)

        except aiohttp.ClientError as e:
            raise LedgerUnavailableError(
                f"RPC connection error: {str(e)}",
                details={"method": method},
            )
        except asyncio.TimeoutError:
            raise LedgerUnavailableError(
                f"RPC timeout: {method}",
                details={"method": method, "timeout": self.rpc_timeout},
            )
        except ValueError as e:
            raise LedgerUnavailableError(
                f"RPC returned invalid JSON: {str(e)}",
                details={"method": method},
            )

        if not isinstance(data, dict):
            raise LedgerUnavailableError(
                "RPC response is not an object",
                details={"method": method},
            )

        if "error" in data:
            raise LedgerUnavailableError(
                f"RPC error: {data['error']}",
                details={"method": method, "error": data["error"]},
            )

        if "result" not in data:
            raise LedgerUnavailableError(
                "RPC response has no result",
                details={"method": method},
            )

        return data["result"]

    async def get_balance(self, address: str) -> int:
        """
        Get account balance.

        Args:
            address: Account public key

        Returns:
            Balance in lamports
        """
        result = await self.call_rpc(
            "getBalance",
            [address, {"commitment": self.commitment}],
        )
        value = _context_value(result, "getBalance")

        # bool is an int subclass; reject it explicitly
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise LedgerUnavailableError(
                "Malformed getBalance response",
                details={"value": value},
            )

        logger.debug(f"Balance for {address}: {value} lamports")
        return value

    async def get_latest_blockhash(self) -> str:
        """
        Get latest blockhash.

        Returns:
            Blockhash (base58)
        """
        result = await self.call_rpc(
            "getLatestBlockhash",
            [{"commitment": self.commitment}],
        )
        value = _context_value(result, "getLatestBlockhash")

        blockhash = value.get("blockhash") if isinstance(value, dict) else None
        if not isinstance(blockhash, str):
            raise LedgerUnavailableError(
                "Malformed getLatestBlockhash response",
                details={"value": value},
            )

        try:
            Hash.from_string(blockhash)
        except Exception:
            raise LedgerUnavailableError(
                "getLatestBlockhash returned an invalid hash",
                details={"blockhash": blockhash},
            )

        return blockhash


def _context_value(result: Dict[str, Any], method: str) -> Any:
    """Extract 'value' from an RpcResponse-with-context payload."""
    if not isinstance(result, dict) or "value" not in result:
        raise LedgerUnavailableError(
            f"Malformed {method} response",
            details={"method": method},
        )
    return result["value"]
