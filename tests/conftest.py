"""
Test fixtures and configuration.
"""

import asyncio
from typing import AsyncGenerator, List, Optional, Tuple

import httpx
import pytest
import pytest_asyncio

from virement.config.settings import Settings, override_settings, reset_settings
from virement.di.dependencies import get_ledger_client
from virement.domain.services.i_ledger_client import ILedgerClient
from virement.main import create_app

# Real mainnet accounts (valid 32-byte public keys)
SENDER_WALLET = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
RECIPIENT_WALLET = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
BLOCKHASH = "EkSnNWid2cvwEVnVx9aBqawnmiCNiDgp3gUdkDPTKN1N"


class FakeLedgerClient(ILedgerClient):
    """
    Deterministic in-memory ledger.

    Records every call. Set `error` to make both operations fail and
    `delay` to slow them down.
    """

    def __init__(
        self,
        balance: int = 2_000_000_000,
        blockhash: str = BLOCKHASH,
    ):
        self.balance = balance
        self.blockhash = blockhash
        self.error: Optional[Exception] = None
        self.blockhash_error: Optional[Exception] = None
        self.delay: float = 0.0
        self.calls: List[Tuple[str, ...]] = []

    async def get_balance(self, address: str) -> int:
        self.calls.append(("getBalance", address))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return self.balance

    async def get_latest_blockhash(self) -> str:
        self.calls.append(("getLatestBlockhash",))
        if self.blockhash_error:
            raise self.blockhash_error
        return self.blockhash

    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def sender_wallet() -> str:
    """Provide sender wallet address."""
    return SENDER_WALLET


@pytest.fixture
def recipient_wallet() -> str:
    """Provide recipient wallet address."""
    return RECIPIENT_WALLET


@pytest.fixture
def blockhash() -> str:
    """Provide recent blockhash."""
    return BLOCKHASH


@pytest.fixture
def fake_ledger() -> FakeLedgerClient:
    """Provide fake ledger holding 2 SOL."""
    return FakeLedgerClient()


@pytest.fixture
def test_settings() -> Settings:
    """Provide isolated test settings (no YAML, no live RPC)."""
    settings = Settings(
        ENV="test",
        LOG_LEVEL="WARNING",
        SOLANA_NETWORK="devnet",
        SOLANA_RPC_URL="http://127.0.0.1:8899",
        METRICS_ENABLED=False,
        REQUEST_TIMEOUT=5.0,
    )
    override_settings(settings)
    yield settings
    reset_settings()


@pytest_asyncio.fixture
async def client(
    test_settings: Settings,
    fake_ledger: FakeLedgerClient,
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    Provide HTTP client for API testing.

    Override ledger dependency to use the fake ledger.
    """
    app = create_app(test_settings)
    app.dependency_overrides[get_ledger_client] = lambda: fake_ledger

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()
