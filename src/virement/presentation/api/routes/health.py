"""
Health check endpoints.
"""

from fastapi import APIRouter, Depends

from virement.config.settings import Settings
from virement.di.dependencies import get_app_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(settings: Settings = Depends(get_app_settings)):
    """
    Liveness check.

    Does not call the ledger: a slow RPC node must not mark the
    service itself as dead.
    """
    return {
        "status": "healthy",
        "service": "virement",
        "version": settings.APP_VERSION,
        "network": settings.SOLANA_NETWORK,
    }
