"""
API routes module.

Exports all route routers for registration in main app.
"""

from virement.presentation.api.routes.health import router as health_router
from virement.presentation.api.routes.transfer import router as transfer_router

__all__ = [
    "health_router",
    "transfer_router",
]
