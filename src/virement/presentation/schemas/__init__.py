"""
Virement API request/response schemas.
"""

from virement.presentation.schemas.action_schemas import (
    ActionErrorResponse,
    ActionGetResponse,
    ActionLinksSchema,
    ActionParameterSchema,
    ActionPostResponse,
    LinkedActionSchema,
)

__all__ = [
    "ActionErrorResponse",
    "ActionGetResponse",
    "ActionLinksSchema",
    "ActionParameterSchema",
    "ActionPostResponse",
    "LinkedActionSchema",
]
