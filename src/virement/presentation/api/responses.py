"""
Action response encoding.

Every action response, success or error, carries the same CORS header
set so that wallets on any origin can call the endpoint.
"""

from typing import Any, Dict

from fastapi import Response, status
from fastapi.responses import JSONResponse

from virement.presentation.schemas.action_schemas import ActionErrorResponse

ACTIONS_CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,PUT,OPTIONS",
    "Access-Control-Allow-Headers": (
        "Content-Type, Authorization, Content-Encoding, Accept-Encoding, "
        "X-Accept-Action-Version, X-Accept-Blockchain-Ids"
    ),
    "Access-Control-Expose-Headers": "X-Action-Version, X-Blockchain-Ids",
    "Content-Type": "application/json",
}


def action_response(
    content: Any,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """
    Encode a JSON action response with CORS headers.

    Args:
        content: JSON-serializable body
        status_code: HTTP status code

    Returns:
        JSONResponse with ACTIONS_CORS_HEADERS
    """
    return JSONResponse(
        content=content,
        status_code=status_code,
        headers=dict(ACTIONS_CORS_HEADERS),
    )


def action_error_response(message: str, status_code: int) -> JSONResponse:
    """Encode an ActionErrorResponse body with CORS headers."""
    return action_response(
        ActionErrorResponse(message=message).model_dump(),
        status_code=status_code,
    )


def action_preflight_response() -> Response:
    """Empty preflight response with CORS headers."""
    return Response(
        status_code=status.HTTP_200_OK,
        headers=dict(ACTIONS_CORS_HEADERS),
    )
