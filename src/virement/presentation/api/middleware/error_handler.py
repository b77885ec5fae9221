"""
Global error handling for action endpoints.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from virement.domain.exceptions import InternalServiceError, VirementException
from virement.infrastructure.monitoring import get_logger, metrics
from virement.presentation.api.responses import action_error_response

logger = get_logger(__name__)

STATUS_CODE_MAP = {
    "INVALID_SENDER_ADDRESS": status.HTTP_400_BAD_REQUEST,
    "MISSING_PARAMETER": status.HTTP_400_BAD_REQUEST,
    "INVALID_RECIPIENT_ADDRESS": status.HTTP_400_BAD_REQUEST,
    "INVALID_AMOUNT": status.HTTP_400_BAD_REQUEST,
    "INSUFFICIENT_BALANCE": status.HTTP_400_BAD_REQUEST,
    "LEDGER_UNAVAILABLE": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "INTERNAL_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def virement_exception_handler(
    request: Request, exc: VirementException
) -> JSONResponse:
    """
    Handle Virement domain exceptions.

    Client errors carry their own message. Server errors are logged and
    replaced by the opaque internal error message.
    """
    status_code = STATUS_CODE_MAP.get(
        exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    metrics.transfer_actions_total.labels(outcome=exc.code.lower()).inc()

    if status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: "
            f"{exc.code}: {exc.message}"
        )
        return action_error_response(InternalServiceError().message, status_code)

    logger.info(f"{request.method} {request.url.path} rejected: {exc.code}")
    return action_error_response(exc.message, status_code)
