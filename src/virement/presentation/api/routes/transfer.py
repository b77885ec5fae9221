"""
Transfer action routes.

Provides the SOL transfer action:
- GET     /transfer - Action descriptor for discovery
- OPTIONS /transfer - CORS preflight
- POST    /transfer?to=&amount= - Unsigned transfer transaction
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from virement.application.use_cases.describe_transfer_action import (
    DescribeTransferAction,
)
from virement.application.use_cases.prepare_transfer_transaction import (
    PrepareTransferTransaction,
)
from virement.application.use_cases.validate_transfer_request import (
    ValidateTransferRequest,
)
from virement.di.dependencies import (
    get_describe_transfer_action,
    get_prepare_transfer_transaction,
    get_validate_transfer_request,
)
from virement.domain.exceptions import InternalServiceError, VirementException
from virement.infrastructure.monitoring import get_logger, metrics
from virement.presentation.api.responses import (
    action_preflight_response,
    action_response,
)
from virement.presentation.schemas.action_schemas import (
    ActionErrorResponse,
    ActionGetResponse,
    ActionPostResponse,
)

logger = get_logger(__name__)

router = APIRouter(tags=["Actions"])


async def _read_account(request: Request) -> object:
    """Extract the raw account field from the JSON body, if any."""
    try:
        body = await request.json()
    except (ValueError, RecursionError):
        # Malformed or pathologically nested JSON
        return None
    if not isinstance(body, dict):
        return None
    return body.get("account")


@router.get(
    "/transfer",
    response_model=ActionGetResponse,
    status_code=status.HTTP_200_OK,
    summary="Describe transfer action",
)
async def describe_transfer_action(
    request: Request,
    use_case: DescribeTransferAction = Depends(get_describe_transfer_action),
) -> JSONResponse:
    """
    Get the transfer action descriptor.

    Side-effect free: identical requests yield identical bodies.
    """
    origin = f"{request.url.scheme}://{request.url.netloc}"
    descriptor = use_case.execute(origin=origin, path=request.url.path)

    return action_response(
        ActionGetResponse.from_descriptor(descriptor).model_dump()
    )


@router.options("/transfer", summary="Transfer action preflight")
async def transfer_action_preflight() -> Response:
    """CORS preflight. Ignores query and body."""
    return action_preflight_response()


@router.post(
    "/transfer",
    response_model=ActionPostResponse,
    status_code=status.HTTP_200_OK,
    summary="Create transfer transaction",
    responses={
        400: {"model": ActionErrorResponse},
        500: {"model": ActionErrorResponse},
        504: {"model": ActionErrorResponse},
    },
)
async def create_transfer_transaction(
    request: Request,
    to: Optional[str] = Query(None, description="Recipient wallet address"),
    amount: Optional[str] = Query(None, description="Amount in SOL"),
    validator: ValidateTransferRequest = Depends(get_validate_transfer_request),
    use_case: PrepareTransferTransaction = Depends(
        get_prepare_transfer_transaction
    ),
) -> JSONResponse:
    """
    Create unsigned SOL transfer transaction.

    Body: {"account": "<sender wallet>"}

    Returns:
        {"transaction": <base64>, "message": <summary>}

    Raises:
        VirementException: Mapped to 400/500 by the exception handler
    """
    try:
        account = await _read_account(request)
        transfer = validator.execute(account=account, to=to, amount=amount)
        result = await use_case.execute(transfer)

    except VirementException:
        raise
    except Exception:
        logger.exception("Transfer action error")
        raise InternalServiceError()

    metrics.transfer_actions_total.labels(outcome="success").inc()

    return action_response(ActionPostResponse.from_result(result).model_dump())
