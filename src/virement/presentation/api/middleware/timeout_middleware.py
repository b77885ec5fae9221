"""
Request timeout middleware.

Bounds the wall-clock time of a single request. This is a hosting
concern: the transfer pipeline itself never cancels its ledger calls.
"""

import asyncio

from fastapi import status
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from virement.infrastructure.monitoring import get_logger
from virement.presentation.api.responses import action_error_response

logger = get_logger(__name__)


class RequestTimeoutMiddleware:
    """
    Answer 504 when a request exceeds the configured ceiling.

    Pure ASGI middleware so that expiry cancels the handler directly.
    If the response has already started it cannot be replaced and the
    connection is simply cut.
    """

    def __init__(self, app: ASGIApp, timeout: float = 30.0):
        self.app = app
        self.timeout = timeout

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(
                self.app(scope, receive, send_wrapper),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.error(
                f"{scope.get('method')} {scope.get('path')} exceeded "
                f"{self.timeout}s ceiling"
            )
            if response_started:
                raise

            response = action_error_response(
                "Request timed out",
                status.HTTP_504_GATEWAY_TIMEOUT,
            )
            await response(scope, receive, send)
