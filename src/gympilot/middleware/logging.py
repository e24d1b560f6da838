"""Request logging and ID injection middleware."""

import time
import uuid

import structlog
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from gympilot.core.logging import get_logger, set_request_id

logger = get_logger(__name__)


class RequestIDMiddleware:
    """
    Inject unique request ID into context.

    Every request gets a UUID unless an X-Request-ID header is supplied.
    The ID is echoed back on the response and bound to every log line.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers", []))
        request_id = headers.get(b"x-request-id", str(uuid.uuid4()).encode()).decode()
        structlog.contextvars.clear_contextvars()
        set_request_id(request_id)
        started = time.perf_counter()

        logger.info("request.start", method=scope["method"], path=scope["path"])

        async def send_with_request_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                response_headers = list(message.get("headers", []))
                response_headers.append((b"x-request-id", request_id.encode()))
                message["headers"] = response_headers
                logger.info(
                    "request.complete",
                    status_code=message.get("status"),
                    duration_ms=int((time.perf_counter() - started) * 1000),
                )
            await send(message)

        await self.app(scope, receive, send_with_request_id)
