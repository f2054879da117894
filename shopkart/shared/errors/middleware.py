"""
Catch-all error interceptor middleware.

Any exception that escapes the routers and the registered exception
handlers ends here and is answered with the 500 error response.
The exception is logged with its stack trace and never re-raised,
so the client always receives a well-formed JSON body.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from shopkart.shared.errors.responder import ErrorResponder, to_json_response

logger = logging.getLogger(__name__)


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Middleware that converts unhandled exceptions into error responses."""

    def __init__(self, app: ASGIApp, responder: ErrorResponder) -> None:
        super().__init__(app)
        self._responder = responder

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process request and answer any escaping exception."""
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(
                "Unhandled error on %s %s: %s",
                request.method,
                request.url.path,
                type(exc).__name__,
            )
            return to_json_response(self._responder.respond_to(exc))
