"""
Centralized error handlers for FastAPI.

Maps product domain errors and request validation errors to HTTP
responses. Unrecognized exceptions are answered by the catch-all
middleware. All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shopkart.core.config import settings
from shopkart.domain.product.errors import (
    ProductNotFoundError,
    ProductValidationError,
)
from shopkart.shared.errors.middleware import UnhandledErrorMiddleware
from shopkart.shared.errors.responder import ErrorResponder, to_json_response

logger = logging.getLogger(__name__)


def register_error_handlers(
    app: FastAPI, responder: ErrorResponder | None = None
) -> None:
    """Register all error handlers on the FastAPI application.

    Must be called before the application starts serving requests.

    Args:
        app: The FastAPI application instance.
        responder: Responder to use; built from settings when omitted.
    """
    if responder is None:
        responder = ErrorResponder.from_settings(settings)

    @app.exception_handler(ProductNotFoundError)
    async def handle_product_not_found(
        _request: Request, exc: ProductNotFoundError
    ) -> JSONResponse:
        """Handle missing product errors."""
        logger.warning("Product not found: %s", exc.message)
        return to_json_response(responder.respond_to(exc))

    @app.exception_handler(ProductValidationError)
    async def handle_product_validation(
        _request: Request, exc: ProductValidationError
    ) -> JSONResponse:
        """Handle product business rule violations."""
        logger.warning("Product validation failed: %s", exc.message)
        return to_json_response(responder.respond_to(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request payloads that fail schema validation."""
        logger.warning(
            "Invalid request on %s %s: %d error(s)",
            request.method,
            request.url.path,
            len(exc.errors()),
        )
        return to_json_response(responder.respond_to(exc))

    app.add_middleware(UnhandledErrorMiddleware, responder=responder)
