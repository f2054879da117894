"""
Application entry point.

Creates the FastAPI application and wires together:
- Error handlers (centralized error-to-HTTP mapping)
- Logging configuration

No business logic belongs here. Product routers are included by
the application that mounts them; they only need to raise the
errors defined in shopkart.domain.product.errors.
"""

from fastapi import FastAPI

from shopkart.core.config import settings
from shopkart.shared.errors.handlers import register_error_handlers
from shopkart.shared.logging import configure_logging


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Returns:
        A FastAPI application whose failed requests are all answered
        with the shared JSON error body.
    """
    configure_logging(
        level=settings.log_level, error_log_level=settings.error_log_level
    )

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    return app


app = create_app()
