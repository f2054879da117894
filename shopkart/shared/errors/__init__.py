"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that domain errors
are consistently translated into API responses.
"""

from shopkart.shared.errors.conditions import ErrorCondition, ErrorKind, classify
from shopkart.shared.errors.handlers import register_error_handlers
from shopkart.shared.errors.responder import ErrorResponder, render
from shopkart.shared.errors.schemas import ErrorResponse

__all__ = [
    "ErrorCondition",
    "ErrorKind",
    "ErrorResponder",
    "ErrorResponse",
    "classify",
    "register_error_handlers",
    "render",
]
