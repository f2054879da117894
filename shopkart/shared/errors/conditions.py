"""
Error conditions and exception classification.

An ErrorCondition is the closed set of reasons a request could not be
fulfilled. classify() turns whatever was raised into exactly one of them,
checking the most specific exception types first and falling back to
UNCLASSIFIED for everything else. It never raises.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from fastapi.exceptions import RequestValidationError

from shopkart.domain.product.errors import (
    ProductNotFoundError,
    ProductValidationError,
)

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Category of a failed request."""

    NOT_FOUND = "not_found"
    VALIDATION_FAILURE = "validation_failure"
    MALFORMED_INPUT = "malformed_input"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class ErrorCondition:
    """A classified failure.

    Attributes:
        kind: The error category.
        message: Human-readable message, None when the failure had none.
        violations: Field-level violation messages, in reported order.
    """

    kind: ErrorKind
    message: str | None = None
    violations: tuple[str, ...] = ()


def _safe_message(exc: BaseException) -> str | None:
    try:
        text = str(exc)
    except Exception:  # a broken __str__ must not break error handling
        logger.debug("Could not render message of %s", type(exc).__name__)
        return None
    return text or None


def _format_violation(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def request_violations(exc: RequestValidationError) -> tuple[str, ...]:
    """Flatten a request validation error into "loc: msg" strings."""
    return tuple(_format_violation(error) for error in exc.errors())


def classify(exc: BaseException) -> ErrorCondition:
    """Map a raised exception to its error condition.

    Args:
        exc: Any exception raised while handling a request.

    Returns:
        The matching condition; UNCLASSIFIED when nothing more
        specific applies.
    """
    if isinstance(exc, ProductNotFoundError):
        return ErrorCondition(ErrorKind.NOT_FOUND, exc.message)
    if isinstance(exc, ProductValidationError):
        return ErrorCondition(
            ErrorKind.VALIDATION_FAILURE, exc.message, exc.violations
        )
    if isinstance(exc, RequestValidationError):
        return ErrorCondition(
            ErrorKind.MALFORMED_INPUT, violations=request_violations(exc)
        )
    return ErrorCondition(ErrorKind.UNCLASSIFIED, _safe_message(exc))
