"""
Error responder: builds the JSON error response for a failed request.

Each error kind maps to a fixed (status, title) pair:

    NOT_FOUND           404  "Product Not Found"
    VALIDATION_FAILURE  400  "Bad Request"
    MALFORMED_INPUT     400  "Validation Error"
    UNCLASSIFIED        500  "Internal Server Error"

Dispatch goes through an explicit table keyed by ErrorKind. Anything the
table does not know is answered as UNCLASSIFIED, so responding never fails.
The responder holds only immutable configuration and is safe to share
between concurrent requests.
"""

from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Any

from starlette.responses import JSONResponse

from shopkart.core.config import DEFAULT_REDACTED_DETAILS, Settings
from shopkart.domain.product.errors import VIOLATION_SEPARATOR
from shopkart.shared.errors.conditions import ErrorCondition, ErrorKind, classify
from shopkart.shared.errors.schemas import ErrorResponse

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

TITLE_NOT_FOUND = "Product Not Found"
TITLE_BAD_REQUEST = "Bad Request"
TITLE_VALIDATION_ERROR = "Validation Error"
TITLE_INTERNAL_ERROR = "Internal Server Error"


class ErrorResponder:
    """Turns error conditions into ErrorResponse values.

    Args:
        redact_internal_errors: Send ``redacted_details`` instead of the
            raw message for UNCLASSIFIED failures.
        redacted_details: Replacement details text.
        clock: Returns the current local time; stamped on each response.
    """

    def __init__(
        self,
        redact_internal_errors: bool = False,
        redacted_details: str = DEFAULT_REDACTED_DETAILS,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._redact_internal_errors = redact_internal_errors
        self._redacted_details = redacted_details
        self._clock = clock
        self._dispatch: dict[ErrorKind, Callable[[ErrorCondition], ErrorResponse]] = {
            ErrorKind.NOT_FOUND: lambda c: self.not_found(_message_of(c)),
            ErrorKind.VALIDATION_FAILURE: self._respond_validation_failure,
            ErrorKind.MALFORMED_INPUT: lambda c: self.malformed_input(_violations_of(c)),
            ErrorKind.UNCLASSIFIED: lambda c: self.unclassified(_message_of(c)),
        }

    @classmethod
    def from_settings(cls, settings: Settings) -> "ErrorResponder":
        """Build a responder configured from application settings."""
        return cls(
            redact_internal_errors=settings.redact_internal_errors,
            redacted_details=settings.redacted_error_details,
        )

    def not_found(self, message: str | None) -> ErrorResponse:
        return self._build(HTTP_404, TITLE_NOT_FOUND, message)

    def validation_failure(self, message: str | None) -> ErrorResponse:
        return self._build(HTTP_400, TITLE_BAD_REQUEST, message)

    def malformed_input(self, violations: Iterable[str]) -> ErrorResponse:
        """Respond to a structurally invalid request.

        Args:
            violations: Field-level messages, aggregated into ``details``.
        """
        details = _join_violations(violations)
        return self._build(HTTP_400, TITLE_VALIDATION_ERROR, details)

    def unclassified(self, message: str | None) -> ErrorResponse:
        if self._redact_internal_errors:
            message = self._redacted_details
        return self._build(HTTP_500, TITLE_INTERNAL_ERROR, message)

    def respond(self, condition: ErrorCondition) -> ErrorResponse:
        """Build the response for a classified condition.

        Values that are not a known condition fall through to the
        catch-all response.
        """
        kind = getattr(condition, "kind", None)
        handler = self._dispatch.get(kind) if isinstance(kind, ErrorKind) else None
        if handler is None:
            return self.unclassified(_message_of(condition))
        return handler(condition)

    def respond_to(self, exc: BaseException) -> ErrorResponse:
        """Classify a raised exception and build its response."""
        return self.respond(classify(exc))

    def _respond_validation_failure(self, condition: ErrorCondition) -> ErrorResponse:
        message = _message_of(condition)
        if not message:
            message = _join_violations(_violations_of(condition)) or message
        return self.validation_failure(message)

    def _build(self, status: int, title: str, details: str | None) -> ErrorResponse:
        return ErrorResponse(
            status=status,
            timestamp=self._clock(),
            title=title,
            details=_as_text(details),
        )


def _as_text(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception:  # never let a bad message break the catch-all
        return None


def _message_of(condition: Any) -> str | None:
    return _as_text(getattr(condition, "message", None))


def _violations_of(condition: Any) -> Any:
    return getattr(condition, "violations", ()) or ()


def _join_violations(violations: Any) -> str:
    """Join violation messages, accepting a lone value or a non-iterable."""
    if violations is None:
        return ""
    if isinstance(violations, str):
        violations = (violations,)
    try:
        items = list(violations)
    except TypeError:
        items = [violations]
    texts = (_as_text(item) for item in items)
    return VIOLATION_SEPARATOR.join(text for text in texts if text)


def render(response: ErrorResponse) -> tuple[int, dict[str, Any]]:
    """Return the HTTP status and JSON body for an error response."""
    return response.status, response.model_dump(mode="json", by_alias=True)


def to_json_response(response: ErrorResponse) -> JSONResponse:
    """Wrap an error response for transmission by the HTTP layer."""
    status_code, body = render(response)
    return JSONResponse(status_code=status_code, content=body)
