"""
Pydantic schema for the JSON error body.

Every error handler returns this shape. Instances are frozen:
a response is built once per failed request and never mutated.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers.

    Attributes:
        status: HTTP status code; the response status always matches it.
        timestamp: Local date-time at which the response was built.
        title: Short fixed text per error category, sent as ``message``.
        details: Message carried by the failure, if it had one.
    """

    model_config = ConfigDict(frozen=True)

    status: int
    timestamp: datetime
    title: str = Field(..., serialization_alias="message")
    details: str | None = None
