"""
Domain-specific errors for the product bounded context.

All errors raised from the product domain must be defined here.
These are mapped to HTTP responses by shopkart.shared.errors.
No framework imports allowed.
"""

from collections.abc import Iterable

VIOLATION_SEPARATOR = "; "


class ProductDomainError(Exception):
    """Base error for all product domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ProductNotFoundError(ProductDomainError):
    """Raised when a requested product does not exist."""

    @classmethod
    def for_id(cls, product_id: object) -> "ProductNotFoundError":
        """Build the standard error for a missing product id."""
        error = cls(f"Product with id {product_id} not found")
        error.product_id = product_id
        return error


class ProductValidationError(ProductDomainError):
    """Raised when product data breaks a business rule.

    Carries either a single message or a set of field-level
    violations. When only violations are given, the message is
    the violations joined with ``"; "``.
    """

    def __init__(
        self, message: str | None = None, violations: Iterable[str] = ()
    ) -> None:
        self.violations = tuple(violations)
        if message is None:
            message = VIOLATION_SEPARATOR.join(str(v) for v in self.violations)
        super().__init__(message)
