"""Custom domain exceptions for the checkout package."""

# Stable, machine-readable error codes for callers.
VALIDATION_ERROR = "VALIDATION_ERROR"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    code: str = "DOMAIN_ERROR"


class DomainValidationError(DomainError):
    """Raised when incoming order data fails validation (e.g. negative totals, unknown customer type)."""

    code = VALIDATION_ERROR
