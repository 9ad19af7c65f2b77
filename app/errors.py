"""Custom domain exceptions for the application."""

# Stable, machine-readable error codes for API consumers.
VALIDATION_ERROR = "VALIDATION_ERROR"
INVALID_RANGE = "INVALID_RANGE"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class DomainValidationError(DomainError):
    """Raised when business rules or domain validation fail (e.g. empty brand list)."""

    pass


class InvalidRangeError(DomainValidationError):
    """Raised when a date range is missing a bound or its start is after its end."""

    pass
