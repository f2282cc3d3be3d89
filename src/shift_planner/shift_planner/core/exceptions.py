class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "DOMAIN_ERROR"


class ValidationError(DomainError):
    """Raised when input data is malformed or violates domain rules."""

    code = "VALIDATION_ERROR"


class ConflictError(DomainError):
    """Raised when a change would give an employee two overlapping shifts."""

    code = "CONFLICT"


class NotFoundError(DomainError):
    """Raised when an operation references an unknown shift or employee."""

    code = "NOT_FOUND"


class RangeError(DomainError):
    """Raised when time-of-day arithmetic leaves the [00:00, 24:00) range."""

    code = "RANGE_ERROR"
