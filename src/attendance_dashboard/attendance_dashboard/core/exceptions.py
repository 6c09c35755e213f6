class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidInputError(ValidationError):
    """Raised when a backend payload does not have the expected shape."""


class NotFoundError(DomainError):
    """Raised when a referenced student or subject does not exist."""
