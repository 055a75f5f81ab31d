class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DataAccessError(DomainError):
    """Raised when an employee, shift or advance store cannot be read or written."""
