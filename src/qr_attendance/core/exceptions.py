class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class DuplicateError(DomainError):
    """Raised when an identity, subject or unique key already exists."""

    status_code = 409


class AuthenticationError(DomainError):
    """Raised when credentials or a session token are invalid."""

    status_code = 401


class InvalidQrError(DomainError):
    """Raised when no QR session exists for the presented id."""


class ExpiredQrError(DomainError):
    """Raised when the QR session exists but its window has closed."""


class StoreError(DomainError):
    """Raised when the underlying persistence layer fails."""

    status_code = 503
