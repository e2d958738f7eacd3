class DomainError(Exception):
    """Base exception for business rule violations."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class StoreError(DomainError):
    """Raised when the database rejects or fails a statement."""
