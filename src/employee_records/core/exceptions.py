class DomainError(Exception):
    """Base exception for failures surfaced to the user as an error page."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidIdError(DomainError):
    """Raised when an identifier is malformed for the store's id format."""


class NotFoundError(DomainError):
    """Raised when the requested record or account does not exist."""

    status_code = 404


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    status_code = 401


class StoreUnavailableError(DomainError):
    """Raised when the backing store cannot be reached."""

    status_code = 500


class ConfigurationError(Exception):
    """Raised at start-up when required configuration is missing."""
