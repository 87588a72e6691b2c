class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateUsernameError(ValidationError):
    """Raised when signing up with a username that is already taken."""


class DuplicateRollNumberError(ValidationError):
    """Raised when creating a student whose roll number already exists."""


class NotFoundError(DomainError):
    """Raised when a keyed record does not exist."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class UnauthenticatedError(DomainError):
    """Raised when a protected request carries no bearer token."""


class InvalidTokenError(DomainError):
    """Raised when a bearer token cannot be trusted."""


class TokenSignatureError(InvalidTokenError):
    """Token is malformed or its signature does not verify."""


class TokenExpiredError(InvalidTokenError):
    """Token signature is fine but its validity window has passed."""
