from __future__ import annotations

from dataclasses import dataclass


class DomainError(Exception):
    """Base for domain errors."""


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class ValidationError(DomainError):
    """Input failed validation; carries one message per offending field."""

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        super().__init__("; ".join(error.message for error in self.errors) or "Validation failed")


class UserConflictError(DomainError):
    """A unique user field is already in use."""


class EmailAlreadyRegisteredError(UserConflictError):
    """Email belongs to another user."""


class UsernameAlreadyTakenError(UserConflictError):
    """Username belongs to another user."""


class InvalidCredentialsError(DomainError):
    """Login failed; deliberately silent about which part was wrong."""


class UserNotFoundError(DomainError):
    """User identity no longer exists."""


class MalformedCredentialError(DomainError):
    """Stored password hash could not be parsed."""


class TokenInvalidError(DomainError):
    """Access token was rejected."""


class TokenMalformedError(TokenInvalidError):
    """Access token could not be parsed or misses required claims."""


class TokenSignatureError(TokenInvalidError):
    """Access token signature does not match the signing secret."""


class TokenExpiredError(TokenInvalidError):
    """Access token lifetime has elapsed."""


class ProductInputError(DomainError):
    """Invalid product parameters."""


class ProductNotFoundError(DomainError):
    """Product does not exist."""


class UploadInputError(DomainError):
    """Upload request has no usable file."""


class ObjectStorageError(DomainError):
    """Object storage rejected or failed the upload."""
