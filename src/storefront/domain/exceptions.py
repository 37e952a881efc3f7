"""Domain-level exceptions.

Every expected failure is a subclass of DomainException so the HTTP and
CLI layers can map them uniformly to status codes and messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DataIntegrityError(DomainException):
    """Stored data references something that no longer exists."""


class AuthenticationError(DomainException):
    """The caller could not be identified."""


class MissingCredentialsError(AuthenticationError):
    """No Authorization header was sent."""


class InvalidTokenError(AuthenticationError):
    """The bearer token is malformed, expired or wrongly signed."""
