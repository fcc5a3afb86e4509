"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and turn them into
user-facing messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Malformed or missing input, or a violated invariant."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class AuthenticationError(DomainException):
    """The caller failed the admin gate."""


class StorageError(DomainException):
    """The backing store could not be read or written."""
