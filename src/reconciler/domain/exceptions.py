"""Domain-level exceptions.

Raised by value objects and catalog maintenance use cases.  Order
rejections are not exceptions: see ``reconciler.domain.errors``.
The CLI layer catches ``DomainException`` uniformly and displays the
message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
