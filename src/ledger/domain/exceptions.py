"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the command interpreter can catch them uniformly and report the message
without stopping the session.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value primitive was built from an invalid scalar."""


class EntityNotFoundError(DomainException):
    """A requested product or campaign does not exist."""


class AlreadyExistsError(DomainException):
    """An entity with the same identity has already been stored."""


class InsufficientStockError(DomainException):
    """An order asked for more units than the product has in stock."""


class BusinessRuleError(DomainException):
    """A cross-aggregate rule was violated (campaign limits, missing links)."""
