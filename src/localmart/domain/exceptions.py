"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
The intermediate classes group errors by category (validation, conflict,
not-found, authorization) so callers can map a whole family at once.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


# --- Validation ---------------------------------------------------------------


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EmptyOrderError(ValidationError):
    """An order was submitted without any items."""


class InvalidStatusError(ValidationError):
    """A status value is not one of the recognised order statuses."""


# --- Conflicts ----------------------------------------------------------------


class ConflictError(DomainException):
    """The request is well-formed but clashes with the current state."""


class InsufficientStockError(ConflictError):
    """A product does not have enough stock for the requested quantity."""


class TotalMismatchError(ConflictError):
    """The caller-supplied total disagrees with the computed total."""


class InvalidTransitionError(ConflictError):
    """The order cannot move from its current status to the target status."""


# --- Not found ----------------------------------------------------------------


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    """A referenced product does not exist or is no longer listed."""


class OrderNotFoundError(EntityNotFoundError):
    """A referenced order does not exist."""


# --- Authorization ------------------------------------------------------------


class AuthorizationError(DomainException):
    """The caller may not perform the requested operation."""


class AuthenticationError(AuthorizationError):
    """The caller could not be identified."""


class ForbiddenError(AuthorizationError):
    """The caller is identified but lacks access to the resource."""
