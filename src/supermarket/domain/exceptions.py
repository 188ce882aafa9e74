"""Exceptions raised by the domain and its adapters.

Expected business failures (bad input, unknown product, out of stock) are
NOT exceptions: they travel through the Result pipeline. Exceptions are
reserved for broken invariants and infrastructure problems, which the
request-level error boundary turns into a server error.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An aggregate invariant was violated."""


class InfrastructureError(Exception):
    """Base class for failures of external collaborators."""


class PersistenceError(InfrastructureError):
    """The repository could not load or store products."""


class SupplierError(InfrastructureError):
    """The supplier could not process a restock request."""
