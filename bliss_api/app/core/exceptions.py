"""
Error types raised by the service layer.

Plain absence is not an error: lookups return ``None``.  These
exceptions cover the cases where an operation cannot complete, and the
HTTP layer maps each one to a status code.
"""


class NotFoundError(LookupError):
    """An entity the operation depends on does not exist."""


class ConflictError(ValueError):
    """The operation would violate a uniqueness rule (username, active subscription)."""


class ConsistencyError(RuntimeError):
    """A stored record references an account that no longer exists."""
