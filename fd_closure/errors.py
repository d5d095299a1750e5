"""
fd_closure/errors.py
====================
Exception types raised by the closure engine.

  FDClosureError
   ├── InvalidDependencyError   malformed FD, or attribute outside a schema
   └── ClosureLimitError        a configured resource limit was exceeded
"""

from __future__ import annotations


class FDClosureError(Exception):
    """Base class for every error raised by :mod:`fd_closure`."""


class InvalidDependencyError(FDClosureError, ValueError):
    """A functional dependency could not be constructed or inserted."""


class ClosureLimitError(FDClosureError, RuntimeError):
    """
    Raised when a computation would exceed one of the :class:`ClosureLimits`.

    Attributes
    ----------
    limit : str
        Name of the limit that tripped (e.g. ``"max_universe"``).
    value : int
        Observed value at the time of the check.
    maximum : int
        Configured bound.
    """

    def __init__(self, limit: str, value: int, maximum: int) -> None:
        self.limit = limit
        self.value = value
        self.maximum = maximum
        super().__init__(f"{limit} exceeded: {value} > {maximum}")
