"""Exception types raised at the input and rendering boundaries."""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when a pH or pCO2 input is not a positive, finite scalar.

    Validation happens before any figure is created, so a failed call never
    leaves a partial chart behind.
    """


class RenderError(RuntimeError):
    """Raised when the matplotlib drawing surface cannot be initialized."""
