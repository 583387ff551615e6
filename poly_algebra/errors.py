"""Exceptions raised by poly_algebra.

Numeric substitution is the only operation with recoverable failures; both
of its errors derive from SubstitutionError so callers can catch either one
or the pair.
"""

from __future__ import annotations


class SubstitutionError(ValueError):
    """Base class for failures of numeric substitution."""

    def __init__(self, variable, message: str):
        super().__init__(message)
        self.variable = variable


class RepeatingVariableError(SubstitutionError):
    """The same variable appears more than once in the binding list."""

    def __init__(self, variable):
        super().__init__(variable, f"variable {variable} is bound more than once")


class MissingVariableError(SubstitutionError):
    """A variable used by the polynomial has no binding."""

    def __init__(self, variable):
        super().__init__(variable, f"no value bound for variable {variable}")


class DomainMismatchError(TypeError):
    """Two operands carry coefficients from different domains."""

    def __init__(self, left, right):
        super().__init__(
            f"cannot combine coefficients from domains {left.name} and {right.name}"
        )
        self.left = left
        self.right = right
