"""Operator overloads shared by every algebraic value.

Var, Monomial, UntypedPolynomial, Term and Polynomial all inherit these
dunders.  Each one forwards to the free functions in arithmetic.py, which own
the result-type rules; unknown operands yield NotImplemented so Python can
try the reflected operation.
"""

from __future__ import annotations


def _binary(op_name: str):
    def forward(self, other):
        from . import arithmetic

        if not arithmetic.is_operand(other):
            return NotImplemented
        return getattr(arithmetic, op_name)(self, other)

    def reflected(self, other):
        from . import arithmetic

        if not arithmetic.is_operand(other):
            return NotImplemented
        return getattr(arithmetic, op_name)(other, self)

    forward.__name__ = f"__{op_name}__"
    reflected.__name__ = f"__r{op_name}__"
    return forward, reflected


class Algebraic:
    """Mixin giving +, -, *, ** and unary - to the construction surface."""

    __slots__ = ()

    __add__, __radd__ = _binary("add")
    __sub__, __rsub__ = _binary("subtract")
    __mul__, __rmul__ = _binary("multiply")

    def __neg__(self):
        from . import arithmetic

        return arithmetic.negate(self)

    def __pow__(self, exponent):
        from . import arithmetic

        return arithmetic.power(self, exponent)
