"""
Render Pi groups as text or sympy expressions.

Expressions are built directly from the (symbol, exponent) terms; there is
no textual round trip.
"""

from fractions import Fraction
from typing import List, Sequence

import sympy

from ._core.groups import PiGroup
from .exceptions import ExpressionError, UnknownOutputFormError


OUTPUT_FORMS = ('expr', 'string')


def _exact_exponent(symbol, exponent) -> Fraction:
    if isinstance(exponent, Fraction):
        return exponent
    if isinstance(exponent, int) and not isinstance(exponent, bool):
        return Fraction(exponent)
    raise ExpressionError(
        f"Exponent {exponent!r} of {symbol} is not an exact rational"
    )


def render_string(group: PiGroup) -> str:
    """
    Textual form ``"g^(1//2)*ℓ^(-1//2)*T^(1//1)"``.

    The exponent is always printed as numerator//denominator, even when
    the denominator is 1. An empty group renders as ``"1"``.
    """
    parts = []
    for symbol, exponent in group:
        a = _exact_exponent(symbol, exponent)
        parts.append(f"{symbol}^({a.numerator}//{a.denominator})")
    return "*".join(parts) if parts else "1"


def render_expr(group: PiGroup) -> sympy.Expr:
    """
    Unevaluated sympy product of ``symbol**exponent`` terms, in term order.

    Substitute values with ``expr.subs(...)`` and call ``.doit()`` or
    ``sympy.lambdify`` to evaluate.
    """
    factors = []
    for symbol, exponent in group:
        a = _exact_exponent(symbol, exponent)
        factors.append(sympy.Pow(sympy.Symbol(symbol),
                                 sympy.Rational(a.numerator, a.denominator),
                                 evaluate=False))
    if not factors:
        return sympy.Integer(1)
    if len(factors) == 1:
        return factors[0]
    return sympy.Mul(*factors, evaluate=False)


def check_form(form: str) -> None:
    """Raise UnknownOutputFormError unless ``form`` is a known output form."""
    if form not in OUTPUT_FORMS:
        raise UnknownOutputFormError(
            f"Type {form!r} not implemented. Choose between 'expr' and 'string'"
        )


def render(groups: Sequence[PiGroup], form: str = 'expr') -> List:
    """Render each group in the requested form ('expr' or 'string')."""
    check_form(form)
    if form == 'string':
        return [render_string(group) for group in groups]
    return [render_expr(group) for group in groups]


__all__ = ["render", "render_string", "render_expr", "check_form", "OUTPUT_FORMS"]
