# symbolic/latex.py
from __future__ import annotations

from typing import TYPE_CHECKING, Optional, assert_never

import sympy
from sympy import Float, Integer, latex, nsimplify, pi

from symbolic.expr import Add, Const, Cos, Div, Exp, Expr, Ln, Mul, Pow, Sin, Sub, Var

if TYPE_CHECKING:
    from quiz.bounds import IntegralBounds

x = sympy.Symbol("x")


def to_sympy(expr: Expr) -> sympy.Expr:
    """
    Convert an expression tree into SymPy.

    SymPy evaluates arithmetic as it goes, so the result is equal to the tree
    but not necessarily shaped like it.
    """
    if isinstance(expr, Const):
        v = expr.value
        return Integer(int(v)) if float(v).is_integer() else Float(v)
    if isinstance(expr, Var):
        return x
    if isinstance(expr, Add):
        return to_sympy(expr.left) + to_sympy(expr.right)
    if isinstance(expr, Sub):
        return to_sympy(expr.left) - to_sympy(expr.right)
    if isinstance(expr, Mul):
        return to_sympy(expr.left) * to_sympy(expr.right)
    if isinstance(expr, Div):
        return to_sympy(expr.left) / to_sympy(expr.right)
    if isinstance(expr, Pow):
        return to_sympy(expr.base) ** to_sympy(expr.exponent)
    if isinstance(expr, Sin):
        return sympy.sin(to_sympy(expr.arg))
    if isinstance(expr, Cos):
        return sympy.cos(to_sympy(expr.arg))
    if isinstance(expr, Exp):
        return sympy.exp(to_sympy(expr.arg))
    if isinstance(expr, Ln):
        return sympy.log(to_sympy(expr.arg))
    assert_never(expr)


def _bound_latex(value: float) -> str:
    # bounds are small rationals or rational multiples of pi
    return latex(nsimplify(value, [pi]))


def integral_latex(integrand: Expr, bounds: Optional["IntegralBounds"] = None) -> str:
    body = latex(to_sympy(integrand))
    if bounds is None:
        return rf"\int {body} \, dx"
    lo = _bound_latex(bounds.lower)
    hi = _bound_latex(bounds.upper)
    return rf"\int_{{{lo}}}^{{{hi}}} {body} \, dx"
