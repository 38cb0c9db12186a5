# symbolic/evaluator.py
from __future__ import annotations

from typing import assert_never

import numpy as np

from symbolic.expr import Add, Const, Cos, Div, Exp, Expr, Ln, Mul, Pow, Sin, Sub, Var


def _eval(expr: Expr, x: np.float64) -> np.float64:
    if isinstance(expr, Const):
        return np.float64(expr.value)
    if isinstance(expr, Var):
        return x
    if isinstance(expr, Add):
        return _eval(expr.left, x) + _eval(expr.right, x)
    if isinstance(expr, Sub):
        return _eval(expr.left, x) - _eval(expr.right, x)
    if isinstance(expr, Mul):
        return _eval(expr.left, x) * _eval(expr.right, x)
    if isinstance(expr, Div):
        return np.divide(_eval(expr.left, x), _eval(expr.right, x))
    if isinstance(expr, Pow):
        return np.power(_eval(expr.base, x), _eval(expr.exponent, x))
    if isinstance(expr, Sin):
        return np.sin(_eval(expr.arg, x))
    if isinstance(expr, Cos):
        return np.cos(_eval(expr.arg, x))
    if isinstance(expr, Exp):
        return np.exp(_eval(expr.arg, x))
    if isinstance(expr, Ln):
        return np.log(_eval(expr.arg, x))
    assert_never(expr)


def evaluate(expr: Expr, x: float) -> float:
    """
    Numeric value of ``expr`` at ``x``.

    Never raises for numeric reasons: 1/0, ln(-1) and friends come back as
    IEEE nan/inf, the same way float64 hardware arithmetic reports them.
    """
    with np.errstate(all="ignore"):
        return float(_eval(expr, np.float64(x)))
