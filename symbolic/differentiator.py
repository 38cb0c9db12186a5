# symbolic/differentiator.py
"""
Symbolic derivative plus a shallow, single-pass simplifier.

The simplifier only cleans up what mechanical differentiation leaves behind
(``0·u``, ``1·u``, ``u + 0``, nested scalar multiples, constant arithmetic).
It is not a canonicalizer: ``sin(x)² + cos(x)²`` stays as it is and sums are
never flattened.
"""

from __future__ import annotations

import math
from typing import assert_never

from symbolic.evaluator import evaluate
from symbolic.expr import (
    Add,
    Const,
    Cos,
    Div,
    Exp,
    Expr,
    Ln,
    Mul,
    Pow,
    Sin,
    Sub,
    Var,
    is_const,
)

ZERO = Const(0.0)
ONE = Const(1.0)


def derivative(expr: Expr) -> Expr:
    """d/dx of ``expr``, unsimplified."""
    if isinstance(expr, Const):
        return ZERO
    if isinstance(expr, Var):
        return ONE
    if isinstance(expr, Add):
        return Add(derivative(expr.left), derivative(expr.right))
    if isinstance(expr, Sub):
        return Sub(derivative(expr.left), derivative(expr.right))
    if isinstance(expr, Mul):
        # (uv)' = u'v + uv'
        u, v = expr.left, expr.right
        return Add(Mul(derivative(u), v), Mul(u, derivative(v)))
    if isinstance(expr, Div):
        # (u/v)' = (u'v - uv') / v²
        u, v = expr.left, expr.right
        return Div(
            Sub(Mul(derivative(u), v), Mul(u, derivative(v))),
            Pow(v, Const(2.0)),
        )
    if isinstance(expr, Pow):
        base, exponent = expr.base, expr.exponent
        if isinstance(exponent, Const):
            n = exponent.value
            return Mul(Mul(Const(n), Pow(base, Const(n - 1))), derivative(base))
        # b^e = e^(e·ln b)
        return derivative(Exp(Mul(exponent, Ln(base))))
    if isinstance(expr, Sin):
        return Mul(Cos(expr.arg), derivative(expr.arg))
    if isinstance(expr, Cos):
        return Mul(Const(-1.0), Mul(Sin(expr.arg), derivative(expr.arg)))
    if isinstance(expr, Exp):
        return Mul(expr, derivative(expr.arg))
    if isinstance(expr, Ln):
        return Div(derivative(expr.arg), expr.arg)
    assert_never(expr)


def _add(l: Expr, r: Expr) -> Expr:
    if is_const(l, 0.0):
        return r
    if is_const(r, 0.0):
        return l
    if isinstance(l, Const) and isinstance(r, Const):
        return Const(l.value + r.value)
    return Add(l, r)


def _sub(l: Expr, r: Expr) -> Expr:
    if is_const(r, 0.0):
        return l
    if isinstance(l, Const) and isinstance(r, Const):
        return Const(l.value - r.value)
    return Sub(l, r)


def _mul(l: Expr, r: Expr) -> Expr:
    if is_const(l, 0.0) or is_const(r, 0.0):
        return ZERO
    if is_const(l, 1.0):
        return r
    if is_const(r, 1.0):
        return l
    if isinstance(l, Const) and isinstance(r, Const):
        return Const(l.value * r.value)
    if isinstance(l, Const) and isinstance(r, Mul) and isinstance(r.left, Const):
        # a·(b·u) -> (ab)·u, then re-check for 0/1
        return _mul(Const(l.value * r.left.value), r.right)
    return Mul(l, r)


def _div(l: Expr, r: Expr) -> Expr:
    if is_const(l, 0.0):
        return ZERO
    if is_const(r, 1.0):
        return l
    if isinstance(l, Const) and isinstance(r, Const) and r.value != 0.0:
        return Const(l.value / r.value)
    return Div(l, r)


def _pow(base: Expr, exponent: Expr) -> Expr:
    if is_const(exponent, 0.0):
        return ONE
    if is_const(exponent, 1.0):
        return base
    if isinstance(base, Const) and isinstance(exponent, Const):
        value = evaluate(Pow(base, exponent), 0.0)
        # never fold into nan/inf, it would leak into formatted output
        if math.isfinite(value):
            return Const(value)
    return Pow(base, exponent)


def simplify(expr: Expr) -> Expr:
    if isinstance(expr, (Const, Var)):
        return expr
    if isinstance(expr, Add):
        return _add(simplify(expr.left), simplify(expr.right))
    if isinstance(expr, Sub):
        return _sub(simplify(expr.left), simplify(expr.right))
    if isinstance(expr, Mul):
        return _mul(simplify(expr.left), simplify(expr.right))
    if isinstance(expr, Div):
        return _div(simplify(expr.left), simplify(expr.right))
    if isinstance(expr, Pow):
        return _pow(simplify(expr.base), simplify(expr.exponent))
    if isinstance(expr, Sin):
        return Sin(simplify(expr.arg))
    if isinstance(expr, Cos):
        return Cos(simplify(expr.arg))
    if isinstance(expr, Exp):
        return Exp(simplify(expr.arg))
    if isinstance(expr, Ln):
        return Ln(simplify(expr.arg))
    assert_never(expr)


def differentiate(expr: Expr) -> Expr:
    return simplify(derivative(expr))
