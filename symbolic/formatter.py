# symbolic/formatter.py
"""
Human-readable rendering of expression trees.

The strings produced here double as answer keys: multiple-choice options are
compared as text, so rendering must stay stable for a given tree.
"""

from __future__ import annotations

import math
from typing import assert_never

from symbolic.differentiator import simplify
from symbolic.expr import Add, Const, Cos, Div, Exp, Expr, Ln, Mul, Pow, Sin, Sub, Var, is_const

_SUPERSCRIPTS = str.maketrans("0123456789-+", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻⁺")
_SUBSCRIPTS = str.maketrans("0123456789-+", "₀₁₂₃₄₅₆₇₈₉₋₊")

# exponents with a dedicated glyph
_NAMED_POWERS = {2.0: "²", 3.0: "³", 4.0: "⁴", 5.0: "⁵"}


def to_superscript(s: str) -> str:
    return s.translate(_SUPERSCRIPTS)


def to_subscript(s: str) -> str:
    return s.translate(_SUBSCRIPTS)


def _is_integral(value: float) -> bool:
    return math.isfinite(value) and value == int(value)


def _number(value: float) -> str:
    if not math.isfinite(value):
        return str(value)
    if _is_integral(value):
        return str(int(value))
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_number(value: float) -> str:
    """Render a numeric answer; anything within 0.001 of an integer snaps to it."""
    if not math.isfinite(value):
        return str(value)
    nearest = round(value)
    if _is_integral(value) or abs(value - nearest) < 0.001:
        return str(int(nearest))
    return _number(value)


def _render_mul(expr: Mul) -> str:
    l, r = expr.left, expr.right
    if is_const(l, 1.0):
        return _render(r)
    if is_const(r, 1.0):
        return _render(l)
    if is_const(l, -1.0):
        if isinstance(r, (Add, Sub)):
            return f"-({_render(r)})"
        return f"-{_render(r)}"
    if isinstance(l, Const) and isinstance(r, Var):
        return f"{_number(l.value)}x"
    return f"{_render(l)}·{_render(r)}"


def _render_pow(expr: Pow) -> str:
    base = _render(expr.base)
    if isinstance(expr.base, (Add, Sub)):
        base = f"({base})"
    e = expr.exponent
    if isinstance(e, Const):
        if e.value in _NAMED_POWERS:
            return base + _NAMED_POWERS[e.value]
        if e.value == 0.5:
            return f"√{base}"
        if _is_integral(e.value):
            return base + to_superscript(str(int(e.value)))
    return f"{base}^({_render(e)})"


def _render_exp(expr: Exp) -> str:
    a = expr.arg
    if isinstance(a, Var):
        return "eˣ"
    if isinstance(a, Mul) and isinstance(a.left, Const) and isinstance(a.right, Var):
        if _is_integral(a.left.value):
            return "e" + to_superscript(f"{int(a.left.value)}x")
    return f"e^({_render(a)})"


def _render(expr: Expr) -> str:
    if isinstance(expr, Const):
        return _number(expr.value)
    if isinstance(expr, Var):
        return "x"
    if isinstance(expr, Add):
        return f"{_render(expr.left)} + {_render(expr.right)}"
    if isinstance(expr, Sub):
        return f"{_render(expr.left)} - {_render(expr.right)}"
    if isinstance(expr, Mul):
        return _render_mul(expr)
    if isinstance(expr, Div):
        return f"({_render(expr.left)})/({_render(expr.right)})"
    if isinstance(expr, Pow):
        return _render_pow(expr)
    if isinstance(expr, Sin):
        return f"sin({_render(expr.arg)})"
    if isinstance(expr, Cos):
        return f"cos({_render(expr.arg)})"
    if isinstance(expr, Exp):
        return _render_exp(expr)
    if isinstance(expr, Ln):
        return f"ln({_render(expr.arg)})"
    assert_never(expr)


def format_expr(expr: Expr) -> str:
    return _render(simplify(expr))
