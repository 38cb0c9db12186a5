# quiz/bounds.py
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Callable, List, assert_never

from symbolic.expr import Add, Const, Cos, Div, Exp, Expr, Ln, Mul, Pow, Sin, Sub, Var


@dataclass(frozen=True)
class IntegralBounds:
    lower: float
    upper: float
    lower_display: str
    upper_display: str


POLYNOMIAL_BOUNDS: List[IntegralBounds] = [
    IntegralBounds(0.0, 1.0, "0", "1"),
    IntegralBounds(0.0, 2.0, "0", "2"),
    IntegralBounds(1.0, 2.0, "1", "2"),
    IntegralBounds(0.0, 3.0, "0", "3"),
    IntegralBounds(1.0, 3.0, "1", "3"),
    IntegralBounds(-1.0, 1.0, "-1", "1"),
]

TRIG_BOUNDS: List[IntegralBounds] = [
    IntegralBounds(0.0, math.pi, "0", "π"),
    IntegralBounds(0.0, math.pi / 2, "0", "π/2"),
    IntegralBounds(0.0, 2 * math.pi, "0", "2π"),
    IntegralBounds(-math.pi, math.pi, "-π", "π"),
]

# ln needs both ends strictly positive
LN_BOUNDS = IntegralBounds(1.0, 2.0, "1", "2")


def _contains(expr: Expr, hit: Callable[[Expr], bool]) -> bool:
    if hit(expr):
        return True
    if isinstance(expr, (Const, Var)):
        return False
    if isinstance(expr, (Add, Sub, Mul, Div)):
        return _contains(expr.left, hit) or _contains(expr.right, hit)
    if isinstance(expr, Pow):
        return _contains(expr.base, hit) or _contains(expr.exponent, hit)
    if isinstance(expr, (Sin, Cos, Exp, Ln)):
        return _contains(expr.arg, hit)
    assert_never(expr)


def contains_trig(expr: Expr) -> bool:
    return _contains(expr, lambda e: isinstance(e, (Sin, Cos)))


def contains_ln(expr: Expr) -> bool:
    return _contains(expr, lambda e: isinstance(e, Ln))


def select_bounds(expr: Expr, rng: random.Random) -> IntegralBounds:
    """Pick integration bounds that keep ``expr`` finite over the whole range."""
    # [1, 2] is also safe for trig, so ln wins when both appear
    if contains_ln(expr):
        return LN_BOUNDS
    if contains_trig(expr):
        return rng.choice(TRIG_BOUNDS)
    return rng.choice(POLYNOMIAL_BOUNDS)
