# quiz/generator.py
"""
Random antiderivatives for integral questions.

Each tier is a fixed menu of function shapes with small integer coefficients;
a shape is picked uniformly from the menu. Callers pass their own
``random.Random`` so a seed reproduces the whole question.
"""

from __future__ import annotations

import random
from typing import Callable, List

from symbolic.expr import Add, Const, Cos, Exp, Expr, Ln, Mul, Pow, Sin, X

Shape = Callable[[random.Random], Expr]


def _c(value: int) -> Const:
    return Const(float(value))


def _monomial(a: int, n: int) -> Expr:
    return Mul(_c(a), Pow(X, _c(n)))


def _quadratic(a: int, b: int) -> Expr:
    return Add(Mul(_c(a), Pow(X, _c(2))), Mul(_c(b), X))


def _scaled_trig(a: int, rng: random.Random) -> Expr:
    fn = Sin if rng.random() < 0.5 else Cos
    return Mul(_c(a), fn(X))


# --- Tier 0 ----------------------------------------------------------------------

_EASY: List[Shape] = [
    lambda rng: _monomial(rng.randint(2, 5), rng.randint(2, 4)),
    lambda rng: _scaled_trig(rng.randint(1, 4), rng),
    lambda rng: Exp(Mul(_c(rng.randint(1, 3)), X)),
    lambda rng: _quadratic(rng.randint(1, 4), rng.randint(1, 4)),
    lambda rng: Ln(X),
]


# --- Tier 1 ----------------------------------------------------------------------


def _sin_cos(rng: random.Random) -> Expr:
    a = rng.randint(1, 3)
    return Mul(Sin(Mul(_c(a), X)), Cos(Mul(_c(a), X)))


_MEDIUM: List[Shape] = [
    lambda rng: Mul(X, Sin(X)),
    lambda rng: Mul(X, Cos(X)),
    lambda rng: Mul(X, Exp(X)),
    _sin_cos,
    lambda rng: Mul(Pow(X, _c(2)), Exp(X)),
    lambda rng: Mul(X, Ln(X)),
]


# --- Tier 2 ----------------------------------------------------------------------

_HARD: List[Shape] = [
    lambda rng: Mul(Pow(X, _c(2)), Sin(X)),
    lambda rng: Mul(Exp(X), Sin(X)),
    lambda rng: Mul(Pow(X, _c(3)), Exp(X)),
    lambda rng: Mul(Sin(X), Sin(X)),
    lambda rng: Mul(X, Mul(Sin(X), Sin(X))),
    lambda rng: Mul(Exp(X), Cos(X)),
]


# --- Definite integrals ------------------------------------------------------------
# Nothing here has a singularity on any catalog bound range; ln is left out
# because it needs a strictly positive lower bound.

_DEFINITE: List[Shape] = [
    lambda rng: _monomial(rng.randint(1, 4), rng.randint(2, 4)),
    lambda rng: Mul(_c(rng.randint(1, 3)), Sin(X)),
    lambda rng: Mul(_c(rng.randint(1, 3)), Cos(X)),
    lambda rng: Exp(Mul(_c(rng.randint(1, 2)), X)),
    lambda rng: _quadratic(rng.randint(1, 3), rng.randint(1, 3)),
    lambda rng: Mul(X, Sin(X)),
]

_TIERS = {0: _EASY, 1: _MEDIUM, 2: _HARD}


def generate(complexity: int, rng: random.Random) -> Expr:
    """Random antiderivative of the given tier; anything above 2 counts as hard."""
    menu = _TIERS.get(complexity, _HARD) if complexity >= 0 else _EASY
    return rng.choice(menu)(rng)


def generate_for_definite(rng: random.Random) -> Expr:
    return rng.choice(_DEFINITE)(rng)
