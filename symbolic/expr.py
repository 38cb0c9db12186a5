# symbolic/expr.py
"""
Expression trees over a single variable ``x``.

Nodes are frozen dataclasses, so trees are immutable and compare structurally.
Construction never validates anything: ``Pow(X, Sin(X))`` or ``Div(X, Const(0))``
are perfectly good trees, they just evaluate to odd numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Const:
    value: float


@dataclass(frozen=True)
class Var:
    pass


@dataclass(frozen=True)
class Add:
    left: Expr
    right: Expr


@dataclass(frozen=True)
class Sub:
    left: Expr
    right: Expr


@dataclass(frozen=True)
class Mul:
    left: Expr
    right: Expr


@dataclass(frozen=True)
class Div:
    left: Expr
    right: Expr


@dataclass(frozen=True)
class Pow:
    base: Expr
    exponent: Expr


@dataclass(frozen=True)
class Sin:
    arg: Expr


@dataclass(frozen=True)
class Cos:
    arg: Expr


@dataclass(frozen=True)
class Exp:
    arg: Expr


@dataclass(frozen=True)
class Ln:
    arg: Expr


Expr = Union[Const, Var, Add, Sub, Mul, Div, Pow, Sin, Cos, Exp, Ln]

# the free variable
X = Var()


def is_const(expr: Expr, value: float | None = None) -> bool:
    """True for a ``Const`` node, optionally holding exactly ``value``."""
    if not isinstance(expr, Const):
        return False
    return value is None or expr.value == value
