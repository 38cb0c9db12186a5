import math
import random

from quiz.bounds import (
    LN_BOUNDS,
    POLYNOMIAL_BOUNDS,
    TRIG_BOUNDS,
    contains_ln,
    contains_trig,
    select_bounds,
)
from quiz.generator import _sin_cos, generate, generate_for_definite
from symbolic.differentiator import differentiate
from symbolic.evaluator import evaluate
from symbolic.expr import Const, Cos, Div, Exp, Ln, Mul, Pow, Sin, X
from symbolic.formatter import format_expr


def _consts(e):
    if isinstance(e, Const):
        return [e.value]
    return [v for child in vars(e).values() for v in _consts(child)]


def test_same_seed_same_function():
    for tier in (0, 1, 2):
        assert generate(tier, random.Random(7)) == generate(tier, random.Random(7))
    assert generate_for_definite(random.Random(7)) == generate_for_definite(random.Random(7))


def test_coefficients_stay_small():
    rng = random.Random(3)
    for _ in range(500):
        for f in (generate(0, rng), generate(1, rng), generate(2, rng), generate_for_definite(rng)):
            assert all(v == int(v) and 1 <= v <= 6 for v in _consts(f)), format_expr(f)


def test_every_menu_entry_shows_up():
    rng = random.Random(11)
    medium = {format_expr(generate(1, rng)) for _ in range(300)}
    hard = {format_expr(generate(2, rng)) for _ in range(300)}
    # sin(ax)·cos(ax) comes in three coefficient variants
    assert len(medium) == 8
    assert len(hard) == 6
    assert "x·ln(x)" in medium
    assert "eˣ·cos(x)" in hard


def test_tiers_above_two_count_as_hard():
    hard = {format_expr(generate(2, random.Random(s))) for s in range(200)}
    assert format_expr(generate(5, random.Random(0))) in hard


def test_definite_menu_has_no_log_or_quotient():
    rng = random.Random(5)
    for _ in range(500):
        f = generate_for_definite(rng)
        assert not contains_ln(f)
        assert "/" not in format_expr(f)


def test_predicates():
    assert contains_trig(Exp(Cos(X)))
    assert not contains_trig(Mul(X, Exp(X)))
    assert contains_ln(Pow(X, Ln(X)))
    assert not contains_ln(Div(Sin(X), X))


def test_select_bounds_by_function_class():
    rng = random.Random(0)
    assert select_bounds(Ln(X), rng) == LN_BOUNDS
    assert select_bounds(Mul(X, Ln(X)), rng) == LN_BOUNDS
    assert select_bounds(Mul(X, Sin(X)), rng) in TRIG_BOUNDS
    assert select_bounds(Mul(Const(2), Pow(X, Const(3))), rng) in POLYNOMIAL_BOUNDS


def test_ln_bounds_are_positive():
    assert LN_BOUNDS.lower > 0 and LN_BOUNDS.upper > 0
    assert any(b.lower < 0 for b in POLYNOMIAL_BOUNDS)


def test_generated_pairs_never_evaluate_to_non_finite():
    rng = random.Random(2024)
    for _ in range(2000):
        f = generate_for_definite(rng)
        b = select_bounds(f, rng)
        integrand = differentiate(f)
        for point in (b.lower, b.upper):
            assert math.isfinite(evaluate(f, point))
            assert math.isfinite(evaluate(integrand, point))
        assert math.isfinite(evaluate(f, b.upper) - evaluate(f, b.lower))


def test_sin_cos_arguments_are_separate_nodes():
    for seed in range(10):
        f = _sin_cos(random.Random(seed))
        assert f.left.arg == f.right.arg
        assert f.left.arg is not f.right.arg
