# quiz/builder.py
"""
Multiple-choice integral questions.

The integrand shown to the player is always produced by differentiating a
randomly generated antiderivative, so the correct answer is known up front.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple, assert_never

from quiz.bounds import IntegralBounds, select_bounds
from quiz.difficulty import Difficulty
from quiz.generator import generate, generate_for_definite
from symbolic.differentiator import differentiate
from symbolic.evaluator import evaluate
from symbolic.expr import Add, Const, Cos, Div, Exp, Expr, Ln, Mul, Pow, Sin, Sub, Var
from symbolic.formatter import format_expr, format_number, to_subscript, to_superscript

logger = logging.getLogger(__name__)

OPTION_COUNT = 4
# extra candidates tried when the standard distractors collide
MAX_EXTRA_DRAWS = 50


@dataclass(frozen=True)
class Question:
    prompt: str
    options: Tuple[str, ...]
    correct_index: int
    difficulty: Difficulty = field(default=Difficulty.EASY, compare=False)
    # F; the integrand is differentiate(antiderivative)
    antiderivative: Optional[Expr] = field(default=None, compare=False, repr=False)
    bounds: Optional[IntegralBounds] = field(default=None, compare=False)

    @property
    def correct_answer(self) -> str:
        return self.options[self.correct_index]


# --- Coefficient perturbation ------------------------------------------------------


def _map_coefficients(expr: Expr, fn: Callable[[int, Const], Const]) -> Expr:
    """Rebuild ``expr`` passing every coefficient through ``fn(index, node)``.

    Exponents of ``Pow`` are not coefficients and are left alone.
    """
    seen = 0

    def walk(e: Expr) -> Expr:
        nonlocal seen
        if isinstance(e, Const):
            seen += 1
            return fn(seen - 1, e)
        if isinstance(e, Var):
            return e
        if isinstance(e, (Add, Sub, Mul, Div)):
            return type(e)(walk(e.left), walk(e.right))
        if isinstance(e, Pow):
            return Pow(walk(e.base), e.exponent)
        if isinstance(e, (Sin, Cos, Exp, Ln)):
            return type(e)(walk(e.arg))
        assert_never(e)

    return walk(expr)


def _count_coefficients(expr: Expr) -> int:
    count = 0

    def tally(_: int, c: Const) -> Const:
        nonlocal count
        count += 1
        return c

    _map_coefficients(expr, tally)
    return count


def _scaled_coefficient(expr: Expr, rng: random.Random) -> Expr:
    factor = rng.uniform(1.5, 3.0)
    n = _count_coefficients(expr)
    if n == 0:
        return Mul(Const(float(round(factor))), expr)
    target = rng.randrange(n)
    return _map_coefficients(
        expr,
        lambda i, c: Const(float(round(c.value * factor))) if i == target else c,
    )


# --- Option assembly ---------------------------------------------------------------


def _collect_options(
    correct: str,
    candidates: Iterable[str],
    extra: Callable[[], str],
) -> List[str]:
    options = [correct]
    for cand in candidates:
        if cand not in options:
            options.append(cand)
        if len(options) == OPTION_COUNT:
            return options

    logger.warning("only %d distinct options for %r, drawing extras", len(options), correct)
    for _ in range(MAX_EXTRA_DRAWS):
        cand = extra()
        if cand not in options:
            options.append(cand)
        if len(options) == OPTION_COUNT:
            return options

    raise RuntimeError(
        f"could not build {OPTION_COUNT} distinct options for {correct!r}: {options}"
    )


def _indefinite_options(
    antiderivative: Expr, integrand: Expr, tier: int, rng: random.Random
) -> List[str]:
    correct = format_expr(antiderivative)

    def candidates() -> Iterable[str]:
        yield format_expr(integrand)
        yield format_expr(_scaled_coefficient(antiderivative, rng))
        yield format_expr(generate(tier, rng))
        yield format_expr(Mul(Const(-1.0), antiderivative))

    draws = 0

    def extra() -> str:
        nonlocal draws
        draws += 1
        return format_expr(generate(1 if draws % 2 else tier, rng))

    return _collect_options(correct, candidates(), extra)


def _definite_options(value: float, rng: random.Random) -> List[str]:
    correct = format_number(value)

    def candidates() -> Iterable[str]:
        yield format_number(value * 1.5)
        yield format_number(value * 2)
        yield format_number(value + rng.randint(1, 5))
        if value != 0:
            yield format_number(-value)
        yield format_number(value + rng.randint(-3, 3))

    def extra() -> str:
        return format_number(value + rng.choice((-1, 1)) * rng.randint(1, 10))

    return _collect_options(correct, candidates(), extra)


def _definite_prompt(integrand: str, bounds: IntegralBounds) -> str:
    lo = to_subscript(bounds.lower_display)
    hi = to_superscript(bounds.upper_display)
    return f"∫{lo}{hi} ({integrand}) dx = ?"


def generate_question(
    difficulty: Difficulty, rng: Optional[random.Random] = None
) -> Question:
    """Build one four-option question; pass a seeded ``rng`` to reproduce it."""
    rng = rng or random.Random()
    difficulty = Difficulty(difficulty)

    bounds: Optional[IntegralBounds] = None
    if difficulty.is_definite:
        antiderivative = generate_for_definite(rng)
        bounds = select_bounds(antiderivative, rng)
    else:
        antiderivative = generate(difficulty.tier, rng)

    integrand = differentiate(antiderivative)
    shown = format_expr(integrand)

    if bounds is not None:
        prompt = _definite_prompt(shown, bounds)
        value = evaluate(antiderivative, bounds.upper) - evaluate(antiderivative, bounds.lower)
        options = _definite_options(value, rng)
    else:
        prompt = f"∫ ({shown}) dx = ?"
        options = _indefinite_options(antiderivative, integrand, difficulty.tier, rng)

    correct = options[0]
    rng.shuffle(options)
    question = Question(
        prompt=prompt,
        options=tuple(options),
        correct_index=options.index(correct),
        difficulty=difficulty,
        antiderivative=antiderivative,
        bounds=bounds,
    )
    logger.debug("generated %s question %r -> %r", difficulty.value, prompt, correct)
    return question
