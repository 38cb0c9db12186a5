from __future__ import annotations

import random as _rnd
from typing import Optional

from fastapi import APIRouter, Query

from quiz.builder import generate_question
from quiz.difficulty import Difficulty
from schemas.integrals import IntegralQuestionOut
from symbolic.differentiator import differentiate
from symbolic.latex import integral_latex

router = APIRouter(prefix="/integrals", tags=["integrals"])


@router.get("/question", response_model=IntegralQuestionOut)
def get_integral_question(
    difficulty: Difficulty = Query(default=Difficulty.EASY),
    seed: Optional[int] = Query(default=None, description="Reproduce a question"),
):
    rng = _rnd.Random(seed) if seed is not None else _rnd.Random()
    q = generate_question(difficulty, rng)
    return {
        "difficulty": q.difficulty,
        "difficulty_name": q.difficulty.display_name,
        "prompt": q.prompt,
        "options": list(q.options),
        "correct_index": q.correct_index,
        "latex": integral_latex(differentiate(q.antiderivative), q.bounds),
    }
