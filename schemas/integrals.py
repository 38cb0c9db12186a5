# schemas/integrals.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel

from quiz.difficulty import Difficulty


class IntegralQuestionOut(BaseModel):
    difficulty: Difficulty
    difficulty_name: str
    prompt: str
    options: List[str]
    correct_index: int
    latex: str
