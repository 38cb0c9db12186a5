# schemas/challenges.py
from __future__ import annotations

import os
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quiz.difficulty import Difficulty

CHALLENGE_QUESTIONS = int(os.getenv("CHALLENGE_QUESTIONS", "3"))

# ---------- Create ----------


class ChallengeCreate(BaseModel):
    difficulty: Difficulty = Difficulty.EASY
    total_questions: int = Field(default=CHALLENGE_QUESTIONS, ge=1, le=20)

    @field_validator("difficulty", mode="before")
    @classmethod
    def _accept_ordinal(cls, v: Any) -> Any:
        # alarm records store the difficulty as 0/1/2
        if isinstance(v, (int, str)) and not isinstance(v, bool):
            return Difficulty.parse(v)
        return v


# ---------- Read ----------


class ChallengeQuestionOut(BaseModel):
    """What the lock screen shows; the answer key stays on the server."""

    prompt: str
    options: List[str]


class ChallengeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    created_at: datetime | None
    difficulty: Difficulty
    total_questions: int
    solved: int
    wrong: int
    done: bool
    finished_at: datetime | None = None
    question: Optional[ChallengeQuestionOut] = None


# ---------- Answer ----------


class AnswerRequest(BaseModel):
    option_index: int = Field(ge=0, le=3)


class AnswerResponse(BaseModel):
    ok: bool
    correct: bool
    solved: int
    remaining: int
    done: bool
    message: str
    # the option text that was correct for the question just answered
    expected: Optional[str] = None
    question: Optional[ChallengeQuestionOut] = None
