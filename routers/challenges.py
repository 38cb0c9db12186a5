# routers/challenges.py
from __future__ import annotations

import logging
import os
from datetime import UTC, datetime
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException, Request

from db import SessionLocal
from models import Challenge
from quiz.builder import generate_question
from quiz.difficulty import Difficulty
from schemas.challenges import (
    AnswerRequest,
    AnswerResponse,
    ChallengeCreate,
    ChallengeOut,
    ChallengeQuestionOut,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/challenges", tags=["challenges"])


def _check_admin(request: Request) -> None:
    want = os.environ.get("ADMIN_TOKEN", "")
    got = request.headers.get("x-admin-token", "")
    if not (want and got == want):
        raise HTTPException(status_code=401, detail="unauthorized")


def _new_question(difficulty: str) -> Dict[str, Any]:
    q = generate_question(Difficulty(difficulty))
    return {"prompt": q.prompt, "options": list(q.options), "correct_index": q.correct_index}


def _public_question(current: Optional[Dict[str, Any]]) -> Optional[ChallengeQuestionOut]:
    if not current:
        return None
    return ChallengeQuestionOut(prompt=current["prompt"], options=current["options"])


def _to_out(c: Challenge) -> ChallengeOut:
    out = ChallengeOut.model_validate(c)
    return out.model_copy(update={"question": _public_question(c.current)})


def _load(db, challenge_id: int, for_update: bool = False) -> Challenge:
    c = db.get(Challenge, challenge_id, with_for_update=for_update)
    if not c:
        raise HTTPException(status_code=404, detail="Challenge not found")
    return c


@router.post("", response_model=ChallengeOut)
def create_challenge(req: ChallengeCreate):
    with SessionLocal() as db:
        c = Challenge(
            difficulty=req.difficulty.value,
            total_questions=req.total_questions,
            solved=0,
            wrong=0,
            current=_new_question(req.difficulty.value),
        )
        db.add(c)
        db.commit()
        db.refresh(c)
        logger.info("challenge %s started (%s, %d questions)", c.id, c.difficulty, c.total_questions)
        return _to_out(c)


@router.get("/recent-list")
def challenges_recent(request: Request, limit: int = 20):
    _check_admin(request)
    limit = max(1, min(limit, 100))

    with SessionLocal() as db:
        items = db.query(Challenge).order_by(Challenge.created_at.desc()).limit(limit).all()
        rows = [ChallengeOut.model_validate(c).model_dump(exclude={"question"}) for c in items]
    return {"ok": True, "items": rows, "count": len(rows)}


@router.get("/{challenge_id}", response_model=ChallengeOut)
def get_challenge(challenge_id: int):
    with SessionLocal() as db:
        return _to_out(_load(db, challenge_id))


@router.post("/{challenge_id}/answer", response_model=AnswerResponse)
def answer_challenge(challenge_id: int, req: AnswerRequest):
    with SessionLocal() as db:
        # row lock on Postgres so concurrent answers cannot lose an increment
        c = _load(db, challenge_id, for_update=True)
        if c.done or not c.current:
            raise HTTPException(status_code=409, detail="Challenge already finished")

        current = c.current
        expected = current["options"][current["correct_index"]]
        correct = req.option_index == current["correct_index"]

        if correct:
            c.solved += 1
        else:
            c.wrong += 1

        remaining = max(c.total_questions - c.solved, 0)
        if c.done:
            c.current = None
            c.finished_at = datetime.now(UTC)
            message = "All solved. Good morning!"
            logger.info("challenge %s finished after %d wrong answers", c.id, c.wrong)
        else:
            # right or wrong, the player always gets a fresh integral
            c.current = _new_question(c.difficulty)
            message = f"Correct! {remaining} to go." if correct else "Wrong, try another one."

        db.commit()
        db.refresh(c)

        return {
            "ok": True,
            "correct": correct,
            "solved": c.solved,
            "remaining": remaining,
            "done": c.done,
            "message": message,
            "expected": expected,
            "question": _public_question(c.current),
        }
