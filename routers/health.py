# routers/health.py
import random

from fastapi import APIRouter, HTTPException
from sqlalchemy import text

from alembic.config import Config
from alembic.script import ScriptDirectory
from db import engine
from quiz.builder import generate_question
from quiz.difficulty import Difficulty

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/db")
def health_db():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"db_error: {type(e).__name__}: {e}")
    return {"ok": True}


@router.get("/engine")
def health_engine():
    """Build one seeded question per difficulty; fails loudly if the generator is broken."""
    rng = random.Random(0)
    prompts = {}
    for d in Difficulty:
        try:
            prompts[d.value] = generate_question(d, rng).prompt
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"engine_error[{d.value}]: {e}")
    return {"ok": True, "prompts": prompts}


def _code_heads() -> list[str]:
    try:
        script = ScriptDirectory.from_config(Config("alembic.ini"))
    except Exception:
        # not started from the project root, nothing to compare against
        return []
    return list(script.get_heads())


def _db_revision():
    with engine.connect() as conn:
        try:
            return conn.execute(text("SELECT version_num FROM alembic_version")).scalar_one_or_none()
        except Exception:
            # schema created without alembic (tests, fresh sqlite)
            return None


@router.get("/migrations")
def health_migrations():
    heads = _code_heads()
    try:
        db_ver = _db_revision()
    except Exception as e:
        return {"ok": False, "error": f"db_connect_failed: {e}", "code_heads": heads, "db_version": None}

    synced = bool(heads) and db_ver in heads
    return {"ok": synced, "synced": synced, "db_version": db_ver, "code_heads": heads}
