from __future__ import annotations

import os
from pathlib import Path

from sqlalchemy import MetaData, create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

# Where the default SQLite file lives; ignored once DATABASE_URL is set.
DATA_DIR = Path(os.getenv("INTEGRAL_QUIZ_DATA_DIR", ".")).expanduser()


def _database_url() -> str:
    url = os.getenv("DATABASE_URL") or f"sqlite:///{DATA_DIR / 'integral_quiz.db'}"
    # psycopg3 is the only Postgres driver installed
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://") :]
    if url.startswith("postgresql://"):
        url = "postgresql+psycopg://" + url[len("postgresql://") :]
    return url


DATABASE_URL = _database_url()
IS_SQLITE = DATABASE_URL.startswith("sqlite")

if IS_SQLITE and DATABASE_URL.startswith("sqlite:///") and ":memory:" not in DATABASE_URL:
    Path(DATABASE_URL[len("sqlite:///") :]).parent.mkdir(parents=True, exist_ok=True)


class Base(DeclarativeBase):
    # index/constraint names line up between SQLite and Postgres migrations
    metadata = MetaData(
        naming_convention={
            "ix": "ix_%(column_0_label)s",
            "uq": "uq_%(table_name)s_%(column_0_name)s",
            "ck": "ck_%(table_name)s_%(constraint_name)s",
            "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
            "pk": "pk_%(table_name)s",
        }
    )


engine = create_engine(
    DATABASE_URL,
    # answers are handled on FastAPI's threadpool
    connect_args={"check_same_thread": False} if IS_SQLITE else {},
    pool_pre_ping=True,
    pool_size=int(os.getenv("DB_POOL_SIZE", "5")),
    max_overflow=0,
)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
