import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Routers
from routers.challenges import router as challenges_router
from routers.health import router as health_router
from routers.integrals import router as integrals_router

logger = logging.getLogger("integral-quiz")
logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Integral Alarm – Quiz API")

# Comma-separated list; defaults cover the local dev front-end
_origins = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in _origins.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-admin-token"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(integrals_router)  # /integrals/question
app.include_router(challenges_router)  # /challenges/...
app.include_router(health_router)  # /health/...
