from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from .config import DEFAULT_APP_CONFIG
from .database.session import create_tables, get_db
from .logging_config import setup_logging
from .recommendations import data_store
from .recommendations.errors import (
    ConflictError,
    InvalidInputError,
    LinkValidationError,
    NotFoundError,
    RecommendationError,
)
from .recommendations.models import (
    RecommendationCreate,
    RecommendationOut,
    ResetResponse,
    VoteResponse,
)
from .recommendations.scoring import downvote, upvote
from .recommendations.selection import get_by_id, get_random, get_recent, get_top
from .recommendations.submission import submit_recommendation

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[RecommendationError], int] = {
    LinkValidationError: 422,
    ConflictError: 409,
    NotFoundError: 404,
    InvalidInputError: 422,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(DEFAULT_APP_CONFIG.log_level)
    create_tables()
    yield


app = FastAPI(
    title=DEFAULT_APP_CONFIG.title,
    version=DEFAULT_APP_CONFIG.version,
    lifespan=lifespan,
)


@app.exception_handler(RecommendationError)
async def recommendation_error_handler(request: Request, exc: RecommendationError) -> JSONResponse:
    status = next(
        (code for err_type, code in _STATUS_BY_ERROR.items() if isinstance(exc, err_type)),
        400,
    )
    return JSONResponse(status_code=status, content={"detail": str(exc)})


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── Recommendations ──────────────────────────────────────────────────────
# Fixed paths are registered before /recommendations/{recommendation_id}.


@app.post("/recommendations", status_code=201, response_model=RecommendationOut)
def create_recommendation(
    body: RecommendationCreate,
    db: Session = Depends(get_db),
) -> RecommendationOut:
    row = submit_recommendation(db, body)
    return RecommendationOut.from_row(row)


@app.get("/recommendations", response_model=list[RecommendationOut])
def recent_recommendations(db: Session = Depends(get_db)) -> list[RecommendationOut]:
    return [RecommendationOut.from_row(r) for r in get_recent(db)]


@app.get("/recommendations/random", response_model=RecommendationOut)
def random_recommendation(db: Session = Depends(get_db)) -> RecommendationOut:
    return RecommendationOut.from_row(get_random(db))


@app.get("/recommendations/top/{amount}", response_model=list[RecommendationOut])
def top_recommendations(amount: int, db: Session = Depends(get_db)) -> list[RecommendationOut]:
    return [RecommendationOut.from_row(r) for r in get_top(db, amount)]


if DEFAULT_APP_CONFIG.enable_reset_route:

    @app.delete("/recommendations/e2eReset", response_model=ResetResponse)
    def reset_recommendations(db: Session = Depends(get_db)) -> ResetResponse:
        deleted = data_store.delete_all(db)
        logger.warning("Reset wiped %d recommendations", deleted)
        return ResetResponse(status="reset", deleted=deleted)


@app.get("/recommendations/{recommendation_id}", response_model=RecommendationOut)
def recommendation_by_id(recommendation_id: int, db: Session = Depends(get_db)) -> RecommendationOut:
    return RecommendationOut.from_row(get_by_id(db, recommendation_id))


@app.post("/recommendations/{recommendation_id}/upvote", response_model=RecommendationOut)
def upvote_recommendation(recommendation_id: int, db: Session = Depends(get_db)) -> RecommendationOut:
    return RecommendationOut.from_row(upvote(db, recommendation_id))


@app.post("/recommendations/{recommendation_id}/downvote", response_model=VoteResponse)
def downvote_recommendation(recommendation_id: int, db: Session = Depends(get_db)) -> VoteResponse:
    removed = downvote(db, recommendation_id)
    return VoteResponse(status="ok", removed=removed)
