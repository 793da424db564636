from __future__ import annotations

import logging

from sqlalchemy import Column, Integer, String, delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..database.session import Base
from .errors import ConflictError

logger = logging.getLogger(__name__)

# Largest signed 64-bit SQL INTEGER; larger ids and limits must not reach the driver
MAX_SQL_INT = 2**63 - 1


class Recommendation(Base):
    __tablename__ = "recommendations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), unique=True, nullable=False)
    youtube_link = Column(String(2048), nullable=False)
    score = Column(Integer, nullable=False, default=0, server_default="0")

    def __repr__(self) -> str:
        return f"Recommendation(id={self.id!r}, name={self.name!r}, score={self.score!r})"


def create(session: Session, name: str, youtube_link: str) -> Recommendation:
    """Insert a new recommendation with score 0. Raises ``ConflictError`` on a taken name."""
    if find_by_name(session, name) is not None:
        raise ConflictError(f"Recommendation '{name}' already exists")

    row = Recommendation(name=name, youtube_link=youtube_link, score=0)
    session.add(row)
    try:
        session.commit()
    except IntegrityError as exc:
        # Lost a race with a concurrent insert of the same name
        session.rollback()
        raise ConflictError(f"Recommendation '{name}' already exists") from exc
    session.refresh(row)
    return row


def is_valid_id(recommendation_id: int) -> bool:
    return 1 <= recommendation_id <= MAX_SQL_INT


def find_by_id(session: Session, recommendation_id: int) -> Recommendation | None:
    if not is_valid_id(recommendation_id):
        return None
    return session.get(Recommendation, recommendation_id)


def find_by_name(session: Session, name: str) -> Recommendation | None:
    return session.execute(
        select(Recommendation).where(Recommendation.name == name)
    ).scalar_one_or_none()


def delete_by_id(session: Session, recommendation_id: int) -> bool:
    """Remove one recommendation. Returns ``False`` when it was already gone."""
    if not is_valid_id(recommendation_id):
        return False
    result = session.execute(delete(Recommendation).where(Recommendation.id == recommendation_id))
    session.commit()
    return result.rowcount > 0


def delete_all(session: Session) -> int:
    result = session.execute(delete(Recommendation))
    session.commit()
    return result.rowcount


def list_recent(session: Session, limit: int) -> list[Recommendation]:
    """Newest first; ids grow with insertion order."""
    stmt = select(Recommendation).order_by(Recommendation.id.desc()).limit(min(limit, MAX_SQL_INT))
    return list(session.execute(stmt).scalars())


def list_top_by_score(session: Session, limit: int) -> list[Recommendation]:
    stmt = (
        select(Recommendation)
        .order_by(Recommendation.score.desc(), Recommendation.id.asc())
        .limit(min(limit, MAX_SQL_INT))
    )
    return list(session.execute(stmt).scalars())


def list_all(session: Session) -> list[Recommendation]:
    stmt = select(Recommendation).order_by(Recommendation.id.asc())
    return list(session.execute(stmt).scalars())
