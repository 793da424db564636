from __future__ import annotations

import logging

from sqlalchemy import delete, update
from sqlalchemy.orm import Session

from .config import DEFAULT_POLICY, RecommendationPolicy
from .data_store import Recommendation, is_valid_id
from .errors import NotFoundError

logger = logging.getLogger(__name__)


def _apply_delta(session: Session, recommendation_id: int, delta: int) -> None:
    """Shift the score in SQL so concurrent votes never read a stale value."""
    if not is_valid_id(recommendation_id):
        raise NotFoundError(f"Recommendation {recommendation_id} not found")
    result = session.execute(
        update(Recommendation)
        .where(Recommendation.id == recommendation_id)
        .values(score=Recommendation.score + delta)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        session.rollback()
        raise NotFoundError(f"Recommendation {recommendation_id} not found")


def upvote(
    session: Session,
    recommendation_id: int,
    policy: RecommendationPolicy = DEFAULT_POLICY,
) -> Recommendation:
    _apply_delta(session, recommendation_id, policy.vote_delta)
    session.commit()
    return session.get(Recommendation, recommendation_id)


def downvote(
    session: Session,
    recommendation_id: int,
    policy: RecommendationPolicy = DEFAULT_POLICY,
) -> bool:
    """
    Lower the score by one and drop the recommendation once it sinks below
    the floor.

    Both statements run in one transaction; the delete is conditional on the
    value the update just wrote. Returns True when the recommendation was
    removed.
    """
    _apply_delta(session, recommendation_id, -policy.vote_delta)
    result = session.execute(
        delete(Recommendation)
        .where(
            Recommendation.id == recommendation_id,
            Recommendation.score < policy.score_floor,
        )
        .execution_options(synchronize_session=False)
    )
    removed = result.rowcount > 0
    session.commit()

    if removed:
        logger.info(
            "Recommendation %d fell below score floor %d and was removed",
            recommendation_id,
            policy.score_floor,
        )
    return removed
