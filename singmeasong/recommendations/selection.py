from __future__ import annotations

import random
from typing import Protocol

from sqlalchemy.orm import Session

from . import data_store
from .config import DEFAULT_POLICY, RecommendationPolicy
from .data_store import Recommendation
from .errors import InvalidInputError, NotFoundError


class RandomSource(Protocol):
    def random(self) -> float: ...

    def randrange(self, stop: int) -> int: ...


def get_recent(
    session: Session,
    limit: int | None = None,
    policy: RecommendationPolicy = DEFAULT_POLICY,
) -> list[Recommendation]:
    return data_store.list_recent(session, policy.recent_limit if limit is None else limit)


def get_by_id(session: Session, recommendation_id: int) -> Recommendation:
    row = data_store.find_by_id(session, recommendation_id)
    if row is None:
        raise NotFoundError(f"Recommendation {recommendation_id} not found")
    return row


def get_top(session: Session, amount: int) -> list[Recommendation]:
    if isinstance(amount, bool) or not isinstance(amount, int) or amount < 1:
        raise InvalidInputError("amount must be a positive integer")
    return data_store.list_top_by_score(session, amount)


def get_random(
    session: Session,
    rng: RandomSource | None = None,
    policy: RecommendationPolicy = DEFAULT_POLICY,
) -> Recommendation:
    """
    Pick one recommendation, favouring popular ones.

    Recommendations scoring above ``popular_threshold`` form the popular
    bucket, chosen with ``popular_probability``; the rest form the other
    bucket. An empty bucket hands the draw to the non-empty one, then a
    uniform index is drawn inside the bucket.
    """
    rng = rng or random
    recommendations = data_store.list_all(session)
    if not recommendations:
        raise NotFoundError("No recommendations yet")

    popular = [r for r in recommendations if r.score > policy.popular_threshold]
    others = [r for r in recommendations if r.score <= policy.popular_threshold]

    wants_popular = rng.random() < policy.popular_probability
    bucket = popular if wants_popular else others
    if not bucket:
        bucket = others if wants_popular else popular

    return bucket[rng.randrange(len(bucket))]
