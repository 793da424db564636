from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RecommendationPolicy:
    """
    Fixed rules for scoring and selection.

    ``score_floor`` is inclusive: a recommendation may sit at -5, the vote
    that takes it to -6 removes it.
    """

    vote_delta: int = 1
    score_floor: int = -5
    recent_limit: int = 10
    popular_threshold: int = 10
    popular_probability: float = 0.7


DEFAULT_POLICY = RecommendationPolicy()
