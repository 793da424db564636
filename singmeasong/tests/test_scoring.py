from __future__ import annotations

import pytest

from singmeasong.recommendations import data_store
from singmeasong.recommendations.config import RecommendationPolicy
from singmeasong.recommendations.errors import NotFoundError
from singmeasong.recommendations.scoring import downvote, upvote

LINK = "https://www.youtube.com/watch?v=1"
HUGE_ID = 99999999999999999999


def test_upvote_adds_one(db):
    rid = data_store.create(db, "up", LINK).id
    updated = upvote(db, rid)
    assert updated.score == 1
    assert upvote(db, rid).score == 2
    assert data_store.find_by_id(db, rid) is not None


def test_upvote_missing_raises(db):
    with pytest.raises(NotFoundError):
        upvote(db, 12345)


@pytest.mark.parametrize("rid", [HUGE_ID, -HUGE_ID, 0])
def test_votes_on_out_of_range_id_raise_not_found(db, rid):
    with pytest.raises(NotFoundError):
        upvote(db, rid)
    with pytest.raises(NotFoundError):
        downvote(db, rid)


def test_downvote_subtracts_one(db):
    rid = data_store.create(db, "down", LINK).id
    assert downvote(db, rid) is False
    assert data_store.find_by_id(db, rid).score == -1


def test_downvote_missing_raises(db):
    with pytest.raises(NotFoundError):
        downvote(db, 12345)


def test_score_may_rest_on_the_floor(db):
    rid = data_store.create(db, "floor", LINK).id
    for _ in range(5):
        assert downvote(db, rid) is False
    assert data_store.find_by_id(db, rid).score == -5


def test_sixth_downvote_removes(db):
    rid = data_store.create(db, "bye", LINK).id
    for _ in range(5):
        downvote(db, rid)
    assert downvote(db, rid) is True
    assert data_store.find_by_id(db, rid) is None
    assert data_store.find_by_name(db, "bye") is None


def test_downvote_after_removal_is_not_found(db):
    rid = data_store.create(db, "twice", LINK).id
    for _ in range(6):
        downvote(db, rid)
    with pytest.raises(NotFoundError):
        downvote(db, rid)


def test_custom_floor(db):
    rid = data_store.create(db, "strict", LINK).id
    policy = RecommendationPolicy(score_floor=0)
    assert downvote(db, rid, policy=policy) is True
    assert data_store.find_by_id(db, rid) is None
