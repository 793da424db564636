from __future__ import annotations

import pytest

from singmeasong.recommendations import data_store
from singmeasong.recommendations.errors import ConflictError

LINK = "https://www.youtube.com/watch?v=chwyjJbcs1Y"


def test_create_starts_at_zero(db):
    row = data_store.create(db, "Falamansa - Xote dos Milagres", LINK)
    assert row.id is not None
    assert row.score == 0
    assert data_store.find_by_name(db, "Falamansa - Xote dos Milagres").id == row.id


def test_create_duplicate_name_conflicts(db):
    data_store.create(db, "Same", LINK)
    with pytest.raises(ConflictError):
        data_store.create(db, "Same", "https://youtu.be/other")
    assert len(data_store.list_all(db)) == 1


def test_find_missing_returns_none(db):
    assert data_store.find_by_id(db, 999) is None
    assert data_store.find_by_name(db, "nobody") is None


def test_delete_by_id_is_idempotent(db):
    rid = data_store.create(db, "Gone", LINK).id
    assert data_store.delete_by_id(db, rid) is True
    assert data_store.delete_by_id(db, rid) is False
    assert data_store.find_by_id(db, rid) is None


def test_delete_all_counts_rows(db):
    for i in range(3):
        data_store.create(db, f"song {i}", LINK)
    assert data_store.delete_all(db) == 3
    assert data_store.list_all(db) == []


def test_list_recent_newest_first(db):
    ids = [data_store.create(db, f"song {i}", LINK).id for i in range(5)]
    recent = data_store.list_recent(db, 3)
    assert [r.id for r in recent] == list(reversed(ids))[:3]


def test_list_top_breaks_ties_by_creation(db):
    a = data_store.create(db, "a", LINK)
    b = data_store.create(db, "b", LINK)
    c = data_store.create(db, "c", LINK)
    a.score, b.score, c.score = 3, 7, 3
    db.commit()

    top = data_store.list_top_by_score(db, 10)
    assert [r.name for r in top] == ["b", "a", "c"]


def test_ids_outside_sql_integer_range_are_absent(db):
    data_store.create(db, "in range", LINK)
    huge = data_store.MAX_SQL_INT + 1
    assert data_store.find_by_id(db, huge) is None
    assert data_store.find_by_id(db, -huge) is None
    assert data_store.delete_by_id(db, huge) is False
    assert len(data_store.list_all(db)) == 1


def test_list_limits_beyond_sql_integer_range(db):
    data_store.create(db, "only", LINK)
    huge = data_store.MAX_SQL_INT * 10
    assert [r.name for r in data_store.list_recent(db, huge)] == ["only"]
    assert [r.name for r in data_store.list_top_by_score(db, huge)] == ["only"]
