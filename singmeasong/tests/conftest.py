from __future__ import annotations

import os

# Must be set before the app modules read their config
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("ENABLE_E2E_RESET", "true")

import pytest  # noqa: E402

from singmeasong.database.session import SessionLocal, create_tables  # noqa: E402
from singmeasong.recommendations.data_store import delete_all  # noqa: E402

create_tables()


@pytest.fixture
def db():
    session = SessionLocal()
    delete_all(session)
    try:
        yield session
    finally:
        session.close()
