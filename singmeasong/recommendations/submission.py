from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from . import data_store
from .data_store import Recommendation
from .errors import ConflictError, LinkValidationError
from .models import RecommendationCreate
from .validation import is_youtube_link

logger = logging.getLogger(__name__)


def submit_recommendation(session: Session, payload: RecommendationCreate) -> Recommendation:
    """Validate the link, then store the recommendation with a zero score."""
    if not is_youtube_link(payload.youtube_link):
        logger.info("Rejected link for %r: %s", payload.name, payload.youtube_link)
        raise LinkValidationError("youtubeLink must be a YouTube video link")

    try:
        row = data_store.create(session, payload.name, payload.youtube_link)
    except ConflictError:
        logger.warning("Duplicate recommendation name %r", payload.name)
        raise

    logger.info("Created recommendation %d (%s)", row.id, row.name)
    return row
