from __future__ import annotations


class RecommendationError(Exception):
    """Base class for failures the API reports back to the client."""


class LinkValidationError(RecommendationError):
    """The submitted link is not a recognised YouTube video link."""


class ConflictError(RecommendationError):
    """A recommendation with the same name already exists."""


class NotFoundError(RecommendationError):
    """No recommendation matches the request."""


class InvalidInputError(RecommendationError):
    """A query parameter is outside its accepted range."""
