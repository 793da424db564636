from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RecommendationCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255, description="Song or artist name, unique")
    youtube_link: str = Field(
        ...,
        alias="youtubeLink",
        min_length=1,
        max_length=2048,
        description="YouTube video link, e.g. https://www.youtube.com/watch?v=...",
    )


class RecommendationOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    youtube_link: str = Field(..., alias="youtubeLink")
    score: int

    @classmethod
    def from_row(cls, row) -> "RecommendationOut":
        return cls(id=row.id, name=row.name, youtubeLink=row.youtube_link, score=row.score)


class VoteResponse(BaseModel):
    status: str
    removed: bool


class ResetResponse(BaseModel):
    status: str
    deleted: int
