from typing import List, Optional

from pydantic import BaseModel, Field

from poper.domain.models.suggestion import Genre, Language, YearBucket


class SuggestionRequestSchema(BaseModel):
    """Request schema for mood-based suggestions"""

    text: str = Field(default="", description="Free-text mood or scenario")
    language: Language = Language.ALL
    genre: Genre = Genre.ALL
    year: YearBucket = YearBucket.ALL


class MoviePublic(BaseModel):
    imdb_id: str
    title: str
    year: str
    poster: str
    detail_url: str
    type: Optional[str] = None
    genre: Optional[str] = None
    language: Optional[str] = None
    plot: Optional[str] = None
    imdb_rating: Optional[str] = None


class SuggestionResultResponse(BaseModel):
    """Response schema for suggestion results"""

    movies: List[MoviePublic]
    candidate_titles: List[str]
    used_fallback: bool
    count: int
    message: Optional[str] = None


class FilterOption(BaseModel):
    value: str
    label: str


class FilterOptionsResponse(BaseModel):
    languages: List[FilterOption]
    genres: List[FilterOption]
    years: List[FilterOption]
