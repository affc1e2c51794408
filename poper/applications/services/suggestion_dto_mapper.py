from typing import Any, Dict, Iterable, List

from poper.applications.interfaces.dtos.suggestion import SuggestionRequestSchema
from poper.domain.models.movie import MovieRecord
from poper.domain.models.suggestion import (
    Genre,
    Language,
    SuggestionFilters,
    SuggestionRequest,
    SuggestionResult,
    YearBucket,
)

NO_MATCHES_MESSAGE = "Couldn't find any movies matching your request. Please try a different description."


class SuggestionDtoMapper:
    """Service for mapping between domain models and DTOs"""

    @staticmethod
    def request_to_domain(schema: SuggestionRequestSchema) -> SuggestionRequest:
        return SuggestionRequest(
            text=schema.text,
            filters=SuggestionFilters(language=schema.language, genre=schema.genre, year=schema.year),
        )

    @staticmethod
    def to_movie_response_dict(movie: MovieRecord) -> Dict[str, Any]:
        return {
            "imdb_id": movie.imdb_id,
            "title": movie.title,
            "year": movie.year,
            "poster": movie.poster,
            "detail_url": movie.detail_url,
            "type": movie.type,
            "genre": movie.genre,
            "language": movie.language,
            "plot": movie.plot,
            "imdb_rating": movie.imdb_rating,
        }

    @staticmethod
    def to_suggestion_result_response_dict(result: SuggestionResult) -> Dict[str, Any]:
        movies = [SuggestionDtoMapper.to_movie_response_dict(movie) for movie in result.movies]
        return {
            "movies": movies,
            "candidate_titles": result.candidate_titles,
            "used_fallback": result.used_fallback,
            "count": len(movies),
            "message": NO_MATCHES_MESSAGE if result.is_empty else None,
        }

    @staticmethod
    def _options(values: Iterable) -> List[Dict[str, str]]:
        return [{"value": value.value, "label": value.label} for value in values]

    @staticmethod
    def to_filter_options_dict() -> Dict[str, List[Dict[str, str]]]:
        return {
            "languages": SuggestionDtoMapper._options(Language),
            "genres": SuggestionDtoMapper._options(Genre),
            "years": SuggestionDtoMapper._options(YearBucket),
        }
