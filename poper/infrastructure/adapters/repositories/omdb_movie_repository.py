import asyncio
from typing import Any, Dict, List, Optional

import requests

from poper.domain.exceptions import ConfigurationError, UpstreamError
from poper.domain.models.movie import POSTER_UNAVAILABLE, MovieRecord, SearchHit
from poper.domain.ports.repositories.movie_metadata_repository import MovieMetadataRepository
from poper.infrastructure.config.settings import Settings
from poper.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

SEARCH_ERROR_MESSAGE = "Failed to search for movies. Please try again later."


class OmdbMovieRepository(MovieMetadataRepository):
    """Movie metadata lookups against the OMDb API"""

    def __init__(self, settings: Settings):
        if not settings.OMDB_API_KEY:
            raise ConfigurationError(
                "OMDB API key is missing. Please check your environment variables.", missing=["OMDB_API_KEY"]
            )
        self.api_key = settings.OMDB_API_KEY
        self.base_url = settings.OMDB_BASE_URL
        self.timeout = settings.HTTP_TIMEOUT

    async def _get(self, params: Dict[str, str]) -> Dict[str, Any]:
        logger.debug("omdb GET params=%s", params)
        try:
            resp = await asyncio.to_thread(
                requests.request,
                "GET",
                self.base_url,
                params={"apikey": self.api_key, **params},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise UpstreamError("metadata", f"{SEARCH_ERROR_MESSAGE} ({type(e).__name__})") from e

        if not resp.ok:
            raise UpstreamError("metadata", f"{SEARCH_ERROR_MESSAGE} (status {resp.status_code})")
        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamError("metadata", f"{SEARCH_ERROR_MESSAGE} (invalid JSON)") from e

    @staticmethod
    def _is_found(data: Dict[str, Any]) -> bool:
        return data.get("Response") == "True" and bool(data.get("imdbID"))

    @staticmethod
    def _to_domain(data: Dict[str, Any]) -> MovieRecord:
        return MovieRecord(
            imdb_id=data["imdbID"],
            title=data.get("Title", ""),
            year=data.get("Year", ""),
            poster=data.get("Poster") or POSTER_UNAVAILABLE,
            type=data.get("Type"),
            genre=data.get("Genre"),
            language=data.get("Language"),
            plot=data.get("Plot"),
            imdb_rating=data.get("imdbRating"),
        )

    async def get_by_title(self, title: str) -> Optional[MovieRecord]:
        data = await self._get({"t": title})
        return self._to_domain(data) if self._is_found(data) else None

    async def get_by_id(self, imdb_id: str) -> Optional[MovieRecord]:
        data = await self._get({"i": imdb_id})
        return self._to_domain(data) if self._is_found(data) else None

    async def search(self, query: str) -> List[SearchHit]:
        data = await self._get({"s": query, "type": "movie"})
        if data.get("Response") != "True":
            logger.info("omdb search found nothing: %s", data.get("Error"))
            return []

        return [
            SearchHit(
                imdb_id=item["imdbID"],
                title=item.get("Title", ""),
                year=item.get("Year", ""),
                poster=item.get("Poster") or POSTER_UNAVAILABLE,
            )
            for item in data.get("Search") or []
            if item.get("imdbID")
        ]
