import uuid
from typing import List, Set

from poper.domain.exceptions import UpstreamError, ValidationError
from poper.domain.models.movie import MovieRecord
from poper.domain.models.suggestion import SuggestionRequest, SuggestionResult
from poper.domain.ports.repositories.movie_metadata_repository import MovieMetadataRepository
from poper.domain.ports.services.logger import LoggerPort
from poper.domain.ports.services.suggestion_service_port import SuggestionServicePort
from poper.domain.ports.services.title_generator import TitleGeneratorPort
from poper.domain.services.suggestion_text import build_prompt, parse_candidate_titles
from poper.domain.services.year_filter import filter_by_year

EMPTY_INPUT_MESSAGE = "Please describe your movie mood or scenario."
UNPARSABLE_MESSAGE = "The AI returned an empty response. Please try again."


class SuggestionOrchestrator(SuggestionServicePort):
    """Turns a mood description into metadata-backed movie records.

    Titles proposed by the generation API are resolved one at a time against
    the metadata API. When none resolve, a single keyword search on the raw
    mood text is tried instead.
    """

    def __init__(
        self,
        title_generator: TitleGeneratorPort,
        metadata_repository: MovieMetadataRepository,
        logger: LoggerPort,
    ):
        self.title_generator = title_generator
        self.metadata_repository = metadata_repository
        self.logger = logger

    async def suggest(self, request: SuggestionRequest) -> SuggestionResult:
        if not request.text or not request.text.strip():
            raise ValidationError(EMPTY_INPUT_MESSAGE)

        log = self.logger.bind(request_id=uuid.uuid4().hex[:8])
        filters = request.filters
        log.info(
            f"Suggesting movies for language={filters.language.value} "
            f"genre={filters.genre.value} year={filters.year.value}"
        )

        candidate_titles = await self._get_candidate_titles(request)
        log.info(f"Model proposed {len(candidate_titles)} titles: {candidate_titles}")

        seen: Set[str] = set()
        movies = await self._resolve_titles(candidate_titles, seen, log)

        used_fallback = False
        if not movies:
            log.info("No exact matches found, trying fallback search")
            used_fallback = True
            movies = await self._fallback_search(request.text, seen, log)

        with_posters = [movie for movie in movies if movie.has_poster]
        filtered = filter_by_year(with_posters, filters.year.value)

        log.info(f"Resolved {len(movies)} movies, {len(with_posters)} with posters, {len(filtered)} after year filter")
        return SuggestionResult(movies=filtered, candidate_titles=candidate_titles, used_fallback=used_fallback)

    async def _get_candidate_titles(self, request: SuggestionRequest) -> List[str]:
        text = await self.title_generator.generate(build_prompt(request))
        titles = parse_candidate_titles(text)
        if not titles:
            raise UpstreamError("suggestion", UNPARSABLE_MESSAGE)
        return titles

    async def _resolve_titles(self, titles: List[str], seen: Set[str], log: LoggerPort) -> List[MovieRecord]:
        resolved = []
        for title in titles:
            try:
                movie = await self.metadata_repository.get_by_title(title)
            except UpstreamError as e:
                log.error(f"Failed to fetch movie {title}: {e}")
                continue

            if movie is None:
                log.debug(f"No metadata match for {title}")
                continue
            if movie.imdb_id in seen:
                continue

            seen.add(movie.imdb_id)
            resolved.append(movie)
        return resolved

    async def _fallback_search(self, text: str, seen: Set[str], log: LoggerPort) -> List[MovieRecord]:
        hits = await self.metadata_repository.search(text)
        log.info(f"Fallback search returned {len(hits)} hits")

        resolved = []
        for hit in hits:
            if hit.imdb_id in seen:
                continue
            try:
                movie = await self.metadata_repository.get_by_id(hit.imdb_id)
            except UpstreamError as e:
                log.error(f"Error fetching movie details for {hit.imdb_id}: {e}")
                continue

            if movie is None or movie.imdb_id in seen:
                continue

            seen.add(movie.imdb_id)
            resolved.append(movie)
        return resolved
