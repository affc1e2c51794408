from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from poper.applications.services.suggestion_orchestrator import SuggestionOrchestrator
from poper.domain.exceptions import ConfigurationError
from poper.domain.ports.repositories.movie_metadata_repository import MovieMetadataRepository
from poper.domain.ports.services.logger import LoggerPort
from poper.domain.ports.services.suggestion_service_port import SuggestionServicePort
from poper.domain.ports.services.title_generator import TitleGeneratorPort
from poper.infrastructure.adapters.repositories.omdb_movie_repository import OmdbMovieRepository
from poper.infrastructure.adapters.services.gemini_title_generator import GeminiTitleGenerator
from poper.infrastructure.config.settings import Settings
from poper.infrastructure.logging.std_logger_adapter import StdLoggerAdapter


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("poper.suggestions")


@lru_cache
def get_settings() -> Settings:
    return Settings()


def ensure_configured(settings: Annotated[Settings, Depends(get_settings)]) -> Settings:
    missing = settings.missing_credentials()
    if missing:
        raise ConfigurationError(settings.configuration_error, missing=missing)
    return settings


def get_title_generator(settings: Annotated[Settings, Depends(ensure_configured)]) -> TitleGeneratorPort:
    return GeminiTitleGenerator(settings)


def get_movie_metadata_repository(
    settings: Annotated[Settings, Depends(ensure_configured)],
) -> MovieMetadataRepository:
    return OmdbMovieRepository(settings)


def get_suggestion_service(
    title_generator: Annotated[TitleGeneratorPort, Depends(get_title_generator)],
    metadata_repository: Annotated[MovieMetadataRepository, Depends(get_movie_metadata_repository)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> SuggestionServicePort:
    return SuggestionOrchestrator(
        title_generator=title_generator,
        metadata_repository=metadata_repository,
        logger=logger,
    )
