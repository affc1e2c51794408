from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from poper.app import app
from poper.domain.ports.repositories.movie_metadata_repository import MovieMetadataRepository
from poper.domain.ports.services.logger import LoggerPort
from poper.domain.ports.services.title_generator import TitleGeneratorPort
from poper.infrastructure.config.dependencies import get_settings
from poper.infrastructure.config.settings import Settings


@pytest.fixture
def settings():
    return Settings(_env_file=None, GEMINI_API_KEY="gemini-test-key", OMDB_API_KEY="omdb-test-key")


@pytest.fixture
def unconfigured_settings():
    return Settings(_env_file=None, GEMINI_API_KEY=None, OMDB_API_KEY=None)


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def mock_title_generator():
    """Mock generation API port"""
    return AsyncMock(spec=TitleGeneratorPort)


@pytest.fixture
def mock_metadata_repository():
    """Mock metadata API repository, answering "not found" unless configured"""
    repository = AsyncMock(spec=MovieMetadataRepository)
    repository.get_by_title.return_value = None
    repository.get_by_id.return_value = None
    repository.search.return_value = []
    return repository


@pytest.fixture
def mock_logger():
    logger = Mock(spec=LoggerPort)
    logger.bind.return_value = logger
    return logger
