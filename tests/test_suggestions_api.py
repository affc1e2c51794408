from http import HTTPStatus
from unittest.mock import AsyncMock

import pytest

from poper.app import app
from poper.domain.exceptions import ConfigurationError, UpstreamError, ValidationError
from poper.domain.models.suggestion import SuggestionResult
from poper.domain.ports.services.suggestion_service_port import SuggestionServicePort
from poper.infrastructure.config.dependencies import get_settings, get_suggestion_service

from .factories import movie_factory


class TestSuggestionsAPI:
    """API tests for the suggestion endpoints"""

    @pytest.fixture
    def mock_suggestion_service(self, client):
        service = AsyncMock(spec=SuggestionServicePort)
        app.dependency_overrides[get_suggestion_service] = lambda: service
        return service

    def test_suggest_success(self, client, mock_suggestion_service):
        mock_suggestion_service.suggest.return_value = SuggestionResult(
            movies=[
                movie_factory.create_movie(imdb_id="tt0435761", title="Toy Story 3", year="2010", language="English")
            ],
            candidate_titles=["Up", "Toy Story 3"],
        )

        response = client.post(
            "/suggestions",
            json={"text": "a funny family movie", "language": "english", "genre": "comedy", "year": "2010s"},
        )

        assert response.status_code == HTTPStatus.OK
        data = response.json()
        assert data["count"] == 1
        assert data["message"] is None
        assert data["used_fallback"] is False
        assert data["candidate_titles"] == ["Up", "Toy Story 3"]
        assert data["movies"][0]["language"] == "English"
        assert data["movies"][0]["imdb_id"] == "tt0435761"
        assert data["movies"][0]["detail_url"] == "https://www.imdb.com/title/tt0435761"

        request = mock_suggestion_service.suggest.await_args.args[0]
        assert request.text == "a funny family movie"
        assert request.filters.language.value == "english"
        assert request.filters.genre.value == "comedy"
        assert request.filters.year.value == "2010s"

    def test_filters_default_to_all(self, client, mock_suggestion_service):
        mock_suggestion_service.suggest.return_value = SuggestionResult(movies=[])

        client.post("/suggestions", json={"text": "anything"})

        filters = mock_suggestion_service.suggest.await_args.args[0].filters
        assert (filters.language.value, filters.genre.value, filters.year.value) == ("all", "all", "all")

    def test_no_matches_is_not_an_error(self, client, mock_suggestion_service):
        mock_suggestion_service.suggest.return_value = SuggestionResult(movies=[], used_fallback=True)

        response = client.post("/suggestions", json={"text": "zzzz"})

        assert response.status_code == HTTPStatus.OK
        data = response.json()
        assert data["movies"] == []
        assert data["count"] == 0
        assert data["message"].startswith("Couldn't find any movies")

    def test_validation_error_is_bad_request(self, client, mock_suggestion_service):
        mock_suggestion_service.suggest.side_effect = ValidationError("Please describe your movie mood or scenario.")

        response = client.post("/suggestions", json={"text": "  "})

        assert response.status_code == HTTPStatus.BAD_REQUEST
        assert response.json()["detail"] == "Please describe your movie mood or scenario."

    def test_upstream_error_is_bad_gateway(self, client, mock_suggestion_service):
        mock_suggestion_service.suggest.side_effect = UpstreamError(
            "suggestion", "Failed to get suggestions from the AI service."
        )

        response = client.post("/suggestions", json={"text": "rainy day"})

        assert response.status_code == HTTPStatus.BAD_GATEWAY
        assert response.json()["detail"] == "Failed to get suggestions from the AI service."

    def test_configuration_error_from_service(self, client, mock_suggestion_service):
        mock_suggestion_service.suggest.side_effect = ConfigurationError("keys missing", missing=["OMDB_API_KEY"])

        response = client.post("/suggestions", json={"text": "rainy day"})

        assert response.status_code == HTTPStatus.SERVICE_UNAVAILABLE
        assert response.json() == {"detail": "keys missing", "missing_credentials": ["OMDB_API_KEY"]}

    def test_unexpected_error_is_internal(self, client, mock_suggestion_service):
        mock_suggestion_service.suggest.side_effect = RuntimeError("boom")

        response = client.post("/suggestions", json={"text": "rainy day"})

        assert response.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
        assert "boom" not in response.text

    def test_unknown_filter_value_is_rejected(self, client, mock_suggestion_service):
        response = client.post("/suggestions", json={"text": "rainy day", "genre": "opera"})

        assert response.status_code == HTTPStatus.UNPROCESSABLE_ENTITY
        mock_suggestion_service.suggest.assert_not_awaited()

    def test_missing_credentials_answer_without_calling_apis(self, client, unconfigured_settings):
        app.dependency_overrides[get_settings] = lambda: unconfigured_settings

        response = client.post("/suggestions", json={"text": "rainy day"})

        assert response.status_code == HTTPStatus.SERVICE_UNAVAILABLE
        data = response.json()
        assert data["detail"].startswith("Configuration Error")
        assert data["missing_credentials"] == ["GEMINI_API_KEY", "OMDB_API_KEY"]

    def test_filter_options(self, client):
        response = client.get("/suggestions/options")

        assert response.status_code == HTTPStatus.OK
        data = response.json()
        assert data["languages"][0] == {"value": "all", "label": "all languages"}
        assert {"value": "sci-fi", "label": "sci-fi"} in data["genres"]
        assert {"value": "classic", "label": "before 1980"} in data["years"]
        assert len(data["years"]) == 12

    def test_health(self, client):
        response = client.get("/suggestions/health")

        assert response.status_code == HTTPStatus.OK
        assert response.json()["configured"] is True

    def test_health_reports_missing_credentials(self, client, unconfigured_settings):
        app.dependency_overrides[get_settings] = lambda: unconfigured_settings

        response = client.get("/suggestions/health")

        assert response.json()["status"] == "misconfigured"
        assert response.json()["missing_credentials"] == ["GEMINI_API_KEY", "OMDB_API_KEY"]
