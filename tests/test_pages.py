from http import HTTPStatus

from poper.app import app
from poper.infrastructure.config.dependencies import get_settings


def test_index_page_renders_form(client):
    response = client.get("/")

    assert response.status_code == HTTPStatus.OK
    assert "text/html" in response.headers["content-type"]

    body = response.text
    assert "<title>poper</title>" in body
    assert 'id="mood"' in body
    assert 'placeholder="describe your mood..."' in body
    assert '<select id="language"' in body
    assert '<select id="genre"' in body
    assert '<select id="year"' in body
    assert '<option value="classic">before 1980</option>' in body
    assert '<option value="2010s">2010-2019</option>' in body
    assert 'id="loading"' in body
    assert 'id="grid"' in body
    assert "Your Movie Suggestions" in body


def test_index_hides_error_banner_when_configured(client):
    body = client.get("/").text

    assert '<div id="error" class="error" hidden></div>' in body


def test_index_shows_configuration_error(client, unconfigured_settings):
    app.dependency_overrides[get_settings] = lambda: unconfigured_settings

    body = client.get("/").text

    assert "Configuration Error: API keys are missing." in body
    assert "GEMINI_API_KEY and OMDB_API_KEY" in body
