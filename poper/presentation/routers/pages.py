import html
from typing import Annotated, Iterable, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from poper.domain.models.suggestion import Genre, Language, YearBucket
from poper.infrastructure.config.dependencies import get_settings
from poper.infrastructure.config.settings import Settings

router = APIRouter(tags=["pages"])

POSTER_PLACEHOLDER = "https://placehold.co/400x600/111827/374151?text=Poster+Not+Found"


def _options_html(values: Iterable) -> str:
    return "\n".join(
        f'<option value="{html.escape(value.value)}">{html.escape(value.label)}</option>' for value in values
    )


def _select_html(select_id: str, values: Iterable) -> str:
    return f'<select id="{select_id}" name="{select_id}">\n{_options_html(values)}\n</select>'


def _error_banner_html(message: Optional[str]) -> str:
    hidden = "" if message else " hidden"
    return f'<div id="error" class="error"{hidden}>{html.escape(message or "")}</div>'


def render_index(configuration_error: Optional[str] = None) -> str:
    return (
        INDEX_TEMPLATE.replace("{{language_select}}", _select_html("language", Language))
        .replace("{{genre_select}}", _select_html("genre", Genre))
        .replace("{{year_select}}", _select_html("year", YearBucket))
        .replace("{{error_banner}}", _error_banner_html(configuration_error))
        .replace("{{poster_placeholder}}", POSTER_PLACEHOLDER)
    )


@router.get("/", response_class=HTMLResponse)
def index(settings: Annotated[Settings, Depends(get_settings)]) -> HTMLResponse:
    """Single-page form that asks for a mood and shows the suggested movies as poster cards."""
    return HTMLResponse(content=render_index(settings.configuration_error))


INDEX_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>poper</title>
  <style>
    * { box-sizing: border-box; }
    body { margin: 0; background: #000; color: #fff; font-family: ui-sans-serif, system-ui, sans-serif; }
    header { text-align: center; padding: 4rem 0; animation: fadeIn .6s ease-out; }
    header h1 { font-size: 3.75rem; font-weight: 300; margin: 0 0 1rem; }
    header p { color: #9ca3af; font-size: 1.125rem; margin: 0; }
    main { max-width: 72rem; margin: 0 auto; padding: 0 2rem; }
    form { display: flex; flex-direction: column; gap: 1rem; margin-bottom: 3rem; animation: fadeInUp .6s ease-out; }
    input, select, button { font-size: 1rem; padding: 1rem 1.5rem; border-radius: .5rem; }
    input, select { background: #111827; color: #fff; border: 1px solid #1f2937; }
    input:focus { outline: none; border-color: #4b5563; }
    .filters { display: grid; grid-template-columns: repeat(3, 1fr); gap: 1.5rem; }
    button { background: #fff; color: #000; border: none; font-weight: 500; cursor: pointer; }
    button:disabled { opacity: .5; cursor: default; }
    .loading { text-align: center; padding: 3rem 0; color: #9ca3af; }
    .spinner { display: inline-block; width: 1.5rem; height: 1.5rem; border-radius: 50%;
      border-bottom: 1px solid #fff; margin-right: 1rem; vertical-align: middle; animation: spin 1s linear infinite; }
    .error { border: 1px solid #991b1b; background: rgba(127, 29, 29, .2); color: #f87171;
      padding: 1.5rem; margin-bottom: 2rem; border-radius: .5rem; text-align: center; }
    .grid { display: grid; grid-template-columns: repeat(3, 1fr); gap: 2rem; }
    .card { background: rgba(17, 24, 39, .5); padding: 1rem; border-radius: .5rem;
      transition: transform .3s; animation: fadeIn .5s ease-out both; }
    .card:hover { transform: translateY(-.5rem); background: rgba(31, 41, 55, .7); }
    .card img { width: 100%; height: 24rem; object-fit: cover; border-radius: .25rem; margin-bottom: 1rem; }
    .card h3 { font-weight: 500; font-size: 1.125rem; margin: 0 0 .5rem; min-height: 3.5rem; }
    .card p { color: #6b7280; margin: 0 0 .75rem; }
    .card a { color: #9ca3af; font-size: .75rem; text-decoration: none; }
    .card a:hover { color: #fff; }
    footer { text-align: center; padding: 2rem 0; margin-top: 4rem; color: #4b5563; font-size: .75rem; }
    [hidden] { display: none !important; }
    @media (max-width: 48rem) { .filters, .grid { grid-template-columns: 1fr; } }
    @keyframes fadeIn { from { opacity: 0; } to { opacity: 1; } }
    @keyframes fadeInUp { from { opacity: 0; transform: translateY(1rem); } to { opacity: 1; transform: none; } }
    @keyframes spin { to { transform: rotate(360deg); } }
  </style>
</head>
<body>
  <header>
    <h1>poper</h1>
    <p>movie suggestions</p>
  </header>

  <main>
    <form id="suggest-form">
      <input id="mood" name="mood" type="text" placeholder="describe your mood..." autocomplete="off" />
      <div class="filters">
        {{language_select}}
        {{genre_select}}
        {{year_select}}
      </div>
      <button id="submit" type="submit">Suggest</button>
    </form>

    <div id="loading" class="loading" hidden><span class="spinner"></span>Searching...</div>

    {{error_banner}}

    <section id="results" hidden>
      <h2>Your Movie Suggestions</h2>
      <div id="grid" class="grid"></div>
    </section>
  </main>

  <footer>powered by gemini &amp; omdb</footer>

  <script>
    const $ = (id) => document.getElementById(id);
    const PLACEHOLDER = '{{poster_placeholder}}';
    let inFlight = false;

    function setBusy(busy) {
      inFlight = busy;
      $('submit').disabled = busy;
      $('submit').textContent = busy ? 'Searching...' : 'Suggest';
      $('loading').hidden = !busy;
    }

    function showError(message) {
      $('error').textContent = message;
      $('error').hidden = !message;
    }

    function renderMovies(movies) {
      const grid = $('grid');
      grid.innerHTML = '';
      movies.forEach((movie, index) => {
        const card = document.createElement('div');
        card.className = 'card';
        card.style.animationDelay = `${index * 50}ms`;

        const img = document.createElement('img');
        img.src = movie.poster;
        img.alt = `Poster for ${movie.title}`;
        img.onerror = () => { img.onerror = null; img.src = PLACEHOLDER; };

        const title = document.createElement('h3');
        title.textContent = movie.title;
        const year = document.createElement('p');
        year.textContent = movie.year;
        const link = document.createElement('a');
        link.href = movie.detail_url;
        link.target = '_blank';
        link.rel = 'noopener noreferrer';
        link.textContent = 'View on IMDb \\u2192';

        card.append(img, title, year, link);
        grid.appendChild(card);
      });
      $('results').hidden = movies.length === 0;
    }

    $('suggest-form').addEventListener('submit', async (ev) => {
      ev.preventDefault();
      if (inFlight) return;

      const text = $('mood').value.trim();
      if (!text) {
        showError('Please describe your movie mood or scenario.');
        return;
      }

      setBusy(true);
      showError('');
      renderMovies([]);

      try {
        const resp = await fetch('/suggestions', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({
            text,
            language: $('language').value,
            genre: $('genre').value,
            year: $('year').value,
          }),
        });
        const body = await resp.json().catch(() => ({}));
        if (!resp.ok) {
          const detail = typeof body.detail === 'string' ? body.detail : null;
          throw new Error(detail || 'An unknown error occurred. Please try again.');
        }
        if (body.movies.length > 0) {
          renderMovies(body.movies);
        } else {
          showError(body.message);
        }
      } catch (err) {
        renderMovies([]);
        showError(err.message);
      } finally {
        setBusy(false);
      }
    });
  </script>
</body>
</html>"""
