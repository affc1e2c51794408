from typing import List

from poper.domain.models.suggestion import SuggestionRequest

PROMPT_TEMPLATE = """
Based on this request: "{text}", suggest 5-8 well-known movie titles that:
- Match the specified language: {language}
- Match the specified genre: {genre}
- Match the specified year/period: {year}
- Are popular and widely available
- Have had theatrical or major streaming releases

IMPORTANT: Return ONLY a comma-separated list of exact movie titles, no explanations.
Example: The Dark Knight, Inception, The Matrix, Pulp Fiction
"""


def build_prompt(request: SuggestionRequest) -> str:
    filters = request.filters
    return PROMPT_TEMPLATE.format(
        text=request.text.strip(),
        language=filters.language.value,
        genre=filters.genre.value,
        year=filters.year.value,
    )


def parse_candidate_titles(text: str) -> List[str]:
    """Split the model output on commas, keeping order and duplicates"""
    if not text:
        return []
    return [title.strip() for title in text.split(",") if title.strip()]
