import re
from typing import Optional

from pydantic import BaseModel

POSTER_UNAVAILABLE = "N/A"
IMDB_TITLE_URL = "https://www.imdb.com/title/{imdb_id}"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_year(year: Optional[str]) -> Optional[int]:
    """Read the leading integer of a year string, e.g. "2019–2021" -> 2019"""
    if not year:
        return None
    match = _LEADING_INT.match(year)
    if not match:
        return None
    return int(match.group(1))


class MovieRecord(BaseModel):
    """Domain model for a title resolved against the metadata API"""

    imdb_id: str
    title: str
    year: str = ""
    poster: str = POSTER_UNAVAILABLE
    type: Optional[str] = None
    genre: Optional[str] = None
    language: Optional[str] = None
    plot: Optional[str] = None
    imdb_rating: Optional[str] = None

    @property
    def has_poster(self) -> bool:
        return bool(self.poster) and self.poster != POSTER_UNAVAILABLE

    @property
    def parsed_year(self) -> Optional[int]:
        return parse_year(self.year)

    @property
    def detail_url(self) -> str:
        return IMDB_TITLE_URL.format(imdb_id=self.imdb_id)


class SearchHit(BaseModel):
    """A row of a keyword search, before its details are fetched"""

    imdb_id: str
    title: str
    year: str = ""
    poster: str = POSTER_UNAVAILABLE
