from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from poper.domain.models.movie import MovieRecord

ALL = "all"


class Language(str, Enum):
    ALL = ALL
    ENGLISH = "english"
    HINDI = "hindi"
    TAMIL = "tamil"
    TELUGU = "telugu"
    PUNJABI = "punjabi"
    MARATHI = "marathi"
    BENGALI = "bengali"
    GUJARATI = "gujarati"
    KANNADA = "kannada"
    MALAYALAM = "malayalam"
    SPANISH = "spanish"
    FRENCH = "french"
    GERMAN = "german"
    JAPANESE = "japanese"
    KOREAN = "korean"
    CHINESE = "chinese"

    @property
    def label(self) -> str:
        return "all languages" if self is Language.ALL else self.value


class Genre(str, Enum):
    ALL = ALL
    ACTION = "action"
    ADVENTURE = "adventure"
    ANIMATION = "animation"
    COMEDY = "comedy"
    CRIME = "crime"
    DOCUMENTARY = "documentary"
    DRAMA = "drama"
    FAMILY = "family"
    FANTASY = "fantasy"
    HORROR = "horror"
    MYSTERY = "mystery"
    ROMANCE = "romance"
    SCI_FI = "sci-fi"
    THRILLER = "thriller"
    WAR = "war"
    WESTERN = "western"

    @property
    def label(self) -> str:
        return "all genres" if self is Genre.ALL else self.value


_YEAR_LABELS = {
    "all": "any year",
    "2010s": "2010-2019",
    "2000s": "2000-2009",
    "1990s": "1990-1999",
    "1980s": "1980-1989",
    "classic": "before 1980",
}


class YearBucket(str, Enum):
    ALL = ALL
    Y2025 = "2025"
    Y2024 = "2024"
    Y2023 = "2023"
    Y2022 = "2022"
    Y2021 = "2021"
    Y2020 = "2020"
    DECADE_2010S = "2010s"
    DECADE_2000S = "2000s"
    DECADE_1990S = "1990s"
    DECADE_1980S = "1980s"
    CLASSIC = "classic"

    @property
    def label(self) -> str:
        return _YEAR_LABELS.get(self.value, self.value)


class SuggestionFilters(BaseModel):
    language: Language = Language.ALL
    genre: Genre = Genre.ALL
    year: YearBucket = YearBucket.ALL


class SuggestionRequest(BaseModel):
    """Domain model for one mood-based suggestion request"""

    text: str
    filters: SuggestionFilters = Field(default_factory=SuggestionFilters)


class SuggestionResult(BaseModel):
    """Domain model for the outcome of one suggestion request"""

    movies: List[MovieRecord]
    candidate_titles: List[str] = Field(default_factory=list)
    used_fallback: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.movies
