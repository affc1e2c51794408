from abc import ABC, abstractmethod
from typing import List, Optional

from poper.domain.models.movie import MovieRecord, SearchHit


class MovieMetadataRepository(ABC):
    """Lookups against the movie-metadata API.

    Lookups return None (or an empty list) when the API answers "not found" and
    raise UpstreamError on transport failures and non-success statuses.
    """

    @abstractmethod
    async def get_by_title(self, title: str) -> Optional[MovieRecord]:
        pass

    @abstractmethod
    async def search(self, query: str) -> List[SearchHit]:
        pass

    @abstractmethod
    async def get_by_id(self, imdb_id: str) -> Optional[MovieRecord]:
        pass
