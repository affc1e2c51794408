from abc import ABC, abstractmethod

from poper.domain.models.suggestion import SuggestionRequest, SuggestionResult


class SuggestionServicePort(ABC):
    """Port for mood-based movie suggestion operations"""

    @abstractmethod
    async def suggest(self, request: SuggestionRequest) -> SuggestionResult:
        """Suggest movies for a mood description and filter selection"""
        pass
