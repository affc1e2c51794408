from abc import ABC, abstractmethod


class TitleGeneratorPort(ABC):
    """Port for the text-generation API that proposes movie titles"""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Return the generated text, raising UpstreamError when the call fails or the text is empty"""
        pass
