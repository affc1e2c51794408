from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    GEMINI_API_KEY: Optional[str] = None
    OMDB_API_KEY: Optional[str] = None

    GEMINI_MODEL: str = "gemini-1.5-flash"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    OMDB_BASE_URL: str = "https://www.omdbapi.com/"

    MAX_OUTPUT_TOKENS: int = 150
    TEMPERATURE: float = 0.4
    HTTP_TIMEOUT: float = 20.0

    def missing_credentials(self) -> List[str]:
        missing = []
        if not self.GEMINI_API_KEY:
            missing.append("GEMINI_API_KEY")
        if not self.OMDB_API_KEY:
            missing.append("OMDB_API_KEY")
        return missing

    @property
    def configuration_error(self) -> Optional[str]:
        missing = self.missing_credentials()
        if not missing:
            return None
        return (
            "Configuration Error: API keys are missing. "
            f"Please add {' and '.join(missing)} to your environment or .env file."
        )
