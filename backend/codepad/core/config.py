from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    APP_NAME: str = "Codepad Gateway"
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    # Judge0 (RapidAPI or self-hosted)
    JUDGE0_API_KEY: str = ""
    JUDGE0_API_HOST: str = ""
    JUDGE0_API_URL: str = ""

    # Polling
    POLL_INTERVAL_S: float = 1.0
    POLL_MAX_ATTEMPTS: int = 30
    HTTP_TIMEOUT_S: float = 10.0

    # Language templates; None means the JSON files shipped with the package
    TEMPLATES_DIR: str | None = None

    class Config:
        env_file = ".env"

    @property
    def execution_configured(self) -> bool:
        return bool(self.JUDGE0_API_KEY and self.JUDGE0_API_URL)


@lru_cache
def get_settings() -> Settings:
    return Settings()
