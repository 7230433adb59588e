# tinytok/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ENV: str = "local"
    SERVICE_NAME: str = "tinytok"
    LOG_LEVEL: str = "INFO"

    DEFAULT_SEGMENTER: str = "whitespace"
    MAX_TEXT_LENGTH: int = 100_000
    MAX_BATCH_SIZE: int = 500
    PIPELINE_CACHE_SIZE: int = 64

    RATE_LIMIT: str = "120/minute"
    RATE_LIMIT_ENABLED: bool = True

    FRONTEND_ORIGIN: str | None = None
    BETTERSTACK_API_KEY: str | None = None  # PRODUCTION MODE ONLY

    model_config = SettingsConfigDict(
        env_file=None,
        env_file_encoding="utf-8",
    )


settings = Settings()
