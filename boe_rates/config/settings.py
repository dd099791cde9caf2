"""Application settings using Pydantic BaseSettings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    BOE_ENDPOINT: str = "http://www.bankofengland.co.uk/boeapps/iadb/fromshowcolumns.asp"
    BOE_TIMEZONE: str = "Europe/London"
    HTTP_TIMEOUT: float = 60.0
    SNAPSHOT_PATH: str = "data/boe_base_rate.json"
    SNAPSHOT_DATE_FORMAT: str = "%Y-%m-%d"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields in .env file
    )


# Global settings instance
settings = Settings()
