"""Application configuration management using Pydantic's BaseSettings."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Defines all configuration settings for the API, loaded from .env file."""

    # API Keys
    google_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "google_api_key", "GOOGLE_API_KEY", "GEMINI_API_KEY"
        ),
    )

    # Model settings
    gemini_model: str = "gemini-1.5-flash"
    max_output_tokens: int = 2048

    # App settings
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3001

    # CORS
    cors_origins: List[str] = ["*"]

    class Config:
        """Pydantic model configuration."""

        env_file = ".env"
        extra = "ignore"


settings = Settings()
