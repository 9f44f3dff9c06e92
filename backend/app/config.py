"""Application configuration and environment variables."""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

STATIC_DIR = Path(__file__).parent / "static"


class Settings(BaseSettings):
    """Application settings loaded from BOOKSTORE_* environment variables."""

    # Application
    app_name: str = "Book Store"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Static page served at "/"
    static_dir: Path = STATIC_DIR

    model_config = {
        "env_prefix": "BOOKSTORE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
