"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global settings loaded from environment variables / .env file."""

    # Database
    database_url: str = "sqlite:///./content_canvas.db"

    # Auth gate: only this email may use the dashboard
    allowed_email: str = "ileana@example.com"
    # Demo mode: skip sign-in and act as the allowed user
    auth_bypass: bool = True
    session_days: int = 7

    # Serve the example dataset when the store is empty or unreachable
    use_example_fallback: bool = True

    env: str = "development"
    log_level: str = "INFO"
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
