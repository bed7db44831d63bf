"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    app_name: str = "SilentSOS"
    debug: bool = False
    api_prefix: str = "/api"
    api_host: str = "127.0.0.1"
    api_port: int = 4000

    # Flat-file document holding users, sosEvents and alerts
    data_file: str = "data.json"
    # Built SPA (vite dist/); served only when the directory exists
    frontend_dist: str | None = None
    cors_origins: list[str] = ["*"]

    # PBKDF2-HMAC-SHA512
    password_hash_iterations: int = 10_000

    nearby_radius_miles: float = 1.0


settings = Settings()
