"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    anthropic_api_key: str = ""
    kraftai_env: str = "development"
    kraftai_log_level: str = "info"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:5500",
    ]

    # Model routing
    model_cheap: str = "claude-haiku-4-5-20251001"
    model_mid: str = "claude-sonnet-4-5-20250929"
    llm_temperature: float = 0.7

    # Server-side image annotation
    vision_enabled: bool = True
    google_cloud_project_id: str = ""

    # Uploads
    max_upload_bytes: int = 10 * 1024 * 1024

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
