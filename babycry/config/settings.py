from typing import Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiConfig(BaseSettings):
    """Google Gemini configuration."""

    api_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"),
    )
    model: str = Field(
        default="gemini-2.5-flash",
        validation_alias="GEMINI_MODEL",
    )
    timeout_seconds: float = Field(
        default=60.0,
        validation_alias="GEMINI_TIMEOUT_SECONDS",
        gt=0,
    )
    chat_temperature: float = Field(
        default=0.7,
        validation_alias="GEMINI_CHAT_TEMPERATURE",
        ge=0.0,
        le=2.0,
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        secrets_dir=".secrets",
        case_sensitive=False,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Application settings"""

    app_name: str = "Baby Cry Gateway"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000
    log_file: str = "logs/app.log"
    analysis_log_file: str = "logs/analysis.log"

    # Uploads
    max_upload_bytes: int = Field(default=50 * 1024 * 1024, ge=1)

    # Gemini
    gemini: GeminiConfig = Field(default_factory=GeminiConfig)

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Hosted/serverless deployments must not open their own listener."""
        return self.environment.strip().lower() == "production"


# Global settings instance
settings = Settings()
