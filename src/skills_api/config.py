"""Configuration management for the application."""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./skills.db")
    database_echo: bool = Field(default=False)
    database_pool_size: int = Field(default=5)

    # Backend Server
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(
        default=4242, validation_alias=AliasChoices("port", "backend_port")
    )

    # Comma-separated list of origins, or "*"
    allowed_origins: str = Field(default="*")

    log_level: str = Field(default="INFO")

    # Base URL the skills board talks to
    api_url: str = Field(default="http://localhost:4242")

    @field_validator("database_url")
    @classmethod
    def normalize_database_url(cls, value: str) -> str:
        """Accept the ``postgres://`` scheme handed out by hosted Postgres providers."""
        if value.startswith("postgres://"):
            return "postgresql://" + value.removeprefix("postgres://")
        return value

    @property
    def origins(self) -> list[str]:
        """Parsed CORS origins."""
        raw = self.allowed_origins.strip()
        if raw == "*":
            return ["*"]
        return [origin.strip() for origin in raw.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
