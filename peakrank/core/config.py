"""Configuration settings for the peakrank backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()


@dataclass(frozen=True)
class RiotAPIConfig:
    """Immutable Riot API configuration handed to the client."""

    api_key: str
    region: str = "europe"
    timeout: float = 10.0


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Riot API Configuration
    riot_api_key: str = Field(default="")
    riot_region: str = Field(default="europe")
    riot_request_timeout: float = Field(default=10.0, gt=0)

    # Database Configuration
    database_url: str = Field(default="sqlite+aiosqlite:///./database.db")

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    # Application Configuration
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # CORS Configuration
    cors_origins: str = Field(default="*")

    @field_validator("riot_region")
    @classmethod
    def normalize_region(cls, v: str) -> str:
        """Routing regions are lower-case host prefixes."""
        return v.strip().lower()

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [
            origin.strip() for origin in self.cors_origins.split(",") if origin.strip()
        ]

    @property
    def riot_api_key_loaded(self) -> bool:
        """Whether a Riot API key is configured."""
        return bool(self.riot_api_key.strip())

    def riot_api_config(self) -> RiotAPIConfig:
        """Build the immutable Riot API configuration."""
        return RiotAPIConfig(
            api_key=self.riot_api_key.strip(),
            region=self.riot_region,
            timeout=self.riot_request_timeout,
        )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix for environment variables
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()


# Create a global settings instance lazily
settings: Settings | None = None


def get_global_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
