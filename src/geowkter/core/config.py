"""
Configuration settings for the GeoWKTer application.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Attributes:
        default_label: Name property given to features read without a label
        flatten_collections: Emit GeometryCollection children as sibling features
        max_wkt_length: Maximum number of characters accepted per request
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="GEOWKTER_",
    )

    # Conversion settings
    default_label: str = "Unnamed"
    flatten_collections: bool = False
    max_wkt_length: int = 1_000_000

    # API settings
    api_v1_prefix: str = "/api/v1"

    # CORS settings
    cors_origins: str = "http://localhost:5173,http://localhost:3000,http://localhost:4173"

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]


# Global settings instance
settings = Settings()
