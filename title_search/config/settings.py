"""Application settings and configuration management."""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = Field(default="Title Search")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)

    # Catalog
    catalog_path: Optional[str] = Field(default=None)
    catalog_name_field: str = Field(default="parentName")

    # Index Configuration
    gram_size_lower: int = Field(default=2)
    gram_size_upper: int = Field(default=3)
    use_edit_distance: bool = Field(default=False)
    refinement_limit: int = Field(default=50)

    # Search Configuration
    min_score: float = Field(default=0.33)
    max_results: int = Field(default=50)
    max_query_length: int = Field(default=200)

    # Logging
    log_level: str = Field(default="INFO")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080", "http://localhost:8000"]
    )

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
