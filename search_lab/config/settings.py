"""Application settings and configuration management."""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""
    
    # Application
    app_name: str = Field(default="Search Lab")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    
    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)
    
    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    
    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080", "http://localhost:8000"]
    )
    
    # Engines
    autocomplete_max_results: int = Field(default=10)
    all_words_limit: int = Field(default=1000)
    seed_sample_data: bool = Field(default=True)
    
    # Input bounds
    max_key_length: int = Field(default=100)
    max_value_length: int = Field(default=500)
    max_word_length: int = Field(default=100)
    max_text_length: int = Field(default=10000)
    max_pattern_length: int = Field(default=1000)
    
    # Sessions
    session_header: str = Field(default="X-Session-ID")
    default_session_id: str = Field(default="default")
    max_sessions: int = Field(default=100)
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
