"""Configuration management for Book Sentiment Analyzer."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BSA_",
    )

    # Paths
    data_dir: Path = Field(default=Path("data"))
    lexicon_path: Path = Field(default=Path("data/lexicons/bing.csv"))
    stop_words_path: Path | None = Field(
        default=None, description="Custom stop-word list (defaults to spaCy's English list)"
    )

    # Extra stop words added on top of the base list
    extra_stop_words: list[str] = Field(
        default_factory=lambda: ["miss", "mrs", "mr", "mister", "sir"]
    )

    # Processing settings
    section_size: int = Field(default=80, description="Lines per section for section scoring")
    top_words: int = Field(default=10, description="Words to report per polarity")
    max_workers: int = Field(default=1, description="Books segmented in parallel")

    # Reporting
    chart_dpi: int = Field(default=150)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
