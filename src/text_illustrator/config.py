"""
Application configuration management.

This module handles configuration from environment variables using Pydantic Settings.
"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application configuration from environment variables.

    All settings can be overridden via environment variables with the same name.
    """

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Text analysis limits
    analysis_max_keywords: int = 10
    analysis_max_entities: int = 5
    analysis_max_themes: int = 3
    analysis_max_sentences: int = 10
    analysis_min_sentence_length: int = 10  # sentences must be strictly longer

    # Content-type classification
    content_type_mixed_floor: float = 0.3  # max score below this → mixed
    content_type_tie_margin: float = 0.15  # top-two gap below this → mixed

    # Query optimizer output bounds
    query_min_results: int = 6
    query_max_results: int = 10
    query_keyword_fallback_count: int = 6
    query_threshold_relaxation_step: float = 0.1

    # Optional JSON file with a partial QueryGenerationConfig override (CLI)
    query_config_path: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()
