"""Configuration management for the Content Consistency Grader."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # NLTK resources
    nltk_auto_download: bool = Field(True, description="Download missing NLTK tagger data on first use")
    nltk_data_dir: str = Field("", description="Extra directory to search for NLTK data")

    # Export settings
    export_indent: int = Field(2, description="Indentation for exported JSON reports")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
