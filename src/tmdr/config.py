"""Configuration module using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_DATASET = Path(__file__).parent / "data" / "acronyms.csv"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TMDR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Dataset
    data_path: Path | None = None  # None = bundled acronyms.csv
    delimiter: str = "–"  # en dash between full form and definition

    # Lookup
    max_results: int = 3

    # Logging
    log_level: str = "WARNING"

    @property
    def dataset_path(self) -> Path:
        """Get the effective dataset path."""
        return self.data_path or BUNDLED_DATASET


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience alias for quick access
settings = get_settings()
