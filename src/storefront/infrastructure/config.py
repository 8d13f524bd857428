"""
Application settings.

Values come from environment variables prefixed with ``STOREFRONT_`` or
from a local ``.env`` file.
"""
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Storefront settings."""

    data_dir: Path = Path("data")
    default_currency: str = "BRL"
    log_level: str = "WARNING"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "STOREFRONT_",
        "extra": "ignore",
    }

    @field_validator("default_currency")
    @classmethod
    def _normalize_currency(cls, value: str) -> str:
        value = value.strip().upper()
        if len(value) != 3:
            raise ValueError("default_currency must be a 3-letter code")
        return value

    @property
    def store_path(self) -> Path:
        return self.data_dir / "store.json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
