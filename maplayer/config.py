"""Library configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Default geometry styling loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MAPLAYER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Display hints
    default_point_radius: float = 2.0
    default_stroke_width: float = 2.0

    # Style applied to newly created geometries
    default_rgb: tuple[int, int, int] = (0, 0, 0)
    default_opacity: int = 0

    default_crs: Optional[str] = None


@lru_cache
def get_settings() -> Settings:
    return Settings()
