import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mdcompose.theme import ThemeName


class Settings(BaseSettings):
    theme: ThemeName = ThemeName.LIGHT

    log_level: str = "INFO"
    log_file: Path | None = None  # JSON-lines sink, disabled when unset

    image_timeout_seconds: float = Field(default=30.0, gt=0)
    image_max_workers: int = Field(default=4, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="MDCOMPOSE_",
        env_file=[os.getenv("ENV_FILE", ""), ".env"],
        extra="ignore",
    )
