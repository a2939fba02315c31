"""Library configuration."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    pages_dir: Path = Path("pages")
    markdown_extensions: list[str] = Field(
        default_factory=lambda: ["extra", "sane_lists", "pymdownx.tasklist"]
    )

    model_config = SettingsConfigDict(
        env_prefix="FLATPAGES_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
