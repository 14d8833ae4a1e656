"""
Configuration for the calculator app.

Settings come from ``PARTICALC_*`` environment variables or a local ``.env``
file, with defaults for everything.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="PARTICALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    page_title: str = "Particalc"
    log_level: str = "INFO"

    # "auto" follows the theme the browser reports to Streamlit
    theme: Literal["light", "dark", "auto"] = "light"
    scientific_default: bool = False


def get_settings() -> Settings:
    """Read settings fresh so env changes apply on the next session."""
    return Settings()
