"""Environment-driven configuration using pydantic-settings."""

import logging
from pathlib import Path
from typing import Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

ROOT_DIR = Path(__file__).resolve().parent.parent

# Internal language name -> ISO 2-letter code. The order is the order profiles are scored in.
DEFAULT_LANGUAGES = (
    "english:en,german:de,french:fr,spanish:es,italian:it,"
    "portuguese:pt,danish:da,swedish:sv,norwegian:no,finnish:fi"
)


class Settings(BaseSettings):
    """All tunables, read from TEXTCAT_* environment variables or a .env file."""

    profile_dir: Path = Field(default=ROOT_DIR / "profiles", alias="TEXTCAT_PROFILE_DIR")
    languages: str = Field(default=DEFAULT_LANGUAGES, alias="TEXTCAT_LANGUAGES")
    log_level: str = Field(default="INFO", alias="TEXTCAT_LOG_LEVEL")
    top_n: int = Field(default=3, ge=1, le=20, alias="TEXTCAT_TOP_N")

    model_config = {
        "env_file": ".env",
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator('log_level')
    @classmethod
    def log_level_must_exist(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{v}'")
        return level

    @field_validator('languages')
    @classmethod
    def languages_must_be_pairs(cls, v: str) -> str:
        for entry in v.split(","):
            if entry.strip() and ":" not in entry:
                raise ValueError(f"expected 'name:code' pairs, got '{entry.strip()}'")
        return v

    @property
    def language_map(self) -> Dict[str, str]:
        """The configured languages as an ordered name -> code dict."""
        pairs = {}
        for entry in self.languages.split(","):
            if not entry.strip():
                continue
            name, _, code = entry.partition(":")
            pairs[name.strip()] = code.strip()
        return pairs


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')


settings = Settings()
