from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    bible_assets_path: Path = Field(Path("bibles"), validation_alias="BIBLE_ASSETS_PATH")
    default_translation: str = Field("nva", validation_alias="DEFAULT_TRANSLATION")
    search_default_limit: int = Field(20, validation_alias="SEARCH_DEFAULT_LIMIT")
    cors_origins: List[str] = Field(["*"], validation_alias="CORS_ORIGINS")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
