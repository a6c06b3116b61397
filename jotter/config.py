from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="JOTTER_")

    # Derivation settings
    excerpt_max_length: int = Field(default=100, gt=0)
    title_max_length: int = Field(default=50, gt=0)
    untitled_title: str = "Untitled"

    # Store settings
    id_strategy: Literal["sequential", "timestamp"] = "sequential"

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
