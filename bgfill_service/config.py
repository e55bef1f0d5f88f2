"""
Configuration loader for the background fill service.

Environment variables are centralized here to keep the rest of the code
focused on image handling and to make deployment tuning clear.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # remove.bg
    removebg_api_key: Optional[str] = Field(None)
    removebg_api_url: str = Field("https://api.remove.bg/v1.0/removebg")
    removebg_size: str = Field("auto")

    # Background assets
    assets_dir: Path = Field(Path("public/assets"))
    project_types: List[str] = Field(default_factory=lambda: ["base", "send", "enb"])
    default_project_type: str = Field("base")
    default_background: str = Field("background1.png")

    # API
    request_timeout_seconds: int = Field(30)
    log_level: str = Field("INFO")
    host: str = Field("0.0.0.0")
    port: int = Field(5000)
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError("LOG_LEVEL must be one of DEBUG|INFO|WARNING|ERROR|CRITICAL")
        return v.upper()

    @model_validator(mode="after")
    def validate_default_project_type(self) -> "Settings":
        if self.default_project_type not in self.project_types:
            raise ValueError("DEFAULT_PROJECT_TYPE must be listed in PROJECT_TYPES")
        return self


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings to avoid reparsing env on every call."""
    return Settings()
