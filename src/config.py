from __future__ import annotations

from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ADMIN = "STADMIN0000000000000000000000000000000"


class AppSettings(BaseSettings):
    assessment_admin: str = DEFAULT_ADMIN
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@cache
def config() -> AppSettings:
    return AppSettings()
