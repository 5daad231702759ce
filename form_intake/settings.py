from __future__ import annotations
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    database_url: str = "sqlite:///./form_submission_db.sqlite"

    upload_dir: str = "uploads"
    upload_url: str = "/uploads"
    upload_collision: Literal["overwrite", "rename"] = "overwrite"

    require_fields: bool = True
    admin_token: str | None = None

    host: str = "127.0.0.1"
    port: int = 8000
    log_console: bool = True
    send_to_logfire: bool | Literal["if-token-present"] = "if-token-present"

    model_config = SettingsConfigDict(env_prefix="FORM_INTAKE_", env_file=".env", extra="ignore")

@lru_cache
def get_settings() -> Settings:
    return Settings()
