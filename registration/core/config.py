# registration/core/config.py
import json
from functools import lru_cache
from pathlib import Path
from typing import Annotated, List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    # ---- App ----
    APP_NAME: str = "Registration API"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    STATIC_DIR: str = str(PROJECT_ROOT / "public")
    LOG_LEVEL: str = "INFO"

    # ---- Mongo ----
    DB_TYPE: str = "mongodb"
    MONGO_URI: Optional[str] = None
    MONGO_DB_NAME: str = "registerdb"

    # ---- CORS ----
    CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    # Pydantic Settings config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("MONGO_URI", mode="before")
    @classmethod
    def blank_uri_is_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def split_origins(cls, v):
        """
        Allow both a comma-separated string and a proper JSON list.
        CORS_ORIGINS=http://localhost:3000,https://example.com
        """
        if isinstance(v, str):
            if v.lstrip().startswith("["):
                return json.loads(v)
            return [o.strip() for o in v.split(",") if o.strip()]
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
