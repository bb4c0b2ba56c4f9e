# bfhl/config.py
"""
Application configuration.

Settings are resolved once from the environment (and a local .env file, if
present) and handed to the app factory. Nothing else in the package reads
os.environ directly.
"""

import os
from functools import lru_cache
from typing import List, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, EmailStr

load_dotenv()

DEFAULT_PORT = 3000
GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
GEMINI_MODEL = "gemini-pro"


class Settings(BaseModel):
    official_email: Optional[EmailStr] = None
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    gemini_api_key: str = ""
    gemini_model: str = GEMINI_MODEL
    gemini_base_url: str = GEMINI_BASE_URL
    # None keeps the HTTP client's default (no timeout)
    gemini_timeout: Optional[float] = None

    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    class Config:
        frozen = True


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from an environment mapping (os.environ by default).

    Empty variables are treated as unset. Invalid values raise a pydantic
    ValidationError, so a bad PORT or OFFICIAL_EMAIL fails at startup.
    """
    env = os.environ if environ is None else environ

    def get(name: str) -> Optional[str]:
        value = env.get(name)
        if value is None or not value.strip():
            return None
        return value.strip()

    values = {
        "official_email": get("OFFICIAL_EMAIL"),
        "host": get("HOST"),
        "port": get("PORT"),
        "gemini_api_key": get("GEMINI_API_KEY"),
        "gemini_model": get("GEMINI_MODEL"),
        "gemini_base_url": get("GEMINI_BASE_URL"),
        "gemini_timeout": get("GEMINI_TIMEOUT"),
        "log_level": get("LOG_LEVEL"),
    }
    origins = get("CORS_ORIGINS")
    if origins is not None:
        values["cors_origins"] = _split_origins(origins)

    return Settings(**{k: v for k, v in values.items() if v is not None})


@lru_cache
def get_settings() -> Settings:
    return load_settings()
