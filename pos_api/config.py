"""
Application settings read from the environment.
A local .env file is loaded first so development overrides work without exporting variables.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    app_title: str = "Kitchen POS API"
    port: int = 8000
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """
    Load settings from environment variables.

    Returns:
        Settings built from APP_TITLE, PORT and LOG_LEVEL, falling back to defaults
    """
    load_dotenv()
    defaults = Settings()
    return Settings(
        app_title=os.environ.get("APP_TITLE", defaults.app_title),
        port=int(os.environ.get("PORT", defaults.port)),
        log_level=os.environ.get("LOG_LEVEL", defaults.log_level),
    )
