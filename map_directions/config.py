import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

API_KEY_ENV_VAR: str = "GOOGLE_MAPS_API_KEY"
LOG_LEVEL_ENV_VAR: str = "MAP_DIRECTIONS_LOG_LEVEL"
LOG_FORMAT_ENV_VAR: str = "MAP_DIRECTIONS_LOG_FORMAT"


def get_api_key() -> Optional[str]:
    return os.getenv(API_KEY_ENV_VAR) or None


def get_log_level() -> str:
    return os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper()


def get_log_format() -> str:
    return os.getenv(LOG_FORMAT_ENV_VAR, "console").lower()
