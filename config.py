"""Settings for the rides API, read from environment variables.

Values are read once at import time, so variables must be set before the
first import of this module.
"""
import os
from dataclasses import dataclass
from typing import Optional

_DB_FILE = os.path.join(os.path.dirname(__file__), "rides.db")


@dataclass
class Settings:
    database_url: str = os.getenv("DATABASE_URL", f"sqlite:///{_DB_FILE}")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))


settings = Settings()
