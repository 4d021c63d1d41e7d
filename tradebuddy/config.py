"""Runtime configuration read from the environment (and .env when present)."""

import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    log_level: str
    log_dir: str
    cors_origins: List[str]


def get_settings() -> Settings:
    """Build Settings from the current environment."""
    origins = os.getenv("TRADEBUDDY_CORS_ORIGINS", "*")
    return Settings(
        host=os.getenv("TRADEBUDDY_HOST", "0.0.0.0"),
        port=int(os.getenv("TRADEBUDDY_PORT", "8000")),
        log_level=os.getenv("TRADEBUDDY_LOG_LEVEL", "INFO").upper(),
        log_dir=os.getenv("TRADEBUDDY_LOG_DIR", "logs"),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
    )
