"""
Server Configuration

Reads settings from the process environment (and a local .env file).
Values are read at call time so that changes made before startup are honored.
"""

import os
import time
from dataclasses import dataclass
from typing import Optional

import dotenv

dotenv.load_dotenv()

# Captured once at import; uptime is measured against it
PROCESS_START = time.monotonic()

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_ENVIRONMENT = "development"
DEFAULT_COMPRESSION_MIN_SIZE = 1000

# Levels understood by both logging and uvicorn
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _get_int(name: str, default: int) -> int:
    """Read an integer environment variable."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {raw!r}")


def _get_log_level() -> str:
    """Read LOG_LEVEL, upper-cased."""
    level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    if level not in LOG_LEVELS:
        raise ValueError(f"Environment variable LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level


def get_environment() -> str:
    """Get the deployment environment name (APP_ENV, falling back to NODE_ENV)."""
    return os.getenv("APP_ENV") or os.getenv("NODE_ENV") or DEFAULT_ENVIRONMENT


def get_uptime(now: Optional[float] = None) -> float:
    """Seconds elapsed since the process started."""
    if now is None:
        now = time.monotonic()
    return now - PROCESS_START


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the HTTP server."""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    environment: str = DEFAULT_ENVIRONMENT
    log_level: str = "INFO"
    compression_min_size: int = DEFAULT_COMPRESSION_MIN_SIZE

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        return cls(
            host=os.getenv("HOST", DEFAULT_HOST),
            port=_get_int("PORT", DEFAULT_PORT),
            environment=get_environment(),
            log_level=_get_log_level(),
            compression_min_size=_get_int("COMPRESSION_MIN_SIZE", DEFAULT_COMPRESSION_MIN_SIZE),
        )


def get_settings() -> Settings:
    return Settings.from_env()
