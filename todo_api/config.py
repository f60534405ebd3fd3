from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080


@dataclass(frozen=True)
class Settings:
    title: str
    api_prefix: str
    seed_path: Optional[str]
    host: str
    port: int
    log_level: str


def normalize_prefix(raw_value: str) -> str:
    """Return ``raw_value`` as a router prefix: leading slash, no trailing slash."""
    value = raw_value.strip().strip("/")
    return f"/{value}" if value else ""


def parse_port(raw_value: Optional[str]) -> int:
    if not raw_value:
        return DEFAULT_PORT
    try:
        return int(raw_value)
    except ValueError:
        logger.warning("Invalid PORT value '%s'; defaulting to %s", raw_value, DEFAULT_PORT)
        return DEFAULT_PORT


@lru_cache
def get_settings() -> Settings:
    title = os.getenv("TODO_API_TITLE", "Todo API")
    api_prefix = normalize_prefix(os.getenv("TODO_API_PREFIX", ""))
    seed_path = os.getenv("TODO_SEED_PATH") or None
    host = os.getenv("HOST", "0.0.0.0")
    port = parse_port(os.getenv("PORT"))
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    return Settings(
        title=title,
        api_prefix=api_prefix,
        seed_path=seed_path,
        host=host,
        port=port,
        log_level=log_level,
    )
