"""Load and validate environment variables. Uses python-dotenv.

Callers should use the accessor functions below rather than reading `os.environ`
directly, to keep environment handling consistent.
"""

import logging
from pathlib import Path

from dotenv import load_dotenv
import os

DEFAULT_BASE_URL = "https://dummyjson.com"


def _project_root() -> Path:
    """Resolve project root (the directory holding catalog_browser/)."""
    return Path(__file__).resolve().parent.parent.parent


def load_config() -> None:
    """
    Load .env from project root. Idempotent; safe to call multiple times.
    Uses override=True to ensure .env values take precedence over existing env vars.
    """
    env_path = _project_root() / ".env"
    load_dotenv(env_path, override=True)


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def get_optional_float(key: str, default: float) -> float:
    """Get optional env var as float; return default if missing or invalid."""
    raw = get_optional(key)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# --- Public config accessors ---

def catalog_base_url() -> str:
    """Optional: catalogue REST service root. Default https://dummyjson.com."""
    return get_optional("CATALOG_BASE_URL", DEFAULT_BASE_URL).rstrip("/")


def catalog_timeout_seconds() -> float:
    """Optional: per-request transport timeout in seconds. Default 30."""
    return get_optional_float("CATALOG_TIMEOUT_SECONDS", 30.0)


def log_level() -> str:
    """Optional: logging level name. Default INFO; unknown names fall back to INFO."""
    name = get_optional("LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(name), int):
        return "INFO"
    return name
