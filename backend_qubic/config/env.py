"""
Environment variable loading for Backend Qubic.

- API_HOST: bind host for the HTTP server (default: 0.0.0.0)
- PORT: listening port (default: 5000)
- LOG_LEVEL: debug | info | warning | error (default: info)
- LOG_FORMAT: json | console (default: json)
- CORS_ALLOW_ORIGINS: comma-separated origins, or * (default: *)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is backend_qubic/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_BACKEND_DIR = _CONFIG_DIR.parent
_ROOT = _BACKEND_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_PORT = 5000
DEFAULT_LOG_LEVEL = "info"
DEFAULT_LOG_FORMAT = "json"
DEFAULT_CORS_ORIGINS = ("*",)


def load_qubic_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides real env."""
    if _ENV_PATH.is_file():
        load_dotenv(_ENV_PATH, override=False)


def get_api_host() -> str:
    load_qubic_env()
    return (os.getenv("API_HOST") or "").strip() or DEFAULT_API_HOST


def get_port() -> int:
    """
    Return PORT from env. Falls back to DEFAULT_PORT when unset or not an integer
    in the valid TCP range.
    """
    load_qubic_env()
    raw = (os.getenv("PORT") or "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        return DEFAULT_PORT
    if not 0 < port < 65536:
        return DEFAULT_PORT
    return port


def get_log_level() -> str:
    load_qubic_env()
    return ((os.getenv("LOG_LEVEL") or "").strip() or DEFAULT_LOG_LEVEL).lower()


def get_log_format() -> str:
    load_qubic_env()
    return ((os.getenv("LOG_FORMAT") or "").strip() or DEFAULT_LOG_FORMAT).lower()


def get_cors_origins() -> tuple[str, ...]:
    """Return CORS_ALLOW_ORIGINS split on commas; '*' allows any origin."""
    load_qubic_env()
    raw = (os.getenv("CORS_ALLOW_ORIGINS") or "").strip()
    if not raw:
        return DEFAULT_CORS_ORIGINS
    origins = tuple(o.strip() for o in raw.split(",") if o.strip())
    return origins or DEFAULT_CORS_ORIGINS
