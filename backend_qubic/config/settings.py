"""
Application settings.

Typed, immutable view over the environment (see config.env) used by the
API server and the process entrypoint.
"""

from __future__ import annotations

from dataclasses import dataclass

from backend_qubic.config.env import (
    get_api_host,
    get_cors_origins,
    get_log_level,
    get_port,
)

SERVICE_NAME = "Qubic Fraud Backend"


@dataclass(frozen=True)
class Settings:
    api_host: str
    port: int
    log_level: str
    cors_origins: tuple[str, ...]
    service_name: str = SERVICE_NAME


def get_settings() -> Settings:
    """
    Return the current application settings, read fresh from the environment.

    Returns:
        Settings with api_host, port, log_level, cors_origins, service_name.
    """
    return Settings(
        api_host=get_api_host(),
        port=get_port(),
        log_level=get_log_level(),
        cors_origins=get_cors_origins(),
    )
