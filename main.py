"""
Main entrypoint: FastAPI server for the Qubic fraud backend.

All state is in memory and lives for the lifetime of this process.

Env: PORT (default 5000), API_HOST (default 0.0.0.0), LOG_LEVEL, LOG_FORMAT,
CORS_ALLOW_ORIGINS. See backend_qubic.config.env.

Equivalent: uvicorn backend_qubic.api_server.app:app --host 0.0.0.0 --port 5000
"""

# Configure structured JSON logging before other imports that may log
from backend_qubic.qubic_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Run the API server in the main thread until SIGINT/SIGTERM."""
    import uvicorn

    from backend_qubic.api_server.app import app
    from backend_qubic.config import get_settings

    settings = get_settings()
    logger.info("main_server_starting", host=settings.api_host, port=settings.port)
    uvicorn.run(app, host=settings.api_host, port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":
    main()
