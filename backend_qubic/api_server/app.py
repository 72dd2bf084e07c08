"""
FastAPI/ASGI application entrypoint.

Run with: uvicorn backend_qubic.api_server.app:app --host 0.0.0.0 --port 5000
"""

from backend_qubic.api_server.server import app, create_app

__all__ = ["app", "create_app"]
