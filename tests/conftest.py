"""
Pytest fixtures for Backend Qubic tests. Every fixture builds fresh in-memory state.
"""

from __future__ import annotations

import pytest


@pytest.fixture
def tracker():
    from backend_qubic.behavioral_memory import WalletIntelligenceTracker

    return WalletIntelligenceTracker()


@pytest.fixture
def transaction_log():
    from backend_qubic.database import TransactionLog

    return TransactionLog()


@pytest.fixture
def service(transaction_log, tracker):
    """Ingestion service over the test's own log and tracker."""
    from backend_qubic.ingestion.service import IngestionService

    return IngestionService(log=transaction_log, tracker=tracker)


@pytest.fixture
def client(service, monkeypatch):
    """FastAPI TestClient over a fresh app that owns `service`. CORS left at the default (*)."""
    from fastapi.testclient import TestClient

    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)

    from backend_qubic.api_server.server import create_app

    return TestClient(create_app(service=service))
