"""
API route definitions — /api endpoints consumed by the automation pipeline and dashboard.

POST /api/transactions ingests one event; the GET routes are read-only views
over the ingestion service owned by the app (app.state.ingestion).
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool

from backend_qubic.api_server.schemas import (
    IngestResponse,
    SummaryResponse,
    TransactionRecord,
    WalletProfileResponse,
)
from backend_qubic.core.exceptions import FraudBackendError
from backend_qubic.ingestion.service import IngestionService
from backend_qubic.qubic_logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Transactions"])


def get_service(request: Request) -> IngestionService:
    """Dependency: the ingestion service owned by this app."""
    return request.app.state.ingestion


@router.post("/transactions", response_model=IngestResponse)
async def post_transaction(
    request: Request,
    service: IngestionService = Depends(get_service),
) -> dict[str, Any]:
    """
    Score and store one transaction event.

    Body is {"data": {...}} or the fields flat: amount, source, dest, tick,
    procedure (all optional); an empty body counts as {}. Malformed bodies
    answer 500 and store nothing.
    """
    try:
        raw = await request.body()
        body = json.loads(raw) if raw.strip() else {}
        # ingest blocks on a threading.Lock; keep it off the event loop
        tx = await run_in_threadpool(service.ingest, body)
    except FraudBackendError as e:
        logger.warning("transaction_rejected", error=e.detail or e.message)
        raise
    except Exception as e:
        logger.exception("transaction_ingest_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error") from e
    return {"status": "ok", "transaction": tx.to_dict()}


@router.get("/transactions", response_model=list[TransactionRecord])
def list_transactions(
    level: str | None = Query(None, description="Risk level filter (case-insensitive)"),
    limit: int | None = Query(None, ge=1, description="Keep only the N most recent"),
    min_amount: float | None = Query(None, ge=0, alias="minAmount", description="Inclusive lower bound"),
    max_amount: float | None = Query(None, ge=0, alias="maxAmount", description="Inclusive upper bound"),
    service: IngestionService = Depends(get_service),
) -> list[dict[str, Any]]:
    """Stored transactions, newest first."""
    return service.list_transactions(
        level=level,
        limit=limit,
        min_amount=min_amount,
        max_amount=max_amount,
    )


@router.get("/transactions/latest")
def latest_transaction(service: IngestionService = Depends(get_service)) -> dict[str, Any]:
    """Most recently ingested transaction, or {} when none."""
    return service.latest_transaction()


@router.get("/summary", response_model=SummaryResponse)
def summary(service: IngestionService = Depends(get_service)) -> dict[str, Any]:
    return service.summary()


@router.get("/wallet/{wallet_id}", response_model=WalletProfileResponse)
def wallet_profile(
    wallet_id: str,
    service: IngestionService = Depends(get_service),
) -> dict[str, Any]:
    """
    Stats and up to 50 most recent transactions for one wallet.
    404 when the wallet was never referenced.
    """
    return service.wallet_profile(wallet_id)
