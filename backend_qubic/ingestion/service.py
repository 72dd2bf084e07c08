"""
Ingestion service — owns the transaction log and wallet tracker.

Per event: normalize -> read the source wallet's snapshot -> score -> append
to the log -> update source wallet -> update dest wallet. The whole sequence
runs under one lock so concurrent requests (FastAPI runs sync routes in a
thread pool) never interleave a read-score-update for the same wallet. Reads
take the same lock and return plain JSON-ready dicts.
"""

from __future__ import annotations

import threading
from typing import Any

from backend_qubic.analytics.risk_engine import compute_risk
from backend_qubic.behavioral_memory.engine import WalletIntelligenceTracker, apply_transaction
from backend_qubic.core.exceptions import WalletNotFound
from backend_qubic.database.models import Transaction
from backend_qubic.database.transaction_log import WALLET_HISTORY_LIMIT, TransactionLog
from backend_qubic.ingestion.normalizer import normalize_body
from backend_qubic.qubic_logging import bind_wallet


class IngestionService:
    def __init__(
        self,
        log: TransactionLog | None = None,
        tracker: WalletIntelligenceTracker | None = None,
    ) -> None:
        self.log = log if log is not None else TransactionLog()
        self.tracker = tracker if tracker is not None else WalletIntelligenceTracker()
        self._lock = threading.Lock()

    def ingest(self, body: Any) -> Transaction:
        """
        Normalize, score and store one raw event, then update both wallets.

        Raises:
            InvalidTransactionPayload: body is not a JSON object. Nothing is stored.
        """
        event = normalize_body(body)
        with self._lock:
            # Snapshot must be read before this event's own update
            prior = self.tracker.get(event.source) if event.source else None
            assessment = compute_risk(event, prior)
            tx = self.log.append(event, assessment)
            apply_transaction(self.tracker, assessment, event)

        bind_wallet(tx.source[:16]).info(
            "transaction_ingested",
            transaction_id=tx.id,
            dest=tx.dest[:16],
            amount=tx.amount,
            known_wallet=prior is not None,
            score=tx.risk_score,
            risk_level=tx.risk_level,
            reasons=list(tx.reasons),
        )
        return tx

    def list_transactions(
        self,
        level: str | None = None,
        limit: int | None = None,
        min_amount: float | None = None,
        max_amount: float | None = None,
    ) -> list[dict[str, Any]]:
        with self._lock:
            txs = self.log.query(level=level, limit=limit, min_amount=min_amount, max_amount=max_amount)
        return [tx.to_dict() for tx in txs]

    def latest_transaction(self) -> dict[str, Any]:
        """Most recent transaction, or {} when nothing was ingested yet."""
        with self._lock:
            tx = self.log.latest()
        return tx.to_dict() if tx is not None else {}

    def summary(self) -> dict[str, Any]:
        with self._lock:
            return self.log.summary(self.tracker)

    def wallet_profile(self, wallet_id: str, limit: int = WALLET_HISTORY_LIMIT) -> dict[str, Any]:
        """
        Stats and recent history for one wallet.

        Raises:
            WalletNotFound: no snapshot and no stored transaction references wallet_id.
        """
        with self._lock:
            wallet = self.tracker.get(wallet_id)
            history = self.log.for_wallet(wallet_id, limit=limit)
            if wallet is None and not history:
                bind_wallet(wallet_id[:16]).info("wallet_profile_not_found")
                raise WalletNotFound(wallet_id)
            stats = wallet.to_dict() if wallet is not None else None
        return {
            "walletId": wallet_id,
            "stats": stats,
            "transactions": [tx.to_dict() for tx in history],
        }
