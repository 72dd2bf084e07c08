"""
In-memory transaction log — insertion-ordered store of scored transactions.

Assigns dense ids starting at 1 and serves the dashboard queries (filtered
listing, latest, per-wallet history, summary). Nothing is persisted; the log
lives as long as its owner. Not thread-safe on its own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from backend_qubic.analytics.risk_rules import RISK_LEVELS
from backend_qubic.database.models import Transaction
from backend_qubic.ingestion.models import NormalizedEvent
from backend_qubic.utils.json_utils import json_number
from backend_qubic.utils.time_utils import utc_now_iso

if TYPE_CHECKING:
    from backend_qubic.analytics.risk_engine import RiskAssessment
    from backend_qubic.behavioral_memory.engine import WalletIntelligenceTracker

WALLET_HISTORY_LIMIT = 50
SUMMARY_RECENT_LIMIT = 10
SUMMARY_TOP_WALLETS = 5


class TransactionLog:
    def __init__(self) -> None:
        self._transactions: list[Transaction] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._transactions)

    @property
    def next_id(self) -> int:
        return self._next_id

    def append(self, event: NormalizedEvent, assessment: RiskAssessment) -> Transaction:
        """Store a scored event under the next id and return the frozen record."""
        tx = Transaction(
            id=self._next_id,
            amount=event.amount,
            source=event.source,
            dest=event.dest,
            tick=event.tick,
            procedure=event.procedure,
            time=utc_now_iso(),
            risk_score=assessment.score,
            risk_level=assessment.level,
            reasons=tuple(assessment.reasons),
        )
        self._transactions.append(tx)
        self._next_id += 1
        return tx

    def all(self) -> list[Transaction]:
        """Oldest first."""
        return list(self._transactions)

    def latest(self) -> Transaction | None:
        return self._transactions[-1] if self._transactions else None

    def query(
        self,
        level: str | None = None,
        limit: int | None = None,
        min_amount: float | None = None,
        max_amount: float | None = None,
    ) -> list[Transaction]:
        """
        Newest first, optionally filtered.

        Args:
            level: Exact riskLevel match, case-insensitive.
            limit: Keep only the N most recent matches.
            min_amount: Inclusive lower bound on amount.
            max_amount: Inclusive upper bound on amount.
        """
        if limit is not None and limit <= 0:
            return []
        wanted_level = level.strip().upper() if level else None
        matches: list[Transaction] = []
        for tx in reversed(self._transactions):
            if wanted_level is not None and tx.risk_level != wanted_level:
                continue
            if min_amount is not None and tx.amount < min_amount:
                continue
            if max_amount is not None and tx.amount > max_amount:
                continue
            matches.append(tx)
            if limit is not None and len(matches) >= limit:
                break
        return matches

    def for_wallet(self, wallet_id: str, limit: int = WALLET_HISTORY_LIMIT) -> list[Transaction]:
        """The most recent `limit` transactions where wallet_id is source or dest, newest first."""
        history: list[Transaction] = []
        for tx in reversed(self._transactions):
            if tx.touches(wallet_id):
                history.append(tx)
                if len(history) >= limit:
                    break
        return history

    def summary(self, tracker: WalletIntelligenceTracker) -> dict[str, Any]:
        """Dashboard summary: totals, per-level counts, riskiest wallets, recent activity."""
        by_level = {level: 0 for level in RISK_LEVELS}
        total_volume = 0.0
        for tx in self._transactions:
            by_level[tx.risk_level] += 1
            total_volume += tx.amount
        return {
            "totalTransactions": len(self._transactions),
            "totalVolume": json_number(total_volume),
            "byLevel": by_level,
            "uniqueWallets": len(tracker),
            "topWallets": [w.to_dict() for w in tracker.top_by_avg_risk(SUMMARY_TOP_WALLETS)],
            "recent": [tx.to_dict() for tx in self.query(limit=SUMMARY_RECENT_LIMIT)],
        }
