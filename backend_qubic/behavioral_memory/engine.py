"""
Wallet intelligence tracker: per-wallet rolling stats fed by every ingested transaction.

Each transaction updates both its source and its dest wallet with the same
risk assessment. That assessment is computed from the source wallet's history
only, so a destination's avg_risk absorbs scores from its senders' point of
view. Dashboard avgRisk values depend on this; dest wallets are never
scored from their own history.

Not thread-safe on its own; the ingestion service serializes access.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from backend_qubic.behavioral_memory.models import WalletSnapshot
from backend_qubic.ingestion.models import NormalizedEvent
from backend_qubic.qubic_logging import get_logger
from backend_qubic.utils.time_utils import utc_now_iso

if TYPE_CHECKING:
    from backend_qubic.analytics.risk_engine import RiskAssessment

logger = get_logger(__name__)

TOP_WALLETS_DEFAULT = 5


class WalletIntelligenceTracker:
    """Owns wallet_id -> WalletSnapshot. Entries are created lazily and never removed."""

    def __init__(self) -> None:
        self._wallets: dict[str, WalletSnapshot] = {}

    def __len__(self) -> int:
        return len(self._wallets)

    def __contains__(self, wallet_id: object) -> bool:
        return wallet_id in self._wallets

    def get(self, wallet_id: str) -> WalletSnapshot | None:
        """Return the live snapshot for wallet_id, or None if the wallet was never seen."""
        return self._wallets.get(wallet_id)

    def snapshots(self) -> list[WalletSnapshot]:
        """All snapshots in first-seen order."""
        return list(self._wallets.values())

    def top_by_avg_risk(self, n: int = TOP_WALLETS_DEFAULT) -> list[WalletSnapshot]:
        """Highest avg_risk first; ties keep first-seen order."""
        ranked = sorted(self._wallets.values(), key=lambda w: w.avg_risk, reverse=True)
        return ranked[:n]

    def update(
        self,
        wallet_id: str,
        assessment: RiskAssessment,
        event: NormalizedEvent,
    ) -> WalletSnapshot | None:
        """
        Apply one transaction to wallet_id's stats. Empty wallet_id is a no-op.

        avg_risk uses the incremental mean (avg * (n - 1) + score) / n, which after
        n updates equals the plain mean of the n scores.

        Returns:
            The updated snapshot, or None when wallet_id is empty.
        """
        if not wallet_id:
            return None

        wallet = self._wallets.get(wallet_id)
        if wallet is None:
            wallet = WalletSnapshot(wallet_id=wallet_id)
            self._wallets[wallet_id] = wallet
            logger.debug("wallet_first_seen", wallet_id=wallet_id[:16])

        wallet.tx_count += 1
        wallet.total_volume += event.amount
        wallet.avg_risk = (wallet.avg_risk * (wallet.tx_count - 1) + assessment.score) / wallet.tx_count
        wallet.last_tick = event.tick
        wallet.last_time = utc_now_iso()
        return wallet


def apply_transaction(
    tracker: WalletIntelligenceTracker,
    assessment: RiskAssessment,
    event: NormalizedEvent,
) -> None:
    """Update the source wallet, then the dest wallet, with the same assessment."""
    tracker.update(event.source, assessment, event)
    tracker.update(event.dest, assessment, event)
