"""
Data models for wallet behavioral memory.

One WalletSnapshot per wallet identifier: running counters and the exact
incremental mean of the risk scores applied to it. Deterministic; no ML.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from backend_qubic.utils.json_utils import json_number


@dataclass
class WalletSnapshot:
    """
    Aggregated behavioral stats for one wallet.

    tx_count counts transactions where the wallet was source or dest.
    avg_risk is the arithmetic mean of every score applied (see tracker).
    last_tick is None until the first update.
    """

    wallet_id: str
    tx_count: int = 0
    total_volume: float = 0.0
    avg_risk: float = 0.0
    last_tick: int | None = None
    last_time: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "walletId": self.wallet_id,
            "txCount": self.tx_count,
            "totalVolume": json_number(self.total_volume),
            "avgRisk": json_number(self.avg_risk),
            "lastTick": self.last_tick,
            "lastTime": self.last_time,
        }
