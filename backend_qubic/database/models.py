"""
Stored transaction record: normalized fields plus id, ingestion time and risk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from backend_qubic.utils.json_utils import json_number


@dataclass(frozen=True)
class Transaction:
    """Immutable once appended to the log. Serialized with camelCase keys."""

    id: int
    amount: float
    source: str
    dest: str
    tick: int
    procedure: str
    time: str
    risk_score: int
    risk_level: str
    reasons: tuple[str, ...] = field(default_factory=tuple)

    def touches(self, wallet_id: str) -> bool:
        return self.source == wallet_id or self.dest == wallet_id

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "amount": json_number(self.amount),
            "source": self.source,
            "dest": self.dest,
            "tick": self.tick,
            "procedure": self.procedure,
            "time": self.time,
            "riskScore": self.risk_score,
            "riskLevel": self.risk_level,
            "reasons": list(self.reasons),
        }
