# Wallet behavioral memory: per-wallet counters, volume and exact mean risk.
# Rule-based only; no ML.

from backend_qubic.behavioral_memory.models import WalletSnapshot
from backend_qubic.behavioral_memory.engine import (
    WalletIntelligenceTracker,
    apply_transaction,
)

__all__ = [
    "WalletSnapshot",
    "WalletIntelligenceTracker",
    "apply_transaction",
]
