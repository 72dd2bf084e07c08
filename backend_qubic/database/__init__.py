"""
Storage layer — in-memory transaction log.

No persistence: the log lives for the lifetime of the service that owns it.
"""

from backend_qubic.database.models import Transaction
from backend_qubic.database.transaction_log import TransactionLog

__all__ = ["Transaction", "TransactionLog"]
