"""
Structured logging for Backend Qubic.

JSON logs with timestamp, event_type, wallet_id and rule context.
Use get_logger() in all modules for aggregation-friendly output.
"""

from backend_qubic.qubic_logging.logger import bind_wallet, get_logger

__all__ = ["get_logger", "bind_wallet"]
