"""
Application-level exceptions.

All inherit from FraudBackendError so the API server can render them with a
single exception handler as {"error": message} and the exception's status code.
"""

from __future__ import annotations


class FraudBackendError(Exception):
    """Base of all backend errors."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, *, detail: str | None = None) -> None:
        self.message = message or self.__class__.message
        # Internal context for logs; never sent to clients
        self.detail = detail
        super().__init__(self.message)


class InvalidTransactionPayload(FraudBackendError):
    """Request body is not a JSON object (or not JSON at all). Reported as a generic 500."""

    status_code = 500
    message = "Internal server error"


class WalletNotFound(FraudBackendError):
    """No wallet snapshot and no transaction references the identifier."""

    status_code = 404
    message = "Wallet not found"

    def __init__(self, wallet_id: str) -> None:
        self.wallet_id = wallet_id
        super().__init__(detail=f"unknown wallet {wallet_id[:16]}")
