"""
Response models for the dashboard API. Field names match the JSON the
dashboard consumes (camelCase).
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field, NonNegativeFloat, NonNegativeInt

# Whole values stay ints on the wire (250000, not 250000.0)
NonNegativeNumber = Union[NonNegativeInt, NonNegativeFloat]


class TransactionRecord(BaseModel):
    """One scored transaction as stored in the log."""

    id: int = Field(..., ge=1, description="Dense ingestion id, starting at 1")
    amount: NonNegativeNumber = Field(..., description="Transfer amount (QU)")
    source: str = Field("", description="Source wallet id (may be empty)")
    dest: str = Field("", description="Destination wallet id (may be empty)")
    tick: int = Field(0, description="Origin-system tick")
    procedure: str = Field("", description="Procedure invoked (may be empty)")
    time: str = Field(..., description="Ingestion time, ISO-8601 UTC")
    riskScore: int = Field(..., ge=0, le=100, description="Capped risk score")
    riskLevel: str = Field(..., description="LOW | MEDIUM | HIGH | CRITICAL")
    reasons: list[str] = Field(default_factory=list, description="Fired rules, in evaluation order")


class IngestResponse(BaseModel):
    """POST /api/transactions response."""

    status: str = Field("ok")
    transaction: TransactionRecord


class WalletStats(BaseModel):
    walletId: str
    txCount: int = Field(..., ge=0)
    totalVolume: NonNegativeNumber
    avgRisk: NonNegativeNumber = Field(..., description="Mean of all scores applied to this wallet")
    lastTick: int | None = None
    lastTime: str | None = None


class SummaryResponse(BaseModel):
    """GET /api/summary response."""

    totalTransactions: int
    totalVolume: NonNegativeNumber
    byLevel: dict[str, int] = Field(..., description="Counts for LOW, MEDIUM, HIGH, CRITICAL")
    uniqueWallets: int
    topWallets: list[WalletStats] = Field(default_factory=list, description="Top 5 by avgRisk")
    recent: list[TransactionRecord] = Field(default_factory=list, description="Last 10, newest first")


class WalletProfileResponse(BaseModel):
    """GET /api/wallet/{wallet_id} response."""

    walletId: str
    stats: WalletStats | None = None
    transactions: list[TransactionRecord] = Field(default_factory=list, description="Up to 50, newest first")
