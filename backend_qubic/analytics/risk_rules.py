"""
Risk rule table: weights for amount bands, procedures, wallet history and identity.

Pure data. The risk engine walks these in a fixed order; changing a weight here
changes scoring everywhere.
"""

from __future__ import annotations

RISK_LOW = "LOW"
RISK_MEDIUM = "MEDIUM"
RISK_HIGH = "HIGH"
RISK_CRITICAL = "CRITICAL"

RISK_LEVELS = (RISK_LOW, RISK_MEDIUM, RISK_HIGH, RISK_CRITICAL)

# (min score, level), highest first
LEVEL_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (85, RISK_CRITICAL),
    (65, RISK_HIGH),
    (40, RISK_MEDIUM),
)

SCORE_MIN = 0
SCORE_MAX = 100

# (min amount, weight, reason), highest band first; at most one fires
AMOUNT_BANDS: tuple[tuple[float, int, str], ...] = (
    (1_000_000, 45, "Very large transaction amount (>= 1M QU)"),
    (100_000, 30, "Large transaction amount (>= 100k QU)"),
    (10_000, 15, "Moderate transaction amount (>= 10k QU)"),
)

PROCEDURE_RISK: dict[str, int] = {
    "QxAddToBidOrder": 20,
    "TransferShareOwnershipAndPossession": 30,
    "IssueAsset": 35,
}
HIGH_RISK_PROCEDURE_REASON = "High-risk procedure: {procedure}"

UNKNOWN_PROCEDURE_WEIGHT = 5
UNKNOWN_PROCEDURE_REASON = "Unknown procedure: {procedure}"

# Wallet history (prior snapshot of the source wallet)
NEW_WALLET_MAX_TX = 2
NEW_WALLET_MIN_AMOUNT = 10_000
NEW_WALLET_WEIGHT = 20
NEW_WALLET_REASON = "New wallet doing large transaction"

EXPERIENCED_WALLET_MIN_TX = 5
EXPERIENCED_WALLET_MIN_AMOUNT = 50_000
EXPERIENCED_WALLET_WEIGHT = 15
EXPERIENCED_WALLET_REASON = "Experienced wallet abnormal volume"

BURST_MAX_TICK_DELTA = 3
BURST_WEIGHT = 20
BURST_REASON = "Burst activity detected (multiple tx in short time)"

RISKY_HISTORY_MIN_AVG = 60
RISKY_HISTORY_WEIGHT = 10
RISKY_HISTORY_REASON = "Wallet already has risky history"

# No prior snapshot of the source wallet
UNSEEN_WALLET_MIN_AMOUNT = 10_000
UNSEEN_WALLET_WEIGHT = 10
UNSEEN_WALLET_REASON = "Brand new wallet with significant amount"

SELF_TRANSFER_WEIGHT = 10
SELF_TRANSFER_REASON = "Source and destination wallet identical"
