"""
Risk engine: score one transaction from its fields and the source wallet's prior snapshot.

Rule groups run in a fixed order (amount band, procedure, wallet history,
identity). Every rule that fires adds its weight and appends one reason.
The total is capped at 100 and mapped to LOW / MEDIUM / HIGH / CRITICAL.
Pure: no mutation, no I/O; identical inputs give identical results.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from backend_qubic.analytics import risk_rules as rules
from backend_qubic.behavioral_memory.models import WalletSnapshot
from backend_qubic.ingestion.models import NormalizedEvent


@dataclass(frozen=True)
class RiskAssessment:
    """Result of compute_risk: capped score, level, reasons in rule order."""

    score: int
    level: str
    reasons: tuple[str, ...] = field(default_factory=tuple)


def risk_level_from_score(score: int) -> str:
    """Map a 0-100 score to its level: >=85 CRITICAL, >=65 HIGH, >=40 MEDIUM, else LOW."""
    for threshold, level in rules.LEVEL_THRESHOLDS:
        if score >= threshold:
            return level
    return rules.RISK_LOW


def _amount_rules(amount: float) -> list[tuple[int, str]]:
    for min_amount, weight, reason in rules.AMOUNT_BANDS:
        if amount >= min_amount:
            return [(weight, reason)]
    return []


def _procedure_rules(procedure: str) -> list[tuple[int, str]]:
    if not procedure:
        return []
    weight = rules.PROCEDURE_RISK.get(procedure)
    if weight:
        return [(weight, rules.HIGH_RISK_PROCEDURE_REASON.format(procedure=procedure))]
    return [(rules.UNKNOWN_PROCEDURE_WEIGHT, rules.UNKNOWN_PROCEDURE_REASON.format(procedure=procedure))]


def _wallet_rules(event: NormalizedEvent, wallet: WalletSnapshot | None) -> list[tuple[int, str]]:
    """
    History rules against the source wallet's snapshot as it was before this event.
    An unseen wallet gets a single replacement rule instead.
    """
    amount = event.amount
    if wallet is None:
        if amount >= rules.UNSEEN_WALLET_MIN_AMOUNT:
            return [(rules.UNSEEN_WALLET_WEIGHT, rules.UNSEEN_WALLET_REASON)]
        return []

    fired: list[tuple[int, str]] = []
    if wallet.tx_count <= rules.NEW_WALLET_MAX_TX and amount >= rules.NEW_WALLET_MIN_AMOUNT:
        fired.append((rules.NEW_WALLET_WEIGHT, rules.NEW_WALLET_REASON))
    if (
        wallet.tx_count >= rules.EXPERIENCED_WALLET_MIN_TX
        and amount >= rules.EXPERIENCED_WALLET_MIN_AMOUNT
    ):
        fired.append((rules.EXPERIENCED_WALLET_WEIGHT, rules.EXPERIENCED_WALLET_REASON))
    if (
        wallet.last_tick is not None
        and abs(event.tick - wallet.last_tick) <= rules.BURST_MAX_TICK_DELTA
    ):
        fired.append((rules.BURST_WEIGHT, rules.BURST_REASON))
    if wallet.avg_risk >= rules.RISKY_HISTORY_MIN_AVG:
        fired.append((rules.RISKY_HISTORY_WEIGHT, rules.RISKY_HISTORY_REASON))
    return fired


def _identity_rules(source: str, dest: str) -> list[tuple[int, str]]:
    if source and dest and source == dest:
        return [(rules.SELF_TRANSFER_WEIGHT, rules.SELF_TRANSFER_REASON)]
    return []


def compute_risk(event: NormalizedEvent, wallet: WalletSnapshot | None = None) -> RiskAssessment:
    """
    Score a normalized transaction.

    Args:
        event: Normalized transaction fields (a stored Transaction works too).
        wallet: Prior snapshot of the source wallet, or None if never seen.

    Returns:
        RiskAssessment with score in [0, 100], its level, and one reason per fired rule.
    """
    fired = (
        _amount_rules(event.amount)
        + _procedure_rules(event.procedure)
        + _wallet_rules(event, wallet)
        + _identity_rules(event.source, event.dest)
    )
    total = sum(weight for weight, _ in fired)
    score = max(rules.SCORE_MIN, min(total, rules.SCORE_MAX))
    level = risk_level_from_score(score)
    reasons = tuple(reason for _, reason in fired)
    return RiskAssessment(score=score, level=level, reasons=reasons)
