"""
Pytest tests for the risk engine: level thresholds, each rule group, additivity, cap, purity.
"""

from __future__ import annotations

import pytest

from backend_qubic.analytics import compute_risk, risk_level_from_score
from backend_qubic.analytics import risk_rules as rules
from backend_qubic.behavioral_memory.models import WalletSnapshot
from backend_qubic.ingestion.models import NormalizedEvent

SOURCE = "0xA1B2"
DEST = "0xC3D4"


def _event(**kwargs) -> NormalizedEvent:
    fields = {"amount": 0.0, "source": SOURCE, "dest": DEST, "tick": 0, "procedure": ""}
    fields.update(kwargs)
    return NormalizedEvent(**fields)


def _wallet(tx_count=1, last_tick=0, avg_risk=0.0) -> WalletSnapshot:
    return WalletSnapshot(
        wallet_id=SOURCE,
        tx_count=tx_count,
        total_volume=0.0,
        avg_risk=avg_risk,
        last_tick=last_tick,
        last_time="2024-01-01T00:00:00.000Z",
    )


# --- Levels ---


@pytest.mark.parametrize(
    "score,level",
    [
        (0, "LOW"),
        (39, "LOW"),
        (40, "MEDIUM"),
        (64, "MEDIUM"),
        (65, "HIGH"),
        (84, "HIGH"),
        (85, "CRITICAL"),
        (100, "CRITICAL"),
    ],
)
def test_risk_level_thresholds(score, level):
    assert risk_level_from_score(score) == level


# --- Amount bands ---


def test_amount_bands_fire_highest_only():
    """Only one band fires, highest first; below 10k contributes nothing."""
    r = compute_risk(_event(amount=1_000_000), _wallet(tx_count=3, last_tick=1000))
    assert r.score == 45
    assert r.reasons == ("Very large transaction amount (>= 1M QU)",)

    r = compute_risk(_event(amount=100_000), _wallet(tx_count=3, last_tick=1000))
    assert r.score == 30
    assert r.reasons == ("Large transaction amount (>= 100k QU)",)

    r = compute_risk(_event(amount=10_000), _wallet(tx_count=3, last_tick=1000))
    assert r.score == 15
    assert r.reasons == ("Moderate transaction amount (>= 10k QU)",)

    r = compute_risk(_event(amount=9_999.99), _wallet(tx_count=3, last_tick=1000))
    assert r.score == 0
    assert r.level == "LOW"
    assert r.reasons == ()


# --- Procedures ---


@pytest.mark.parametrize(
    "procedure,weight",
    [
        ("QxAddToBidOrder", 20),
        ("TransferShareOwnershipAndPossession", 30),
        ("IssueAsset", 35),
    ],
)
def test_high_risk_procedures(procedure, weight):
    r = compute_risk(_event(procedure=procedure), _wallet(tx_count=3, last_tick=1000))
    assert r.score == weight
    assert r.reasons == (f"High-risk procedure: {procedure}",)


def test_unknown_procedure_adds_five():
    r = compute_risk(_event(procedure="QxTransfer"), _wallet(tx_count=3, last_tick=1000))
    assert r.score == rules.UNKNOWN_PROCEDURE_WEIGHT == 5
    assert r.reasons == ("Unknown procedure: QxTransfer",)


def test_empty_procedure_adds_nothing():
    r = compute_risk(_event(procedure=""), _wallet(tx_count=3, last_tick=1000))
    assert r.score == 0
    assert r.reasons == ()


# --- Wallet history ---


def test_unseen_wallet_significant_amount():
    """No prior snapshot: +10 for amount >= 10k, and no history rules."""
    r = compute_risk(_event(amount=10_000, tick=5), None)
    assert r.score == 15 + 10
    assert r.reasons[-1] == "Brand new wallet with significant amount"

    r = compute_risk(_event(amount=9_999, tick=5), None)
    assert r.score == 0


def test_new_wallet_large_transaction():
    r = compute_risk(_event(amount=10_000, tick=500), _wallet(tx_count=2, last_tick=100))
    assert r.score == 15 + 20
    assert "New wallet doing large transaction" in r.reasons

    r = compute_risk(_event(amount=10_000, tick=500), _wallet(tx_count=3, last_tick=100))
    assert "New wallet doing large transaction" not in r.reasons


def test_experienced_wallet_abnormal_volume():
    r = compute_risk(_event(amount=50_000, tick=500), _wallet(tx_count=5, last_tick=100))
    assert r.score == 15 + 15
    assert r.reasons == (
        "Moderate transaction amount (>= 10k QU)",
        "Experienced wallet abnormal volume",
    )

    r = compute_risk(_event(amount=49_999, tick=500), _wallet(tx_count=5, last_tick=100))
    assert r.score == 15


def test_burst_activity_uses_absolute_tick_delta():
    assert "Burst activity detected (multiple tx in short time)" in compute_risk(
        _event(tick=103), _wallet(tx_count=3, last_tick=100)
    ).reasons
    assert compute_risk(_event(tick=97), _wallet(tx_count=3, last_tick=100)).score == 20
    assert compute_risk(_event(tick=104), _wallet(tx_count=3, last_tick=100)).score == 0


def test_burst_needs_last_tick():
    r = compute_risk(_event(tick=0), _wallet(tx_count=3, last_tick=None))
    assert r.score == 0


def test_risky_history():
    r = compute_risk(_event(tick=500), _wallet(tx_count=3, last_tick=100, avg_risk=60.0))
    assert r.score == 10
    assert r.reasons == ("Wallet already has risky history",)

    r = compute_risk(_event(tick=500), _wallet(tx_count=3, last_tick=100, avg_risk=59.99))
    assert r.score == 0


# --- Identity ---


def test_source_equals_destination():
    r = compute_risk(_event(source="W", dest="W"), _wallet(tx_count=3, last_tick=1000))
    assert r.score == 10
    assert r.reasons == ("Source and destination wallet identical",)


def test_empty_source_and_dest_are_not_identical():
    r = compute_risk(_event(source="", dest=""), None)
    assert r.score == 0


# --- Combinations ---


def test_rules_are_additive_in_order():
    """New wallet + burst fire together; reasons keep evaluation order."""
    r = compute_risk(_event(amount=20_000, tick=102), _wallet(tx_count=1, last_tick=100))
    assert r.score == 15 + 20 + 20
    assert r.level == "MEDIUM"
    assert r.reasons == (
        "Moderate transaction amount (>= 10k QU)",
        "New wallet doing large transaction",
        "Burst activity detected (multiple tx in short time)",
    )


def test_first_transaction_scenario():
    """250k QxAddToBidOrder from an unseen wallet: 30 + 20 + 10 = 60, MEDIUM."""
    r = compute_risk(
        _event(amount=250_000, procedure="QxAddToBidOrder", tick=12045),
        None,
    )
    assert r.score == 60
    assert r.level == "MEDIUM"
    assert len(r.reasons) == 3


def test_score_is_capped_at_100():
    event = _event(amount=1_500_000, procedure="IssueAsset", source="W", dest="W", tick=101)
    wallet = _wallet(tx_count=1, last_tick=100, avg_risk=90.0)
    r = compute_risk(event, wallet)
    # 45 + 35 + 20 + 20 + 10 + 10 = 140
    assert r.score == 100
    assert r.level == "CRITICAL"
    assert len(r.reasons) == 6


def test_compute_risk_is_pure_and_repeatable():
    event = _event(amount=60_000, procedure="QxAddToBidOrder", tick=12046)
    wallet = _wallet(tx_count=1, last_tick=12045, avg_risk=60.0)
    before = wallet.to_dict()
    first = compute_risk(event, wallet)
    second = compute_risk(event, wallet)
    assert first == second
    assert wallet.to_dict() == before
    # 15 + 20 + 20 (new) + 20 (burst) + 10 (history)
    assert first.score == 85
    assert first.level == "CRITICAL"


def test_compute_risk_emits_no_logs():
    from structlog.testing import capture_logs

    with capture_logs() as logs:
        compute_risk(_event(amount=250_000, procedure="QxAddToBidOrder"), None)
    assert logs == []
