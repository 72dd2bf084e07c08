"""
Qubic risk analytics.

Rule-based scoring of single transactions. Modules: risk_rules (weights),
risk_engine (compute_risk, risk_level_from_score).
"""

from backend_qubic.analytics.risk_engine import (
    RiskAssessment,
    compute_risk,
    risk_level_from_score,
)

__all__ = [
    "RiskAssessment",
    "compute_risk",
    "risk_level_from_score",
]
