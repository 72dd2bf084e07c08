"""
Data model for a normalized incoming event (before id, time and risk are assigned).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NormalizedEvent:
    """Typed transaction fields after normalization. Every field has a concrete value."""

    amount: float = 0.0
    source: str = ""
    dest: str = ""
    tick: int = 0
    procedure: str = ""
