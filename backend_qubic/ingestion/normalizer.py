"""
Transaction normalizer — raw pipeline event to NormalizedEvent.

The automation pipeline sends either {"data": {...}} or the fields flat at the
top level. Every field is optional and has an explicit default:

- amount: number or numeric string -> float; missing, null, non-numeric,
  non-finite or negative -> 0.0. Numeric strings follow the dashboard's
  Number() grammar: decimal with optional sign and exponent, or an unsigned
  0x / 0o / 0b integer; digit separators such as "_" are not numbers
- tick: same parsing, truncated to int; unusable -> 0
- source, dest, procedure: strings kept verbatim; numbers -> str(number);
  missing, null or anything else -> ""

Booleans are never treated as numbers. Each coercion is logged at debug level.
"""

from __future__ import annotations

import math
import re
from typing import Any

from backend_qubic.core.exceptions import InvalidTransactionPayload
from backend_qubic.ingestion.models import NormalizedEvent
from backend_qubic.qubic_logging import get_logger

logger = get_logger(__name__)

_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_PREFIXED_INT_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def extract_event(body: Any) -> dict[str, Any]:
    """
    Return the event object from a request body.

    Uses body["data"] when it is an object, otherwise the body itself.

    Raises:
        InvalidTransactionPayload: body is not a JSON object.
    """
    if not isinstance(body, dict):
        raise InvalidTransactionPayload(detail=f"body must be a JSON object, got {type(body).__name__}")
    data = body.get("data")
    if isinstance(data, dict):
        return data
    return body


def _parse_number(value: Any) -> float | None:
    """Finite float from an int, float or Number()-style numeric string; None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        try:
            if _DECIMAL_RE.fullmatch(text):
                number = float(text)
            elif _PREFIXED_INT_RE.fullmatch(text):
                number = float(int(text, 0))
            else:
                return None
        except OverflowError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def normalize_amount(value: Any) -> float:
    number = _parse_number(value)
    if number is None or number < 0:
        if value is not None:
            logger.debug("transaction_field_coerced", field="amount", raw=repr(value)[:64], value=0.0)
        return 0.0
    return number


def normalize_tick(value: Any) -> int:
    number = _parse_number(value)
    if number is None:
        if value is not None:
            logger.debug("transaction_field_coerced", field="tick", raw=repr(value)[:64], value=0)
        return 0
    tick = int(number)
    if tick != number:
        logger.debug("transaction_field_coerced", field="tick", raw=repr(value)[:64], value=tick)
    return tick


def normalize_text(field_name: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if value is not None:
        logger.debug("transaction_field_coerced", field=field_name, raw=repr(value)[:64], value="")
    return ""


def normalize_event(raw: dict[str, Any]) -> NormalizedEvent:
    """Apply the field rules to one event object. Never fails for a dict input."""
    return NormalizedEvent(
        amount=normalize_amount(raw.get("amount")),
        source=normalize_text("source", raw.get("source")),
        dest=normalize_text("dest", raw.get("dest")),
        tick=normalize_tick(raw.get("tick")),
        procedure=normalize_text("procedure", raw.get("procedure")),
    )


def normalize_body(body: Any) -> NormalizedEvent:
    """extract_event + normalize_event."""
    return normalize_event(extract_event(body))
