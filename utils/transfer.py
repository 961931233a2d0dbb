"""JSON export and import of the whole schedule mapping."""

from __future__ import annotations

import json
import math
from typing import Any, Dict, Mapping

from .scheduler import MAX_INTERVAL_MS, MIN_EF, ReviewState

# Largest value an SQLite INTEGER column holds.
MAX_STORED_INT = 2**63 - 1


class ImportRejected(ValueError):
    """Raised when an uploaded progress document cannot replace the schedule."""


def state_to_dict(state: ReviewState) -> Dict[str, Any]:
    return {
        "ef": state.ef,
        "reps": state.reps,
        "interval": state.interval,
        "due": state.due,
        "lapses": state.lapses,
        "isLeech": state.is_leech,
    }


def _number(value: Any, field: str, card_id: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ImportRejected(f"{card_id}: '{field}' must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise ImportRejected(f"{card_id}: '{field}' must be a number")
    return value


def _count(value: Any, field: str, card_id: str, upper: int = MAX_STORED_INT) -> int:
    number = int(_number(value, field, card_id))
    if not 0 <= number <= upper:
        raise ImportRejected(f"{card_id}: '{field}' must be between 0 and {upper}")
    return number


def state_from_dict(card_id: str, data: Any) -> ReviewState:
    """Build a ReviewState from an exported entry, rejecting malformed ones."""
    if not isinstance(data, dict):
        raise ImportRejected(f"{card_id}: entry must be an object")
    missing = [field for field in ("ef", "reps", "interval", "due") if field not in data]
    if missing:
        raise ImportRejected(f"{card_id}: missing {', '.join(missing)}")
    is_leech = data.get("isLeech", data.get("is_leech", False))
    if not isinstance(is_leech, bool):
        raise ImportRejected(f"{card_id}: 'isLeech' must be true or false")
    try:
        ef = float(_number(data["ef"], "ef", card_id))
    except OverflowError as exc:
        raise ImportRejected(f"{card_id}: 'ef' is too large") from exc
    if ef < MIN_EF:
        raise ImportRejected(f"{card_id}: 'ef' must be at least {MIN_EF}")
    return ReviewState(
        ef=ef,
        reps=_count(data["reps"], "reps", card_id),
        interval=_count(data["interval"], "interval", card_id, MAX_INTERVAL_MS),
        due=_count(data["due"], "due", card_id),
        lapses=_count(data.get("lapses", 0), "lapses", card_id),
        is_leech=is_leech,
    )


def export_schedules(schedules: Mapping[str, ReviewState]) -> str:
    payload = {card_id: state_to_dict(state) for card_id, state in schedules.items()}
    return json.dumps(payload, indent=2, ensure_ascii=False)


def parse_import(text: str | bytes) -> Dict[str, ReviewState]:
    """Parse an exported document into a full schedule mapping."""
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ImportRejected("Invalid file: not valid JSON") from exc
    if not isinstance(data, dict):
        raise ImportRejected("Invalid file: expected an object keyed by card")
    return {str(card_id): state_from_dict(str(card_id), entry) for card_id, entry in data.items()}
