"""SM-2 style spaced-repetition scheduling with four grades."""

import math
import time
from dataclasses import dataclass, replace
from datetime import datetime
from enum import IntEnum
from typing import Mapping, Optional, Union

MINUTE_MS = 60 * 1000
DAY_MS = 24 * 60 * MINUTE_MS
MIN_EF = 1.3
DEFAULT_EF = 2.5
MAX_INTERVAL_MS = 180 * DAY_MS
AGAIN_INTERVAL_MS = MINUTE_MS
HARD_NEW_INTERVAL_MS = 5 * MINUTE_MS
LEECH_LAPSES = 8


class InvalidArgument(ValueError):
    """Raised when a grade outside Again/Hard/Good/Easy is supplied."""


class Grade(IntEnum):
    AGAIN = 1
    HARD = 2
    GOOD = 3
    EASY = 4


@dataclass(frozen=True)
class ReviewState:
    """Persisted scheduling data for one card. Times are epoch milliseconds."""

    ef: float
    reps: int
    interval: int
    due: int
    lapses: int = 0
    is_leech: bool = False

    def is_due(self, now: Optional[int] = None) -> bool:
        return self.due <= (now_ms() if now is None else now)


def now_ms() -> int:
    return int(time.time() * 1000)


def _round(value: float) -> int:
    # Half-up, matching the rounding used by existing exported schedules.
    return int(math.floor(value + 0.5))


def create_default(now: Optional[int] = None) -> ReviewState:
    return ReviewState(
        ef=DEFAULT_EF,
        reps=0,
        interval=0,
        due=now_ms() if now is None else now,
        lapses=0,
    )


def coerce_grade(value: Union[Grade, int, str]) -> Grade:
    """Accept a Grade, its number (1-4) or its name ('good', 'Easy')."""
    if isinstance(value, Grade):
        return value
    if isinstance(value, bool):
        raise InvalidArgument(f"Unknown grade: {value!r}")
    if isinstance(value, int):
        try:
            return Grade(value)
        except ValueError as exc:
            raise InvalidArgument(f"Unknown grade: {value!r}") from exc
    if isinstance(value, str):
        key = value.strip().upper()
        if key.isdigit():
            return coerce_grade(int(key))
        try:
            return Grade[key]
        except KeyError as exc:
            raise InvalidArgument(f"Unknown grade: {value!r}") from exc
    raise InvalidArgument(f"Unknown grade: {value!r}")


def grade_card(
    state: Optional[ReviewState],
    grade: Union[Grade, int, str],
    now: Optional[int] = None,
) -> ReviewState:
    """Apply one grading event and return the new state with its due time."""
    grade = coerce_grade(grade)
    now = now_ms() if now is None else now
    if state is None:
        state = create_default(now)

    ef = state.ef
    reps = state.reps
    interval = state.interval
    lapses = state.lapses
    is_leech = state.is_leech

    if grade is Grade.AGAIN:
        reps = 0
        interval = AGAIN_INTERVAL_MS
        ef = max(MIN_EF, ef - 0.3)
        lapses += 1
        if lapses >= LEECH_LAPSES:
            is_leech = True
    elif grade is Grade.HARD:
        ef = max(MIN_EF, ef - 0.15)
        if reps == 0:
            interval = HARD_NEW_INTERVAL_MS
        else:
            interval = min(MAX_INTERVAL_MS, max(DAY_MS, _round(interval * 1.2)))
    elif grade is Grade.GOOD:
        if reps == 0:
            reps = 1
            interval = DAY_MS
        elif reps == 1:
            reps = 2
            interval = 6 * DAY_MS
        else:
            reps += 1
            interval = min(MAX_INTERVAL_MS, _round(interval * ef))
    else:
        ef += 0.15
        if reps == 0:
            reps = 2
            interval = 4 * DAY_MS
        else:
            reps += 1
            interval = min(MAX_INTERVAL_MS, _round(interval * (ef + 0.3)))

    return replace(
        state,
        ef=ef,
        reps=reps,
        interval=interval,
        due=now + interval,
        lapses=lapses,
        is_leech=is_leech,
    )


def is_new(schedules: Mapping[str, ReviewState], card_id: str) -> bool:
    return card_id not in schedules


def is_due(schedules: Mapping[str, ReviewState], card_id: str, now: Optional[int] = None) -> bool:
    state = schedules.get(card_id)
    return state is not None and state.is_due(now)


def format_due(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp / 1000).strftime("%Y-%m-%d %H:%M")


def describe(state: Optional[ReviewState]) -> str:
    """One-line hint shown above a card."""
    if state is None or state.reps == 0:
        return "New card"
    text = f"Due {format_due(state.due)} · EF {state.ef:.2f} · Streak {state.reps}"
    if state.is_leech:
        text += " · Difficult card"
    return text
