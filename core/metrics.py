"""
core/metrics.py
────────────────────────────────────────────────────────────────────────
Display metrics derived from the current GenerationState.

Nothing here is stored; every value is recomputed from the state the
caller passes in:

1. Protein progress  (percentage of the daily target, clamped at 100)
2. Meal period       (morning / midday / afternoon / evening bucket)
3. Small view helpers for the plan screen (target shown, calendar banner,
   period grouping)
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from core.models.meal import MealItem
from core.models.state import GenerationState, Success

DEFAULT_PROTEIN_TARGET = 134.0  # g

_HOUR_RE = re.compile(r"^\s*(\d{1,2})")
_MERIDIEM_RE = re.compile(r"(?<![a-z])([ap])\.?\s?m(?![a-z])", re.IGNORECASE)


# ──────────────────────────────────────────────────────────────────────
#  Protein progress
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ProteinProgress:
    current: float
    target: float
    percentage: float
    display: int
    complete: bool


def protein_progress(current: float | None, target: float | None) -> float:
    """min(current / target * 100, 100); zero or missing target → 0."""
    if not target or target <= 0 or math.isnan(target):
        return 0.0
    cur = current or 0.0
    if math.isnan(cur) or cur <= 0:
        return 0.0
    return min(cur / target * 100, 100.0)


def display_percent(pct: float) -> int:
    # half-up, 89.55 → 90
    return int(math.floor(pct + 0.5))


def progress_for(
    state: GenerationState, default_target: float = DEFAULT_PROTEIN_TARGET
) -> ProteinProgress:
    if isinstance(state, Success):
        current = state.result.total_protein_planned
        target = state.result.daily_protein_target
    else:
        current, target = 0.0, default_target

    pct = protein_progress(current, target)
    return ProteinProgress(
        current=current,
        target=target,
        percentage=pct,
        display=display_percent(pct),
        complete=target > 0 and current >= target,
    )


def displayed_protein_target(
    state: GenerationState, default_target: float = DEFAULT_PROTEIN_TARGET
) -> float:
    if isinstance(state, Success) and state.result.daily_protein_target:
        return state.result.daily_protein_target
    return default_target


# ──────────────────────────────────────────────────────────────────────
#  Meal period
# ──────────────────────────────────────────────────────────────────────
class MealPeriod(str, Enum):
    morning = "morning"
    midday = "midday"
    afternoon = "afternoon"
    evening = "evening"

    @property
    def order(self) -> int:
        return _PERIOD_ORDER.index(self)


_PERIOD_ORDER = (
    MealPeriod.morning,
    MealPeriod.midday,
    MealPeriod.afternoon,
    MealPeriod.evening,
)


def _hour_of(timing: str) -> int | None:
    """24-hour clock hour of the leading token, or None when unparseable."""
    head = timing.split(":", 1)[0]
    m = _HOUR_RE.match(head)
    if not m:
        return None
    hour = int(m.group(1))

    mer = _MERIDIEM_RE.search(timing)
    # a marker on a 24-hour hour ("15:00 pm") is ignored
    if mer and 1 <= hour <= 12:
        pm = mer.group(1).lower() == "p"
        if pm and hour != 12:
            hour += 12
        elif not pm and hour == 12:
            hour = 0
    return hour if 0 <= hour <= 23 else None


def meal_period(timing: str | None) -> MealPeriod:
    hour = _hour_of(timing or "")
    if hour is None:
        return MealPeriod.evening
    if 6 <= hour < 11:
        return MealPeriod.morning
    if 11 <= hour < 14:
        return MealPeriod.midday
    if 14 <= hour < 18:
        return MealPeriod.afternoon
    return MealPeriod.evening


def period_groups(meals: Iterable[MealItem]) -> dict[MealPeriod, list[MealItem]]:
    """Bucket meals by period; agent order is kept inside each bucket."""
    groups: dict[MealPeriod, list[MealItem]] = {p: [] for p in _PERIOD_ORDER}
    for meal in meals:
        groups[meal_period(meal.timing)].append(meal)
    return groups


# ──────────────────────────────────────────────────────────────────────
#  Calendar banner
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class CalendarConfirmation:
    email: str
    events_created: int


def calendar_confirmation(state: GenerationState) -> CalendarConfirmation | None:
    if not isinstance(state, Success) or not state.result.user_email:
        return None
    created = sum(1 for m in state.result.meals if m.calendar_event_created)
    return CalendarConfirmation(email=state.result.user_email, events_created=created)
