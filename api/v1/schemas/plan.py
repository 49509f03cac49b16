from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from core.metrics import MealPeriod
from core.models.meal import MealPlanResult

Status = Literal["idle", "loading", "success", "error"]


class ProgressOut(BaseModel):
    current: float
    target: float
    percentage: float
    display: int          # rounded, for the “90%” label
    complete: bool


class CalendarOut(BaseModel):
    email: str
    events_created: int


class MealPeriodOut(BaseModel):
    meal_number: int
    period: MealPeriod


class PlanStateOut(BaseModel):
    status: Status
    message: str | None = None
    result: MealPlanResult | None = None
    progress: ProgressOut
    displayed_target: float
    calendar: CalendarOut | None = None
    meal_periods: list[MealPeriodOut] = []


class TriggerOut(BaseModel):
    dispatched: bool
    status: Status
    message: str | None = None
