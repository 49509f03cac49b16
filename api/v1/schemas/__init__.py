"""Re-export individual schema modules for easy imports."""

from .plan import CalendarOut, MealPeriodOut, PlanStateOut, ProgressOut, TriggerOut
from .session import SessionOut

__all__ = [
    "CalendarOut",
    "MealPeriodOut",
    "PlanStateOut",
    "ProgressOut",
    "TriggerOut",
    "SessionOut",
]
