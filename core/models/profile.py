from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, ConfigDict, PositiveInt


class Profile(BaseModel):
    """User profile owned by the session's ProfileStore."""

    height: str = "5'7\""          # free text, e.g. 5'7"
    weight: PositiveInt = 67       # kg
    goal: str = "Shred + Muscle gain"
    email: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def has_valid_email(self) -> bool:
        return bool(self.email) and "@" in self.email


class MealTimePreferences(BaseModel):
    breakfast: str = "8:00 AM"
    mid_morning: str = "11:00 AM"
    lunch: str = "1:00 PM"
    evening: str = "5:00 PM"
    dinner: str = "8:00 PM"

    model_config = ConfigDict(frozen=True)

    def slots(self) -> Iterator[tuple[str, str]]:
        """(label, time) pairs in fixed slot order."""
        yield "Breakfast", self.breakfast
        yield "Mid-morning", self.mid_morning
        yield "Lunch", self.lunch
        yield "Evening", self.evening
        yield "Dinner", self.dinner
