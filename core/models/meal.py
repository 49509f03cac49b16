from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, PositiveFloat, field_validator


class MealItem(BaseModel):
    meal_number: int = Field(..., ge=1)
    meal_name: str
    timing: str                    # free-form, e.g. "8:00 AM"
    food_items: list[str] = []
    protein_content: NonNegativeFloat
    prep_instructions: str = ""
    calendar_event_created: bool = False

    model_config = ConfigDict(extra="ignore", frozen=True)


class MealPlanResult(BaseModel):
    """
    Plan as reported by the agent.

    `total_protein_planned` is taken verbatim from the agent and is *not*
    reconciled with the sum of `meals[*].protein_content`.
    """

    user_email: str
    daily_protein_target: PositiveFloat
    user_weight: float
    meals: list[MealItem]
    total_protein_planned: NonNegativeFloat
    summary: str = ""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("meals")
    @classmethod
    def _unique_ordinals(cls, meals: list[MealItem]) -> list[MealItem]:
        seen = [m.meal_number for m in meals]
        if len(seen) != len(set(seen)):
            raise ValueError("duplicate meal_number in plan")
        return meals

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
