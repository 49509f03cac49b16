"""
Prompt sent to the meal-plan agent.

The agent parses this text, so field order and wording are part of its
interface. Changing them breaks the agent, not just this module.
"""
from __future__ import annotations

from core.models.profile import MealTimePreferences, Profile

PREFERENCE_CLAUSE = (
    "I prefer easy-prep Indian non-veg options like eggs, chicken, paneer, fish. "
    "Minimal cooking skills."
)


def build_prompt(profile: Profile, meal_times: MealTimePreferences) -> str:
    times = ", ".join(f"{label} {time}" for label, time in meal_times.slots())
    return (
        f"Generate today's meal plan for a {profile.weight}kg male focused on {profile.goal}. "
        f"Email: {profile.email}. "
        f"Preferred meal times: {times}. "
        f"{PREFERENCE_CLAUSE}"
    )
