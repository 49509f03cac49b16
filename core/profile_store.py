from __future__ import annotations

import logging

from core.models.profile import MealTimePreferences, Profile

_LOG = logging.getLogger(__name__)


class ProfileStore:
    """
    Session-scoped holder of the user profile and meal-time preferences.

    The profile is only ever swapped as a whole; there are no per-field
    setters. Validation happens in the orchestrator when a plan is requested.
    """

    def __init__(
        self,
        profile: Profile | None = None,
        meal_times: MealTimePreferences | None = None,
    ) -> None:
        self._profile = profile or Profile()
        self._meal_times = meal_times or MealTimePreferences()

    def get_profile(self) -> Profile:
        return self._profile

    def replace_profile(self, next_profile: Profile) -> None:
        self._profile = next_profile
        _LOG.debug("profile replaced (weight=%s, goal=%r)", next_profile.weight, next_profile.goal)

    @property
    def meal_times(self) -> MealTimePreferences:
        return self._meal_times
