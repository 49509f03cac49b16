from __future__ import annotations

from fastapi import APIRouter, Depends, status

from api.v1.deps import get_session
from core.models.profile import MealTimePreferences, Profile
from services.sessions import Session

router = APIRouter()


# ───────────────────────── read ─────────────────────────────
@router.get("/{session_id}/profile", response_model=Profile)
async def get_profile(session: Session = Depends(get_session)) -> Profile:
    return session.store.get_profile()


# ───────────────────────── replace ──────────────────────────
@router.put(
    "/{session_id}/profile",
    response_model=Profile,
    status_code=status.HTTP_200_OK,
)
async def replace_profile(
    body: Profile,
    session: Session = Depends(get_session),
) -> Profile:
    # whole-object replace; a displayed plan stays until the next generate
    session.store.replace_profile(body)
    return session.store.get_profile()


@router.get("/{session_id}/meal-times", response_model=MealTimePreferences)
async def get_meal_times(session: Session = Depends(get_session)) -> MealTimePreferences:
    return session.store.meal_times
