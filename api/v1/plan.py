# api/v1/plan.py
from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, Query, status

from api.v1.deps import get_session
from api.v1.schemas import CalendarOut, MealPeriodOut, PlanStateOut, ProgressOut, TriggerOut
from config import settings
from core.metrics import (
    calendar_confirmation,
    displayed_protein_target,
    meal_period,
    progress_for,
)
from core.models.state import Error, GenerationState, Success
from services.sessions import Session

router = APIRouter()


def render_state(state: GenerationState) -> PlanStateOut:
    """State + every derived metric the plan screen shows."""
    default_target = settings.default_protein_target
    progress = progress_for(state, default_target)
    calendar = calendar_confirmation(state)

    result = state.result if isinstance(state, Success) else None
    return PlanStateOut(
        status=state.status,
        message=state.message if isinstance(state, Error) else None,
        result=result,
        progress=ProgressOut(
            current=progress.current,
            target=progress.target,
            percentage=progress.percentage,
            display=progress.display,
            complete=progress.complete,
        ),
        displayed_target=displayed_protein_target(state, default_target),
        calendar=(
            CalendarOut(email=calendar.email, events_created=calendar.events_created)
            if calendar else None
        ),
        meal_periods=[
            MealPeriodOut(meal_number=m.meal_number, period=meal_period(m.timing))
            for m in (result.meals if result else [])
        ],
    )


# ───────────────────────── trigger ──────────────────────────
@router.post(
    "/{session_id}/plan",
    response_model=TriggerOut,
    status_code=status.HTTP_202_ACCEPTED,
)
async def generate_plan(
    session: Session = Depends(get_session),
    wait: bool = Query(False, description="block until the agent has answered"),
) -> TriggerOut:
    orch = session.orchestrator
    task = orch.trigger()
    if task is not None and wait:
        await asyncio.shield(task)

    state = orch.state
    return TriggerOut(
        dispatched=task is not None,
        status=state.status,
        message=state.message if isinstance(state, Error) else None,
    )


# ───────────────────────── read ─────────────────────────────
@router.get("/{session_id}/plan", response_model=PlanStateOut)
async def get_plan(session: Session = Depends(get_session)) -> PlanStateOut:
    return render_state(session.orchestrator.state)
