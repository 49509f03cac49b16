"""
GenerationState – tagged variant over the request lifecycle.

Exactly one of ``Idle | Loading | Success | Error`` is held by the
orchestrator at any time; a result and an error message can never coexist.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from core.models.meal import MealPlanResult


@dataclass(frozen=True)
class Idle:
    status: ClassVar[str] = "idle"


@dataclass(frozen=True)
class Loading:
    status: ClassVar[str] = "loading"


@dataclass(frozen=True)
class Success:
    result: MealPlanResult
    status: ClassVar[str] = "success"


@dataclass(frozen=True)
class Error:
    message: str
    status: ClassVar[str] = "error"


GenerationState = Union[Idle, Loading, Success, Error]

IDLE = Idle()
LOADING = Loading()
