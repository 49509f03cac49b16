from __future__ import annotations

import asyncio
from typing import Any

import pytest

from services.agent import AgentEnvelope

SHRED_PLAN: dict[str, Any] = {
    "user_email": "a@b.com",
    "daily_protein_target": 134,
    "user_weight": 67,
    "meals": [
        {
            "meal_number": 1,
            "meal_name": "Masala Omelette",
            "timing": "8:00 AM",
            "food_items": ["3 eggs", "1 onion", "2 slices toast"],
            "protein_content": 30,
            "prep_instructions": "Whisk eggs with onion, cook 3 min.",
            "calendar_event_created": True,
        },
        {
            "meal_number": 2,
            "meal_name": "Chicken Rice Bowl",
            "timing": "1:00 PM",
            "food_items": ["150g chicken breast", "1 cup rice"],
            "protein_content": 45,
            "prep_instructions": "Pan-sear chicken, serve on rice.",
            "calendar_event_created": True,
        },
        {
            "meal_number": 3,
            "meal_name": "Paneer Bhurji",
            "timing": "8:00 PM",
            "food_items": ["150g paneer", "2 rotis"],
            "protein_content": 40,
            "prep_instructions": "Crumble paneer into spiced onions.",
            "calendar_event_created": False,
        },
    ],
    "total_protein_planned": 120,
    "summary": "High-protein Indian day plan.",
}


def success_envelope(plan: dict[str, Any] | None = None) -> AgentEnvelope:
    return AgentEnvelope.model_validate(
        {"success": True, "response": {"status": "success", "result": plan or SHRED_PLAN}}
    )


class FakeAgent:
    """Records calls; answers with `envelope`, raises `exc`, or waits on `gate` first."""

    def __init__(
        self,
        envelope: AgentEnvelope | None = None,
        exc: Exception | None = None,
        gated: bool = False,
    ) -> None:
        self.envelope = envelope or success_envelope()
        self.exc = exc
        self.gated = gated
        self.gate: asyncio.Event | None = None
        self.calls: list[tuple[str, str]] = []

    async def call(self, message: str, agent_id: str) -> AgentEnvelope:
        self.calls.append((message, agent_id))
        if self.gated:
            if self.gate is None:
                self.gate = asyncio.Event()
            await self.gate.wait()
        if self.exc is not None:
            raise self.exc
        return self.envelope


@pytest.fixture
def fake_agent() -> FakeAgent:
    return FakeAgent()
