# services/gemini.py
from __future__ import annotations

import asyncio
import functools
import json
import logging

from google import genai
from google.genai import types

from config import settings
from scripts.helpers import extract_clean_json
from services.agent import AgentEnvelope, AgentResponse

_LOG = logging.getLogger(__name__)

# ───────────── Model Names ─────────────
CHAT_MODEL = "models/gemini-2.0-flash"

# ───────────── Output contract ─────────────
PLAN_SCHEMA_HINT = {
    "user_email": "string",
    "daily_protein_target": "number (grams)",
    "user_weight": "number (kg)",
    "meals": [
        {
            "meal_number": 1,
            "meal_name": "string",
            "timing": "8:00 AM",
            "food_items": ["string"],
            "protein_content": "number (grams)",
            "prep_instructions": "string",
            "calendar_event_created": False,
        }
    ],
    "total_protein_planned": "number (grams)",
    "summary": "string",
}

SYSTEM_INSTRUCTION = (
    "You are a sports-nutrition meal planner. Reply with ONE JSON object in a "
    "```json block matching this shape, and nothing else:\n"
    + json.dumps(PLAN_SCHEMA_HINT, indent=2)
    + "\nYou cannot create calendar events, so calendar_event_created is always false."
)


# ───────────── API Key & Client ─────────────
@functools.lru_cache(maxsize=1)
def _client() -> genai.Client:
    if not settings.gemini_api_key:
        raise RuntimeError("GEMINI_API_KEY not set in environment")
    return genai.Client(api_key=settings.gemini_api_key)


# ───────────── Generation (sync) ─────────────
def generate(
    prompt: str,
    temperature: float = 0.7,
    max_output_tokens: int = 2000,
) -> str:
    """Run a chat completion and return the LLM’s text response."""
    try:
        resp = _client().models.generate_content(
            model=CHAT_MODEL,
            contents=[prompt],
            config=types.GenerateContentConfig(
                system_instruction=SYSTEM_INSTRUCTION,
                temperature=temperature,
                max_output_tokens=max_output_tokens,
            ),
        )
        # take the first candidate’s text
        return resp.candidates[0].content.parts[0].text
    except Exception as e:
        _LOG.error("Gemini generation failed: %s", e)
        raise


# ───────────── Agent adapter ─────────────
class GeminiAgentClient:
    """Agent backend that asks Gemini directly instead of the hosted agent."""

    def __init__(self, temperature: float = 0.4) -> None:
        self._temperature = temperature

    async def call(self, message: str, agent_id: str) -> AgentEnvelope:
        _LOG.info("gemini backend handling request for agent %s", agent_id)
        text = await asyncio.to_thread(generate, message, self._temperature)

        plan = extract_clean_json(text)
        if not plan:
            return AgentEnvelope(
                success=True,
                response=AgentResponse(status="error", message="Agent returned no meal plan"),
            )
        return AgentEnvelope(
            success=True,
            response=AgentResponse(status="success", result=plan),
        )
