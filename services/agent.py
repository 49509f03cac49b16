"""
services/agent.py
────────────────────────────────────────────────────────────────────────
Boundary to the external meal-plan agent.

One operation: send (message, agent_id), get back an AgentEnvelope

    { success: bool,
      response: { status: str, message?: str, result?: <plan payload> } }

Agents answer in several loose shapes (plan as a nested dict, as JSON
text, as a fenced ```json block, status missing …); `normalize_envelope`
folds them into the envelope above. Whatever is inside `result` is *not*
validated here – that is the orchestrator's job.
"""
from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx
from pydantic import BaseModel, ConfigDict

from config import settings
from scripts.helpers import extract_clean_json

_LOG = logging.getLogger(__name__)


class AgentTransportError(Exception):
    """The agent could not be reached or answered with something that is not a JSON envelope."""


class AgentResponse(BaseModel):
    status: str = "error"
    message: str | None = None
    result: dict[str, Any] | None = None

    model_config = ConfigDict(extra="ignore")


class AgentEnvelope(BaseModel):
    success: bool
    response: AgentResponse

    model_config = ConfigDict(extra="ignore")


class AgentClient(Protocol):
    async def call(self, message: str, agent_id: str) -> AgentEnvelope: ...


# ───────────── normalisation ─────────────
def _as_result(value: Any) -> dict[str, Any] | None:
    if isinstance(value, dict):
        return value
    if isinstance(value, str):
        return extract_clean_json(value) or None
    return None


def normalize_envelope(raw: Any) -> AgentEnvelope:
    """Fold a raw agent body into an AgentEnvelope."""
    if not isinstance(raw, dict):
        return AgentEnvelope(
            success=False,
            response=AgentResponse(status="error", message=None),
        )

    # only a real JSON true counts; "false" strings must not pass
    success = raw.get("success", True) is True
    body = raw.get("response", raw)

    if isinstance(body, str):
        # bare text reply: either JSON plan text or a plain message
        result = _as_result(body)
        body = {"result": result} if result else {"status": "error", "message": body}
    elif not isinstance(body, dict):
        body = {}

    result = _as_result(body.get("result"))
    status = body.get("status")
    if not isinstance(status, str):
        status = "success" if success and result is not None else "error"

    message = body.get("message")
    if message is not None and not isinstance(message, str):
        message = str(message)

    return AgentEnvelope(
        success=success,
        response=AgentResponse(status=status, message=message or None, result=result),
    )


# ───────────── HTTP agent ─────────────
class HttpAgentClient:
    """POSTs the prompt to the hosted agent endpoint."""

    def __init__(
        self,
        url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url or settings.agent_api_url
        self._api_key = api_key if api_key is not None else settings.agent_api_key
        self._timeout = timeout or settings.agent_timeout_s
        self._transport = transport

    async def call(self, message: str, agent_id: str) -> AgentEnvelope:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["x-api-key"] = self._api_key

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                resp = await client.post(
                    self._url,
                    json={"message": message, "agent_id": agent_id},
                    headers=headers,
                )
                resp.raise_for_status()
                raw = resp.json()
        except httpx.HTTPError as e:
            raise AgentTransportError(f"agent call failed: {e}") from e
        except ValueError as e:
            raise AgentTransportError("agent returned a non-JSON body") from e

        return normalize_envelope(raw)


def build_agent_client() -> AgentClient:
    """Client for the backend named by AGENT_BACKEND."""
    if settings.agent_backend == "gemini":
        from services.gemini import GeminiAgentClient

        return GeminiAgentClient()
    return HttpAgentClient()
