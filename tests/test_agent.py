from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from services.agent import AgentTransportError, HttpAgentClient, normalize_envelope

from conftest import SHRED_PLAN

URL = "http://agent.test/api/agent"


# ── envelope normalisation ──────────────────────────────────────────
def test_normalize_canonical_envelope():
    env = normalize_envelope(
        {"success": True, "response": {"status": "success", "result": SHRED_PLAN}}
    )
    assert env.success
    assert env.response.status == "success"
    assert env.response.result == SHRED_PLAN


def test_normalize_result_as_json_text():
    env = normalize_envelope(
        {"success": True, "response": {"status": "success", "result": json.dumps(SHRED_PLAN)}}
    )
    assert env.response.result == SHRED_PLAN


def test_normalize_fenced_text_response():
    text = "Here you go:\n```json\n" + json.dumps(SHRED_PLAN) + "\n```"
    env = normalize_envelope({"success": True, "response": text})
    assert env.response.status == "success"
    assert env.response.result["summary"] == SHRED_PLAN["summary"]


def test_normalize_plain_text_is_error_with_message():
    env = normalize_envelope({"success": True, "response": "I could not do that"})
    assert env.response.status == "error"
    assert env.response.message == "I could not do that"


def test_normalize_missing_status_is_inferred():
    env = normalize_envelope({"response": {"result": SHRED_PLAN}})
    assert env.success and env.response.status == "success"

    env = normalize_envelope({"success": False, "response": {"message": "quota"}})
    assert env.response.status == "error"
    assert env.response.message == "quota"


@pytest.mark.parametrize("raw", [None, [], "text", 3])
def test_normalize_non_object_body(raw):
    env = normalize_envelope(raw)
    assert not env.success
    assert env.response.result is None


# ── HTTP client ──────────────────────────────────────────────────────
def _client(handler) -> HttpAgentClient:
    return HttpAgentClient(
        url=URL, api_key="k-1", timeout=5, transport=httpx.MockTransport(handler)
    )


def test_http_client_posts_message_and_agent_id():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        seen["key"] = request.headers.get("x-api-key")
        return httpx.Response(
            200, json={"success": True, "response": {"status": "success", "result": SHRED_PLAN}}
        )

    env = asyncio.run(_client(handler).call("hello", "agent-1"))
    assert seen["body"] == {"message": "hello", "agent_id": "agent-1"}
    assert seen["key"] == "k-1"
    assert env.response.result == SHRED_PLAN


def test_http_client_non_2xx_raises_transport_error():
    client = _client(lambda request: httpx.Response(503, text="down"))
    with pytest.raises(AgentTransportError):
        asyncio.run(client.call("hello", "agent-1"))


def test_http_client_non_json_raises_transport_error():
    client = _client(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(AgentTransportError):
        asyncio.run(client.call("hello", "agent-1"))


def test_http_client_connection_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(AgentTransportError):
        asyncio.run(_client(handler).call("hello", "agent-1"))


@pytest.mark.parametrize("flag", ["false", "true", 1, None])
def test_normalize_success_must_be_json_true(flag):
    env = normalize_envelope(
        {"success": flag, "response": {"status": "success", "result": SHRED_PLAN}}
    )
    assert env.success is False
