"""
core/orchestrator.py
────────────────────────────────────────────────────────────────────────
Request lifecycle for one session:

    Idle ─▶ Loading ─▶ Success | Error
              ▲              │
              └── generate ──┘   (previous result/error dropped)

* At most one agent call is in flight; `generate()` while Loading is a no-op.
* Each dispatch carries a sequence number. A completion whose number is no
  longer current (see `discard_pending`) is dropped, never applied.
* Every failure ends in `Error(message)`; nothing is raised to the caller.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Callable

from pydantic import ValidationError as PydanticValidationError

from core.errors import AgentReportedError, GenerationError, TransportError, ValidationError
from core.models.meal import MealPlanResult
from core.models.state import IDLE, LOADING, Error, GenerationState, Loading, Success
from core.profile_store import ProfileStore
from core.prompt import build_prompt
from services.agent import AgentClient, AgentEnvelope

_LOG = logging.getLogger(__name__)

Listener = Callable[[GenerationState], None]


def normalize_response(envelope: AgentEnvelope) -> MealPlanResult:
    """Envelope ➜ MealPlanResult, or AgentReportedError with the text to show."""
    resp = envelope.response
    if not envelope.success or resp.status != "success" or resp.result is None:
        raise AgentReportedError(resp.message)
    try:
        return MealPlanResult.model_validate(resp.result)
    except PydanticValidationError as exc:
        _LOG.warning("malformed plan payload: %s", exc.errors(include_url=False))
        raise AgentReportedError(resp.message) from exc


class GenerationOrchestrator:
    def __init__(
        self,
        store: ProfileStore,
        agent: AgentClient,
        agent_id: str,
    ) -> None:
        self._store = store
        self._agent = agent
        self._agent_id = agent_id

        self._state: GenerationState = IDLE
        self._seq = 0                      # last dispatched request
        self._task: asyncio.Task[None] | None = None
        self._listeners: list[Listener] = []

    # ─────────────────────────────── read side ─────────────────────── #
    @property
    def state(self) -> GenerationState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # ─────────────────────────────── write side ────────────────────── #
    def trigger(self) -> asyncio.Task[None] | None:
        """
        Start a generation without waiting for it.

        Returns the pending task, or None when nothing was dispatched
        (already loading, an abandoned call still running, or the profile
        failed validation).
        Must be called from within a running event loop.
        """
        if self.is_loading:
            _LOG.debug("generate ignored: request #%d still in flight", self._seq)
            return None
        if self._task is not None and not self._task.done():
            # an abandoned call has not returned yet; one agent call at a time
            _LOG.info("generate ignored: abandoned request still running")
            return None

        profile = self._store.get_profile()
        if not profile.has_valid_email:
            self._fail(ValidationError())
            return None

        prompt = build_prompt(profile, self._store.meal_times)
        self._seq += 1
        seq = self._seq
        self._publish(LOADING)
        _LOG.info("dispatching request #%d to agent %s", seq, self._agent_id)

        self._task = asyncio.create_task(self._dispatch(seq, prompt))
        return self._task

    async def generate(self) -> GenerationState:
        """Run one generation to completion and return the resulting state."""
        task = self.trigger()
        if task is not None:
            # cancelling the caller must not cancel the request
            await asyncio.shield(task)
        return self._state

    def discard_pending(self) -> None:
        """
        Forget the in-flight request (session torn down, view gone).

        The agent call keeps running; its completion will be dropped and
        no new request is dispatched until it has returned.
        """
        if not self.is_loading:
            return
        _LOG.info("request #%d abandoned", self._seq)
        self._seq += 1
        self._publish(IDLE)

    # ─────────────────────────────── internals ─────────────────────── #
    async def _dispatch(self, seq: int, prompt: str) -> None:
        outcome: Success | GenerationError
        try:
            envelope = await self._agent.call(prompt, self._agent_id)
        except asyncio.CancelledError:
            _LOG.warning("agent call #%d cancelled", seq)
            if seq == self._seq:
                self._fail(TransportError())
            raise
        except Exception:
            _LOG.exception("agent call #%d failed", seq)
            outcome = TransportError()
        else:
            try:
                outcome = Success(normalize_response(envelope))
            except AgentReportedError as exc:
                outcome = exc

        if seq != self._seq:
            _LOG.info(
                "dropping stale completion of request #%d (current #%d): %s",
                seq, self._seq, type(outcome).__name__,
            )
            return

        if isinstance(outcome, GenerationError):
            self._fail(outcome)
        else:
            _LOG.info("request #%d succeeded with %d meals", seq, len(outcome.result.meals))
            self._publish(outcome)

    def _fail(self, exc: GenerationError) -> None:
        _LOG.info("generation failed (%s): %s", type(exc).__name__, exc.message)
        self._publish(Error(exc.message))

    def _publish(self, state: GenerationState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                _LOG.exception("state listener %r failed", listener)
