"""
In-memory session registry.

A session bundles one ProfileStore with its GenerationOrchestrator. Nothing
is persisted; closing a session (or restarting the process) forgets it.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Callable

from core.orchestrator import GenerationOrchestrator
from core.profile_store import ProfileStore
from services.agent import AgentClient

_LOG = logging.getLogger(__name__)


@dataclass
class Session:
    id: str
    store: ProfileStore
    orchestrator: GenerationOrchestrator


class SessionRegistry:
    def __init__(self, agent_factory: Callable[[], AgentClient], agent_id: str) -> None:
        self._agent_factory = agent_factory
        self._agent_id = agent_id
        self._sessions: dict[str, Session] = {}

    def create(self) -> Session:
        store = ProfileStore()
        orch = GenerationOrchestrator(store, self._agent_factory(), self._agent_id)
        session = Session(id=uuid.uuid4().hex, store=store, orchestrator=orch)
        self._sessions[session.id] = session
        _LOG.info("session %s opened", session.id)
        return session

    def get(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    def close(self, session_id: str) -> bool:
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.orchestrator.discard_pending()
        _LOG.info("session %s closed", session_id)
        return True

    def __len__(self) -> int:
        return len(self._sessions)
