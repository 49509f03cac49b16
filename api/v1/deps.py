from __future__ import annotations

from fastapi import Depends, HTTPException, Request

from services.sessions import Session, SessionRegistry


def get_registry(request: Request) -> SessionRegistry:
    return request.app.state.sessions


def get_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_registry),
) -> Session:
    session = registry.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session
