from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from api.v1.deps import get_registry
from api.v1.schemas import SessionOut
from services.sessions import SessionRegistry

router = APIRouter()


# ───────────────────────── open ────────────────────────────
@router.post("", response_model=SessionOut, status_code=status.HTTP_201_CREATED)
async def open_session(registry: SessionRegistry = Depends(get_registry)) -> SessionOut:
    return SessionOut(session_id=registry.create().id)


# ───────────────────────── close ───────────────────────────
@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_registry),
) -> Response:
    if not registry.close(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
