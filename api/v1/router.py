# api/v1/router.py
from fastapi import APIRouter

from . import plan, profile, sessions

api_router = APIRouter()

api_router.include_router(sessions.router, prefix="/sessions", tags=["Sessions"])

# profile and plan live *under* the session resource
api_router.include_router(profile.router, prefix="/sessions", tags=["Profile"])
api_router.include_router(plan.router, prefix="/sessions", tags=["Plan"])
