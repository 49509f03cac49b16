"""
Centralised settings loader.

Every key can be supplied through the environment or a local `.env` file;
names are matched case-insensitively (``AGENT_API_URL`` → ``agent_api_url``).
"""

from __future__ import annotations
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime ────────────────────────────────────────────────────
    env_name: str = "local"
    log_level: str = "INFO"

    # ─── agent boundary ─────────────────────────────────────────────
    agent_backend: Literal["http", "gemini"] = "http"
    agent_api_url: str = "http://127.0.0.1:8080/api/agent"
    agent_api_key: str | None = None
    agent_id: str = "696eb2abb50537828e0afde7"
    agent_timeout_s: float = Field(120.0, gt=0)

    # ─── Gemini backend ─────────────────────────────────────────────
    gemini_api_key: str | None = None

    # ─── display defaults ───────────────────────────────────────────
    default_protein_target: float = Field(134.0, gt=0)

    # allow other teammates’ env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore", env_file=".env", env_file_encoding="utf-8"
    )


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
