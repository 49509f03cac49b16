"""
Failure kinds of a generation request.

All three end the request and surface only their ``message``; the kind
decides which text the user sees, nothing else.
"""
from __future__ import annotations

INVALID_EMAIL_MSG = (
    "Please enter a valid email address in your profile to create calendar events"
)
GENERIC_FAILURE_MSG = "Failed to generate meal plan"
NETWORK_ERROR_MSG = "Network error occurred"


class GenerationError(Exception):
    default_message = GENERIC_FAILURE_MSG

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(GenerationError):
    """Profile failed the pre-dispatch check; the agent was not contacted."""

    default_message = INVALID_EMAIL_MSG


class AgentReportedError(GenerationError):
    """Agent answered but signalled failure or returned an unusable payload."""

    default_message = GENERIC_FAILURE_MSG


class TransportError(GenerationError):
    """The agent call itself failed."""

    default_message = NETWORK_ERROR_MSG
