from __future__ import annotations

from pydantic import BaseModel, field_validator


class QuickActionRequest(BaseModel):
    """Either a ready prompt or the name of a canned action (breathing, meditation, affirmation)."""

    prompt: str | None = None
    action: str | None = None
    language: str | None = None

    @field_validator("prompt", "action", "language", mode="before")
    @classmethod
    def _drop_non_string(cls, value: object) -> str | None:
        return value if isinstance(value, str) else None


class QuickActionResponse(BaseModel):
    response: str
    error: str | None = None
