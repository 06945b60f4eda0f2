from __future__ import annotations

from pydantic import BaseModel, field_validator


class ChatRequest(BaseModel):
    """Chat message sent by the browser client.

    ``emotion`` is the client's own keyword guess and is advisory only.
    ``context`` is prepended verbatim to the message sent to the model.
    Non-string values are dropped rather than rejected.
    """

    message: str | None = None
    emotion: str | None = None
    language: str | None = None
    context: str | None = None

    @field_validator("message", "emotion", "language", "context", mode="before")
    @classmethod
    def _drop_non_string(cls, value: object) -> str | None:
        return value if isinstance(value, str) else None


class MoodPayload(BaseModel):
    icon: str
    text: str


class ChatResponse(BaseModel):
    response: str
    emotion: str | None = None
    mood: MoodPayload | None = None
    error: str | None = None


class WelcomeResponse(BaseModel):
    message: str
