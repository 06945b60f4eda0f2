from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    status: str
    ai_enabled: bool = Field(alias="aiEnabled")
    provider: str | None = None

    model_config = ConfigDict(populate_by_name=True)
