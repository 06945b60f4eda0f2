from __future__ import annotations

from fastapi import APIRouter, Depends

from mindmate.clients.llm_providers import CompletionProvider
from mindmate.core.dependencies import get_completion_provider
from mindmate.schemas.health import HealthResponse

router = APIRouter()


@router.get("/ping")
def ping() -> dict[str, str]:
    return {"message": "pong"}


@router.get("/health", response_model=HealthResponse)
def health(
    provider: CompletionProvider | None = Depends(get_completion_provider),  # noqa: B008
) -> HealthResponse:
    return HealthResponse(
        status="MindMate is running and ready to help!",
        ai_enabled=provider is not None,
        provider=getattr(provider, "name", None),
    )
