from __future__ import annotations

from fastapi import APIRouter, Body, Depends

from mindmate.core.dependencies import get_quick_action_service
from mindmate.schemas.quick_action import QuickActionRequest, QuickActionResponse
from mindmate.services.quick_action import QuickActionService

router = APIRouter(prefix="/api")


@router.post(
    "/quick-action", response_model=QuickActionResponse, response_model_exclude_none=True
)
async def quick_action(
    request: QuickActionRequest | None = Body(default=None),  # noqa: B008
    service: QuickActionService = Depends(get_quick_action_service),  # noqa: B008
) -> QuickActionResponse:
    """Generate breathing, meditation or affirmation content."""
    return await service.handle_quick_action(
        request if request is not None else QuickActionRequest()
    )
