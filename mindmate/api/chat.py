from __future__ import annotations

from fastapi import APIRouter, Body, Depends

from mindmate.core.dependencies import get_chat_service
from mindmate.schemas.chat import ChatRequest, ChatResponse, WelcomeResponse
from mindmate.services.chat import ChatService
from mindmate.services.prompts import pick_welcome_message

router = APIRouter(prefix="/api")


@router.post("/chat", response_model=ChatResponse, response_model_exclude_none=True)
async def chat(
    request: ChatRequest | None = Body(default=None),  # noqa: B008
    service: ChatService = Depends(get_chat_service),  # noqa: B008
) -> ChatResponse:
    """Reply to a user message; degrades to a fallback reply instead of failing."""
    return await service.handle_chat(request if request is not None else ChatRequest())


@router.get("/welcome", response_model=WelcomeResponse)
def welcome() -> WelcomeResponse:
    return WelcomeResponse(message=pick_welcome_message())
