from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from mindmate.api import chat, health, quick_action
from mindmate.core.config import Settings
from mindmate.core.dependencies import get_completion_provider, get_settings
from mindmate.core.errors import ClientInputError
from mindmate.core.logging import configure_logging

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


async def client_input_error_handler(request: Request, exc: ClientInputError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


def create_app(app_settings: Settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting MindMate on port %s", app_settings.port)
        # A missing key is reported once by get_provider_config.
        provider = get_completion_provider()
        if provider is not None:
            logger.info(
                "AI provider '%s' enabled", getattr(provider, "name", app_settings.ai_provider)
            )
        yield
        logger.info("MindMate is shutting down")
        aclose = getattr(provider, "aclose", None)
        if aclose is not None:
            await aclose()

    app = FastAPI(title="mindmate", version="1.0.0", lifespan=lifespan)
    app.include_router(health.router)
    app.include_router(chat.router)
    app.include_router(quick_action.router)
    app.add_exception_handler(ClientInputError, client_input_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]

    if app_settings.static_dir:
        static_path = Path(app_settings.static_dir)
        if static_path.is_dir():
            app.mount("/", StaticFiles(directory=static_path, html=True), name="static")
        else:
            logger.warning("STATIC_DIR %s is not a directory; static client disabled", static_path)
    return app


app = create_app(settings)


def run() -> None:
    uvicorn.run(
        "mindmate.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
