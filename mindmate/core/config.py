from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_AI_PROVIDER = "gemini"
DEFAULT_AI_MAX_TOKENS = 150
DEFAULT_AI_TIMEOUT_SECONDS = 20.0


def _get_int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float | None) -> float | None:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if not value:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    log_level: str
    ai_provider: str
    ai_model_id: str
    gemini_api_key: str
    openai_api_key: str
    http_ai_api_key: str
    http_ai_url: str
    ai_max_tokens: int
    ai_temperature: float | None
    ai_timeout_seconds: float
    server_emotion_detection: bool
    static_dir: str


def load_settings() -> Settings:
    timeout = _get_float_env("AI_TIMEOUT_SECONDS", DEFAULT_AI_TIMEOUT_SECONDS)
    if timeout is None or timeout <= 0:
        timeout = DEFAULT_AI_TIMEOUT_SECONDS
    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=_get_int_env("PORT", 8000),
        log_level=os.getenv("LOG_LEVEL", "info"),
        ai_provider=os.getenv("AI_PROVIDER", DEFAULT_AI_PROVIDER),
        ai_model_id=os.getenv("AI_MODEL_ID", ""),
        gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        http_ai_api_key=os.getenv("HTTP_AI_API_KEY", ""),
        http_ai_url=os.getenv("HTTP_AI_URL", ""),
        ai_max_tokens=_get_int_env("AI_MAX_TOKENS", DEFAULT_AI_MAX_TOKENS),
        ai_temperature=_get_float_env("AI_TEMPERATURE", None),
        ai_timeout_seconds=timeout,
        server_emotion_detection=_get_bool_env("SERVER_EMOTION_DETECTION", True),
        static_dir=os.getenv("STATIC_DIR", ""),
    )
