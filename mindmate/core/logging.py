from __future__ import annotations

import logging
from collections.abc import Iterable

PROBE_PATHS = frozenset({"/health", "/ping"})

# Third-party loggers that log every outbound request at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore", "google_genai", "openai")


class ProbePathFilter(logging.Filter):
    """Drops uvicorn access lines for liveness/health probes."""

    def __init__(self, paths: Iterable[str]) -> None:
        super().__init__()
        self._paths = {path.rstrip("/") or "/" for path in paths}

    def filter(self, record: logging.LogRecord) -> bool:
        path = _request_path(record)
        return not (path and path in self._paths)


def _request_path(record: logging.LogRecord) -> str | None:
    # uvicorn.access args: (client_addr, method, full_path, http_version, status_code)
    args = record.args
    if isinstance(args, tuple) and len(args) >= 3:
        return str(args[2]).split("?", 1)[0].rstrip("/") or "/"
    message = record.getMessage()
    for candidate in PROBE_PATHS:
        if f" {candidate} " in message or f'"{candidate} ' in message:
            return candidate
    return None


def resolve_level(level: str) -> int:
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str) -> None:
    resolved = resolve_level(level)
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    if resolved > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").addFilter(ProbePathFilter(PROBE_PATHS))
