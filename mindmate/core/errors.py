from __future__ import annotations


class ClientInputError(ValueError):
    """A required request field is missing or blank; maps to HTTP 400."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
