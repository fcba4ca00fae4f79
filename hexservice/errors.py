"""Errors returned to HTTP clients."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any


class HttpError(Exception):
    """An error carrying the HTTP status and body to send to the client."""

    def __init__(self, status: int, cause: str, data: Any = None) -> None:
        super().__init__(cause)
        self.status = HTTPStatus(status)
        self.cause = cause
        self.data = data

    def __str__(self) -> str:
        return f"not found: {self.cause}"

    def body(self) -> dict[str, Any]:
        """Return the JSON body of the error response."""
        body: dict[str, Any] = {"cause": self.cause}
        if self.data is not None:
            body["data"] = self.data
        return body