"""Base classes shared by every request and response schema."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class RequestModel(BaseModel):
    """Immutable request body. Builder methods return updated copies."""

    model_config = ConfigDict(frozen=True)

    def to_body(self) -> dict[str, Any]:
        """JSON-ready body with unset optional fields left out."""
        return self.model_dump(mode="json", exclude_none=True)


class ResponseModel(BaseModel):
    """Decoded response body. Fields the client does not know about are ignored."""

    model_config = ConfigDict(extra="ignore")


class ErrorEnvelope(ResponseModel):
    """Body returned by the service with any non-200 status."""

    error: str
    status: int | None = None
