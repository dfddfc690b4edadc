"""Data types for the text completion endpoint."""

from __future__ import annotations

from prediction_guard.registry import ModelName
from prediction_guard.schemas.base import ResponseModel
from prediction_guard.schemas.screening import ScreenedRequest

PATH = "/completions"


class CompletionRequest(ScreenedRequest):
    """Request for ``POST /completions``."""

    model: ModelName
    prompt: str
    max_tokens: int = 100
    temperature: float = 0.0
    top_p: float | None = None
    top_k: int | None = None

    def with_max_tokens(self, max_tokens: int) -> CompletionRequest:
        return self.model_copy(update={"max_tokens": max_tokens})

    def with_temperature(self, temperature: float) -> CompletionRequest:
        return self.model_copy(update={"temperature": temperature})

    def with_top_p(self, top_p: float) -> CompletionRequest:
        return self.model_copy(update={"top_p": top_p})

    def with_top_k(self, top_k: int) -> CompletionRequest:
        return self.model_copy(update={"top_k": top_k})


class CompletionChoice(ResponseModel):
    text: str = ""
    index: int = 0
    status: str | None = None
    model: ModelName | None = None


class CompletionResponse(ResponseModel):
    id: str | None = None
    object: str | None = None
    created: int | None = None
    choices: list[CompletionChoice] | None = None
