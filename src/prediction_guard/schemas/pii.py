"""Data types for the PII detection endpoint."""

from __future__ import annotations

from enum import Enum

from prediction_guard.schemas.base import RequestModel, ResponseModel

PATH = "/PII"


class ReplaceMethod(str, Enum):
    """Ways to replace any PII that is found."""

    RANDOM = "random"
    MASK = "mask"
    CATEGORY = "category"
    FAKE = "fake"


class PIIRequest(RequestModel):
    prompt: str
    replace: bool
    replace_method: ReplaceMethod = ReplaceMethod.RANDOM


class PIICheck(ResponseModel):
    new_prompt: str = ""
    index: int = 0
    status: str | None = None


class PIIResponse(ResponseModel):
    id: str | None = None
    object: str | None = None
    created: int | None = None
    checks: list[PIICheck] | None = None
