"""Data types for the prompt injection endpoint."""

from prediction_guard.schemas.base import RequestModel, ResponseModel

PATH = "/injection"


class InjectionRequest(RequestModel):
    prompt: str
    detect: bool = True


class InjectionCheck(ResponseModel):
    probability: float = 0.0
    index: int = 0
    status: str | None = None


class InjectionResponse(ResponseModel):
    id: str = ""
    object: str = ""
    # The service sends this one as a numeric string.
    created: int = 0
    checks: list[InjectionCheck] = []
