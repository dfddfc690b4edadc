"""Data types for the toxicity endpoint."""

from prediction_guard.schemas.base import RequestModel, ResponseModel

PATH = "/toxicity"


class ToxicityRequest(RequestModel):
    text: str


class ToxicityCheck(ResponseModel):
    score: float
    index: int
    status: str


class ToxicityResponse(ResponseModel):
    id: str | None = None
    object: str | None = None
    created: int | None = None
    checks: list[ToxicityCheck] | None = None
