"""Data types for the factuality endpoint."""

from prediction_guard.schemas.base import RequestModel, ResponseModel

PATH = "/factuality"


class FactualityRequest(RequestModel):
    """Check ``text`` against the ``reference`` text."""

    reference: str
    text: str


class FactualityCheck(ResponseModel):
    score: float = 0.0
    index: int = 0
    status: str | None = None


class FactualityResponse(ResponseModel):
    id: str = ""
    object: str = ""
    created: int = 0
    checks: list[FactualityCheck] = []
