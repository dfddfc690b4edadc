"""Data types for the rerank endpoint."""

from prediction_guard.registry import ModelName
from prediction_guard.schemas.base import RequestModel, ResponseModel

PATH = "/rerank"


class RerankRequest(RequestModel):
    """Rank ``documents`` by relevance to ``query``."""

    model: ModelName
    query: str
    documents: tuple[str, ...]
    return_documents: bool = True


class RerankResult(ResponseModel):
    index: int = 0
    relevance_score: float = 0.0
    text: str = ""


class RerankResponse(ResponseModel):
    id: str = ""
    object: str = ""
    created: int = 0
    model: ModelName | None = None
    results: list[RerankResult] = []
