"""Data types for the tokenize endpoint."""

from prediction_guard.registry import ModelName
from prediction_guard.schemas.base import RequestModel, ResponseModel

PATH = "/tokenize"


class TokenizeRequest(RequestModel):
    model: ModelName
    input: str


class Token(ResponseModel):
    id: int = 0
    start: int = 0
    end: int = 0
    text: str = ""


class TokenizeResponse(ResponseModel):
    id: str = ""
    object: str = ""
    created: int = 0
    model: ModelName | None = None
    tokens: list[Token] = []
