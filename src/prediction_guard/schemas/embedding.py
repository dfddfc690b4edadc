"""Data types for the embedding endpoint."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict

from prediction_guard.registry import ModelName
from prediction_guard.schemas.base import RequestModel, ResponseModel

PATH = "/embeddings"


class Direction(str, Enum):
    """Side of the input to cut when it exceeds the model context."""

    RIGHT = "Right"
    LEFT = "Left"


class EmbeddingInput(BaseModel):
    """Text and/or a base64 encoded image to embed."""

    model_config = ConfigDict(frozen=True)

    text: str | None = None
    image: str | None = None


class EmbeddingRequest(RequestModel):
    model: ModelName
    input: tuple[EmbeddingInput, ...] = ()
    truncate: bool | None = None
    truncate_direction: Direction | None = None

    @classmethod
    def new(
        cls,
        model: ModelName,
        text: str | None = None,
        image: str | None = None,
    ) -> EmbeddingRequest:
        """Request with a single input made of text and/or an image."""
        return cls(model=model, input=(EmbeddingInput(text=text, image=image),))

    def add_input(self, text: str | None = None, image: str | None = None) -> EmbeddingRequest:
        return self.add_inputs([EmbeddingInput(text=text, image=image)])

    def add_inputs(self, inputs: Iterable[EmbeddingInput]) -> EmbeddingRequest:
        return self.model_copy(update={"input": (*self.input, *inputs)})

    def with_truncate(self, direction: Direction | str = Direction.RIGHT) -> EmbeddingRequest:
        return self.model_copy(update={"truncate": True, "truncate_direction": Direction(direction)})


class EmbeddingData(ResponseModel):
    index: int = 0
    object: str = ""
    embedding: list[float] = []
    status: str | None = None


class EmbeddingResponse(ResponseModel):
    id: str = ""
    object: str = ""
    created: int = 0
    model: ModelName | None = None
    data: list[EmbeddingData] = []
