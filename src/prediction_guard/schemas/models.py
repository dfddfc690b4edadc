"""Data types for the model listing endpoint."""

from pydantic import ConfigDict

from prediction_guard.schemas.base import ResponseModel

PATH = "/models"


def path_for(capability: str | None = None) -> str:
    """Listing path, narrowed to one capability (e.g. ``chat-completion``) when given."""
    if capability:
        return f"{PATH}/{capability}"
    return PATH


class ModelCapabilities(ResponseModel):
    chat_completion: bool = False
    chat_with_image: bool = False
    completion: bool = False
    embedding: bool = False
    embedding_with_image: bool = False
    tokenize: bool = False


class ModelData(ResponseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str = ""
    object: str = ""
    created: str = ""
    owned_by: str = ""
    description: str = ""
    max_context_length: int = 0
    prompt_format: str = ""
    capabilities: ModelCapabilities = ModelCapabilities()


class ModelsResponse(ResponseModel):
    object: str = ""
    data: list[ModelData] = []
