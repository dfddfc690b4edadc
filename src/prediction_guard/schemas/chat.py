"""Data types for the chat endpoints, including vision and streamed chat events."""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict

from prediction_guard.registry import ModelName
from prediction_guard.schemas.base import ResponseModel
from prediction_guard.schemas.screening import ScreenedRequest

PATH = "/chat/completions"


class Roles(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A plain-text chat message."""

    model_config = ConfigDict(frozen=True)

    role: Roles = Roles.USER
    content: str = ""
    output: str | None = None


class ImageURL(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Only base64 data URIs are accepted by the service.
    url: str


class Content(BaseModel):
    """One part of a vision message: either text or an image."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text", "image_url"]
    text: str | None = None
    image_url: ImageURL | None = None


class VisionMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Roles = Roles.USER
    content: tuple[Content, ...] = ()


class ChatRequest(ScreenedRequest):
    """Request for ``POST /chat/completions``.

    Example:
        req = (
            ChatRequest(model=Model.NEURAL_CHAT_7B)
            .add_message(Roles.USER, "How do you feel about the world in general?")
            .with_max_tokens(1000)
            .with_temperature(0.85)
        )
    """

    model: ModelName
    messages: tuple[Union[Message, VisionMessage], ...] = ()
    max_tokens: int = 100
    temperature: float = 0.0
    top_p: float | None = None
    top_k: int | None = None
    stream: bool = False

    def add_message(self, role: Roles, content: str) -> ChatRequest:
        return self.with_message(Message(role=role, content=content))

    def add_vision_message(self, role: Roles, prompt: str, image_uri: str) -> ChatRequest:
        """Add an image and its text prompt as a single message.

        Args:
            role: The role of the user sending the message.
            prompt: The text prompt sent along with the image.
            image_uri: Data URI of a base64 encoded image, e.g.
                ``data:image/jpeg;base64,<data>``.
        """
        message = VisionMessage(
            role=role,
            content=(
                Content(type="image_url", image_url=ImageURL(url=image_uri)),
                Content(type="text", text=prompt),
            ),
        )
        return self.with_message(message)

    def with_message(self, message: Message | VisionMessage) -> ChatRequest:
        return self.model_copy(update={"messages": (*self.messages, message)})

    def with_max_tokens(self, max_tokens: int) -> ChatRequest:
        return self.model_copy(update={"max_tokens": max_tokens})

    def with_temperature(self, temperature: float) -> ChatRequest:
        return self.model_copy(update={"temperature": temperature})

    def with_top_p(self, top_p: float) -> ChatRequest:
        return self.model_copy(update={"top_p": top_p})

    def with_top_k(self, top_k: int) -> ChatRequest:
        return self.model_copy(update={"top_k": top_k})

    def for_streaming(self) -> ChatRequest:
        """Copy with streaming on; output checks cannot run on a stream."""
        return self.model_copy(update={"stream": True, "output": None})


class ChatChoice(ResponseModel):
    index: int = 0
    message: Message
    status: str | None = None


class ChatResponse(ResponseModel):
    id: str | None = None
    object: str | None = None
    created: int | None = None
    model: ModelName | None = None
    choices: list[ChatChoice] | None = None


class ChatEventDelta(ResponseModel):
    content: str | None = None


class ChatEventChoice(ResponseModel):
    index: int = 0
    generated_text: str | None = None
    logprobs: Any = None
    finish_reason: str | None = None
    delta: ChatEventDelta | None = None


class ChatEvents(ResponseModel):
    """One decoded server-sent event of a streamed chat completion."""

    id: str | None = None
    object: str | None = None
    created: int | None = None
    model: ModelName | None = None
    choices: list[ChatEventChoice] = []
