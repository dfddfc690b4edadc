"""Async client for the Prediction Guard API."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncGenerator, Callable
from contextlib import aclosing
from functools import lru_cache
from typing import Any, TypeVar

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from prediction_guard._version import __version__
from prediction_guard.config import Settings, load_settings
from prediction_guard.errors import (
    APIError,
    ConfigurationError,
    DecodeError,
    PredictionGuardError,
    StreamDecodeError,
)
from prediction_guard.registry import model_to_wire
from prediction_guard.schemas import (
    chat,
    completion,
    embedding,
    factuality,
    injection,
    models,
    pii,
    rerank,
    tokenize,
    toxicity,
    translate,
)
from prediction_guard.schemas.base import ErrorEnvelope, RequestModel
from prediction_guard.streaming import DONE_MARKER, ChatChunk, TextChannel, iter_sse

logger = structlog.get_logger()

USER_AGENT = f"Prediction Guard Python Client v{__version__}"

R = TypeVar("R")


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def _build_headers(api_key: str) -> dict[str, str]:
    if not api_key.isascii() or not api_key.isprintable():
        raise ConfigurationError("API key cannot be encoded as an HTTP header value")
    return {
        "x-api-key": api_key,
        "Authorization": f"Bearer {api_key}",
        "User-Agent": USER_AGENT,
    }


def _error_from_response(response: httpx.Response) -> PredictionGuardError:
    """Turn a non-200 response into APIError, or DecodeError if its body is unreadable."""
    try:
        envelope = ErrorEnvelope.model_validate_json(response.content)
    except ValidationError as e:
        return DecodeError(
            f"error parsing error response, {e}", status_code=response.status_code
        )
    return APIError(envelope.error, status_code=envelope.status or response.status_code)


class Client:
    """Handles the connectivity to the Prediction Guard API.

    One ``httpx.AsyncClient`` (and its connection pool) is created per
    instance and is never mutated after construction, so a single client can
    be shared by any number of concurrent tasks.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not settings.api_key:
            raise ConfigurationError("missing Prediction Guard API key")
        if not settings.url:
            raise ConfigurationError("missing Prediction Guard URL")

        self._base_url = settings.url.rstrip("/")
        self._request_timeout = settings.request_timeout
        self._http = httpx.AsyncClient(
            headers=_build_headers(settings.api_key),
            timeout=httpx.Timeout(settings.read_timeout, connect=settings.connect_timeout),
            transport=transport,
        )

    @classmethod
    def from_env(
        cls,
        transport: httpx.AsyncBaseTransport | None = None,
        **overrides,
    ) -> Client:
        """Build a client from PREDICTIONGUARD_API_KEY / PREDICTIONGUARD_URL (or .env)."""
        return cls(load_settings(**overrides), transport=transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def close(self) -> None:
        if not self._http.is_closed:
            await self._http.aclose()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _send(
        self,
        method: str,
        path: str,
        body: RequestModel | None = None,
    ) -> httpx.Response:
        """Send one request and return the 200 response; any other status raises."""
        url = f"{self._base_url}{path}"
        logger.debug("pg_request_start", method=method, path=path)

        response = await asyncio.wait_for(
            self._http.request(
                method,
                url,
                json=body.to_body() if body is not None else None,
            ),
            timeout=self._request_timeout,
        )

        if response.status_code != httpx.codes.OK:
            error = _error_from_response(response)
            logger.warning(
                "pg_request_failed",
                method=method,
                path=path,
                status_code=response.status_code,
                error=str(error),
            )
            raise error

        logger.debug("pg_request_complete", method=method, path=path)
        return response

    async def _request(
        self,
        method: str,
        path: str,
        response_type: type[R] | Any,
        body: RequestModel | None = None,
    ) -> R:
        response = await self._send(method, path, body)
        try:
            return _adapter(response_type).validate_json(response.content)
        except ValidationError as e:
            logger.error("pg_response_decode_failed", method=method, path=path)
            raise DecodeError(
                f"error decoding {path} response: {e}", status_code=response.status_code
            ) from e

    async def check_health(self) -> str:
        """Calls the health endpoint and returns its plain text body."""
        response = await self._send("GET", "/")
        return response.text

    # Completion

    async def generate_completion(
        self, req: completion.CompletionRequest
    ) -> completion.CompletionResponse:
        return await self._request("POST", completion.PATH, completion.CompletionResponse, req)

    async def retrieve_completion_models(self) -> list[str]:
        """Model names available for the completion endpoint."""
        return await self._request("GET", completion.PATH, list[str])

    # Chat

    async def generate_chat_completion(self, req: chat.ChatRequest) -> chat.ChatResponse:
        return await self._request("POST", chat.PATH, chat.ChatResponse, req)

    async def generate_chat_vision(self, req: chat.ChatRequest) -> chat.ChatResponse:
        """Chat completion for requests built with ``add_vision_message``."""
        return await self._request("POST", chat.PATH, chat.ChatResponse, req)

    async def retrieve_chat_completion_models(self) -> list[str]:
        return await self._request("GET", chat.PATH, list[str])

    async def stream_chat_completion(
        self, req: chat.ChatRequest
    ) -> AsyncGenerator[ChatChunk, None]:
        """Stream a chat completion as it is generated.

        Yields one ``content`` chunk per text fragment, in the order the server
        sent them, and a single ``final`` chunk when a choice finishes with
        ``stop``. The stream also ends, without a final chunk, on ``[DONE]``
        or when the server closes the connection. The request is sent with
        streaming on and output checks removed.

        Raises:
            APIError: non-200 status, or a transport failure mid-stream.
            StreamDecodeError: an event payload is not valid JSON.
        """
        req = req.for_streaming()
        url = f"{self._base_url}{chat.PATH}"
        chunk_count = 0

        logger.info("pg_stream_start", model=model_to_wire(req.model))

        try:
            async with self._http.stream(
                "POST",
                url,
                json=req.to_body(),
                headers={"Accept": "text/event-stream"},
            ) as response:
                if response.status_code != httpx.codes.OK:
                    await response.aread()
                    raise _error_from_response(response)

                async for event in iter_sse(response.aiter_lines()):
                    if event.comment:
                        continue

                    if event.data == DONE_MARKER:
                        logger.info("pg_stream_complete", reason="done", chunks=chunk_count)
                        return

                    try:
                        frame = chat.ChatEvents.model_validate_json(event.data)
                    except ValidationError as e:
                        raise StreamDecodeError(f"error parsing stream response: {e}") from e

                    # Heartbeat with nothing to stream
                    if not frame.choices:
                        continue

                    choice = frame.choices[0]
                    if choice.finish_reason == "stop":
                        logger.info("pg_stream_complete", reason="stop", chunks=chunk_count)
                        yield ChatChunk(chunk_type="final", response=frame)
                        return

                    text = ""
                    if choice.delta is not None and choice.delta.content is not None:
                        text = choice.delta.content

                    chunk_count += 1
                    logger.debug("pg_stream_chunk", chunk_number=chunk_count, text_length=len(text))
                    yield ChatChunk(chunk_type="content", text=text)
        except httpx.StreamClosed:
            pass
        except httpx.HTTPError as e:
            logger.error("pg_stream_failed", reason=str(e), chunks=chunk_count)
            raise APIError(str(e)) from e

        logger.info("pg_stream_complete", reason="closed", chunks=chunk_count)

    async def generate_chat_completion_events(
        self,
        req: chat.ChatRequest,
        handler: Callable[[str], None],
    ) -> chat.ChatEvents | None:
        """Streamed chat completion delivered through a callback.

        ``handler`` is called inline with every text fragment; a slow handler
        holds back reading the stream. Returns the event that finished the
        generation, or None when the stream ended on ``[DONE]`` or was closed.
        """
        async with aclosing(self.stream_chat_completion(req)) as stream:
            async for chunk in stream:
                if chunk.chunk_type == "final":
                    return chunk.response
                handler(chunk.text)
        return None

    async def generate_chat_completion_events_async(
        self,
        req: chat.ChatRequest,
        channel: TextChannel,
    ) -> chat.ChatEvents | None:
        """Streamed chat completion delivered on a channel for another task.

        Every fragment is sent on ``channel``, then the ``STOP`` sentinel is
        sent once however the stream ends. If the receiver closes the channel
        the stream is abandoned and None is returned.
        """
        try:
            async with aclosing(self.stream_chat_completion(req)) as stream:
                async for chunk in stream:
                    if chunk.chunk_type == "final":
                        return chunk.response
                    if not await channel.send(chunk.text):
                        logger.info("pg_stream_receiver_closed")
                        return None
            return None
        finally:
            await channel.finish()

    # Embeddings

    async def embedding(self, req: embedding.EmbeddingRequest) -> embedding.EmbeddingResponse:
        return await self._request("POST", embedding.PATH, embedding.EmbeddingResponse, req)

    async def retrieve_embedding_models(self) -> list[str]:
        return await self._request("GET", embedding.PATH, list[str])

    # Checks

    async def check_factuality(
        self, req: factuality.FactualityRequest
    ) -> factuality.FactualityResponse:
        return await self._request("POST", factuality.PATH, factuality.FactualityResponse, req)

    async def injection(self, req: injection.InjectionRequest) -> injection.InjectionResponse:
        return await self._request("POST", injection.PATH, injection.InjectionResponse, req)

    async def pii(self, req: pii.PIIRequest) -> pii.PIIResponse:
        """Detect, and optionally replace, PII in a prompt."""
        return await self._request("POST", pii.PATH, pii.PIIResponse, req)

    async def toxicity(self, req: toxicity.ToxicityRequest) -> toxicity.ToxicityResponse:
        return await self._request("POST", toxicity.PATH, toxicity.ToxicityResponse, req)

    # Text utilities

    async def translate(self, req: translate.TranslateRequest) -> translate.TranslateResponse:
        return await self._request("POST", translate.PATH, translate.TranslateResponse, req)

    async def rerank(self, req: rerank.RerankRequest) -> rerank.RerankResponse:
        return await self._request("POST", rerank.PATH, rerank.RerankResponse, req)

    async def tokenize(self, req: tokenize.TokenizeRequest) -> tokenize.TokenizeResponse:
        return await self._request("POST", tokenize.PATH, tokenize.TokenizeResponse, req)

    # Models

    async def models(self, capability: str | None = None) -> models.ModelsResponse:
        """List models, optionally only those with ``capability`` (e.g. ``chat-completion``)."""
        return await self._request("GET", models.path_for(capability), models.ModelsResponse)

    async def retrieve_model_list(self, capability: str | None = None) -> list[str]:
        result = await self.models(capability)
        return [m.id for m in result.data]
