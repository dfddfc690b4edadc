"""Server-sent event parsing and the sinks used by streamed chat completions."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncGenerator, AsyncIterator
from dataclasses import dataclass
from typing import Literal

import structlog

from prediction_guard.schemas.chat import ChatEvents

logger = structlog.get_logger()

DONE_MARKER = "[DONE]"
STOP_SENTINEL = "STOP"

_END = object()


@dataclass(slots=True)
class ServerSentEvent:
    """A single frame of an ``text/event-stream`` response."""

    data: str = ""
    event: str = "message"
    id: str | None = None
    comment: bool = False


@dataclass(slots=True)
class ChatChunk:
    """A single item produced by a chat completion stream.

    ``content`` chunks carry the next text fragment; the one ``final`` chunk
    carries the event whose finish reason was ``stop``.
    """

    chunk_type: Literal["content", "final"]
    text: str | None = None
    response: ChatEvents | None = None


async def iter_sse(lines: AsyncIterator[str]) -> AsyncGenerator[ServerSentEvent, None]:
    """Group raw response lines into server-sent events.

    Consecutive ``data:`` lines are joined with newlines and dispatched on the
    blank line that ends the frame. Lines starting with ``:`` are yielded as
    comment frames. A frame still pending when the stream ends is dispatched.
    """
    data_lines: list[str] = []
    event = "message"
    event_id: str | None = None

    async for raw in lines:
        line = raw.rstrip("\r")

        if not line:
            if data_lines:
                yield ServerSentEvent(data="\n".join(data_lines), event=event, id=event_id)
            data_lines = []
            event = "message"
            continue

        if line.startswith(":"):
            yield ServerSentEvent(data=line[1:].lstrip(), comment=True)
            continue

        field, _, value = line.partition(":")
        if value.startswith(" "):
            value = value[1:]

        if field == "data":
            data_lines.append(value)
        elif field == "event":
            event = value
        elif field == "id":
            event_id = value
        # "retry" and unknown fields are ignored

    if data_lines:
        yield ServerSentEvent(data="\n".join(data_lines), event=event, id=event_id)


class TextChannel:
    """Bounded hand-off of stream text from a producer task to a consumer.

    The producer calls ``send`` for every fragment and ``finish`` once at the
    end. The consumer either calls ``recv`` until it sees the ``STOP``
    sentinel or iterates with ``async for``. A consumer that loses interest
    calls ``close``; from then on ``send`` returns False and the producer
    stops forwarding.

    The end of the stream is queued as a private marker. ``recv`` reports it
    as ``STOP``, so a ``recv`` caller cannot tell the end apart from a model
    fragment that is literally ``"STOP"``. ``async for`` stops only on the
    marker and passes such a fragment through.
    """

    def __init__(self, maxsize: int = 32) -> None:
        self._queue: asyncio.Queue[object] = asyncio.Queue(maxsize=maxsize)
        self._closed_event = asyncio.Event()
        self._finished = False

    @property
    def closed(self) -> bool:
        return self._closed_event.is_set()

    async def send(self, text: str) -> bool:
        """Enqueue a fragment, waiting while the channel is full.

        Returns False without enqueueing once the receiver has closed.
        """
        return await self._put(text)

    async def _put(self, item: object) -> bool:
        if self.closed:
            return False
        try:
            self._queue.put_nowait(item)
            return True
        except asyncio.QueueFull:
            pass

        # Full: wait for room or for the receiver to close, whichever is first.
        put = asyncio.ensure_future(self._queue.put(item))
        closing = asyncio.ensure_future(self._closed_event.wait())
        try:
            await asyncio.wait({put, closing}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in (put, closing):
                if not task.done():
                    task.cancel()
        return put.done() and not put.cancelled() and not self.closed

    async def finish(self) -> None:
        """Mark the end of the stream. Later calls do nothing."""
        if self._finished:
            return
        self._finished = True
        await self._put(_END)

    async def recv(self) -> str:
        item = await self._queue.get()
        if item is _END:
            return STOP_SENTINEL
        return item

    def close(self) -> None:
        """Stop accepting fragments and drop anything not yet received."""
        self._closed_event.set()
        while not self._queue.empty():
            self._queue.get_nowait()

    def __aiter__(self) -> TextChannel:
        return self

    async def __anext__(self) -> str:
        if self.closed:
            raise StopAsyncIteration
        item = await self._queue.get()
        if item is _END:
            raise StopAsyncIteration
        return item
