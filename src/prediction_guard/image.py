"""Download an image and base64 encode it for embedding and vision requests."""

from __future__ import annotations

import base64

import httpx
import structlog

logger = structlog.get_logger()


async def encode(url: str, client: httpx.AsyncClient | None = None) -> str:
    """Download the image at ``url`` and return it base64 encoded.

    Raises:
        httpx.HTTPError: on connection failures and non-2xx responses.
    """
    if client is None:
        async with httpx.AsyncClient(timeout=30.0, follow_redirects=True) as own_client:
            return await encode(url, own_client)

    response = await client.get(url)
    response.raise_for_status()

    encoded = base64.b64encode(response.content).decode("ascii")
    logger.debug("image_encoded", url=url, size_bytes=len(response.content))
    return encoded


async def encode_or_none(url: str, client: httpx.AsyncClient | None = None) -> str | None:
    """Best-effort ``encode``: a failed download means "no image" rather than an error."""
    try:
        return await encode(url, client)
    except httpx.HTTPError as e:
        logger.warning("image_encode_failed", url=url, reason=str(e))
        return None


def to_data_uri(encoded: str, media_type: str = "image/jpeg") -> str:
    """Wrap base64 image data in the data URI that vision messages expect."""
    return f"data:{media_type};base64,{encoded}"
