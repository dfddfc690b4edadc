"""Embed text together with an image downloaded from a URL."""

import asyncio

from prediction_guard import Client, Model, configure_logging, image, load_settings
from prediction_guard.schemas.embedding import EmbeddingRequest

IMAGE_URL = "https://farm4.staticflickr.com/3300/3497460990_11dfb95dd1_z.jpg"


async def main() -> None:
    settings = load_settings()
    configure_logging(settings)

    # A failed download still embeds the text alone.
    encoded = await image.encode_or_none(IMAGE_URL)
    req = EmbeddingRequest.new(
        Model.BRIDGETOWER_LARGE_ITM_MLM_ITC,
        text="skyline with a flying horse",
        image=encoded,
    )

    async with Client(settings) as client:
        result = await client.embedding(req)

    for item in result.data:
        print(f"input {item.index}: {len(item.embedding)} dimensions, status={item.status}")


if __name__ == "__main__":
    asyncio.run(main())
