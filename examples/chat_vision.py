"""Ask a vision model about an image downloaded from a URL."""

import asyncio

from prediction_guard import Client, Model, Roles, configure_logging, image, load_settings
from prediction_guard.schemas.chat import ChatRequest

IMAGE_URL = "https://pbs.twimg.com/profile_images/1571574401107169282/ylAgz_f5_400x400.jpg"


async def main() -> None:
    settings = load_settings()
    configure_logging(settings)

    encoded = await image.encode(IMAGE_URL)

    req = (
        ChatRequest(model=Model.LLAVA_1_5_7B_HF)
        .add_vision_message(Roles.USER, "What is in this image?", image.to_data_uri(encoded))
        .with_max_tokens(300)
        .with_temperature(0.1)
    )

    async with Client(settings) as client:
        result = await client.generate_chat_vision(req)

    print(f"\n\nchat vision response:\n{result.model_dump_json(indent=2)}\n\n")


if __name__ == "__main__":
    asyncio.run(main())
