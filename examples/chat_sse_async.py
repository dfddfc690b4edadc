"""Stream a chat completion in one task and print it from another through a TextChannel."""

import asyncio
import sys

from prediction_guard import Client, Roles, TextChannel, configure_logging, load_settings
from prediction_guard.schemas.chat import ChatRequest


async def main() -> None:
    settings = load_settings()
    configure_logging(settings)

    async with Client(settings) as client:
        models = await client.retrieve_model_list("chat-completion")
        if not models:
            sys.exit("no chat-completion models available")

        req = (
            ChatRequest(model=models[0])
            .add_message(Roles.USER, "How do you feel about the world in general")
            .with_max_tokens(300)
            .with_temperature(0.1)
            .with_top_p(0.1)
            .with_top_k(50)
        )

        channel = TextChannel()
        producer = asyncio.create_task(client.generate_chat_completion_events_async(req, channel))

        async for text in channel:
            sys.stdout.write(text)
            sys.stdout.flush()

        result = await producer

    print(f"\n\nchat sse async completion response:\n{result}\n\n")


if __name__ == "__main__":
    asyncio.run(main())
