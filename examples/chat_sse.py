"""Stream a chat completion, printing each fragment as it arrives."""

import asyncio
import sys

from prediction_guard import Client, Model, Roles, configure_logging, load_settings
from prediction_guard.schemas.chat import ChatRequest


def print_fragment(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


async def main() -> None:
    settings = load_settings()
    configure_logging(settings)

    req = (
        ChatRequest(model=Model.NEURAL_CHAT_7B)
        .add_message(Roles.USER, "How do you feel about the world in general")
        .with_max_tokens(1000)
        .with_temperature(0.85)
    )

    async with Client(settings) as client:
        result = await client.generate_chat_completion_events(req, print_fragment)

    print(f"\n\nfinal event:\n{result}\n\n")


if __name__ == "__main__":
    asyncio.run(main())
