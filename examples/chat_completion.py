"""Send a chat prompt and print the single response."""

import asyncio

from prediction_guard import Client, Model, Roles, configure_logging, load_settings
from prediction_guard.schemas.chat import ChatRequest


async def main() -> None:
    settings = load_settings()
    configure_logging(settings)

    req = (
        ChatRequest(model=Model.NEURAL_CHAT_7B)
        .add_message(Roles.USER, "How do you feel about the world in general?")
        .with_max_tokens(1000)
        .with_temperature(0.85)
        .with_input(block_prompt_injection=True)
        .with_output(toxicity=True)
    )

    async with Client(settings) as client:
        result = await client.generate_chat_completion(req)

    print(f"\n\nchat completion response:\n{result.model_dump_json(indent=2)}\n\n")


if __name__ == "__main__":
    asyncio.run(main())
