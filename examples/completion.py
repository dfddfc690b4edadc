"""Send a completion prompt and print the single response."""

import asyncio

from prediction_guard import Client, Model, configure_logging, load_settings
from prediction_guard.schemas.completion import CompletionRequest
from prediction_guard.schemas.pii import ReplaceMethod


async def main() -> None:
    settings = load_settings()
    configure_logging(settings)

    req = (
        CompletionRequest(model=Model.NEURAL_CHAT_7B, prompt="Will I lose my hair")
        .with_max_tokens(1000)
        .with_temperature(0.85)
        .with_input(pii=("replace", ReplaceMethod.FAKE))
    )

    async with Client(settings) as client:
        print("completion models:", await client.retrieve_completion_models())
        result = await client.generate_completion(req)

    print(f"\n\ncompletion response:\n{result.model_dump_json(indent=2)}\n\n")


if __name__ == "__main__":
    asyncio.run(main())
