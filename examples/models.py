"""List all models, then only those that support chat completion."""

import asyncio

from prediction_guard import Client, configure_logging, load_settings


async def main() -> None:
    settings = load_settings()
    configure_logging(settings)

    async with Client(settings) as client:
        print("health:", await client.check_health())

        everything = await client.models()
        for m in everything.data:
            print(f"{m.id:<40} context={m.max_context_length} owned_by={m.owned_by}")

        chat_models = await client.retrieve_model_list("chat-completion")
        print("\nchat-completion models:", chat_models)


if __name__ == "__main__":
    asyncio.run(main())
