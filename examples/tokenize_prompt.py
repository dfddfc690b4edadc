"""Show how a model tokenizes a prompt."""

import asyncio

from prediction_guard import Client, Model, configure_logging, load_settings
from prediction_guard.schemas.tokenize import TokenizeRequest


async def main() -> None:
    settings = load_settings()
    configure_logging(settings)

    req = TokenizeRequest(model=Model.NEURAL_CHAT_7B_V3_3, input="Tell me a joke.")

    async with Client(settings) as client:
        result = await client.tokenize(req)

    for token in result.tokens:
        print(f"{token.id:>6} {token.start:>3} {token.text!r}")


if __name__ == "__main__":
    asyncio.run(main())
