"""Rank documents by relevance to a query."""

import asyncio

from prediction_guard import Client, Model, configure_logging, load_settings
from prediction_guard.schemas.rerank import RerankRequest


async def main() -> None:
    settings = load_settings()
    configure_logging(settings)

    req = RerankRequest(
        model=Model.BGE_RERANKER_V2_M3,
        query="What is Deep Learning?",
        documents=("Deep Learning is pizza.", "Deep Learning is not pizza."),
    )

    async with Client(settings) as client:
        result = await client.rerank(req)

    for r in result.results:
        print(f"{r.relevance_score:.5f}  [{r.index}] {r.text}")


if __name__ == "__main__":
    asyncio.run(main())
