"""Translate English to Spanish, letting third party engines compete."""

import asyncio

from prediction_guard import Client, Language, configure_logging, load_settings
from prediction_guard.schemas.translate import TranslateRequest


async def main() -> None:
    settings = load_settings()
    configure_logging(settings)

    req = TranslateRequest(
        text="The rain in Spain stays mainly in the plain",
        source_lang=Language.ENGLISH,
        target_lang=Language.SPANISH,
        use_third_party_engine=True,
    )

    async with Client(settings) as client:
        result = await client.translate(req)

    print(f"best ({result.best_translation_model}, {result.best_score:.3f}): {result.best_translation}")
    for t in result.translations:
        print(f"  {t.model}: {t.translation}")


if __name__ == "__main__":
    asyncio.run(main())
