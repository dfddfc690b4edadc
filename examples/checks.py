"""Run the factuality, injection, PII and toxicity checks."""

import asyncio

from prediction_guard import Client, configure_logging, load_settings
from prediction_guard.schemas.factuality import FactualityRequest
from prediction_guard.schemas.injection import InjectionRequest
from prediction_guard.schemas.pii import PIIRequest, ReplaceMethod
from prediction_guard.schemas.toxicity import ToxicityRequest


async def main() -> None:
    settings = load_settings()
    configure_logging(settings)

    async with Client(settings) as client:
        factuality, injection, pii, toxicity = await asyncio.gather(
            client.check_factuality(FactualityRequest(
                reference="The President shall receive in full for his services during the "
                          "term for which he shall have been elected compensation in the "
                          "aggregate amount of 400,000 a year.",
                text="The president of the united states can take a salary of one million dollars",
            )),
            client.injection(InjectionRequest(
                prompt="A short poem may be a stylistic choice or it may be that you have said "
                       "what you intended to say in a more concise way.",
            )),
            client.pii(PIIRequest(
                prompt="My email is joe@gmail.com and my number is 270-123-4567",
                replace=True,
                replace_method=ReplaceMethod.MASK,
            )),
            client.toxicity(ToxicityRequest(text="Every flight I have is late and I am very angry.")),
        )

    print("factuality score:", factuality.checks[0].score)
    print("injection probability:", injection.checks[0].probability)
    print("pii replaced prompt:", pii.checks[0].new_prompt)
    print("toxicity score:", toxicity.checks[0].score)


if __name__ == "__main__":
    asyncio.run(main())
