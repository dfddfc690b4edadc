"""Input and output screening options shared by chat and completion requests."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ConfigDict

from prediction_guard.schemas.base import RequestModel
from prediction_guard.schemas.pii import ReplaceMethod

T = TypeVar("T", bound="ScreenedRequest")


class RequestInput(BaseModel):
    """Checks applied to the prompt before it reaches the model."""

    model_config = ConfigDict(frozen=True)

    block_prompt_injection: bool = False
    pii: str | None = None
    pii_replace_method: ReplaceMethod | None = None


class RequestOutput(BaseModel):
    """Checks applied to the generated text."""

    model_config = ConfigDict(frozen=True)

    factuality: bool = False
    toxicity: bool = False


class ScreenedRequest(RequestModel):
    """Request carrying optional input/output screening blocks.

    ``with_input`` and ``with_output`` create the block on first use and
    merge into it afterwards: an argument left as None keeps whatever the
    block already holds.
    """

    input: RequestInput | None = None
    output: RequestOutput | None = None

    def with_input(
        self: T,
        block_prompt_injection: bool | None = None,
        pii: tuple[str, ReplaceMethod | str] | None = None,
    ) -> T:
        """Set prompt screening.

        Args:
            block_prompt_injection: Reject prompts detected as injection attempts.
            pii: ``(mode, replace_method)`` e.g. ``("replace", ReplaceMethod.FAKE)``.
        """
        current = self.input or RequestInput()
        update: dict = {}
        if block_prompt_injection is not None:
            update["block_prompt_injection"] = block_prompt_injection
        if pii is not None:
            mode, method = pii
            # model_copy skips validation, so plain strings are coerced here
            update["pii"] = mode
            update["pii_replace_method"] = ReplaceMethod(method)
        return self.model_copy(update={"input": current.model_copy(update=update)})

    def with_output(
        self: T,
        factuality: bool | None = None,
        toxicity: bool | None = None,
    ) -> T:
        current = self.output or RequestOutput()
        update: dict = {}
        if factuality is not None:
            update["factuality"] = factuality
        if toxicity is not None:
            update["toxicity"] = toxicity
        return self.model_copy(update={"output": current.model_copy(update=update)})
