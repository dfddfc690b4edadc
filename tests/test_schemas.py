"""Tests for request builders and response decoding."""

import warnings

import pytest
from pydantic import ValidationError

from prediction_guard.registry import Model
from prediction_guard.schemas.chat import ChatRequest, Message, Roles, VisionMessage
from prediction_guard.schemas.completion import CompletionRequest
from prediction_guard.schemas.embedding import Direction, EmbeddingInput, EmbeddingRequest
from prediction_guard.schemas.injection import InjectionResponse
from prediction_guard.schemas.models import ModelsResponse, path_for
from prediction_guard.schemas.pii import PIIRequest, ReplaceMethod
from prediction_guard.schemas.screening import RequestInput, RequestOutput
from prediction_guard.schemas.toxicity import ToxicityResponse


@pytest.fixture
def chat_req() -> ChatRequest:
    return ChatRequest(model=Model.NEURAL_CHAT_7B)


class TestChatRequest:
    def test_defaults(self, chat_req):
        assert chat_req.max_tokens == 100
        assert chat_req.temperature == 0.0
        assert chat_req.messages == ()
        assert chat_req.stream is False
        assert chat_req.input is None
        assert chat_req.output is None

    def test_builders_return_copies(self, chat_req):
        updated = chat_req.add_message(Roles.USER, "hi").with_max_tokens(1000)

        assert chat_req.messages == ()
        assert chat_req.max_tokens == 100
        assert updated.messages == (Message(role=Roles.USER, content="hi"),)
        assert updated.max_tokens == 1000

    def test_sampling_builders(self, chat_req):
        req = chat_req.with_temperature(0.85).with_top_p(0.9).with_top_k(50)
        assert (req.temperature, req.top_p, req.top_k) == (0.85, 0.9, 50)

    def test_messages_keep_order(self, chat_req):
        req = (
            chat_req.add_message(Roles.SYSTEM, "be brief")
            .add_message(Roles.USER, "hello")
            .add_message(Roles.ASSISTANT, "hi")
        )
        assert [m.role for m in req.messages] == [Roles.SYSTEM, Roles.USER, Roles.ASSISTANT]

    def test_unset_options_left_out_of_body(self, chat_req):
        body = chat_req.add_message(Roles.USER, "hi").to_body()
        assert body == {
            "model": "Neural-Chat-7B",
            "messages": [{"role": "user", "content": "hi"}],
            "max_tokens": 100,
            "temperature": 0.0,
            "stream": False,
        }

    def test_vision_message_puts_image_first(self, chat_req):
        req = chat_req.add_vision_message(
            Roles.USER, "What is in this image?", "data:image/jpeg;base64,AAAA"
        )
        message = req.messages[0]
        assert isinstance(message, VisionMessage)

        body = req.to_body()
        assert body["messages"][0]["content"] == [
            {"type": "image_url", "image_url": {"url": "data:image/jpeg;base64,AAAA"}},
            {"type": "text", "text": "What is in this image?"},
        ]

    def test_for_streaming_drops_output_checks(self, chat_req):
        req = chat_req.with_output(toxicity=True).with_input(block_prompt_injection=True)
        streaming = req.for_streaming()

        assert streaming.stream is True
        assert streaming.output is None
        assert streaming.input == req.input
        assert req.stream is False

    def test_requests_are_immutable(self, chat_req):
        with pytest.raises(ValidationError):
            chat_req.max_tokens = 5


class TestScreening:
    def test_with_input_creates_block(self, chat_req):
        req = chat_req.with_input(block_prompt_injection=True)
        assert req.input == RequestInput(block_prompt_injection=True)

    def test_with_input_merges_into_existing_block(self, chat_req):
        req = chat_req.with_input(block_prompt_injection=True).with_input(
            pii=("replace", ReplaceMethod.FAKE)
        )
        assert req.input == RequestInput(
            block_prompt_injection=True,
            pii="replace",
            pii_replace_method=ReplaceMethod.FAKE,
        )

    def test_with_output_merges_into_existing_block(self, chat_req):
        req = chat_req.with_output(factuality=True).with_output(toxicity=True)
        assert req.output == RequestOutput(factuality=True, toxicity=True)

    def test_second_pii_option_leaves_other_fields(self, chat_req):
        req = (
            chat_req.with_input(block_prompt_injection=True, pii=("replace", ReplaceMethod.MASK))
            .with_output(factuality=True)
            .with_input(pii=("replace", ReplaceMethod.FAKE))
        )
        assert req.input.block_prompt_injection is True
        assert req.input.pii_replace_method is ReplaceMethod.FAKE
        assert req.output == RequestOutput(factuality=True, toxicity=False)

    def test_pii_method_given_as_string_is_coerced(self, chat_req):
        req = chat_req.with_input(pii=("replace", "fake"))

        assert req.input.pii_replace_method is ReplaceMethod.FAKE
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            body = req.to_body()
        assert body["input"]["pii_replace_method"] == "fake"

    def test_unknown_pii_method_rejected(self, chat_req):
        with pytest.raises(ValueError):
            chat_req.with_input(pii=("replace", "shred"))

    def test_later_value_wins(self, chat_req):
        req = chat_req.with_output(toxicity=True).with_output(toxicity=False)
        assert req.output.toxicity is False

    def test_screening_body(self):
        req = (
            CompletionRequest(model=Model.HERMES_2_PRO_LLAMA_3_8B, prompt="Will I lose my hair?")
            .with_input(block_prompt_injection=True, pii=("replace", ReplaceMethod.MASK))
            .with_output(toxicity=True)
        )
        body = req.to_body()
        assert body["input"] == {
            "block_prompt_injection": True,
            "pii": "replace",
            "pii_replace_method": "mask",
        }
        assert body["output"] == {"factuality": False, "toxicity": True}


class TestEmbeddingRequest:
    def test_new_single_input(self):
        req = EmbeddingRequest.new(Model.BRIDGETOWER_LARGE_ITM_MLM_ITC, text="Tell me a joke.")
        assert req.to_body() == {
            "model": "bridgetower-large-itm-mlm-itc",
            "input": [{"text": "Tell me a joke."}],
        }

    def test_add_inputs_and_truncate(self):
        req = (
            EmbeddingRequest(model=Model.BRIDGETOWER_LARGE_ITM_MLM_ITC)
            .add_input(text="one")
            .add_inputs([EmbeddingInput(image="AAAA"), EmbeddingInput(text="three")])
            .with_truncate(Direction.LEFT)
        )
        body = req.to_body()
        assert body["input"] == [{"text": "one"}, {"image": "AAAA"}, {"text": "three"}]
        assert body["truncate"] is True
        assert body["truncate_direction"] == "Left"

    def test_truncate_direction_given_as_string_is_coerced(self):
        req = EmbeddingRequest(model=Model.BRIDGETOWER_LARGE_ITM_MLM_ITC).with_truncate("Left")

        assert req.truncate_direction is Direction.LEFT
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert req.to_body()["truncate_direction"] == "Left"


def test_pii_request_defaults_to_random_replacement():
    req = PIIRequest(prompt="My email is bob@example.com", replace=True)
    assert req.to_body() == {
        "prompt": "My email is bob@example.com",
        "replace": True,
        "replace_method": "random",
    }


def test_injection_created_accepts_numeric_string():
    resp = InjectionResponse.model_validate_json(
        '{"id":"injection-1","object":"injection_check","created":"1716927842",'
        '"checks":[{"probability":0.5,"index":0,"status":"success"}]}'
    )
    assert resp.created == 1716927842
    assert resp.checks[0].probability == 0.5


def test_toxicity_check_requires_fields():
    with pytest.raises(ValidationError):
        ToxicityResponse.model_validate({"checks": [{"score": 0.7}]})


def test_models_response_keeps_created_as_string():
    resp = ModelsResponse.model_validate({
        "object": "list",
        "data": [{"id": "llava-1.5-7b-hf", "created": 1727795131,
                  "capabilities": {"chat_with_image": True}}],
    })
    assert resp.data[0].created == "1727795131"
    assert resp.data[0].capabilities.chat_with_image is True
    assert resp.data[0].capabilities.chat_completion is False


def test_models_path_for_capability():
    assert path_for() == "/models"
    assert path_for("chat-completion") == "/models/chat-completion"
