import asyncio
from types import SimpleNamespace

import pytest

from core.ai_models import GeminiModel, get_extraction_model
from core.config import ExtractionSettings
from core.prompts import QUESTION_EXTRACTION_PROMPT


class FakeModels:
    def __init__(self, response):
        self.response = response
        self.requests = []

    async def generate_content(self, model, contents, config=None):
        self.requests.append({"model": model, "contents": contents, "config": config})
        return self.response


def fake_client(response):
    models = FakeModels(response)
    return SimpleNamespace(aio=SimpleNamespace(models=models)), models


def text_response(text):
    part = SimpleNamespace(text=text)
    candidate = SimpleNamespace(content=SimpleNamespace(parts=[part]))
    usage = SimpleNamespace(prompt_token_count=1200, candidates_token_count=300, total_token_count=1500)
    return SimpleNamespace(candidates=[candidate], usage_metadata=usage)


def test_extract_text_sends_prompt_then_inline_image():
    client, models = fake_client(text_response("[]"))
    model = GeminiModel(api_key="k", model_name="gemini-1.5-flash", client=client)

    text = asyncio.run(model.extract_text(b"img-bytes", "image/png"))

    assert text == "[]"
    request = models.requests[0]
    assert request["model"] == "gemini-1.5-flash"
    (content,) = request["contents"]
    assert content.role == "user"
    prompt_part, image_part = content.parts
    assert prompt_part.text == QUESTION_EXTRACTION_PROMPT
    assert image_part.inline_data.mime_type == "image/png"
    assert image_part.inline_data.data == b"img-bytes"


@pytest.mark.parametrize("response", [
    SimpleNamespace(candidates=[], usage_metadata=None),
    SimpleNamespace(candidates=None, usage_metadata=None),
    SimpleNamespace(candidates=[SimpleNamespace(content=None)], usage_metadata=None),
    SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[]))], usage_metadata=None),
    text_response(""),
])
def test_extract_text_returns_none_without_candidate_text(response):
    client, _ = fake_client(response)
    model = GeminiModel(api_key="k", model_name="gemini-1.5-flash", client=client)

    assert asyncio.run(model.extract_text(b"x", "image/jpeg")) is None


def test_extract_text_returns_fenced_text_untouched():
    client, _ = fake_client(text_response("```json\n[]\n```"))
    model = GeminiModel(api_key="k", model_name="gemini-1.5-flash", client=client)

    assert asyncio.run(model.extract_text(b"x", "image/jpeg")) == "```json\n[]\n```"


def test_extract_text_propagates_api_errors():
    class FailingModels:
        async def generate_content(self, **kwargs):
            raise RuntimeError("quota exceeded")

    client = SimpleNamespace(aio=SimpleNamespace(models=FailingModels()))
    model = GeminiModel(api_key="k", model_name="gemini-1.5-flash", client=client)

    with pytest.raises(RuntimeError):
        asyncio.run(model.extract_text(b"x", "image/jpeg"))


def test_gemini_model_requires_api_key():
    with pytest.raises(ValueError):
        GeminiModel(api_key="", model_name="gemini-1.5-flash")


def test_factory_requires_api_key():
    with pytest.raises(ValueError):
        get_extraction_model(ExtractionSettings(api_key=None))


def test_factory_builds_gemini_model():
    model = get_extraction_model(ExtractionSettings(api_key="k", model_name="gemini-1.5-flash"))

    assert isinstance(model, GeminiModel)
    assert model.model_name == "gemini-1.5-flash"
