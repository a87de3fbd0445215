import asyncio
from types import SimpleNamespace

import pytest

from cs_tutor.config import load_settings
from cs_tutor.main import create_app
from cs_tutor.services import llm


class FakeModel:
    def __init__(self, model_name):
        self.model_name = model_name
        self.prompts = []
        self.text = "Binary search halves the range each step."

    async def generate_content_async(self, prompt):
        self.prompts.append(prompt)
        return SimpleNamespace(text=self.text)


@pytest.fixture
def fake_genai(monkeypatch):
    configured = {}
    monkeypatch.setattr(llm.genai, "configure", lambda **kwargs: configured.update(kwargs))
    monkeypatch.setattr(llm.genai, "GenerativeModel", FakeModel)
    return configured


def test_gemini_client_generates(fake_genai):
    client = llm.GeminiClient("secret", "gemini-2.5-flash")
    assert fake_genai == {"api_key": "secret"}
    assert client.model.model_name == "gemini-2.5-flash"

    text = asyncio.run(client.generate("prompt"))
    assert text == "Binary search halves the range each step."
    assert client.model.prompts == ["prompt"]


def test_create_app_builds_gemini_client(fake_genai):
    settings = load_settings({"GEMINI_API_KEY": "secret", "GEMINI_MODEL": "gemini-pro"})
    app = create_app(settings)
    assert isinstance(app.state.generator, llm.GeminiClient)
    assert app.state.generator.model_name == "gemini-pro"
