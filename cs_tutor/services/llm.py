from typing import Protocol

import google.generativeai as genai


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str:
        ...


class GeminiClient:
    """Text generation through Gemini.

    Holds no per-request state, so one instance is shared by all requests.
    """

    def __init__(self, api_key: str, model_name: str):
        genai.configure(api_key=api_key)
        self.model_name = model_name
        self.model = genai.GenerativeModel(model_name)

    async def generate(self, prompt: str) -> str:
        response = await self.model.generate_content_async(prompt)
        return response.text
