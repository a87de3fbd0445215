import pytest
from fastapi.testclient import TestClient

from cs_tutor.config import Settings
from cs_tutor.main import create_app


class FakeGenerator:
    def __init__(self, reply="A stack is a last in first out data structure.", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


def make_client(generator):
    return TestClient(create_app(Settings(gemini_api_key="test-key"), generator))


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def client(generator):
    return make_client(generator)
