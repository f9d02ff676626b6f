"""Shared test configuration and fixtures."""

import pytest

from services.llm_client import LLMClient


class FakeLLMClient(LLMClient):
    """Records prompts and replays a canned reply or error."""

    model_name = "fake-model"

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def make_llm():
    """Factory for fake LLM clients: make_llm(reply=...) or make_llm(error=...)."""
    return FakeLLMClient
