"""Shared dependencies for API routes."""

from services.gemini_client import get_client
from services.llm_client import LLMClient


def get_llm_client() -> LLMClient:
    return get_client()
