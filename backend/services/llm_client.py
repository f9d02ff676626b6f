"""Abstract base class for LLM completion collaborators."""

from abc import ABC, abstractmethod


class LLMUnavailableError(RuntimeError):
    """Raised when the completion service cannot be called at all."""


class LLMClient(ABC):
    """Single-shot text completion service.

    Subclasses must implement:
        - model_name: identifier of the upstream model
        - generate(prompt): send one prompt and return the reply text

    Failures (network, quota, timeout) propagate as exceptions; callers
    decide how to absorb them.
    """

    model_name: str = ""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Return the model's free-form reply to ``prompt``."""

    @property
    def is_configured(self) -> bool:
        return True
