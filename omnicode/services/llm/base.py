"""Abstract LLM provider interface. All providers must implement this."""

from abc import ABC, abstractmethod


class EmptyModelResponseError(Exception):
    """The model answered without any text (e.g. a blocked candidate)."""


class BaseLLMProvider(ABC):
    def prepare_history(self, history: list[dict]) -> list:
        """Convert Gemini-format dicts into the provider's own history objects."""
        return history

    @abstractmethod
    async def send_message(self, history: list[dict], message: str) -> str:
        """Continue a chat seeded with ``history`` and return the reply text.

        History is in Gemini content format:
        [{"role": "user" | "model", "parts": [{"text": "..."}]}]
        """
        ...
