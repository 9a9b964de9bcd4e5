"""LLM provider factory."""

from omnicode.core.config import settings
from omnicode.services.llm.base import BaseLLMProvider


def get_llm_provider() -> BaseLLMProvider:
    """Factory function that returns the configured LLM provider."""
    if settings.llm_provider == "gemini":
        from omnicode.services.llm.gemini import GeminiProvider
        return GeminiProvider()
    else:
        raise ValueError(f"Unknown LLM provider: {settings.llm_provider}")
