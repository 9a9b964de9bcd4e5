"""Google Gemini LLM provider."""

import logging

from google import genai
from google.genai import types

from omnicode.core.config import settings
from omnicode.services.llm.base import BaseLLMProvider, EmptyModelResponseError

logger = logging.getLogger(__name__)


class GeminiProvider(BaseLLMProvider):
    def __init__(self, client: genai.Client | None = None, model: str | None = None):
        self.client = client or genai.Client(api_key=settings.gemini_api_key)
        self.model = model or settings.gemini_model

    def prepare_history(self, history: list) -> list[types.Content]:
        return [h if isinstance(h, types.Content) else types.Content(**h) for h in history]

    async def send_message(self, history: list, message: str) -> str:
        chat = self.client.aio.chats.create(
            model=self.model,
            history=self.prepare_history(history),
        )
        logger.debug(f"Gemini chat ({self.model}) with {len(history)} prior turns")

        response = await chat.send_message(message)

        usage = response.usage_metadata
        if usage:
            logger.info(
                f"Gemini usage: prompt={usage.prompt_token_count} "
                f"response={usage.candidates_token_count} total={usage.total_token_count}"
            )

        if not response.text:
            raise EmptyModelResponseError(f"Model {self.model} returned an empty response")
        return response.text
