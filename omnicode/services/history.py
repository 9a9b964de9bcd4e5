"""Conversion of the client transcript into Gemini chat history."""

from typing import Any, Iterable

from omnicode.models.message import NON_CONVERSATIONAL_TYPES

PERSONA_ACK = "Understood. I am the OmniCode Agent."


def to_model_history(history: Iterable[dict[str, Any]]) -> list[dict]:
    """Drop welcome/status messages and map the rest to Gemini contents.

    Order is preserved. Anything that is not a user turn is sent as a model turn.
    """
    return [
        {
            "role": "user" if msg.get("role") == "user" else "model",
            "parts": [{"text": msg.get("text") or ""}],
        }
        for msg in history
        if msg.get("type") not in NON_CONVERSATIONAL_TYPES
    ]


def persona_preamble(system_instruction: str) -> list[dict]:
    return [
        {"role": "user", "parts": [{"text": "Context: " + system_instruction}]},
        {"role": "model", "parts": [{"text": PERSONA_ACK}]},
    ]


def seed_history(model_history: list[dict], system_instruction: str) -> list[dict]:
    """Prior context for the chat.

    The last filtered entry is the message being sent, so it is left out. A
    session with no conversational turns yet is seeded with the persona
    preamble instead.
    """
    if model_history:
        return model_history[:-1]
    return persona_preamble(system_instruction)
