"""Chat message and request models exchanged with the front end."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field

from omnicode.core.errors import RequestValidationError


class MessageType(str, Enum):
    TEXT = "text"
    WELCOME_MESSAGE = "welcome_message"
    STATUS_MESSAGE = "status_message"
    EXPLAIN_COMMAND = "explain_command"
    ERROR = "error"
    AI_RESPONSE = "ai_response"


# Informational messages shown in the UI but never sent to the model
NON_CONVERSATIONAL_TYPES = {MessageType.WELCOME_MESSAGE.value, MessageType.STATUS_MESSAGE.value}

# Fields of a history entry that are read before the model call
HISTORY_STRING_FIELDS = ("role", "text", "type")


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Message(BaseModel):
    role: Literal["user", "agent"]
    text: str
    timestamp: str = Field(default_factory=utc_timestamp)
    type: str = MessageType.TEXT.value


class ChatRequest(BaseModel):
    """A validated gateway request.

    History entries are kept exactly as the client sent them so that they are
    persisted unchanged.
    """

    uid: str
    message: str
    history: list[dict[str, Any]]

    @classmethod
    def from_payload(cls, payload: Any) -> "ChatRequest":
        if not isinstance(payload, dict):
            raise RequestValidationError("Request body must be a JSON object")

        uid = payload.get("uid")
        message = payload.get("message")
        history = payload.get("history")

        if not isinstance(uid, str) or not uid:
            raise RequestValidationError("uid is required")
        if not isinstance(message, str) or not message:
            raise RequestValidationError("message is required")
        if not isinstance(history, list):
            raise RequestValidationError("history must be an array")
        for entry in history:
            if not isinstance(entry, dict):
                raise RequestValidationError("history entries must be objects")
            for field in HISTORY_STRING_FIELDS:
                value = entry.get(field)
                if value is not None and not isinstance(value, str):
                    raise RequestValidationError(f"history entry {field} must be a string")

        return cls(uid=uid, message=message, history=history)
